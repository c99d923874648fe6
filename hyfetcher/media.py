"""Shared helpers for saving media referenced by a page."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from urllib.parse import urljoin, urlsplit

import httpx


def _is_absolute(url: str | None) -> bool:
    return bool(url) and bool(urlsplit(url).scheme)


def resolve_media_url(src: str, base_url: str | None) -> str | None:
    """Return the URL to fetch for *src*, or ``None`` if it cannot be resolved.

    Absolute ``http(s)`` sources are used as they are. Other sources are
    joined onto *base_url*, which only counts when it is an absolute URL.
    """
    base = base_url if _is_absolute(base_url) else None
    if not src.startswith(("http://", "https://")) and base is None:
        return None
    if src.startswith("http") or base is None:
        return src
    try:
        return urljoin(base, src)
    except ValueError:
        return src


def filename_from_url(url: str, default: str) -> str:
    """Return the last ``/``-separated part of *url*, or *default* if it is empty."""
    return url.rsplit("/", 1)[-1] or default


async def download_file(
    client: httpx.AsyncClient, url: str, path: str | os.PathLike[str]
) -> bool:
    """Fetch *url* into *path* unless the file already exists.

    Returns ``True`` when a file was written. A request that cannot be sent
    is reported on stderr; an unsuccessful status leaves nothing behind.
    """
    path = Path(path)
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        response = await client.send(client.build_request("GET", url), stream=True)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        print(f"Failed to download {url}: {exc}", file=sys.stderr)
        return False
    try:
        if not response.is_success:
            return False
        with path.open("wb") as handle:
            async for chunk in response.aiter_bytes():
                handle.write(chunk)
    finally:
        await response.aclose()
    return True