"""Save a page's videos next to it and point the page at the copies."""

from __future__ import annotations

import os
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from hyfetcher.media import download_file, filename_from_url, resolve_media_url

VIDEO_DIR = "videos"
DEFAULT_VIDEO_NAME = "video.mp4"


async def process_videos(
    html: str,
    page_url: str,
    html_file_dir: str | os.PathLike[str],
    client: httpx.AsyncClient,
) -> str:
    """Download ``<video src>`` and ``<source src>`` files into ``videos/``.

    Returns *html* with each ``src="..."`` rewritten to the local copy.
    """
    soup = BeautifulSoup(html, "html.parser")
    elements = [*soup.find_all("video"), *soup.find_all("source")]
    target_dir = Path(html_file_dir) / VIDEO_DIR
    replacements: list[tuple[str, str]] = []
    for element in elements:
        src = element.get("src")
        if src is None:
            continue
        url = resolve_media_url(src, page_url)
        if url is None:
            continue
        filename = filename_from_url(url, DEFAULT_VIDEO_NAME)
        await download_file(client, url, target_dir / filename)
        replacements.append((src, f"{VIDEO_DIR}/{filename}"))

    for old, new in replacements:
        html = html.replace(f'src="{old}"', f'src="{new}"')
    return html