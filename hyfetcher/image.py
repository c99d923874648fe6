"""Save a page's images next to it and point the page at the copies."""

from __future__ import annotations

import os
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from hyfetcher.media import download_file, filename_from_url, resolve_media_url

IMAGE_DIR = "images"
DEFAULT_IMAGE_NAME = "image.jpg"


async def process_images(
    html: str,
    page_url: str,
    html_file_dir: str | os.PathLike[str],
    client: httpx.AsyncClient,
) -> str:
    """Download every ``<img src>`` into ``images/`` beside the page.

    Returns *html* with each ``src="..."`` rewritten to the local copy.
    """
    target_dir = Path(html_file_dir) / IMAGE_DIR
    replacements: list[tuple[str, str]] = []
    for img in BeautifulSoup(html, "html.parser").find_all("img"):
        src = img.get("src")
        if src is None:
            continue
        url = resolve_media_url(src, page_url)
        if url is None:
            continue
        filename = filename_from_url(url, DEFAULT_IMAGE_NAME)
        await download_file(client, url, target_dir / filename)
        replacements.append((src, f"{IMAGE_DIR}/{filename}"))

    for old, new in replacements:
        html = html.replace(f'src="{old}"', f'src="{new}"')
    return html