"""Fetch a post's page and store it with its media."""

from __future__ import annotations

import os
from pathlib import Path

import httpx

from hyfetcher.image import process_images
from hyfetcher.model import Post
from hyfetcher.video import process_videos


async def download_and_save_post(
    post: Post, outputs_dir: str | os.PathLike[str], client: httpx.AsyncClient
) -> bool:
    """Save *post* under *outputs_dir* with local copies of its images and videos.

    Returns ``False`` if the page was already saved, ``True`` once it is written.
    Network and file errors propagate.
    """
    html_path = Path(outputs_dir) / post.rel_save_path
    if html_path.exists():
        print(f"Exists, skip: {html_path}")
        return False
    html_dir = html_path.parent
    html_dir.mkdir(parents=True, exist_ok=True)

    response = await client.get(post.url)
    content = response.text
    content = await process_images(content, post.url, html_dir, client)
    content = await process_videos(content, post.url, html_dir, client)

    html_path.write_text(content, encoding="utf-8")
    print(f"Downloaded: {post.url} -> {html_path}")
    return True