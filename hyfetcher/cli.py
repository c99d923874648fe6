"""Command line entry point: fetch every listed post and write an index."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

import httpx

from hyfetcher.csv_parser import parse_posts
from hyfetcher.downloader import download_and_save_post
from hyfetcher.index_builder import build_index_tree, write_index_html
from hyfetcher.model import Post

USER_AGENT = "Mozilla/5.0 (compatible; HyFetcher/1.0)"


async def run(
    data_dir: str | os.PathLike[str],
    outputs_dir: str | os.PathLike[str],
    concurrency: int,
) -> Path:
    """Download all posts under *data_dir* and return the path of the index."""
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")
    data_dir = Path(data_dir)
    outputs_dir = Path(outputs_dir)

    print(f"Parsing posts from {data_dir} ...")
    posts = parse_posts(data_dir)
    print(f"Found {len(posts)} posts.")

    limit = asyncio.Semaphore(concurrency)

    async with httpx.AsyncClient(
        headers={"User-Agent": USER_AGENT}, follow_redirects=True
    ) as client:

        async def fetch(post: Post) -> None:
            async with limit:
                try:
                    await download_and_save_post(post, outputs_dir, client)
                except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
                    print(f"Error downloading: {exc}", file=sys.stderr)

        await asyncio.gather(*(fetch(post) for post in posts))

    index_path = write_index_html(build_index_tree(posts), outputs_dir)
    print(f"All done! Index generated at: {outputs_dir}/index.html")
    return index_path


def _positive(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hyfetcher", description="Offline website downloader and indexer"
    )
    parser.add_argument("-d", "--data-dir", default="data", help="data input directory")
    parser.add_argument("-o", "--outputs-dir", default="outputs", help="output directory")
    parser.add_argument(
        "-c", "--concurrency", type=_positive, default=8, help="number of concurrent downloads"
    )
    args = parser.parse_args(argv)
    try:
        asyncio.run(run(args.data_dir, args.outputs_dir, args.concurrency))
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())