"""Collect posts from a tree of CSV files."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterator
from pathlib import Path

from hyfetcher.model import Post


def _csv_files(data_dir: Path) -> Iterator[Path]:
    for root, dirs, files in os.walk(data_dir):
        dirs.sort()
        for name in sorted(files):
            path = Path(root, name)
            if path.suffix == ".csv" and path.is_file():
                yield path


def _read_records(csv_path: Path) -> Iterator[list[str]]:
    """Yield data rows, skipping the header and rows of the wrong width."""
    with csv_path.open(encoding="utf-8-sig", newline="") as handle:
        rows = (row for row in csv.reader(handle) if row)
        header = next(rows, None)
        if header is None:
            return
        for row in rows:
            if len(row) == len(header):
                yield row


def parse_posts(data_dir: str | os.PathLike[str]) -> list[Post]:
    """Read every CSV file under *data_dir* into a list of posts.

    The first directory below *data_dir* is the category, the directories
    between it and the file form the sub-directory, and the file's stem is
    kept as well. Each CSV has a header row; its columns are url and title.
    """
    data_dir = Path(data_dir)
    posts: list[Post] = []
    for csv_path in _csv_files(data_dir):
        rel_parts = csv_path.relative_to(data_dir).parts
        category = rel_parts[0] if rel_parts else "unknown"
        csv_subdir = "/".join(rel_parts[1:-1])
        csv_filename = csv_path.stem or "unknown"

        for record in _read_records(csv_path):
            url = record[0] if record else ""
            title = record[1] if len(record) > 1 else ""
            if url and title:
                posts.append(Post(url, title, category, csv_subdir, csv_filename))
    return posts