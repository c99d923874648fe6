"""Build and render the HTML index of downloaded posts."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

from hyfetcher.model import Post


class IndexEntry(NamedTuple):
    """A post listed in the index."""

    title: str
    rel_path: str
    url: str


@dataclass
class IndexNode:
    """A directory in the index tree; children are listed in sorted order."""

    children: dict[str, IndexNode] = field(default_factory=dict)
    files: list[IndexEntry] = field(default_factory=list)

    def child(self, name: str) -> IndexNode:
        """Return the child called *name*, creating it if needed."""
        return self.children.setdefault(name, IndexNode())


def build_index_tree(posts: Iterable[Post]) -> IndexNode:
    """Arrange posts into a tree following their output directories."""
    root = IndexNode()
    for post in posts:
        node = root
        for part in post.path_parts:
            node = node.child(part)
        node.files.append(IndexEntry(post.title, post.rel_save_path, post.url))
    return root


_STYLE = [
    "body{font-family:system-ui,-apple-system,sans-serif;line-height:1.4;"
    "max-width:800px;margin:30px auto;padding:0 20px;color:#24292e}",
    "ul{margin:0 0 0 1.5em;padding:0;}",
    "li{margin:.2em 0;}",
    "strong{color:#24292e;font-size:1.1em;}",
    "a{color:#0366d6;text-decoration:none;}",
    "a:hover{text-decoration:underline;}",
    ".meta{color:#666;font-size:0.9em;margin-bottom:20px;}",
]


def _tree_lines(node: IndexNode, indent: int) -> Iterator[str]:
    pad = " " * (indent * 2)
    for name in sorted(node.children):
        yield f"{pad}<li><strong>{name}</strong>\n{pad}<ul>"
        yield from _tree_lines(node.children[name], indent + 1)
        yield f"{pad}</ul></li>"
    for entry in node.files:
        yield (
            f'{pad}<li><a href="{entry.rel_path}">{entry.title}</a> '
            f'(<a href="{entry.url}" target="_blank">{entry.url}</a>)</li>'
        )


def render_index_html(tree: IndexNode, generated: datetime | None = None) -> str:
    """Render the index page; *generated* defaults to the current local time."""
    stamp = (generated or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        "<!DOCTYPE html>",
        '<html lang="zh-CN">',
        "<head>",
        '<meta charset="UTF-8">',
        "<title>Hyplus Index - Hyplusite Exporter</title>",
        f'<meta name="generated" content="{stamp}">',
        "<style>",
        *_STYLE,
        "</style>",
        "</head>",
        "<body>",
        "<h1>Hyplus Index</h1>",
        f'<p class="meta">Generated by Hyplusite Exporter on {stamp}.'
        "<br>Enjoy your reading experience at any time!</p>",
        "<ul>",
        *_tree_lines(tree, 1),
        "</ul>",
        "</body>",
        "</html>",
    ]
    return "".join(f"{line}\n" for line in lines)


def write_index_html(tree: IndexNode, outputs_dir: str | os.PathLike[str]) -> Path:
    """Write ``index.html`` into an existing *outputs_dir* and return its path."""
    index_path = Path(outputs_dir) / "index.html"
    index_path.write_text(render_index_html(tree), encoding="utf-8")
    return index_path