"""Post records and file-name helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_FORBIDDEN = re.compile(r'[<>:"/\\|?*]')


def sanitize_filename(s: str) -> str:
    """Replace characters that are not allowed in file names with ``_``."""
    return _FORBIDDEN.sub("_", s)


@dataclass
class Post:
    """One article to fetch, as listed in a CSV file."""

    url: str
    title: str
    category: str
    csv_subdir: str = ""
    csv_filename: str = ""
    safe_title: str = field(init=False)

    def __post_init__(self) -> None:
        self.safe_title = sanitize_filename(self.title)

    @property
    def path_parts(self) -> list[str]:
        """Directory components under the output root, without the file name."""
        parts = [self.category]
        if self.csv_subdir:
            parts.extend(self.csv_subdir.split("/"))
        if self.csv_filename:
            parts.append(self.csv_filename)
        return parts

    @property
    def rel_save_path(self) -> str:
        """Path of the saved HTML file relative to the output directory."""
        return "/".join([*self.path_parts, f"{self.safe_title}.html"])