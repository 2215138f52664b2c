"""
Path helpers for mapping content documents to output pages.
"""

from pathlib import Path, PurePath
from typing import Union

from models import MARKUP_EXTENSION, PAGE_EXTENSION


def is_markup_file(path: Union[str, PurePath]) -> bool:
    """Check whether a path is a convertible Markdown document."""
    return PurePath(path).suffix == MARKUP_EXTENSION


def derive_title(path: Union[str, PurePath]) -> str:
    """
    Derive a page title from a document path.

    The title is the base file name with its extension removed; no
    capitalisation or escaping is applied ("posts/my-post.md" -> "my-post").
    """
    return PurePath(path).stem


def output_path_for(rel_path: Union[str, PurePath], out_dir: Path) -> Path:
    """Map a content-relative document path to its page path under out_dir."""
    rel = PurePath(rel_path)
    return out_dir / rel.with_suffix(PAGE_EXTENSION)
