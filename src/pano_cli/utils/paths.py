"""Supported image formats and the predicates built on them.

Extensions are compared case-insensitively and without the leading dot,
so ``IMG_0001.JPG`` and ``scan.tiff`` both qualify.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

_P = TypeVar("_P", str, Path)

SUPPORTED_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png", "tif", "tiff")


def _normalized_extension(path: str | Path) -> str:
    return Path(path).suffix.lower().lstrip(".")


def is_extension_supported(path: str | Path) -> bool:
    """Return ``True`` when *path* ends in one of :data:`SUPPORTED_EXTENSIONS`."""
    return _normalized_extension(path) in SUPPORTED_EXTENSIONS


def keep_supported(paths: Iterable[_P]) -> list[_P]:
    """Return the subsequence of *paths* with a supported extension.

    Order, duplicates and the input type (``str`` or ``Path``) are preserved.
    """
    return [path for path in paths if is_extension_supported(path)]
