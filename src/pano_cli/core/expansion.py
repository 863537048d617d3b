"""Input path resolution: directory expansion, extension filter, ordering.

This is the only part of the core that touches the filesystem.
Directories are expanded **one level deep**: regular files directly
inside are kept, nested subdirectories are passed through and then
dropped by the extension filter.

Entries stay raw strings until the final step, so an empty token is not
mistaken for ``Path("")`` (the current directory) and ``./a.jpg`` sorts
by what the user typed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pano_cli.core.protocols import Logger
from pano_cli.exceptions import DirectoryExpansionError, NoSupportedImagesError
from pano_cli.utils.paths import SUPPORTED_EXTENSIONS, keep_supported


# ---------------------------------------------------------------------------
# 1. Expand
# ---------------------------------------------------------------------------

def _directory_files(directory: str) -> list[str]:
    try:
        return [str(entry) for entry in Path(directory).iterdir() if entry.is_file()]
    except OSError as exc:
        raise DirectoryExpansionError(
            f"Cannot read directory {directory}: {exc.strerror or exc}",
            hint="Check that the directory exists and is readable.",
        ) from exc


def expand_directories(entries: Sequence[str], logger: Logger) -> list[str]:
    """Replace each directory in *entries* with the regular files it contains.

    Files keep the platform's enumeration order; non-directory entries,
    including empty strings, pass through unchanged and in place.
    """
    result: list[str] = []
    for entry in entries:
        if entry and Path(entry).is_dir():
            logger.info(f"Expanding directory: {entry}")
            result.extend(_directory_files(entry))
        else:
            result.append(entry)
    return result


# ---------------------------------------------------------------------------
# 2. Filter
# ---------------------------------------------------------------------------

def filter_supported(entries: Sequence[str]) -> list[str]:
    """Keep only entries with a supported image extension.

    Raises
    ------
    NoSupportedImagesError
        If *entries* was non-empty but nothing survived the filter.  An
        empty input is fine (e.g. ``--help`` alone).
    """
    supported = keep_supported(entries)
    if entries and not supported:
        raise NoSupportedImagesError(
            "No supported images provided!",
            hint=f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}",
        )
    return supported


# ---------------------------------------------------------------------------
# 3. Sort
# ---------------------------------------------------------------------------

def sort_paths(entries: Sequence[str]) -> list[str]:
    """Sort ascending by path string; duplicates are kept."""
    return sorted(entries)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def resolve_input_paths(entries: Sequence[str], logger: Logger) -> tuple[Path, ...]:
    """Run the full expand → filter → sort pipeline on raw positional tokens."""
    expanded = expand_directories(entries, logger)
    supported = filter_supported(expanded)
    return tuple(Path(entry) for entry in sort_paths(supported))
