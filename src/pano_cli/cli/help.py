"""Static ``--help`` and ``--version`` text.

Ranges, defaults and accepted literals are read from the same tables and
constants the parser and validator use, so the help cannot drift from
what is actually accepted.
"""

from __future__ import annotations

import textwrap

from pano_cli.core.protocols import Logger
from pano_cli.core.value_parsers import (
    MATCHING_TYPES,
    PROJECTION_TYPES,
    WAVE_CORRECTION_TYPES,
    literals,
)
from pano_cli.utils.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MATCH_THRESHOLD,
    DEFAULT_MAX_PANO_MPX,
    DEFAULT_PNG_COMPRESSION,
    DEFAULT_SHIFT_IN_PANO,
    MAX_JPEG_QUALITY,
    MAX_MATCH_THRESHOLD,
    MAX_PANO_MPX_LIMIT,
    MAX_PNG_COMPRESSION,
    MAX_SHIFT_IN_PANO,
    MIN_MATCH_THRESHOLD,
    MIN_PANO_MPX_LIMIT,
    MIN_SHIFT_IN_PANO,
)
from pano_cli.utils.paths import SUPPORTED_EXTENSIONS
from pano_cli.version import __version__

_INDENT = " " * 27


def _wrap_literals(names: str, width: int = 55) -> list[str]:
    """Split a comma-separated literal list over indented continuation lines."""
    lines = textwrap.wrap(
        f"Types: {names}", width=width, break_long_words=False, break_on_hyphens=False,
    )
    return [f"{_INDENT}{line}" for line in lines]


def help_lines() -> list[str]:
    """Return the usage block, one entry per output line."""
    return [
        f"pano-cli v{__version__}",
        "",
        "Usage: pano-cli [<input files or directories>] [options]",
        "",
        "Options:",
        "  --output=<path>          Output file path",
        "  --gui                    Launch GUI mode",
        "  --help                   Show this help message",
        "  --version                Show version",
        "",
        "Projection:",
        "  --projection=<type>      Projection type (default: spherical)",
        *_wrap_literals(literals(PROJECTION_TYPES)),
        "",
        "Matching:",
        "  --matching-type=<type>   Matching mode (default: auto)",
        *_wrap_literals(literals(MATCHING_TYPES)),
        f"{_INDENT}auto: pairwise matching, recommended",
        f"{_INDENT}single: assume all images form one pano",
        f"{_INDENT}none: skip matching",
        f"  --match-threshold=<N>    Match threshold, {MIN_MATCH_THRESHOLD} - "
        f"{MAX_MATCH_THRESHOLD} (default: {DEFAULT_MATCH_THRESHOLD})",
        f"  --min-shift=<F>          Min shift filter, {MIN_SHIFT_IN_PANO} - "
        f"{MAX_SHIFT_IN_PANO} (default: {DEFAULT_SHIFT_IN_PANO})",
        "",
        "Export:",
        f"  --jpeg-quality=<N>       JPEG quality, 0 - {MAX_JPEG_QUALITY} "
        f"(default: {DEFAULT_JPEG_QUALITY})",
        f"  --png-compression=<N>    PNG compression, 0 - {MAX_PNG_COMPRESSION} "
        f"(default: {DEFAULT_PNG_COMPRESSION})",
        "  --copy-metadata          Copy EXIF from first image",
        "  --no-copy-metadata       Don't copy EXIF metadata",
        "",
        "Stitching:",
        "  --wave-correction=<type> Wave correction (default: auto)",
        *_wrap_literals(literals(WAVE_CORRECTION_TYPES)),
        f"  --max-pano-mpx=<N>       Max panorama size in megapixels, "
        f"{MIN_PANO_MPX_LIMIT} - {MAX_PANO_MPX_LIMIT} (default: {DEFAULT_MAX_PANO_MPX})",
        "",
        f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}",
    ]


def print_help(logger: Logger) -> None:
    """Write the usage block to the informational channel of *logger*."""
    for line in help_lines():
        logger.info(line)


def print_version(logger: Logger) -> None:
    logger.info(f"pano-cli {__version__}")
