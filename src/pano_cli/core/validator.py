"""Cross-field and range validation of a fully assembled :class:`Args`.

Rules run in a fixed order and validation stops at the first violation,
so a failed invocation always produces exactly one diagnostic.
Enum fields and ``copy_metadata`` are not checked: an absent value means
the downstream default applies.
"""

from __future__ import annotations

from collections.abc import Callable

from pano_cli.core.models import Args
from pano_cli.exceptions import ValidationError
from pano_cli.utils.constants import (
    MAX_JPEG_QUALITY,
    MAX_MATCH_THRESHOLD,
    MAX_PANO_MPX_LIMIT,
    MAX_PNG_COMPRESSION,
    MAX_SHIFT_IN_PANO,
    MIN_MATCH_THRESHOLD,
    MIN_PANO_MPX_LIMIT,
    MIN_SHIFT_IN_PANO,
)
from pano_cli.utils.paths import is_extension_supported

Rule = Callable[[Args], "str | None"]


def _out_of_range(value: float | None, low: float, high: float) -> bool:
    # NaN compares false against both bounds and must fail too.
    return value is not None and not low <= value <= high


# ---------------------------------------------------------------------------
# Output rules
# ---------------------------------------------------------------------------

def _output_needs_inputs(args: Args) -> str | None:
    if args.output_path is not None and not args.input_paths:
        return "No supported images provided"
    return None


def _output_extension_supported(args: Args) -> str | None:
    if args.output_path is not None and not is_extension_supported(args.output_path):
        return f'Unsupported output file extension: "{args.output_path.suffix}"'
    return None


def _output_excludes_gui(args: Args) -> str | None:
    if args.output_path is not None and args.run_gui:
        return "Specifying --gui and --output together is not yet supported."
    return None


# ---------------------------------------------------------------------------
# Numeric rules
# ---------------------------------------------------------------------------

def _match_threshold_nonzero(args: Args) -> str | None:
    if args.match_threshold == 0:
        return "Invalid value for --match-threshold"
    return None


def _match_threshold_range(args: Args) -> str | None:
    if _out_of_range(args.match_threshold, MIN_MATCH_THRESHOLD, MAX_MATCH_THRESHOLD):
        return (
            f"--match-threshold must be between {MIN_MATCH_THRESHOLD} "
            f"and {MAX_MATCH_THRESHOLD}"
        )
    return None


def _min_shift_range(args: Args) -> str | None:
    if _out_of_range(args.min_shift, MIN_SHIFT_IN_PANO, MAX_SHIFT_IN_PANO):
        return f"--min-shift must be between {MIN_SHIFT_IN_PANO} and {MAX_SHIFT_IN_PANO}"
    return None


def _jpeg_quality_range(args: Args) -> str | None:
    if _out_of_range(args.jpeg_quality, 0, MAX_JPEG_QUALITY):
        return f"--jpeg-quality must be between 0 and {MAX_JPEG_QUALITY}"
    return None


def _png_compression_range(args: Args) -> str | None:
    if _out_of_range(args.png_compression, 0, MAX_PNG_COMPRESSION):
        return f"--png-compression must be between 0 and {MAX_PNG_COMPRESSION}"
    return None


def _max_pano_mpx_range(args: Args) -> str | None:
    if _out_of_range(args.max_pano_mpx, MIN_PANO_MPX_LIMIT, MAX_PANO_MPX_LIMIT):
        return (
            f"--max-pano-mpx must be between {MIN_PANO_MPX_LIMIT} "
            f"and {MAX_PANO_MPX_LIMIT}"
        )
    return None


RULES: tuple[Rule, ...] = (
    _output_needs_inputs,
    _output_extension_supported,
    _output_excludes_gui,
    _match_threshold_nonzero,
    _match_threshold_range,
    _min_shift_range,
    _jpeg_quality_range,
    _png_compression_range,
    _max_pano_mpx_range,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def first_violation(args: Args) -> ValidationError | None:
    """Return the error for the first failing rule, or ``None`` if valid."""
    for rule in RULES:
        message = rule(args)
        if message is not None:
            return ValidationError(message)
    return None


def validate_args(args: Args) -> None:
    """Raise :class:`ValidationError` for the first failing rule."""
    error = first_violation(args)
    if error is not None:
        raise error
