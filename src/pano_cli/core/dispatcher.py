"""Token dispatcher — turns the raw argument vector into an :class:`Args`.

Each token is handled independently and in order:

1. An exact boolean flag (``--gui``) sets its field.
2. A ``--name=value`` flag hands the remainder to that field's parser;
   an unparseable value leaves the field unset.
3. Anything else is a positional input path.

Positional tokens are returned as the raw strings next to the record;
directory expansion, extension filtering and sorting happen in
:mod:`pano_cli.core.expansion`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from pano_cli.core.models import Args
from pano_cli.core.protocols import Logger
from pano_cli.core.value_parsers import (
    MATCHING_TYPES,
    literals,
    parse_float,
    parse_int,
    resolve_matching_type,
    resolve_projection,
    resolve_wave_correction,
)


# ---------------------------------------------------------------------------
# Flag tables
# ---------------------------------------------------------------------------

BOOLEAN_FLAGS: dict[str, tuple[str, bool]] = {
    "--gui": ("run_gui", True),
    "--help": ("print_help", True),
    "--version": ("print_version", True),
    "--copy-metadata": ("copy_metadata", True),
    "--no-copy-metadata": ("copy_metadata", False),
}


@dataclass(frozen=True, slots=True)
class ValueFlag:
    """A ``--name=value`` flag bound to one optional :class:`Args` field."""

    prefix: str
    field: str
    parse: Callable[[str], object | None]
    invalid_warning: str | None = None
    """Template logged for an unparseable value; ``{value}`` is the raw text."""


VALUE_FLAGS: tuple[ValueFlag, ...] = (
    ValueFlag("--output=", "output_path", Path),
    ValueFlag("--projection=", "projection", resolve_projection),
    ValueFlag(
        "--matching-type=",
        "matching_type",
        resolve_matching_type,
        invalid_warning=(
            "Invalid --matching-type '{value}', using default (auto). "
            f"Valid: {literals(MATCHING_TYPES)}"
        ),
    ),
    ValueFlag("--match-threshold=", "match_threshold", parse_int),
    ValueFlag("--min-shift=", "min_shift", parse_float),
    ValueFlag("--jpeg-quality=", "jpeg_quality", parse_int),
    ValueFlag("--png-compression=", "png_compression", parse_int),
    ValueFlag("--wave-correction=", "wave_correction", resolve_wave_correction),
    ValueFlag("--max-pano-mpx=", "max_pano_mpx", parse_int),
)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _match_value_flag(token: str) -> tuple[ValueFlag, str] | None:
    for flag in VALUE_FLAGS:
        if token.startswith(flag.prefix):
            return flag, token[len(flag.prefix):]
    return None


def dispatch_tokens(
    tokens: Iterable[str], logger: Logger,
) -> tuple[Args, list[str]]:
    """Build an :class:`Args` from *tokens* (program name excluded).

    Returns the record, with ``input_paths`` still empty, and the
    positional tokens verbatim in encounter order.

    A repeated flag overwrites the earlier value; a repeated flag with an
    unparseable value resets the field to unset.
    """
    fields: dict[str, object] = {}
    positionals: list[str] = []

    for token in tokens:
        if token in BOOLEAN_FLAGS:
            name, value = BOOLEAN_FLAGS[token]
            fields[name] = value
            continue

        matched = _match_value_flag(token)
        if matched is None:
            positionals.append(token)
            continue

        flag, raw_value = matched
        parsed = flag.parse(raw_value)
        fields[flag.field] = parsed
        if parsed is None and flag.invalid_warning is not None:
            logger.warning(flag.invalid_warning.format(value=raw_value))

    return Args(**fields), positionals  # type: ignore[arg-type]
