"""Typed value parsers and enum resolvers for ``--name=value`` flags.

Every function here is all-or-nothing: the whole string is consumed or
the result is ``None``.  Nothing in this module raises.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import TypeVar

from pano_cli.core.models import MatchingType, ProjectionType, WaveCorrectionType

_E = TypeVar("_E")

_INT_PATTERN = re.compile(r"-?[0-9]+")

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
FLOAT32_MAX: float = 3.4028234663852886e38


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_int(text: str) -> int | None:
    """Parse a plain decimal integer such as ``"42"`` or ``"-3"``.

    Signs other than a leading ``-``, whitespace, underscores and any
    trailing characters are rejected, as are values outside the signed
    32-bit range.
    """
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def parse_float(text: str) -> float | None:
    """Parse a floating-point literal such as ``"0.25"`` or ``"1e-2"``.

    Leading whitespace is allowed, trailing whitespace is not.  Finite
    values beyond single precision are rejected.
    """
    if not text.strip() or text != text.rstrip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    # "1e400" overflows to inf in double precision; only a spelled-out inf is kept.
    if math.isinf(value) and "inf" not in text.lower():
        return None
    if math.isfinite(value) and abs(value) > FLOAT32_MAX:
        return None
    return value


# ---------------------------------------------------------------------------
# Enum literal tables
# ---------------------------------------------------------------------------

PROJECTION_TYPES: Mapping[str, ProjectionType] = {
    "perspective": ProjectionType.PERSPECTIVE,
    "cylindrical": ProjectionType.CYLINDRICAL,
    "spherical": ProjectionType.SPHERICAL,
    "fisheye": ProjectionType.FISHEYE,
    "stereographic": ProjectionType.STEREOGRAPHIC,
    "rectilinear": ProjectionType.COMPRESSED_RECTILINEAR,
    "panini": ProjectionType.PANINI,
    "mercator": ProjectionType.MERCATOR,
    "transverse-mercator": ProjectionType.TRANSVERSE_MERCATOR,
}

MATCHING_TYPES: Mapping[str, MatchingType] = {
    "auto": MatchingType.AUTO,
    "single": MatchingType.SINGLE_PANO,
    "none": MatchingType.NONE,
}

WAVE_CORRECTION_TYPES: Mapping[str, WaveCorrectionType] = {
    "off": WaveCorrectionType.OFF,
    "auto": WaveCorrectionType.AUTO,
    "horizontal": WaveCorrectionType.HORIZONTAL,
    "vertical": WaveCorrectionType.VERTICAL,
}


def literals(table: Mapping[str, object]) -> str:
    """Render the accepted literals of *table* as ``"a, b, c"``."""
    return ", ".join(table)


def _resolve(table: Mapping[str, _E], text: str) -> _E | None:
    return table.get(text)


def resolve_projection(text: str) -> ProjectionType | None:
    return _resolve(PROJECTION_TYPES, text)


def resolve_matching_type(text: str) -> MatchingType | None:
    return _resolve(MATCHING_TYPES, text)


def resolve_wave_correction(text: str) -> WaveCorrectionType | None:
    return _resolve(WAVE_CORRECTION_TYPES, text)
