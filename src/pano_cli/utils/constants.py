"""Numeric bounds and defaults shared by the validator and the help text.

Defaults apply downstream when an optional argument is absent; the
bounds are enforced by :mod:`pano_cli.core.validator`.
"""

from __future__ import annotations

# --- Matching ------------------------------------------------------------------

DEFAULT_MATCH_THRESHOLD: int = 6
MIN_MATCH_THRESHOLD: int = 4
MAX_MATCH_THRESHOLD: int = 50

DEFAULT_SHIFT_IN_PANO: float = 0.1
MIN_SHIFT_IN_PANO: float = 0.0
MAX_SHIFT_IN_PANO: float = 1.0

# --- Export --------------------------------------------------------------------

DEFAULT_JPEG_QUALITY: int = 95
MAX_JPEG_QUALITY: int = 100

DEFAULT_PNG_COMPRESSION: int = 2
MAX_PNG_COMPRESSION: int = 9

# --- Stitching -----------------------------------------------------------------

DEFAULT_MAX_PANO_MPX: int = 500
"""Panorama size cap in megapixels used when ``--max-pano-mpx`` is absent."""

MIN_PANO_MPX_LIMIT: int = 1
MAX_PANO_MPX_LIMIT: int = 5000
