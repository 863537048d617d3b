"""Domain models for pano-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Optional settings use ``None`` for
"not given on the command line"; a present ``0`` is a real value.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from pano_cli.exceptions import PanoCliError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectionType(enum.Enum):
    """Output projection of the stitched panorama."""

    PERSPECTIVE = "perspective"
    CYLINDRICAL = "cylindrical"
    SPHERICAL = "spherical"
    FISHEYE = "fisheye"
    STEREOGRAPHIC = "stereographic"
    COMPRESSED_RECTILINEAR = "compressed-rectilinear"
    PANINI = "panini"
    MERCATOR = "mercator"
    TRANSVERSE_MERCATOR = "transverse-mercator"


class MatchingType(enum.Enum):
    """How input images are grouped into panoramas."""

    AUTO = "auto"
    SINGLE_PANO = "single-pano"
    NONE = "none"


class WaveCorrectionType(enum.Enum):
    OFF = "off"
    AUTO = "auto"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# ---------------------------------------------------------------------------
# Configuration record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Args:
    """Fully resolved command-line configuration for one invocation."""

    run_gui: bool = False
    print_help: bool = False
    print_version: bool = False

    input_paths: tuple[Path, ...] = ()
    """Supported image paths, sorted ascending by path string."""

    output_path: Path | None = None

    # Projection
    projection: ProjectionType | None = None

    # Matching
    matching_type: MatchingType | None = None
    match_threshold: int | None = None
    min_shift: float | None = None

    # Export
    jpeg_quality: int | None = None
    png_compression: int | None = None
    copy_metadata: bool | None = None

    # Stitching
    wave_correction: WaveCorrectionType | None = None
    max_pano_mpx: int | None = None


# ---------------------------------------------------------------------------
# Parse outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Either a complete :class:`Args` record or the error that stopped parsing.

    Exactly one of :attr:`args` and :attr:`error` is set.  Build instances
    through :meth:`success` and :meth:`failure`.
    """

    args: Args | None = None
    error: PanoCliError | None = None

    @classmethod
    def success(cls, args: Args) -> ParseResult:
        return cls(args=args)

    @classmethod
    def failure(cls, error: PanoCliError) -> ParseResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok
