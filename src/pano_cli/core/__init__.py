"""Core / service layer — argument parsing, input resolution, validation.

Rules
-----
* No ``print()`` calls; diagnostics go through the injected
  :class:`~pano_cli.core.protocols.Logger`.
* Filesystem access is confined to :mod:`pano_cli.core.expansion`.
* No imports from ``cli``.
"""

from pano_cli.core.arg_parser import parse_args
from pano_cli.core.models import (
    Args,
    MatchingType,
    ParseResult,
    ProjectionType,
    WaveCorrectionType,
)
from pano_cli.core.protocols import Logger

__all__: list[str] = [
    "Args",
    "Logger",
    "MatchingType",
    "ParseResult",
    "ProjectionType",
    "WaveCorrectionType",
    "parse_args",
]
