"""Custom exception hierarchy for pano-cli.

Every failure raised while turning the raw argument vector into a
configuration record inherits from :class:`PanoCliError`.  Inside the
core these are raised like any other exception; the public
:func:`~pano_cli.core.arg_parser.parse_args` boundary catches them and
returns an explicit :class:`~pano_cli.core.models.ParseResult` instead.

Hierarchy
---------
PanoCliError
├── MalformedInvocationError
│   └── DirectoryExpansionError
├── NoSupportedImagesError
├── ValidationError
└── EnvironmentError
"""

from __future__ import annotations


class PanoCliError(Exception):
    """Base exception for all pano-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Token parsing ---------------------------------------------------------

class MalformedInvocationError(PanoCliError):
    """Raised when the raw argument vector cannot be processed at all."""


class DirectoryExpansionError(MalformedInvocationError):
    """Raised when a directory argument cannot be enumerated."""


# --- Inputs ------------------------------------------------------------------

class NoSupportedImagesError(PanoCliError):
    """Raised when positional inputs resolve to zero supported images."""


# --- Cross-field validation ---------------------------------------------------

class ValidationError(PanoCliError):
    """Raised for the first violated rule of the argument validator."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PanoCliError):
    """Raised when an optional runtime dependency is not available."""
