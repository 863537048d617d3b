"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on a concrete logging
backend — so tests can inject a recorder and the CLI can inject a
configured :class:`logging.Logger`.
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Contract for the diagnostic sink used while parsing arguments.

    :class:`logging.Logger` satisfies this protocol structurally (no
    explicit inheritance required).  Messages arrive fully formatted.
    """

    def info(self, msg: str) -> None:
        """Record an informational line (help text, directory expansion)."""
        ...  # pragma: no cover

    def warning(self, msg: str) -> None:
        """Record a recoverable problem, such as an ignored flag value."""
        ...  # pragma: no cover

    def error(self, msg: str) -> None:
        """Record the single diagnostic that accompanies a failed parse."""
        ...  # pragma: no cover
