"""Single source of truth for the pano-cli version string."""

from __future__ import annotations

__version__: str = "1.3.0"
