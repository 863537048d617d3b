"""Allow ``python -m pano_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pano_cli`` behaves identically to the ``pano-cli``
console script.
"""

from __future__ import annotations

from pano_cli.cli.app import cli

if __name__ == "__main__":
    cli()
