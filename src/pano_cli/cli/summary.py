"""Resolved-configuration summary shown when no pipeline runner is attached.

Renders a Rich table of every :class:`~pano_cli.core.models.Args` field,
falling back to an aligned plain-text table when Rich is missing.  Absent
optional values are shown with the default the pipeline will apply.
"""

from __future__ import annotations

import enum
import sys

from pano_cli.cli.console import console
from pano_cli.core.models import Args
from pano_cli.utils.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MATCH_THRESHOLD,
    DEFAULT_MAX_PANO_MPX,
    DEFAULT_PNG_COMPRESSION,
    DEFAULT_SHIFT_IN_PANO,
)


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def _show(value: object, default: object | None = None) -> str:
    if value is None:
        return "default" if default is None else f"{default} (default)"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def summary_rows(args: Args) -> list[tuple[str, str]]:
    """Return ``(setting, value)`` pairs in help-text order."""
    return [
        ("Inputs", f"{len(args.input_paths)} image(s)"),
        ("Output", str(args.output_path) if args.output_path is not None else "-"),
        ("GUI", _show(args.run_gui)),
        ("Projection", _show(args.projection, "spherical")),
        ("Matching type", _show(args.matching_type, "auto")),
        ("Match threshold", _show(args.match_threshold, DEFAULT_MATCH_THRESHOLD)),
        ("Min shift", _show(args.min_shift, DEFAULT_SHIFT_IN_PANO)),
        ("JPEG quality", _show(args.jpeg_quality, DEFAULT_JPEG_QUALITY)),
        ("PNG compression", _show(args.png_compression, DEFAULT_PNG_COMPRESSION)),
        ("Copy metadata", _show(args.copy_metadata)),
        ("Wave correction", _show(args.wave_correction, "auto")),
        ("Max pano Mpx", _show(args.max_pano_mpx, DEFAULT_MAX_PANO_MPX)),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    """Render the summary without Rich."""
    print("\npano-cli configuration", file=sys.stderr)
    print("=" * 44, file=sys.stderr)
    for label, value in rows:
        print(f"{label:<18} {value}", file=sys.stderr)
    print(file=sys.stderr)


def render_summary(args: Args) -> None:
    """Print the resolved configuration followed by the input file list."""
    rows = summary_rows(args)

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        for path in args.input_paths:
            print(f"  {path}", file=sys.stderr)
        return

    table = Table(
        title="pano-cli configuration",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Setting", style="bold", min_width=16)
    table.add_column("Value", min_width=20)
    for label, value in rows:
        table.add_row(label, value)

    console.print()
    console.print(table)
    for path in args.input_paths:
        console.print(f"  [dim]{escape(str(path))}[/dim]")
    console.print()
