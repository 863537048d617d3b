"""CLI application entry point and command routing for pano-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pano_cli.exceptions.PanoCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here — all work is delegated to
  :func:`pano_cli.core.parse_args`.
* The stitching pipeline and the GUI are external collaborators; they
  are reached through the optional *runner* callable.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from pano_cli.cli import exit_codes
from pano_cli.cli.console import configure_logging, console, escape_markup
from pano_cli.cli.help import print_help, print_version
from pano_cli.core.arg_parser import parse_args
from pano_cli.core.models import Args
from pano_cli.core.protocols import Logger
from pano_cli.exceptions import PanoCliError

Runner = Callable[[Args], int]
"""Downstream consumer of a validated configuration; returns an exit code."""


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    runner: Runner | None = None,
    logger: Logger | None = None,
) -> int:
    """Run the pano-cli front end.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    runner:
        Pipeline or GUI launcher that receives the validated
        :class:`Args`.  When ``None``, a configuration summary is shown.
    logger:
        Diagnostic sink.  When ``None``, the ``pano_cli`` logger is
        configured for stderr output.

    Returns
    -------
    int
        OS process exit code.
    """
    if logger is None:
        logger = configure_logging()

    result = parse_args(argv, logger)
    if result.args is None:
        if result.error is not None and result.error.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(result.error.hint)}")
        return exit_codes.GENERAL_ERROR

    args = result.args
    if args.print_help:
        print_help(logger)
        return exit_codes.SUCCESS
    if args.print_version:
        print_version(logger)
        return exit_codes.SUCCESS

    if runner is not None:
        return runner(args)

    from pano_cli.cli.summary import render_summary

    render_summary(args)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PanoCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
