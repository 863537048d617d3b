"""Argument parsing service: the public entry point of the core layer.

Pipeline order (enforced by :func:`parse_args`):

1. **Dispatch** — tokens → raw :class:`Args` plus positional tokens
   (:mod:`.dispatcher`).
2. **Resolve inputs** — expand directories, keep supported images, sort
   (:mod:`.expansion`).
3. **Validate** — first failing rule wins (:mod:`.validator`).

Guarantees
----------
* Only :class:`~pano_cli.exceptions.PanoCliError` subclasses are turned
  into failures; each failure logs exactly one error line.
* A failed parse never exposes a partially populated record.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from pano_cli.core.dispatcher import dispatch_tokens
from pano_cli.core.expansion import resolve_input_paths
from pano_cli.core.models import Args, ParseResult
from pano_cli.core.protocols import Logger
from pano_cli.core.validator import validate_args
from pano_cli.exceptions import MalformedInvocationError, PanoCliError

LOGGER_NAME = "pano_cli"


def _dispatch(tokens: Sequence[str], logger: Logger) -> tuple[Args, list[str]]:
    """Run the dispatcher and ensure only our exceptions escape."""
    try:
        return dispatch_tokens(tokens, logger)
    except PanoCliError:
        raise
    except Exception as exc:
        raise MalformedInvocationError(f"Error parsing arguments: {exc}") from exc


def parse_args(
    argv: Sequence[str] | None = None,
    logger: Logger | None = None,
) -> ParseResult:
    """Parse, expand, filter and validate a command line.

    Parameters
    ----------
    argv:
        Arguments without the program name.  When ``None`` (default),
        ``sys.argv[1:]`` is used.
    logger:
        Diagnostic sink.  Defaults to the ``pano_cli`` standard logger.

    Returns
    -------
    ParseResult
        The validated :class:`Args`, or the error that stopped parsing.
    """
    if argv is None:
        argv = sys.argv[1:]
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)

    try:
        args, positionals = _dispatch(argv, logger)
        args = replace(args, input_paths=resolve_input_paths(positionals, logger))
        validate_args(args)
    except PanoCliError as exc:
        logger.error(str(exc))
        return ParseResult.failure(exc)

    return ParseResult.success(args)
