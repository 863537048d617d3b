"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from pano_cli.core.arg_parser import LOGGER_NAME
from pano_cli.exceptions import EnvironmentError

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan)[a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			plain = [
				_MARKUP_TAG.sub("", obj) if isinstance(obj, str) else obj
				for obj in objects
			]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def escape_markup(text: str) -> str:
	"""Escape user-supplied *text* for interpolation into console markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


def _build_handler() -> logging.Handler:
	"""Return a Rich log handler, or a plain stderr handler without Rich."""
	try:
		rich_console = get_rich_console()
		from rich.logging import RichHandler
	except (EnvironmentError, ModuleNotFoundError):
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
		return handler
	return RichHandler(
		console=rich_console,
		show_time=False,
		show_path=False,
		markup=False,
	)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
	"""Attach a single stderr handler to the ``pano_cli`` logger.

	Calling this again replaces the handler instead of stacking a second
	one, so repeated ``main()`` calls in one process log each line once.
	"""
	logger = logging.getLogger(LOGGER_NAME)
	logger.handlers.clear()
	logger.addHandler(_build_handler())
	logger.setLevel(level)
	logger.propagate = False
	return logger
