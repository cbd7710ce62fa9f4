"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``-h``, ``--version``) remain
functional even when Rich is not installed.  It also owns the one-time
logging setup for the whole application.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from toodles.exceptions import EnvironmentError, ToodlesError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``/``input`` proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects, **options)

	def input(self, prompt: str = "") -> str:
		"""Read one line after showing a (markup) *prompt*."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			return input(prompt)
		return str(rich_console.input(prompt))

	def clear(self) -> None:
		"""Clear the terminal screen."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print("\033[2J\033[H", end="", file=self._stream())
			return
		rich_console.clear()


console = _ConsoleProxy()


def print_error(exc: ToodlesError) -> None:
	"""Report a recoverable error as ``ERR: <message>`` plus its hint."""
	from toodles.cli.render import escape

	console.print(f"[bold red]ERR:[/bold red] {escape(str(exc))}")
	if exc.hint:
		console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(level: str = "WARNING") -> None:
	"""Attach a single stderr handler to the ``toodles`` logger.

	Uses :class:`rich.logging.RichHandler` when Rich is importable and a
	plain :class:`logging.StreamHandler` otherwise.  Calling it again
	replaces the previous handler.
	"""
	numeric = getattr(logging, level.upper(), None)
	if not isinstance(numeric, int):
		numeric = logging.WARNING

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_path=False,
			markup=False,
		)

	package_logger = logging.getLogger("toodles")
	for existing in list(package_logger.handlers):
		package_logger.removeHandler(existing)
	package_logger.addHandler(handler)
	package_logger.setLevel(numeric)
