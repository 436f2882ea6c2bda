"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so the dispatch path (usage, ``help``) remains functional
even when Rich is not installed.
"""

from __future__ import annotations

from typing import Any

from vapor_cli.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class(highlight=False, soft_wrap=True)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stdout print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects)
			return
		rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
