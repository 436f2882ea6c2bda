"""``vapor help`` — list every registered command."""

from __future__ import annotations

from collections.abc import Sequence

from vapor_cli.cli.console import console
from vapor_cli.core.command import Command
from vapor_cli.core.help import render_help
from vapor_cli.core.registry import Registry


class HelpCommand(Command):
    id = "help"

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def execute(self, args: Sequence[str], directory: str) -> None:
        console.print(render_help(directory, self._registry), markup=False)
