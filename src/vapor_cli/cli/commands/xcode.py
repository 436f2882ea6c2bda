"""``vapor xcode`` — generate and open an Xcode project (macOS only)."""

from __future__ import annotations

from collections.abc import Sequence

from vapor_cli.cli.console import console
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessError
from vapor_cli.infra import shell


class XcodeCommand(Command):
    id = "xcode"
    help = ("Generates and opens an Xcode Project.",)
    dependencies = ("swift",)

    def execute(self, args: Sequence[str], directory: str) -> None:
        console.print("Generating Xcode Project...")
        try:
            shell.run("swift package generate-xcodeproj")
        except ProcessError:
            console.print("[yellow]Warning:[/yellow] Could not generate Xcode Project.")
            return

        console.print("Opening Xcode...")
        try:
            shell.run("open *.xcodeproj")
        except ProcessError as exc:
            raise CommandFailedError("Could not open Xcode Project.") from exc
