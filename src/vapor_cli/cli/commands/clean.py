"""``vapor clean`` — remove fetched packages and build products."""

from __future__ import annotations

from collections.abc import Sequence

from vapor_cli.cli.console import console
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessError
from vapor_cli.infra import shell


class CleanCommand(Command):
    id = "clean"
    help = ("Removes the Packages and .build directories.",)

    def execute(self, args: Sequence[str], directory: str) -> None:
        if args:
            raise CommandFailedError(f"{self.id} doesn't take any additional parameters")

        try:
            shell.run("rm -rf Packages .build")
        except ProcessError as exc:
            raise CommandFailedError("Could not clean.") from exc
        console.print("Cleaned.")
