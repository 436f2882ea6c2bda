"""``vapor self-update`` — upgrade the installed distribution with pip."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence

from vapor_cli.cli.console import console
from vapor_cli.core import flags
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessError
from vapor_cli.infra import shell
from vapor_cli.utils.constants import DISTRIBUTION_NAME


def pip_command(*, verbose: bool = False, user: bool = False) -> str:
    parts = [shlex.quote(sys.executable), "-m pip install --upgrade"]
    if not verbose:
        parts.append("--quiet")
    if user:
        parts.append("--user")
    parts.append(DISTRIBUTION_NAME)
    return " ".join(parts)


class SelfUpdateCommand(Command):
    id = "self-update"
    help = (
        "Downloads the latest version of",
        "the Vapor command line interface.",
    )

    def execute(self, args: Sequence[str], directory: str) -> None:
        verbose = flags.has_flag(args, "--verbose")
        console.print("Downloading...")
        try:
            shell.run(pip_command(verbose=verbose))
        except ProcessError:
            console.print("Could not upgrade Vapor CLI in place.")
            console.print("Trying with '--user'.")
            try:
                shell.run(pip_command(verbose=verbose, user=True))
            except ProcessError as exc:
                raise CommandFailedError(
                    "Could not install Vapor CLI, giving up."
                ) from exc
        console.print("Vapor CLI updated.")
