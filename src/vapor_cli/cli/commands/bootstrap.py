"""``vapor bootstrap`` — install a ``vapor`` launcher script."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence
from pathlib import Path

from vapor_cli.cli.console import console, escape
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError

LAUNCHER_NAME: str = "vapor"


def launcher_script(python: str) -> str:
    """POSIX shell launcher that runs this package with *python*."""
    return f'#!/bin/sh\nexec {shlex.quote(python)} -m vapor_cli "$@"\n'


class BootstrapCommand(Command):
    id = "bootstrap"
    help = (
        "bootstrap <directory>",
        "Installs the vapor launcher in the",
        "specified location (defaults to current directory).",
    )

    def execute(self, args: Sequence[str], directory: str) -> None:
        target = Path(args[0] if args else ".") / LAUNCHER_NAME
        try:
            target.write_text(launcher_script(sys.executable), encoding="utf-8")
            target.chmod(0o755)
        except OSError as exc:
            raise CommandFailedError(
                f"Could not install {target}",
                hint=f"Check that the directory exists and is writable ({exc.strerror}).",
            ) from exc
        console.print(f"Installed {escape(str(target))}")
