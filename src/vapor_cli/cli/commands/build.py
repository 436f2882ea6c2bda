"""``vapor build`` — fetch dependencies and compile the project."""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from vapor_cli.cli.console import console
from vapor_cli.core import flags
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessCancelledError, ProcessError
from vapor_cli.infra import shell
from vapor_cli.utils.constants import EXTRA_SCHEME_DIRS

TOOLCHAIN_HINT: str = "\n".join(
    (
        "Make sure you are running a supported Swift toolchain.",
        "Vapor only supports the latest release.",
        "Run `swift --version` to check your version.",
    )
)


def build_command(args: Sequence[str]) -> str:
    """Compose ``swift build`` with ``--release`` mapped to ``-c release``."""
    parts = ["swift build"]
    passthrough = flags.without(args, "--release")
    if passthrough:
        parts.append(shlex.join(passthrough))
    if flags.has_flag(args, "--release"):
        parts.append("-c release")
    return " ".join(parts)


def _remove_extra_schemes() -> None:
    """Best effort: a failure here is reported and ignored."""
    try:
        for pattern in EXTRA_SCHEME_DIRS:
            shell.run(f"rm -rf {pattern}")
    except ProcessError:
        console.print("[yellow]Warning:[/yellow] Failed to remove extra schemes")


class BuildCommand(Command):
    id = "build"
    help = (
        "build <module-name>",
        "Builds source files and links Vapor libs.",
        "Defaults to App/ folder structure.",
    )
    dependencies = ("swift",)

    def execute(self, args: Sequence[str], directory: str) -> None:
        try:
            shell.run("swift build --fetch")
        except ProcessCancelledError as exc:
            raise CommandFailedError("Fetch cancelled.") from exc
        except ProcessError as exc:
            raise CommandFailedError("Could not fetch dependencies.") from exc

        _remove_extra_schemes()

        try:
            shell.run(build_command(args))
        except ProcessCancelledError as exc:
            raise CommandFailedError("Build cancelled.") from exc
        except ProcessError as exc:
            raise CommandFailedError("Could not build project.", hint=TOOLCHAIN_HINT) from exc
