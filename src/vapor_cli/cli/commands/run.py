"""``vapor run`` — execute the binary produced by ``vapor build``."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path

from vapor_cli.cli.console import console
from vapor_cli.core import flags
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessCancelledError, ProcessError
from vapor_cli.infra import shell
from vapor_cli.utils.constants import DEFAULT_EXECUTABLE


def executable_path(args: Sequence[str]) -> Path:
    """``.build/<debug|release>/<name>`` selected by ``--release``/``--name=``."""
    name = flags.value_for(args, "name") or DEFAULT_EXECUTABLE
    folder = "release" if flags.has_flag(args, "--release") else "debug"
    return Path(".build") / folder / name


def passthrough_args(args: Sequence[str]) -> list[str]:
    """Arguments left for the application once our own flags are removed."""
    return flags.without_prefix(flags.without(args, "--release"), "--name")


class RunCommand(Command):
    id = "run"
    help = (
        "runs executable built by vapor build.",
        "use --release for release configuration.",
        "use --name=<executable> to pick a product (default App).",
    )

    def execute(self, args: Sequence[str], directory: str) -> None:
        executable = executable_path(args)
        if not executable.is_file():
            raise CommandFailedError(
                f"Could not find executable {executable}",
                hint="Run `vapor build` first.",
            )

        console.print("Running...")
        command = shlex.join([str(executable), *passthrough_args(args)])
        try:
            shell.run(command)
        except ProcessCancelledError as exc:
            raise CommandFailedError("Run cancelled.") from exc
        except ProcessError as exc:
            raise CommandFailedError("Could not run project.") from exc
