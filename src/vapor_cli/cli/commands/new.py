"""``vapor new`` — create a project from the Vapor example template."""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from vapor_cli.cli.console import console, escape
from vapor_cli.core import flags
from vapor_cli.core.command import Command
from vapor_cli.exceptions import CommandFailedError, ProcessError
from vapor_cli.infra import shell
from vapor_cli.infra.tools import is_macos, tool_exists
from vapor_cli.utils.constants import EXAMPLE_TARBALL_NAME, EXAMPLE_TARBALL_URL


def scaffold_commands(name: str, *, verbose: bool = False) -> list[str]:
    """Shell steps that download and unpack the template into *name*."""
    target = shlex.quote(name)
    tarball = f"{target}/{EXAMPLE_TARBALL_NAME}"
    curl_flags = "" if verbose else " -s"
    tar_flags = "v" if verbose else ""

    return [
        f"mkdir {target}",
        f"curl -L{curl_flags} {EXAMPLE_TARBALL_URL} -o {tarball}",
        f"tar -{tar_flags}xzf {tarball} --strip-components=1 --directory {target}",
        f"rm {tarball}",
    ]


class NewCommand(Command):
    id = "new"
    help = (
        "new <project-name>",
        "Clones the Vapor Example to a given",
        "folder name and initializes an empty",
        "Git repository inside it.",
    )
    dependencies = ("curl", "tar")

    def execute(self, args: Sequence[str], directory: str) -> None:
        name = next((arg for arg in args if not arg.startswith("--")), None)
        if not name:
            raise CommandFailedError(
                "Invalid number of arguments.",
                usage=f"Usage: {directory} {self.id} <project-name>",
            )

        macos = is_macos()
        target = shlex.quote(name)
        try:
            for command in scaffold_commands(name, verbose=flags.has_flag(args, "--verbose")):
                shell.run(command)
        except ProcessError as exc:
            raise CommandFailedError("Could not clone repository") from exc

        xcode_project = macos
        if macos:
            try:
                shell.run(f"cd {target} && swift package generate-xcodeproj")
            except ProcessError:
                console.print("[yellow]Warning:[/yellow] Could not generate Xcode Project.")
                xcode_project = False

        if tool_exists("git"):
            console.print("Initializing git repository if necessary")
            shell.call(f"git init {target}")
            shell.call(f'cd {target} && git add . && git commit -m "initial vapor project setup"')
            console.print()

        console.print()
        console.print(f'Project "{escape(name)}" has been created.')
        console.print(f"Type `cd {escape(name)}` to enter project directory")
        console.print("Enjoy!")
        console.print()
        if xcode_project:
            shell.call(f"open {target}/*.xcodeproj")
