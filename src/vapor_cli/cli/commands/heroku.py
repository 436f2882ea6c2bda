"""``vapor heroku <subcommand>`` — Heroku deployment helpers.

``heroku`` is a compound command: its first argument selects a
subcommand from a private registry (currently only ``init``).
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from vapor_cli.cli.console import console, escape
from vapor_cli.core.command import Command
from vapor_cli.core.dispatcher import CompoundCommand
from vapor_cli.core.protocols import DependencyChecker
from vapor_cli.exceptions import CommandFailedError, ProcessError
from vapor_cli.infra import prompts, shell, workspace
from vapor_cli.infra.tools import tool_exists
from vapor_cli.utils.constants import DEFAULT_BUILDPACK

BUILDPACK_ALREADY_SET_STATUS: int = 1
"""``heroku buildpacks:set`` exits with 1 when the buildpack is unchanged."""


class HerokuInitCommand(Command):
    id = "init"
    help = (
        "Creates a heroku app, sets the Swift buildpack,",
        "writes a Procfile and optionally deploys.",
    )

    def execute(self, args: Sequence[str], directory: str) -> None:
        if args:
            raise CommandFailedError("heroku init takes no args")

        if not workspace.git_history_is_clean():
            raise CommandFailedError(
                "Found Uncommitted Changes",
                hint="\n".join(
                    (
                        "Setting up heroku requires adding a commit to the repository.",
                        "Please commit your current changes before setting up heroku.",
                    )
                ),
            )

        package_name = workspace.get_package_name()
        console.print(f"Setting up Heroku for {escape(package_name)} ...")
        console.print()

        if workspace.heroku_remote_exists():
            console.print("Found existing heroku app")
            console.print()
        else:
            self._create_app()

        self._set_buildpack()

        console.print("Creating Procfile ...")
        try:
            workspace.write_procfile()
        except OSError as exc:
            raise CommandFailedError("Unable to make Procfile") from exc

        console.print()
        if not prompts.ask_confirm("Would you like to push to heroku now?"):
            console.print()
            console.print("Make sure to push your changes to heroku using:")
            console.print("\t'git push heroku master'")
            console.print("You may need to scale up dynos")
            console.print("\t'heroku ps:scale web=1'")
            return

        console.print()
        console.print("Pushing to heroku ... this could take a while")
        console.print()
        shell.call("git add .")
        shell.call('git commit -m "setting up heroku"')
        shell.call("git push heroku master")

        console.print("spinning up dynos ...")
        try:
            shell.run("heroku ps:scale web=1")
        except ProcessError as exc:
            raise CommandFailedError("unable to spin up dynos") from exc

    @staticmethod
    def _create_app() -> None:
        app_name = prompts.ask_text("Custom Heroku App Name? (return to let Heroku create)")
        command = f"heroku create {shlex.quote(app_name)}" if app_name else "heroku create"
        try:
            shell.run(command)
        except ProcessError as exc:
            raise CommandFailedError("unable to create heroku app") from exc

    @staticmethod
    def _set_buildpack() -> None:
        answer = prompts.ask_text("Custom Buildpack? (return to use default)")
        buildpack = answer or DEFAULT_BUILDPACK
        try:
            shell.run(f"heroku buildpacks:set {shlex.quote(buildpack)}")
        except ProcessError as exc:
            if exc.status != BUILDPACK_ALREADY_SET_STATUS:
                raise CommandFailedError(f"unable to set buildpack: {buildpack}") from exc
            console.print()
            return
        console.print(f"Using buildpack: {escape(buildpack)}")
        console.print()


class HerokuCommand(CompoundCommand):
    id = "heroku"
    help = (
        "heroku init",
        "Configures a new heroku project",
    )
    dependencies = ("git", "heroku")
    subcommand_types = (HerokuInitCommand,)

    def __init__(self, checker: DependencyChecker = tool_exists) -> None:
        super().__init__(checker)
