"""Named-variant dispatch.

:class:`Dispatcher` resolves an identifier against a :class:`Registry`,
runs the dependency gate and invokes the command.  The same class
serves the top level (``vapor <command> …``) and compound commands
(``vapor heroku <subcommand> …``) through :class:`CompoundCommand`.

Gates, in order, each terminal on failure:

1. invocation shape — program path and command id present;
2. resolution — the id is registered;
3. dependencies — every declared tool is available;
4. execution — ``execute`` returns normally.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from vapor_cli.core.command import Command
from vapor_cli.core.help import render_usage
from vapor_cli.core.protocols import DependencyChecker
from vapor_cli.core.registry import Registry
from vapor_cli.exceptions import (
    CommandNotFoundError,
    InvocationError,
    SubcommandNotFoundError,
)


@dataclass(frozen=True, slots=True)
class Invocation:
    """One parsed process invocation."""

    directory: str
    """The program path token (``argv[0]``)."""

    command_id: str

    args: tuple[str, ...] = field(default_factory=tuple)
    """Every token after the command id, unmodified."""


class Dispatcher:
    """Resolve and invoke commands from one registry.

    Parameters
    ----------
    registry:
        The commands this dispatcher can reach.
    checker:
        Dependency probe consulted before every ``execute``.
    parent:
        Id of the owning compound command, or ``None`` at top level.
        Only changes the wording of resolution errors.
    """

    def __init__(
        self,
        registry: Registry,
        checker: DependencyChecker,
        *,
        parent: str | None = None,
    ) -> None:
        self.registry = registry
        self._checker = checker
        self._parent = parent

    # ------------------------------------------------------------------
    # Gates
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> Invocation:
        """Split raw *argv* into an :class:`Invocation`."""
        if not argv:
            raise InvocationError("no directory")
        directory = argv[0]
        if len(argv) < 2:
            raise InvocationError(
                "no command",
                usage=render_usage(directory, self.registry),
            )
        return Invocation(directory=directory, command_id=argv[1], args=tuple(argv[2:]))

    def resolve(self, command_id: str | None) -> Command:
        """Return the command registered as *command_id*."""
        command = self.registry.lookup(command_id) if command_id is not None else None
        if command is not None:
            return command
        if self._parent is not None:
            raise SubcommandNotFoundError(
                f"{self._parent} subcommand not found. supported: {self.registry.supported}"
            )
        raise CommandNotFoundError(f"command {command_id} doesn't exist")

    def dispatch(self, command_id: str | None, args: Sequence[str], directory: str) -> None:
        """Resolve *command_id*, check its dependencies and execute it."""
        command = self.resolve(command_id)
        command.assert_dependencies_satisfied(self._checker)
        command.execute(list(args), directory)

    def run(self, argv: Sequence[str]) -> None:
        """Run all four gates against a full ``sys.argv``-style list."""
        invocation = self.parse(argv)
        self.dispatch(invocation.command_id, invocation.args, invocation.directory)


class CompoundCommand(Command):
    """A command whose first argument names one of its own subcommands.

    Subclasses set ``subcommand_types``; an instance builds a private,
    frozen :class:`Registry` from them and a nested :class:`Dispatcher`.
    """

    subcommand_types: ClassVar[tuple[type[Command], ...]] = ()

    def __init__(self, checker: DependencyChecker) -> None:
        self.subcommands = Registry(cls() for cls in self.subcommand_types).freeze()
        self._dispatcher = Dispatcher(self.subcommands, checker, parent=self.id)

    def execute(self, args: Sequence[str], directory: str) -> None:
        subcommand_id = args[0] if args else None
        self._dispatcher.dispatch(subcommand_id, args[1:], directory)
