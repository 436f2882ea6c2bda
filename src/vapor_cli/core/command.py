"""The command contract shared by every built-in command.

A command is an instance of a :class:`Command` subclass that declares
three class attributes and implements :meth:`Command.execute`:

* ``id`` — the verb typed on the command line; unique per registry.
* ``help`` — usage lines shown by ``vapor help``; may be empty.
* ``dependencies`` — external tools that must be on PATH beforehand.

Description rendering and the dependency gate are defined here once
and are not overridden by subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from vapor_cli.core.protocols import DependencyChecker
from vapor_cli.exceptions import MissingDependencyError


class Command(ABC):
    """Base class for top-level commands and subcommands."""

    id: ClassVar[str]
    help: ClassVar[tuple[str, ...]] = ()
    dependencies: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def execute(self, args: Sequence[str], directory: str) -> None:
        """Run the command.

        Parameters
        ----------
        args:
            Raw argument tokens following the command id.
        directory:
            The invoking program path (``argv[0]``).

        Raises
        ------
        VaporError
            On any unrecoverable failure.  Returning normally means
            success.
        """

    @property
    def description(self) -> str:
        """Render ``"<id>:\\n"`` followed by each help line, indented."""
        return f"{self.id}:\n" + "".join(f"  {line}\n" for line in self.help)

    def assert_dependencies_satisfied(self, checker: DependencyChecker) -> None:
        """Raise on the first declared dependency *checker* reports absent."""
        for dependency in self.dependencies:
            if not checker(dependency):
                raise MissingDependencyError(self.id, dependency)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
