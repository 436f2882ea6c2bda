"""Ordered, append-only registry of commands.

A :class:`Registry` is filled once during start-up, frozen, and then
only read.  Registration order is display order; lookup is an exact,
case-sensitive match on ``id``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from vapor_cli.core.command import Command


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry that has been frozen."""


class Registry:
    """An ordered collection of :class:`Command` instances."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands: list[Command] = []
        self._frozen = False
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> None:
        """Append *command*.

        Raises
        ------
        ValueError
            When the id is empty or already registered.
        RegistryFrozenError
            When the registry has been frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(f"cannot register {command.id!r}: registry is frozen")
        if not command.id:
            raise ValueError("command id must not be empty")
        if self.lookup(command.id) is not None:
            raise ValueError(f"command id {command.id!r} is already registered")
        self._commands.append(command)

    def freeze(self) -> Registry:
        """Reject further registrations and return ``self``."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, command_id: str) -> Command | None:
        """Return the first command whose id equals *command_id*."""
        return next((cmd for cmd in self._commands if cmd.id == command_id), None)

    def list_all(self) -> tuple[Command, ...]:
        """Return every command in registration order."""
        return tuple(self._commands)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(cmd.id for cmd in self._commands)

    @property
    def supported(self) -> str:
        """Pipe-separated ids, e.g. ``"help|build|run"``."""
        return "|".join(self.ids)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, command_id: object) -> bool:
        return isinstance(command_id, str) and self.lookup(command_id) is not None
