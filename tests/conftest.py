"""Shared pytest fixtures and configuration for the vapor-cli test suite.

Guidelines
----------
* ``vapor_cli.infra.shell`` is mocked; only ``test_shell.py`` spawns ``/bin/sh``.
* PATH lookups are mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from vapor_cli.core.command import Command
from vapor_cli.core.registry import Registry


class RecordingCommand(Command):
    """A command that records every ``execute`` call."""

    def __init__(
        self,
        command_id: str,
        *,
        help: Sequence[str] = (),
        dependencies: Sequence[str] = (),
    ) -> None:
        self.id = command_id
        self.help = tuple(help)
        self.dependencies = tuple(dependencies)
        self.calls: list[tuple[list[str], str]] = []

    def execute(self, args: Sequence[str], directory: str) -> None:
        self.calls.append((list(args), directory))


@pytest.fixture
def recording_registry() -> Registry:
    """Registry holding ``help``, ``build`` and ``run`` recording commands."""
    return Registry(
        [
            RecordingCommand("help"),
            RecordingCommand("build", dependencies=("swift",)),
            RecordingCommand("run", dependencies=("swift",)),
        ]
    ).freeze()


@pytest.fixture
def make_command() -> type[RecordingCommand]:
    """Factory for :class:`RecordingCommand` instances."""
    return RecordingCommand
