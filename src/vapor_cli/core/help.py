"""Usage and help text rendering (pure formatting)."""

from __future__ import annotations

from collections.abc import Iterable
from textwrap import indent
from typing import TYPE_CHECKING

from vapor_cli.utils.constants import COMMUNITY_FOOTER

if TYPE_CHECKING:
    from vapor_cli.core.command import Command


def render_usage(directory: str, commands: Iterable[Command]) -> str:
    """``Usage: <directory> [id1|id2|...]``"""
    ids = "|".join(command.id for command in commands)
    return f"Usage: {directory} [{ids}]"


def render_help(directory: str, commands: Iterable[Command]) -> str:
    """Render the full ``vapor help`` screen."""
    commands = tuple(commands)
    body = "\n".join(indent(command.description, "  ") for command in commands)
    return "\n".join(
        (
            render_usage(directory, commands),
            "Available Commands:",
            "",
            body,
            *COMMUNITY_FOOTER,
        )
    )
