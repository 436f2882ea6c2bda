"""Core layer — command contract, registry, dispatch and help rendering.

Rules
-----
* No ``print()`` calls.
* No subprocess, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from vapor_cli.core.command import Command
from vapor_cli.core.dispatcher import CompoundCommand, Dispatcher, Invocation
from vapor_cli.core.protocols import DependencyChecker
from vapor_cli.core.registry import Registry, RegistryFrozenError

__all__: list[str] = [
    "Command",
    "CompoundCommand",
    "DependencyChecker",
    "Dispatcher",
    "Invocation",
    "Registry",
    "RegistryFrozenError",
]
