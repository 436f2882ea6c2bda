"""Custom exception hierarchy for vapor-cli.

Every fatal condition is raised as a subclass of :class:`VaporError`
and reported by the single error boundary in :mod:`vapor_cli.cli.app`.
Commands never terminate the process themselves.

Hierarchy
---------
VaporError
├── InvocationError
├── CommandNotFoundError
├── SubcommandNotFoundError
├── MissingDependencyError
├── CommandFailedError
├── ManifestError
├── EnvironmentError
└── ProcessError
    ├── ProcessFailedError
    └── ProcessCancelledError
"""

from __future__ import annotations


class VaporError(Exception):
    """Base exception for all vapor-cli errors.

    Parameters
    ----------
    message:
        One-line cause, rendered after ``Error:``.
    hint:
        Optional remediation text rendered below the error line.
    usage:
        Optional usage line rendered *before* the error line.
    """

    exit_code: int = 1
    """Process exit status used by the error boundary."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        usage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        self.usage: str | None = usage


# --- Dispatch --------------------------------------------------------------

class InvocationError(VaporError):
    """Raised when the raw argument list is malformed."""


class CommandNotFoundError(VaporError):
    """Raised when no registered command matches the requested id."""


class SubcommandNotFoundError(VaporError):
    """Raised when a compound command cannot resolve its subcommand."""


class MissingDependencyError(VaporError):
    """Raised when a command's external tool is not on ``PATH``."""

    def __init__(self, command_id: str, dependency: str) -> None:
        super().__init__(f"{command_id} requires {dependency}")
        self.command_id = command_id
        self.dependency = dependency


# --- Command bodies --------------------------------------------------------

class CommandFailedError(VaporError):
    """Raised by a command body on an unrecoverable failure."""


class ManifestError(VaporError):
    """Raised when ``Package.swift`` is missing or cannot be parsed."""


class EnvironmentError(VaporError):
    """Raised when an optional runtime library is not available."""


# --- Process executor ------------------------------------------------------

class ProcessError(VaporError):
    """Raised when a shell command exits with a nonzero status."""

    def __init__(self, command: str, status: int) -> None:
        super().__init__(f"`{command}` exited with status {status}")
        self.command = command
        self.status = status


class ProcessFailedError(ProcessError):
    """Generic nonzero exit status."""


class ProcessCancelledError(ProcessError):
    """The distinguished "cancelled" exit status (2)."""
