"""Infrastructure: synchronous shell command execution.

This module is the **only** place in the codebase that spawns
subprocesses.  Commands compose a full shell string and hand it here;
nonzero statuses are mapped to typed exceptions.

Rules
-----
* Commands inherit the parent's stdin/stdout/stderr.
* No retries and no timeouts — the call blocks until the child exits.
* While a child runs, SIGINT is ignored in this process and left at its
  default in the child, so Ctrl+C stops the child only and surfaces as a
  cancelled status.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import signal
import subprocess
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from vapor_cli.exceptions import ProcessCancelledError, ProcessFailedError
from vapor_cli.utils.constants import CANCELLED_STATUS


def _restore_default_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


@contextmanager
def _sigint_ignored() -> Iterator[None]:
    # signal handlers can only be installed from the main thread
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def is_cancelled(status: int) -> bool:
    """Return ``True`` for a child stopped by SIGINT or exiting with status 2."""
    return status in (CANCELLED_STATUS, -signal.SIGINT)


def call(command: str) -> int:
    """Run *command* through the shell and return its exit status.

    A child killed by a signal reports the negated signal number, as
    :attr:`subprocess.CompletedProcess.returncode` does.
    """
    with _sigint_ignored():
        completed = subprocess.run(
            command,
            shell=True,
            check=False,
            preexec_fn=_restore_default_sigint,
        )
    return completed.returncode


def run(command: str) -> None:
    """Run *command*, raising on any nonzero exit status.

    Raises
    ------
    ProcessCancelledError
        When the child was interrupted (see :func:`is_cancelled`).
    ProcessFailedError
        For every other nonzero status.
    """
    status = call(command)
    if is_cancelled(status):
        raise ProcessCancelledError(command, status)
    if status != 0:
        raise ProcessFailedError(command, status)


def passes(command: str) -> bool:
    """Return ``True`` when *command* exits with status 0."""
    return call(command) == 0
