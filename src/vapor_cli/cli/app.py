"""CLI application entry point for vapor-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~vapor_cli.exceptions.VaporError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No command logic lives here — :func:`main` builds the registry and
  hands the raw argument list to the top-level
  :class:`~vapor_cli.core.dispatcher.Dispatcher`.
* Commands raise; they never call :func:`sys.exit`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from vapor_cli.cli import exit_codes
from vapor_cli.cli.commands import build_registry
from vapor_cli.cli.console import console, escape
from vapor_cli.core.dispatcher import Dispatcher
from vapor_cli.exceptions import VaporError
from vapor_cli.infra.tools import tool_exists


def main(argv: Sequence[str] | None = None) -> int:
    """Run the vapor CLI.

    Parameters
    ----------
    argv:
        Full argument list *including* the program path, as in
        ``sys.argv``.  When ``None`` (default), ``sys.argv`` is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    VaporError
        On any fatal condition; :func:`cli` reports it.
    """
    if argv is None:
        argv = sys.argv

    registry = build_registry(tool_exists)
    Dispatcher(registry, tool_exists).run(argv)
    return exit_codes.SUCCESS


def report_error(exc: VaporError) -> None:
    """Print *exc* as ``Error: <message>`` with its usage line and hint."""
    if exc.usage:
        console.print(exc.usage, markup=False)
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except VaporError as exc:
        report_error(exc)
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
