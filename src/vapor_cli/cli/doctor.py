"""``vapor doctor`` — environment diagnostics command.

Probes every external tool declared by the registered commands and
renders a Rich table summarising what is available.  Missing tools are
warnings: only the commands that need them will refuse to run.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Iterable, Sequence

from vapor_cli.cli import exit_codes
from vapor_cli.cli.console import console
from vapor_cli.core.command import Command
from vapor_cli.core.registry import Registry
from vapor_cli.exceptions import CommandFailedError
from vapor_cli.infra.tools import detect_tool
from vapor_cli.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _vapor_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the vapor-cli version row."""
    return "vapor-cli", __version__, "[green]OK[/green]"


def _tool_check(name: str, users: Sequence[str]) -> tuple[str, str, str]:
    """Return (label, value, status) for one external tool."""
    status_obj = detect_tool(name)
    if status_obj.found:
        return name, str(status_obj.path), "[green]OK[/green]"
    return name, f"not found (needed by {', '.join(users)})", "[yellow]WARN[/yellow]"


def required_tools(commands: Iterable[Command]) -> dict[str, list[str]]:
    """Map each declared dependency to the ids of the commands needing it.

    Tools appear in first-declared order across the registry.
    """
    tools: dict[str, list[str]] = {}
    for command in commands:
        for dependency in command.dependencies:
            tools.setdefault(dependency, []).append(command.id)
    return tools


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nvapor doctor")
    print("=" * 64)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}")
    print("-" * 64)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(commands: Iterable[Command]) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _vapor_version_check(),
        _python_version_check(),
        _os_check(),
    ]
    checks.extend(
        _tool_check(name, users) for name, users in required_tools(commands).items()
    )

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="vapor doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()

    if has_failure:
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS


class DoctorCommand(Command):
    id = "doctor"
    help = ("Checks that the external tools used by vapor are installed.",)

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def execute(self, args: Sequence[str], directory: str) -> None:
        if run_doctor(self._registry) != exit_codes.SUCCESS:
            raise CommandFailedError("Some checks failed.")
