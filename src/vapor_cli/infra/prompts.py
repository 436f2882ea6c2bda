"""Infrastructure: blocking interactive prompts.

Thin wrappers over questionary so commands can be tested by patching
these two functions.  questionary is imported lazily; commands that
never prompt work without it.
"""

from __future__ import annotations

from typing import Any

from vapor_cli.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def ask_text(message: str) -> str:
    """Read one line of free text.  Empty string on EOF or Ctrl+D."""
    questionary = _import_questionary()
    answer = questionary.text(message).ask()
    if answer is None:
        return ""
    return answer.strip()


def ask_confirm(message: str, *, default: bool = True) -> bool:
    """Ask a yes/no question.

    Raises ``KeyboardInterrupt`` when the prompt is aborted, so the
    error boundary reports it like any other Ctrl+C.
    """
    questionary = _import_questionary()
    answer = questionary.confirm(message, default=default).ask()
    if answer is None:
        raise KeyboardInterrupt
    return bool(answer)
