"""Infrastructure layer — external system integration.

This layer wraps all interaction with the shell, the filesystem, PATH
lookups and interactive input.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the command layer.
"""

from vapor_cli.infra.tools import ToolStatus, detect_tool, is_macos, tool_exists

__all__: list[str] = [
    "ToolStatus",
    "detect_tool",
    "is_macos",
    "tool_exists",
]
