"""Infrastructure: external tool detection.

Answers "is ``<name>`` available on PATH?" for the dependency gate
and the ``doctor`` command.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No permanent PATH modification.
* No automatic installation.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one external tool.

    Attributes
    ----------
    name : str
        The tool name as declared by a command.
    found : bool
        Whether the tool was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    """

    name: str
    found: bool
    path: Path | None


def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name* and describe the result."""
    result = shutil.which(name)
    if result is None:
        return ToolStatus(name=name, found=False, path=None)
    return ToolStatus(name=name, found=True, path=Path(result).resolve())


def tool_exists(name: str) -> bool:
    """Return ``True`` when *name* resolves on PATH."""
    return shutil.which(name) is not None


def is_macos() -> bool:
    """Return ``True`` on macOS, where Xcode-only steps are available."""
    return platform.system() == "Darwin"
