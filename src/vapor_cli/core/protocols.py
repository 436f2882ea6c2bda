"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the dispatcher can be driven by a fake checker in
tests and by :func:`vapor_cli.infra.tools.tool_exists` in production.
"""

from __future__ import annotations

from typing import Protocol


class DependencyChecker(Protocol):
    """Contract for external-tool availability probes.

    Any callable taking a tool name and returning ``bool`` satisfies
    this protocol structurally.
    """

    def __call__(self, name: str) -> bool:
        """Return ``True`` when the tool *name* can be invoked."""
        ...  # pragma: no cover
