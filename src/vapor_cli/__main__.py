"""Allow ``python -m vapor_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m vapor_cli`` behaves identically to the ``vapor``
console script.
"""

from __future__ import annotations

from vapor_cli.cli.app import cli

if __name__ == "__main__":
    cli()
