"""Long-flag helpers over raw argument tokens.

Flags are matched by a linear prefix scan; there are no short flags,
no ``--`` terminator and no combined flags.
"""

from __future__ import annotations

from collections.abc import Sequence


def value_for(args: Sequence[str], name: str) -> str | None:
    """Return the value of the first ``--<name>=<value>`` token, if any.

    >>> value_for(["--name=foo", "--release"], "name")
    'foo'
    """
    prefix = f"--{name}="
    for arg in args:
        if arg.startswith(prefix):
            return arg[len(prefix):]
    return None


def has_flag(args: Sequence[str], flag: str) -> bool:
    """Return ``True`` when *flag* appears verbatim in *args*."""
    return flag in args


def without(args: Sequence[str], flag: str) -> list[str]:
    """Return *args* minus every token equal to *flag*."""
    return [arg for arg in args if arg != flag]


def without_prefix(args: Sequence[str], prefix: str) -> list[str]:
    """Return *args* minus every token starting with *prefix*."""
    return [arg for arg in args if not arg.startswith(prefix)]
