"""Package manifest scanning.

``Package.swift`` is not parsed as Swift; the package name is found by
simple text scanning, which is all the tool has ever needed.
"""

from __future__ import annotations

from vapor_cli.exceptions import ManifestError


def extract_package_name(manifest: str) -> str:
    """Return the package name declared in *manifest*.

    The first line that starts with ``name`` once surrounding spaces are
    trimmed is used; the name is its first double-quoted substring.

    Raises
    ------
    ManifestError
        When no such line, or no quoted value on it, exists.
    """
    for line in manifest.split("\n"):
        stripped = line.strip(" ")
        if not stripped.startswith("name"):
            continue
        parts = stripped.split('"')
        if len(parts) >= 3:
            return parts[1]
        break
    raise ManifestError("Unable to extract package name")
