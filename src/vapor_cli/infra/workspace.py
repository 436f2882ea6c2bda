"""Infrastructure: project workspace state.

Reads and writes the files the heroku integration relies on and asks
git about the working tree.  All paths are relative to the current
working directory, the project root.
"""

from __future__ import annotations

from pathlib import Path

from vapor_cli.core.manifest import extract_package_name
from vapor_cli.exceptions import ManifestError
from vapor_cli.infra import shell
from vapor_cli.utils.constants import PACKAGE_MANIFEST, PROCFILE_CONTENTS, PROCFILE_NAME


def read_package_manifest(root: Path | None = None) -> str:
    """Return the text of ``Package.swift`` under *root*.

    Raises
    ------
    ManifestError
        When the manifest cannot be read.
    """
    path = (root or Path.cwd()) / PACKAGE_MANIFEST
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(
            f"Unable to find {PACKAGE_MANIFEST}",
            hint="Make sure you've run `vapor new` or set up your Swift project manually.",
        ) from exc


def get_package_name(root: Path | None = None) -> str:
    """Read the manifest under *root* and return its package name."""
    return extract_package_name(read_package_manifest(root))


def git_history_is_clean() -> bool:
    """Return ``True`` when ``git status --porcelain`` reports nothing."""
    return shell.passes('test -z "$(git status --porcelain)"')


def heroku_remote_exists() -> bool:
    """Return ``True`` when the repository already has a heroku remote."""
    return shell.passes("git remote get-url heroku")


def write_procfile(root: Path | None = None) -> Path:
    """Write the Procfile, overwriting any existing one."""
    path = (root or Path.cwd()) / PROCFILE_NAME
    path.write_text(PROCFILE_CONTENTS + "\n", encoding="utf-8")
    return path
