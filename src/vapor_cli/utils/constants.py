"""Fixed URLs, file names and texts shared across commands."""

from __future__ import annotations

DISTRIBUTION_NAME: str = "vapor-cli"

EXAMPLE_TARBALL_URL: str = (
    "https://github.com/qutheory/vapor-example/archive/master.tar.gz"
)
EXAMPLE_TARBALL_NAME: str = "vapor-example.tar.gz"

CANCELLED_STATUS: int = 2
"""Subprocess exit status reported as "cancelled" (the process still exits 1)."""

DEFAULT_EXECUTABLE: str = "App"

DEFAULT_BUILDPACK: str = "https://github.com/kylef/heroku-buildpack-swift"

PACKAGE_MANIFEST: str = "Package.swift"

PROCFILE_NAME: str = "Procfile"
PROCFILE_CONTENTS: str = "web: App --port=$PORT"

EXTRA_SCHEME_DIRS: tuple[str, ...] = (
    "Packages/Sources/Vapor-*/Development",
    "Packages/Sources/Vapor-*/Performance",
    "Packages/Sources/Vapor-*/Generator",
)

COMMUNITY_FOOTER: tuple[str, ...] = (
    "Community:",
    "  Join our Slack if you have questions,",
    "  need help, or want to contribute.",
    "  http://slack.qutheory.io",
)
