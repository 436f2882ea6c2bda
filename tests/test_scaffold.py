"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from vapor_cli import __version__
from vapor_cli.cli import exit_codes
from vapor_cli.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    EnvironmentError,
    InvocationError,
    ManifestError,
    MissingDependencyError,
    ProcessCancelledError,
    ProcessError,
    ProcessFailedError,
    SubcommandNotFoundError,
    VaporError,
)


class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvocationError,
            CommandNotFoundError,
            SubcommandNotFoundError,
            CommandFailedError,
            ManifestError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[VaporError]) -> None:
        assert issubclass(exc_class, VaporError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(VaporError, Exception)

    def test_hint_and_usage_are_stored(self) -> None:
        err = VaporError("boom", hint="try this", usage="Usage: vapor [help]")
        assert str(err) == "boom"
        assert err.hint == "try this"
        assert err.usage == "Usage: vapor [help]"

    def test_defaults(self) -> None:
        err = VaporError("boom")
        assert err.hint is None
        assert err.usage is None
        assert err.exit_code == exit_codes.GENERAL_ERROR

    def test_structured_errors(self) -> None:
        assert issubclass(MissingDependencyError, VaporError)
        assert issubclass(ProcessFailedError, ProcessError)
        assert str(ProcessCancelledError("swift build", 2)) == "`swift build` exited with status 2"


class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_cancelled_status_is_two(self) -> None:
        from vapor_cli.utils.constants import CANCELLED_STATUS

        assert CANCELLED_STATUS == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130
