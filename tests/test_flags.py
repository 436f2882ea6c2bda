"""Tests for long-flag helpers (core/flags.py)."""

from __future__ import annotations

import pytest

from vapor_cli.core.flags import has_flag, value_for, without, without_prefix


class TestValueFor:
    def test_extracts_value(self) -> None:
        assert value_for(["--name=foo", "--release"], "name") == "foo"

    def test_absent(self) -> None:
        assert value_for(["--release"], "name") is None

    def test_empty_args(self) -> None:
        assert value_for([], "name") is None

    def test_first_match_wins(self) -> None:
        assert value_for(["--name=a", "--name=b"], "name") == "a"

    @pytest.mark.parametrize("token", ["--name", "--names=foo", "-name=foo", "name=foo"])
    def test_requires_exact_prefix(self, token: str) -> None:
        assert value_for([token], "name") is None

    def test_value_may_contain_equals(self) -> None:
        assert value_for(["--env=KEY=VALUE"], "env") == "KEY=VALUE"

    def test_empty_value(self) -> None:
        assert value_for(["--name="], "name") == ""


class TestFilters:
    def test_has_flag_is_exact(self) -> None:
        assert has_flag(["--release"], "--release")
        assert not has_flag(["--release=1"], "--release")

    def test_without_removes_every_occurrence(self) -> None:
        assert without(["--release", "a", "--release"], "--release") == ["a"]

    def test_without_prefix(self) -> None:
        assert without_prefix(["--name=Api", "--names", "x"], "--name") == ["x"]
