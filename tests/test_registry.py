"""Tests for the command registry (core/registry.py) and the built-in set.

Coverage:
* Exact, case-sensitive lookup; ``None`` for unknown and empty ids.
* Registration order is preserved.
* Empty and duplicate ids are rejected; frozen registries reject writes.
* Built-in registry ids are non-empty and unique.
"""

from __future__ import annotations

import pytest

from vapor_cli.cli.commands import build_registry
from vapor_cli.core.registry import Registry, RegistryFrozenError


class TestLookup:
    def test_returns_registered_command(self, recording_registry: Registry) -> None:
        command = recording_registry.lookup("build")
        assert command is not None
        assert command.id == "build"

    @pytest.mark.parametrize("command_id", ["", "deploy", "Build", "build ", "--build"])
    def test_unregistered_returns_none(
        self, recording_registry: Registry, command_id: str
    ) -> None:
        assert recording_registry.lookup(command_id) is None

    def test_every_registered_id_resolves_to_itself(self, recording_registry: Registry) -> None:
        for command in recording_registry.list_all():
            assert recording_registry.lookup(command.id) is command

    def test_repeated_lookup_is_stable(self, recording_registry: Registry) -> None:
        first = recording_registry.lookup("run")
        assert recording_registry.lookup("run") is first
        assert recording_registry.lookup("missing") is None
        assert recording_registry.lookup("missing") is None

    def test_contains(self, recording_registry: Registry) -> None:
        assert "run" in recording_registry
        assert "walk" not in recording_registry
        assert 3 not in recording_registry


class TestOrdering:
    def test_list_all_in_registration_order(self, recording_registry: Registry) -> None:
        assert [cmd.id for cmd in recording_registry.list_all()] == ["help", "build", "run"]

    def test_ids_and_supported(self, recording_registry: Registry) -> None:
        assert recording_registry.ids == ("help", "build", "run")
        assert recording_registry.supported == "help|build|run"

    def test_iter_and_len(self, recording_registry: Registry) -> None:
        assert len(recording_registry) == 3
        assert [cmd.id for cmd in recording_registry] == ["help", "build", "run"]


class TestRegister:
    def test_register_appends(self, make_command: type) -> None:
        registry = Registry()
        registry.register(make_command("a"))
        registry.register(make_command("b"))
        assert registry.ids == ("a", "b")

    def test_empty_id_rejected(self, make_command: type) -> None:
        with pytest.raises(ValueError, match="empty"):
            Registry().register(make_command(""))

    def test_duplicate_id_rejected(self, make_command: type) -> None:
        registry = Registry([make_command("build")])
        with pytest.raises(ValueError, match="already registered"):
            registry.register(make_command("build"))
        assert len(registry) == 1

    def test_frozen_registry_rejects_register(self, make_command: type) -> None:
        registry = Registry([make_command("a")]).freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(make_command("b"))

    def test_list_all_is_a_snapshot(self, make_command: type) -> None:
        registry = Registry([make_command("a")])
        snapshot = registry.list_all()
        registry.register(make_command("b"))
        assert len(snapshot) == 1


class TestBuiltinRegistry:
    def test_ids_non_empty_and_unique(self) -> None:
        registry = build_registry(lambda name: True, macos=True)
        ids = registry.ids
        assert all(ids)
        assert len(ids) == len(set(ids))

    def test_order(self) -> None:
        registry = build_registry(lambda name: True, macos=True)
        assert registry.ids == (
            "help",
            "clean",
            "build",
            "run",
            "new",
            "bootstrap",
            "self-update",
            "xcode",
            "heroku",
            "doctor",
        )

    def test_xcode_only_on_macos(self) -> None:
        registry = build_registry(lambda name: True, macos=False)
        assert "xcode" not in registry

    def test_registry_is_frozen(self) -> None:
        assert build_registry(lambda name: True, macos=False).frozen

    def test_declared_dependencies(self) -> None:
        registry = build_registry(lambda name: True, macos=True)
        deps = {cmd.id: cmd.dependencies for cmd in registry}
        assert deps["build"] == ("swift",)
        assert deps["new"] == ("curl", "tar")
        assert deps["heroku"] == ("git", "heroku")
        assert deps["help"] == ()
