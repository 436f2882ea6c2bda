"""Built-in commands and the start-up registry.

:func:`build_registry` is the only place commands are registered.  The
order below is the order ``vapor help`` lists them in.
"""

from __future__ import annotations

from vapor_cli.cli.commands.bootstrap import BootstrapCommand
from vapor_cli.cli.commands.build import BuildCommand
from vapor_cli.cli.commands.clean import CleanCommand
from vapor_cli.cli.commands.help import HelpCommand
from vapor_cli.cli.commands.heroku import HerokuCommand, HerokuInitCommand
from vapor_cli.cli.commands.new import NewCommand
from vapor_cli.cli.commands.run import RunCommand
from vapor_cli.cli.commands.self_update import SelfUpdateCommand
from vapor_cli.cli.commands.xcode import XcodeCommand
from vapor_cli.cli.doctor import DoctorCommand
from vapor_cli.core.protocols import DependencyChecker
from vapor_cli.core.registry import Registry
from vapor_cli.infra.tools import is_macos, tool_exists


def build_registry(
    checker: DependencyChecker = tool_exists,
    *,
    macos: bool | None = None,
) -> Registry:
    """Register every built-in command and return the frozen registry.

    ``xcode`` is only registered on macOS; pass *macos* to override
    platform detection.
    """
    if macos is None:
        macos = is_macos()

    registry = Registry()
    registry.register(HelpCommand(registry))
    registry.register(CleanCommand())
    registry.register(BuildCommand())
    registry.register(RunCommand())
    registry.register(NewCommand())
    registry.register(BootstrapCommand())
    registry.register(SelfUpdateCommand())
    if macos:
        registry.register(XcodeCommand())
    registry.register(HerokuCommand(checker))
    registry.register(DoctorCommand(registry))
    return registry.freeze()


__all__: list[str] = [
    "BootstrapCommand",
    "BuildCommand",
    "CleanCommand",
    "DoctorCommand",
    "HelpCommand",
    "HerokuCommand",
    "HerokuInitCommand",
    "NewCommand",
    "RunCommand",
    "SelfUpdateCommand",
    "XcodeCommand",
    "build_registry",
]
