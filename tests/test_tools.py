"""Tests for external tool detection (infra/tools.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from vapor_cli.infra.tools import ToolStatus, detect_tool, is_macos, tool_exists


class TestDetectTool:
    @patch("vapor_cli.infra.tools.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/bin/swift"
        status = detect_tool("swift")
        assert status.found is True
        assert status.name == "swift"
        assert isinstance(status.path, Path)
        mock_which.assert_called_once_with("swift")

    @patch("vapor_cli.infra.tools.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        status = detect_tool("heroku")
        assert status == ToolStatus(name="heroku", found=False, path=None)


class TestToolExists:
    @patch("vapor_cli.infra.tools.shutil.which", return_value="/usr/bin/git")
    def test_present(self, _mock_which: MagicMock) -> None:
        assert tool_exists("git") is True

    @patch("vapor_cli.infra.tools.shutil.which", return_value=None)
    def test_absent(self, _mock_which: MagicMock) -> None:
        assert tool_exists("git") is False


class TestIsMacos:
    @pytest.mark.parametrize(("system", "expected"), [("Darwin", True), ("Linux", False)])
    def test_platform(self, system: str, expected: bool) -> None:
        with patch("vapor_cli.infra.tools.platform.system", return_value=system):
            assert is_macos() is expected


class TestToolStatus:
    def test_frozen(self) -> None:
        status = ToolStatus(name="tar", found=True, path=Path("/bin/tar"))
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
