"""Tests for appdoctor.platform.process module."""

from __future__ import annotations

import subprocess
import sys
from unittest.mock import patch

from appdoctor.core.result import Err, Ok
from appdoctor.platform.process import CompletedCommand, ProcessError, command_exists, run


class TestRun:
    def test_success_captures_output(self) -> None:
        result = run([sys.executable, "-c", "print('1.11.3')"])

        assert isinstance(result, Ok)
        assert result.value.returncode == 0
        assert result.value.stdout.strip() == "1.11.3"
        assert result.value.ok is True

    def test_nonzero_exit_is_still_ok(self) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('license'); sys.exit(69)"]
        )

        assert isinstance(result, Ok)
        assert result.value.returncode == 69
        assert result.value.stderr == "license"
        assert result.value.ok is False

    def test_missing_executable_is_err(self) -> None:
        result = run(["appdoctor-definitely-not-a-command-xyz", "--version"])

        assert isinstance(result, Err)
        assert result.error.command == ("appdoctor-definitely-not-a-command-xyz", "--version")

    def test_timeout_is_err(self) -> None:
        with patch(
            "appdoctor.platform.process.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd=["pod"], timeout=1.0),
        ):
            result = run(["pod", "--version"], timeout=1.0)

        assert isinstance(result, Err)
        assert "timed out after 1.0s" in result.error.reason


class TestProcessError:
    def test_str_truncates_long_commands(self) -> None:
        error = ProcessError(("xcrun", "simctl", "list", "devices", "-j"), "boom")
        assert str(error) == "xcrun simctl list ...: boom"

    def test_str_short_command(self) -> None:
        assert str(ProcessError(("pod", "--version"), "not found")) == "pod --version: not found"


class TestCompletedCommand:
    def test_ok(self) -> None:
        assert CompletedCommand(("a",), 0, "", "").ok is True
        assert CompletedCommand(("a",), 1, "", "").ok is False


class TestCommandExists:
    def test_uses_which(self) -> None:
        with patch("appdoctor.platform.process.shutil.which", return_value="/opt/homebrew/bin/brew"):
            assert command_exists("brew") is True
        with patch("appdoctor.platform.process.shutil.which", return_value=None):
            assert command_exists("brew") is False
