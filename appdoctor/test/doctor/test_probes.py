# SPDX-License-Identifier: MIT
"""Tests for probe helpers and SystemProbe."""

from __future__ import annotations

import pytest

import appdoctor.doctor.probes as probes_mod
from appdoctor.core.result import Err, Ok, Result
from appdoctor.doctor.probes import SystemProbe, first_line, stdout_if_ok
from appdoctor.platform.process import CompletedCommand, ProcessError
from appdoctor.test.fakes import FakeProbe


class TestFirstLine:
    def test_single_line(self) -> None:
        assert first_line("1.11.3") == "1.11.3"

    def test_skips_blank_lines(self) -> None:
        assert first_line("\n\n  1.9.2  \nmore") == "1.9.2"

    def test_empty(self) -> None:
        assert first_line("   \n ") == ""


class TestStdoutIfOk:
    def test_returns_stripped_stdout(self) -> None:
        probe = FakeProbe({("pod", "--version"): (0, "1.11.3\n", "")})
        assert stdout_if_ok(probe, "pod", ["--version"]) == "1.11.3"

    def test_nonzero_exit_is_none(self) -> None:
        probe = FakeProbe({("pod", "--version"): (1, "1.11.3", "boom")})
        assert stdout_if_ok(probe, "pod", ["--version"]) is None

    def test_spawn_failure_is_none(self) -> None:
        assert stdout_if_ok(FakeProbe(), "pod", ["--version"]) is None

    def test_empty_output_is_none(self) -> None:
        probe = FakeProbe({("pod", "--version"): (0, "  \n", "")})
        assert stdout_if_ok(probe, "pod", ["--version"]) is None


class TestSystemProbe:
    def test_exists_uses_path_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(probes_mod, "command_exists", lambda name: name == "brew")
        probe = SystemProbe()
        assert probe.exists("brew") is True
        assert probe.exists("pod") is False

    def test_run_passes_timeout_and_args(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[tuple[list[str], float | None]] = []

        def fake_run(
            cmd: list[str], *, timeout: float | None = None
        ) -> Result[CompletedCommand, ProcessError]:
            seen.append((cmd, timeout))
            return Ok(CompletedCommand(tuple(cmd), 0, "ok\n", ""))

        monkeypatch.setattr(probes_mod, "run_process", fake_run)
        result = SystemProbe(timeout=5.0).run("pod", ["--version"])

        assert isinstance(result, Ok)
        assert result.value.stdout == "ok\n"
        assert seen == [(["pod", "--version"], 5.0)]

    def test_run_returns_err_unchanged(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = ProcessError(("pod", "--version"), "not found")
        monkeypatch.setattr(probes_mod, "run_process", lambda cmd, *, timeout=None: Err(error))

        result = SystemProbe().run("pod", ["--version"])

        assert isinstance(result, Err)
        assert result.error is error
