# SPDX-License-Identifier: MIT
"""Probe collaborators.

Validators never spawn processes themselves. They ask a `Probe` whether a
tool exists and what it prints, which keeps them testable with canned
responses.
"""

from __future__ import annotations

from typing import Protocol

from appdoctor.core.logging import get_logger
from appdoctor.core.result import Err, Result
from appdoctor.platform.process import CompletedCommand, ProcessError, command_exists
from appdoctor.platform.process import run as run_process

__all__ = ["Probe", "SystemProbe", "first_line", "stdout_if_ok"]

log = get_logger(__name__)


class Probe(Protocol):
    """Protocol for observing external tools."""

    def exists(self, tool: str) -> bool:
        """Return True if tool is on PATH. Never raises."""
        ...

    def run(self, tool: str, args: list[str]) -> Result[CompletedCommand, ProcessError]:
        """Run tool with args.

        Returns:
            Ok with exit code and output (any exit code), or Err if the
            executable could not be spawned.
        """
        ...


class SystemProbe:
    """Probe backed by PATH lookup and subprocess."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    def exists(self, tool: str) -> bool:
        found = command_exists(tool)
        log.debug("probe exists", tool=tool, found=found)
        return found

    def run(self, tool: str, args: list[str]) -> Result[CompletedCommand, ProcessError]:
        result = run_process([tool, *args], timeout=self._timeout)
        if isinstance(result, Err):
            log.debug("probe unavailable", tool=tool, reason=result.error.reason)
        else:
            log.debug(
                "probe ran", tool=tool, args=" ".join(args), returncode=result.value.returncode
            )
        return result


def first_line(text: str) -> str:
    """Extract the first non-empty line from text."""
    for line in text.strip().splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


def stdout_if_ok(probe: Probe, tool: str, args: list[str]) -> str | None:
    """Run a command and return its stripped stdout on exit code 0.

    Returns None when the command cannot be spawned, fails, or prints
    nothing.
    """
    result = probe.run(tool, args)
    if isinstance(result, Err) or not result.value.ok:
        return None
    return result.value.stdout.strip() or None
