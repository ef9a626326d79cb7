"""Subprocess execution for probes.

Unlike build steps, a probe that exits non-zero is still a successful
*observation* (e.g. `xcrun simctl list` failing tells us simctl is broken).
So `run()` only returns Err when the command could not be observed at all:
the executable is missing, cannot be spawned, or timed out.

Usage:
    match run(["pod", "--version"]):
        case Ok(completed):
            print(completed.returncode, completed.stdout)
        case Err(error):
            print(f"unavailable: {error}")
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass

from appdoctor.core.result import Err, Ok, Result

__all__ = ["CompletedCommand", "ProcessError", "command_exists", "run"]


@dataclass(frozen=True, slots=True)
class CompletedCommand:
    """Observed outcome of a command that ran to completion."""

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be observed.

    Attributes:
        command: The command that was attempted.
        reason: Why it could not run (spawn error text or timeout).
    """

    command: tuple[str, ...]
    reason: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str}: {self.reason}"


def command_exists(name: str) -> bool:
    """Return True if name resolves to an executable on PATH."""
    return shutil.which(name) is not None


def run(cmd: list[str], *, timeout: float | None = None) -> Result[CompletedCommand, ProcessError]:
    """Run a command, capturing text output.

    Args:
        cmd: Command and arguments.
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(CompletedCommand) whatever the exit code, Err(ProcessError) if the
        command could not be spawned or timed out.
    """
    command = tuple(cmd)
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return Err(ProcessError(command=command, reason=f"timed out after {timeout}s"))
    except OSError as e:
        return Err(ProcessError(command=command, reason=str(e)))

    return Ok(
        CompletedCommand(
            command=command,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
    )
