# SPDX-License-Identifier: MIT
"""ios-deploy probing (installs and debugs apps on connected devices)."""

from __future__ import annotations

from typing import Protocol

from appdoctor.doctor.probes import Probe, first_line, stdout_if_ok

__all__ = ["IosDeploy", "IosDeployProbe"]


class IosDeployProbe(Protocol):
    def version_text(self) -> str | None:
        ...


class IosDeploy:
    def __init__(self, probe: Probe) -> None:
        self._probe = probe

    def version_text(self) -> str | None:
        """Return `ios-deploy --version` output, or None if unavailable."""
        output = stdout_if_ok(self._probe, "ios-deploy", ["--version"])
        if output is None:
            return None
        return first_line(output) or None
