# SPDX-License-Identifier: MIT
"""Xcode probing.

- xcode-select path: where the active developer directory points
- xcodebuild -version: only succeeds for a full Xcode (not CommandLineTools)
- xcrun clang: prints a license prompt until the EULA is accepted
- xcrun simctl: missing until Xcode's additional components are installed
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from appdoctor.core.result import Err
from appdoctor.core.versions import Version, parse_version
from appdoctor.doctor.probes import Probe, stdout_if_ok

__all__ = ["Xcode", "XcodeInstallation", "XcodeProbe", "XCODE_DOWNLOAD_URL"]

XCODE_DOWNLOAD_URL = "https://developer.apple.com/xcode/download/"

_XCODE_SELECT = "/usr/bin/xcode-select"
_XCODEBUILD = "/usr/bin/xcodebuild"
_XCRUN = "/usr/bin/xcrun"

_XCODE_VERSION_RE = re.compile(r"Xcode\s+(\d+(?:\.\d+)*)")


@dataclass(frozen=True, slots=True)
class XcodeInstallation:
    """What the presence probe found.

    Attributes:
        select_path: Active developer directory, or None if unset
        version_text: `xcodebuild -version` output joined on one line
            (e.g. "Xcode 10.1, Build version 10B61"), or None
    """

    select_path: str | None
    version_text: str | None

    @property
    def is_installed(self) -> bool:
        return bool(self.select_path) and self.version_text is not None

    @property
    def version(self) -> Version | None:
        if not self.version_text:
            return None
        match = _XCODE_VERSION_RE.search(self.version_text)
        if not match:
            return None
        return parse_version(match.group(1))

    @property
    def short_version_text(self) -> str | None:
        """Version text up to the first comma ("Xcode 10.1")."""
        if not self.version_text:
            return None
        return self.version_text.split(",", 1)[0].strip() or None


class XcodeProbe(Protocol):
    """What the iOS validator needs to know about Xcode."""

    def locate(self) -> XcodeInstallation:
        ...

    def eula_signed(self) -> bool:
        ...

    def simctl_installed(self) -> bool:
        ...


class Xcode:
    """Xcode collaborator. Every call probes the host again."""

    def __init__(self, probe: Probe) -> None:
        self._probe = probe

    def locate(self) -> XcodeInstallation:
        """Run the presence probe."""
        select_path = stdout_if_ok(self._probe, _XCODE_SELECT, ["--print-path"])
        version_text: str | None = None
        if select_path:
            raw = stdout_if_ok(self._probe, _XCODEBUILD, ["-version"])
            if raw:
                version_text = ", ".join(line.strip() for line in raw.splitlines() if line.strip())
        return XcodeInstallation(select_path=select_path, version_text=version_text)

    def eula_signed(self) -> bool:
        """Return False while `xcrun clang` asks for the license agreement."""
        result = self._probe.run(_XCRUN, ["clang"])
        if isinstance(result, Err):
            return False
        output = result.value.stdout + result.value.stderr
        return "license" not in output.lower()

    def simctl_installed(self) -> bool:
        result = self._probe.run(_XCRUN, ["simctl", "list"])
        if isinstance(result, Err):
            return False
        return result.value.ok
