# SPDX-License-Identifier: MIT
"""CocoaPods classification.

CocoaPods is classified into one of three tiers. The evaluation carries the
instruction texts the validator embeds verbatim in its messages.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Protocol

from appdoctor.core.logging import get_logger
from appdoctor.core.versions import Version, meets_minimum, parse_version
from appdoctor.doctor.probes import Probe, first_line, stdout_if_ok

__all__ = [
    "CocoaPods",
    "CocoaPodsClassifier",
    "CocoaPodsEvaluation",
    "CocoaPodsStatus",
    "NO_COCOAPODS_CONSEQUENCE",
    "COCOAPODS_INSTALL_INSTRUCTIONS",
    "COCOAPODS_UPGRADE_INSTRUCTIONS",
]

NO_COCOAPODS_CONSEQUENCE = (
    "CocoaPods fetches the native iOS code of the plugins your app uses.\n"
    "Without it, plugins will not work on iOS."
)
COCOAPODS_INSTALL_INSTRUCTIONS = "brew install cocoapods\npod setup"
COCOAPODS_UPGRADE_INSTRUCTIONS = "brew upgrade cocoapods\npod setup"

# Spec repo directories: "master" for git-based setups, "trunk" for the CDN.
_SPEC_REPO_NAMES = ("master", "trunk")

log = get_logger(__name__)


class CocoaPodsStatus(Enum):
    RECOMMENDED = auto()
    NOT_INSTALLED = auto()
    OUTDATED = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True, slots=True)
class CocoaPodsEvaluation:
    """Result of the classification probe.

    Attributes:
        status: Installation tier
        version_text: Output of `pod --version`, or None if not installed
        recommended_version: Version text shown in upgrade advice
        install_instructions: Commands that install CocoaPods
        upgrade_instructions: Commands that upgrade CocoaPods
    """

    status: CocoaPodsStatus
    version_text: str | None
    recommended_version: str
    install_instructions: str = COCOAPODS_INSTALL_INSTRUCTIONS
    upgrade_instructions: str = COCOAPODS_UPGRADE_INSTRUCTIONS


class CocoaPodsClassifier(Protocol):
    """Classification and setup state of CocoaPods."""

    def evaluate(self) -> CocoaPodsEvaluation:
        ...

    def is_initialized(self) -> bool:
        ...


class CocoaPods:
    """CocoaPods collaborator.

    Args:
        probe: Used to run `pod --version`
        recommended_version: Floor below which CocoaPods counts as outdated
        repos_dir: Spec repos directory; defaults to $CP_REPOS_DIR or
            ~/.cocoapods/repos
    """

    def __init__(
        self,
        probe: Probe,
        recommended_version: Version,
        *,
        repos_dir: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._probe = probe
        self._recommended_version = recommended_version
        self._repos_dir = repos_dir
        self._env = env if env is not None else os.environ

    @property
    def recommended_version(self) -> Version:
        return self._recommended_version

    def version_text(self) -> str | None:
        output = stdout_if_ok(self._probe, "pod", ["--version"])
        if output is None:
            return None
        return first_line(output) or None

    def evaluate(self) -> CocoaPodsEvaluation:
        """Classify the installed CocoaPods.

        A `pod` whose version cannot be parsed counts as outdated.
        """
        version_text = self.version_text()
        if version_text is None:
            status = CocoaPodsStatus.NOT_INSTALLED
        else:
            version = parse_version(version_text)
            if version is not None and meets_minimum(version, self._recommended_version):
                status = CocoaPodsStatus.RECOMMENDED
            else:
                status = CocoaPodsStatus.OUTDATED

        return CocoaPodsEvaluation(
            status=status,
            version_text=version_text,
            recommended_version=str(self._recommended_version),
        )

    def repos_dir(self) -> Path:
        if self._repos_dir is not None:
            return self._repos_dir
        env_dir = self._env.get("CP_REPOS_DIR")
        if env_dir:
            return Path(env_dir).expanduser()
        return Path.home() / ".cocoapods" / "repos"

    def is_initialized(self) -> bool:
        """Return True once `pod setup` has created a spec repo.

        An unreadable or unresolvable repos directory counts as not
        initialized.
        """
        try:
            repos = self.repos_dir()
            return any((repos / name).is_dir() for name in _SPEC_REPO_NAMES)
        except (OSError, RuntimeError) as e:
            log.debug("cocoapods repos unreadable", error=str(e))
            return False
