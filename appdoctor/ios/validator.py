# SPDX-License-Identifier: MIT
"""iOS toolchain validator.

Two aspects are checked and merged:
- xcode: Xcode presence, then version floor, license agreement and simctl
- homebrew: Homebrew presence, then (optionally) ios-deploy and CocoaPods

A missing aspect short-circuits its secondary checks. A failed secondary
check turns an installed aspect into a partial one and adds its own message.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from appdoctor.core.config import DoctorConfig
from appdoctor.core.logging import get_logger
from appdoctor.core.versions import meets_minimum, parse_version
from appdoctor.doctor.model import ValidationResult
from appdoctor.doctor.probes import Probe
from appdoctor.doctor.validation_pass import ValidationPass
from appdoctor.ios.cocoapods import (
    NO_COCOAPODS_CONSEQUENCE,
    CocoaPodsClassifier,
    CocoaPodsStatus,
)
from appdoctor.ios.ios_deploy import IosDeployProbe
from appdoctor.ios.xcode import XCODE_DOWNLOAD_URL, XcodeProbe

__all__ = ["IOSValidator", "XCODE", "HOMEBREW"]

log = get_logger(__name__)

XCODE = "xcode"
HOMEBREW = "homebrew"


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(f"{prefix}{line}" for line in text.splitlines())


@dataclass(frozen=True, slots=True)
class IOSValidator:
    """Check Xcode and the Homebrew-based iOS tooling.

    Attributes:
        probe: Presence probe for Homebrew
        xcode: Xcode collaborator
        cocoapods: CocoaPods classification collaborator
        ios_deploy: ios-deploy collaborator (used only if enabled in config)
        config: Version floors and optional checks
    """

    probe: Probe
    xcode: XcodeProbe
    cocoapods: CocoaPodsClassifier
    ios_deploy: IosDeployProbe
    config: DoctorConfig = field(default_factory=DoctorConfig)
    title: str = "Xcode - develop for iOS and macOS"

    def validate(self) -> ValidationResult:
        state = ValidationPass(XCODE, HOMEBREW)
        self._check_xcode(state)
        self._check_homebrew(state)
        result = state.result()
        log.debug(
            "ios validation finished",
            xcode=str(state.status(XCODE)),
            homebrew=str(state.status(HOMEBREW)),
            overall=str(result.overall_type),
        )
        return result

    def _check_xcode(self, state: ValidationPass) -> None:
        installation = self.xcode.locate()

        if not installation.is_installed:
            if not installation.select_path:
                state.missing(
                    XCODE,
                    "Xcode not installed; this is necessary for iOS development.\n"
                    f"Download at {XCODE_DOWNLOAD_URL}.",
                )
            else:
                state.missing(
                    XCODE,
                    "Xcode installation is incomplete; a full installation is necessary "
                    "for iOS development.\n"
                    f"Download at {XCODE_DOWNLOAD_URL} or install Xcode via the App Store.\n"
                    "Once installed, run:\n"
                    "  sudo xcode-select --switch /Applications/Xcode.app/Contents/Developer",
                )
            return

        short_version = installation.short_version_text
        state.summary = short_version
        if short_version:
            state.installed(XCODE, f"{short_version} at {installation.select_path}")
        else:
            state.installed(XCODE, f"Xcode at {installation.select_path}")

        required = self.config.xcode.min_version
        version = installation.version
        if version is None or not meets_minimum(version, required):
            state.degrade(
                XCODE,
                f"A minimum Xcode version of {required} is required.\n"
                "Download the latest version or update via the Mac App Store.",
            )

        if not self.xcode.eula_signed():
            state.degrade(
                XCODE,
                "Xcode end user license agreement not signed; open Xcode or run the "
                "command 'sudo xcodebuild -license'.",
            )

        if not self.xcode.simctl_installed():
            state.degrade(
                XCODE,
                "Xcode requires additional components to be installed in order to run.\n"
                "Launch Xcode and install additional required components when prompted.",
            )

    def _check_homebrew(self, state: ValidationPass) -> None:
        if not self.probe.exists("brew"):
            state.missing(
                HOMEBREW,
                "Homebrew not installed; use it to install tools for iOS device development.\n"
                "Download Homebrew at https://brew.sh/.",
            )
            return

        state.installed(HOMEBREW)

        if self.config.ios_deploy.check:
            self._check_ios_deploy(state)
        self._check_cocoapods(state)

    def _check_ios_deploy(self, state: ValidationPass) -> None:
        required = self.config.ios_deploy.min_version
        version_text = self.ios_deploy.version_text()

        if version_text is None:
            state.degrade(
                HOMEBREW,
                "ios-deploy not installed. To install:\n  brew install ios-deploy",
            )
            return

        state.info(f"ios-deploy {version_text}")
        version = parse_version(version_text)
        if version is None or not meets_minimum(version, required):
            state.degrade(
                HOMEBREW,
                f"ios-deploy out of date ({required} is required). To upgrade:\n"
                "  brew upgrade ios-deploy",
            )

    def _check_cocoapods(self, state: ValidationPass) -> None:
        evaluation = self.cocoapods.evaluate()

        match evaluation.status:
            case CocoaPodsStatus.RECOMMENDED:
                if self.cocoapods.is_initialized():
                    state.info(f"CocoaPods version {evaluation.version_text}")
                else:
                    state.degrade(
                        HOMEBREW,
                        "CocoaPods installed but not initialized.\n"
                        f"{NO_COCOAPODS_CONSEQUENCE}\n"
                        "To initialize CocoaPods, run:\n"
                        "  pod setup\n"
                        "once to finalize CocoaPods' installation.",
                    )
            case CocoaPodsStatus.NOT_INSTALLED:
                state.degrade(
                    HOMEBREW,
                    "CocoaPods not installed.\n"
                    f"{NO_COCOAPODS_CONSEQUENCE}\n"
                    "To install:\n"
                    f"{_indent(evaluation.install_instructions)}",
                )
            case CocoaPodsStatus.OUTDATED:
                state.degrade(
                    HOMEBREW,
                    f"CocoaPods out of date ({evaluation.recommended_version} is recommended).\n"
                    f"{NO_COCOAPODS_CONSEQUENCE}\n"
                    "To upgrade:\n"
                    f"{_indent(evaluation.upgrade_instructions)}",
                )
