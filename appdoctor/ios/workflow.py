# SPDX-License-Identifier: MIT
"""iOS workflow: only macOS hosts can build for iOS."""

from __future__ import annotations

from dataclasses import dataclass

from appdoctor.core.config import DoctorConfig
from appdoctor.doctor.base import DoctorValidator
from appdoctor.doctor.probes import Probe
from appdoctor.ios.cocoapods import CocoaPods
from appdoctor.ios.ios_deploy import IosDeploy
from appdoctor.ios.validator import IOSValidator
from appdoctor.ios.xcode import Xcode
from appdoctor.platform.detection import Platform

__all__ = ["IOSWorkflow", "create_ios_workflow"]


@dataclass(frozen=True, slots=True)
class IOSWorkflow:
    """Workflow for building iOS apps.

    Attributes:
        platform: Host platform the predicate compares against
        validators: Validators run when the workflow applies
    """

    platform: Platform
    validators: tuple[DoctorValidator, ...] = ()
    name: str = "iOS toolchain"

    @property
    def applies_to_host_platform(self) -> bool:
        return self.platform == Platform.MACOS


def create_ios_workflow(platform: Platform, config: DoctorConfig, probe: Probe) -> IOSWorkflow:
    """Wire the iOS workflow with collaborators sharing one probe."""
    validator = IOSValidator(
        probe=probe,
        xcode=Xcode(probe),
        cocoapods=CocoaPods(probe, config.cocoapods.recommended_version),
        ios_deploy=IosDeploy(probe),
        config=config,
    )
    return IOSWorkflow(platform=platform, validators=(validator,))
