# SPDX-License-Identifier: MIT
"""iOS workflow and its collaborators.

- Xcode: IDE toolchain probing
- CocoaPods: dependency manager classification
- IosDeploy: device deployment tool probing
- IOSValidator: merges the xcode and homebrew aspects
- IOSWorkflow: gates everything on a macOS host
"""

from appdoctor.ios.cocoapods import (
    CocoaPods,
    CocoaPodsClassifier,
    CocoaPodsEvaluation,
    CocoaPodsStatus,
)
from appdoctor.ios.ios_deploy import IosDeploy, IosDeployProbe
from appdoctor.ios.validator import IOSValidator
from appdoctor.ios.workflow import IOSWorkflow, create_ios_workflow
from appdoctor.ios.xcode import Xcode, XcodeInstallation, XcodeProbe

__all__ = [
    "CocoaPods",
    "CocoaPodsClassifier",
    "CocoaPodsEvaluation",
    "CocoaPodsStatus",
    "IosDeploy",
    "IosDeployProbe",
    "IOSValidator",
    "IOSWorkflow",
    "create_ios_workflow",
    "Xcode",
    "XcodeInstallation",
    "XcodeProbe",
]
