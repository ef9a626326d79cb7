# SPDX-License-Identifier: MIT
"""Tests for IOSWorkflow."""

from __future__ import annotations

import pytest

from appdoctor.core.config import DoctorConfig
from appdoctor.ios.validator import IOSValidator
from appdoctor.ios.workflow import IOSWorkflow, create_ios_workflow
from appdoctor.platform.detection import Platform
from appdoctor.test.fakes import FakeProbe


class TestApplicability:
    def test_applies_on_macos(self) -> None:
        assert IOSWorkflow(platform=Platform.MACOS).applies_to_host_platform is True

    @pytest.mark.parametrize("platform", [Platform.LINUX, Platform.WINDOWS, Platform.UNKNOWN])
    def test_does_not_apply_elsewhere(self, platform: Platform) -> None:
        assert IOSWorkflow(platform=platform).applies_to_host_platform is False

    def test_predicate_does_not_probe(self) -> None:
        probe = FakeProbe()
        workflow = create_ios_workflow(Platform.LINUX, DoctorConfig(), probe)

        assert workflow.applies_to_host_platform is False
        assert probe.calls == []
        assert probe.exists_calls == []


class TestFactory:
    def test_wires_one_ios_validator(self) -> None:
        config = DoctorConfig()
        workflow = create_ios_workflow(Platform.MACOS, config, FakeProbe())

        assert workflow.name == "iOS toolchain"
        assert len(workflow.validators) == 1
        validator = workflow.validators[0]
        assert isinstance(validator, IOSValidator)
        assert validator.config is config

    def test_validator_runs_against_probe(self) -> None:
        probe = FakeProbe()
        workflow = create_ios_workflow(Platform.MACOS, DoctorConfig(), probe)

        result = workflow.validators[0].validate()

        # nothing on the fake host: xcode and homebrew both missing
        assert str(result.overall_type) == "missing"
        assert ("/usr/bin/xcode-select", "--print-path") in probe.calls
        assert probe.exists_calls == ["brew"]
