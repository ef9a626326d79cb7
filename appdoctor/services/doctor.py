from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from appdoctor.core.config import DoctorConfig
from appdoctor.core.logging import get_logger
from appdoctor.doctor import (
    DoctorValidator,
    Probe,
    ValidationResult,
    ValidationType,
    Workflow,
    merge,
)
from appdoctor.ios import create_ios_workflow
from appdoctor.platform.detection import Platform

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ValidatorReport:
    title: str
    result: ValidationResult


@dataclass(frozen=True, slots=True)
class WorkflowReport:
    name: str
    overall_type: ValidationType
    validators: tuple[ValidatorReport, ...]


@dataclass(frozen=True, slots=True)
class DoctorReport:
    workflows: tuple[WorkflowReport, ...]
    skipped: tuple[str, ...] = ()

    def all_results(self) -> list[ValidationResult]:
        return [v.result for w in self.workflows for v in w.validators]

    def has_issues(self) -> bool:
        return any(not r.is_installed for r in self.all_results())


def build_workflows(platform: Platform, config: DoctorConfig, probe: Probe) -> list[Workflow]:
    """All known workflows, applicable or not."""
    return [create_ios_workflow(platform, config, probe)]


class DoctorService:
    def __init__(self, *, workflows: Sequence[Workflow]) -> None:
        self._workflows = list(workflows)

    def run(self) -> DoctorReport:
        """Validate every applicable workflow.

        Raises:
            ValidationContractError: If a validator or a workflow breaks the
                aggregation contract (e.g. a workflow with no validators).
        """
        reports: list[WorkflowReport] = []
        skipped: list[str] = []

        for workflow in self._workflows:
            if not workflow.applies_to_host_platform:
                log.info("workflow skipped", workflow=workflow.name)
                skipped.append(workflow.name)
                continue

            log.info("workflow running", workflow=workflow.name)
            validators = tuple(self._run_validator(v) for v in workflow.validators)
            reports.append(
                WorkflowReport(
                    name=workflow.name,
                    overall_type=merge(v.result.overall_type for v in validators),
                    validators=validators,
                )
            )

        return DoctorReport(workflows=tuple(reports), skipped=tuple(skipped))

    def _run_validator(self, validator: DoctorValidator) -> ValidatorReport:
        result = validator.validate()
        log.info(
            "validator finished",
            validator=validator.title,
            status=str(result.overall_type),
            errors=len(result.errors),
        )
        return ValidatorReport(title=validator.title, result=result)
