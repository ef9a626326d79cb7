"""Services orchestrating workflows for the CLI."""

from appdoctor.services.doctor import (
    DoctorReport,
    DoctorService,
    ValidatorReport,
    WorkflowReport,
    build_workflows,
)

__all__ = [
    "DoctorReport",
    "DoctorService",
    "ValidatorReport",
    "WorkflowReport",
    "build_workflows",
]
