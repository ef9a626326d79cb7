# SPDX-License-Identifier: MIT
"""Validator aggregation model.

- ValidationType / ValidationMessage / ValidationResult: value types
- merge: equality-collapse reduction of statuses
- ValidationPass: per-call accumulator used by validators
- Workflow / DoctorValidator: platform workflow interfaces
- Probe / SystemProbe: external tool observation
"""

from appdoctor.doctor.base import DoctorValidator, Workflow
from appdoctor.doctor.merge import combine, merge
from appdoctor.doctor.model import (
    ValidationContractError,
    ValidationMessage,
    ValidationResult,
    ValidationType,
)
from appdoctor.doctor.probes import Probe, SystemProbe
from appdoctor.doctor.validation_pass import ValidationPass

__all__ = [
    # Value types
    "ValidationContractError",
    "ValidationMessage",
    "ValidationResult",
    "ValidationType",
    # Merge engine
    "combine",
    "merge",
    # Accumulator
    "ValidationPass",
    # Interfaces
    "DoctorValidator",
    "Workflow",
    # Probes
    "Probe",
    "SystemProbe",
]
