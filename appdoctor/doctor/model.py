# SPDX-License-Identifier: MIT
"""Value types produced by validators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "ValidationType",
    "ValidationMessage",
    "ValidationResult",
    "ValidationContractError",
]


class ValidationContractError(Exception):
    """Validator logic broke an invariant of the aggregation model.

    Raised for defects only (empty merge, unknown aspect, illegal status
    transition). Environmental problems are never reported this way.
    """


class ValidationType(IntEnum):
    """Status of a toolchain aspect, ranked worst to best."""

    MISSING = 0
    """Not installed at all."""

    PARTIAL = 1
    """Installed, but something needs fixing."""

    INSTALLED = 2
    """Installed and fully usable."""

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class ValidationMessage:
    """One line of doctor output.

    Attributes:
        text: Human-readable text; may span several lines.
        is_error: True when the text describes a problem to fix.
    """

    text: str
    is_error: bool = False

    @classmethod
    def info(cls, text: str) -> ValidationMessage:
        return cls(text)

    @classmethod
    def error(cls, text: str) -> ValidationMessage:
        return cls(text, is_error=True)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of one `validate()` call.

    Attributes:
        overall_type: Merge of every aspect status set during the call
        messages: Messages in the order they were produced
        summary: Optional short text such as the detected version
    """

    overall_type: ValidationType
    messages: tuple[ValidationMessage, ...] = ()
    summary: str | None = None

    @property
    def errors(self) -> tuple[ValidationMessage, ...]:
        return tuple(m for m in self.messages if m.is_error)

    @property
    def has_errors(self) -> bool:
        return any(m.is_error for m in self.messages)

    @property
    def is_installed(self) -> bool:
        return self.overall_type == ValidationType.INSTALLED
