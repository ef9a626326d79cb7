# SPDX-License-Identifier: MIT
"""Interfaces shared by every platform workflow.

A `Workflow` groups the validators needed for one target platform and says
whether the host can build for it. A `DoctorValidator` checks one toolchain
dimension. Adding a platform means adding a new implementation of both,
not extending an existing one.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .model import ValidationResult

__all__ = ["DoctorValidator", "Workflow"]


class DoctorValidator(Protocol):
    """Checks one toolchain dimension."""

    @property
    def title(self) -> str:
        """Short name shown as the report header (e.g. "Xcode")."""
        ...

    def validate(self) -> ValidationResult:
        """Probe the host and return a fresh result.

        Must not raise for environmental conditions, and must not carry
        state over from a previous call.
        """
        ...


class Workflow(Protocol):
    """Platform-scoped group of validators."""

    @property
    def name(self) -> str:
        ...

    @property
    def applies_to_host_platform(self) -> bool:
        """Pure predicate over the injected host platform. No probing."""
        ...

    @property
    def validators(self) -> Sequence[DoctorValidator]:
        ...
