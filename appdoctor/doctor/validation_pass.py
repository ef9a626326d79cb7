# SPDX-License-Identifier: MIT
"""Per-call accumulator for validators.

Every `validate()` call creates its own `ValidationPass`, records aspect
statuses and messages on it, then turns it into a `ValidationResult`. The
validator object itself stays stateless, so calling `validate()` twice never
duplicates messages.

Aspect status transitions within one pass:

    (unsettled) MISSING --installed()--> INSTALLED --degrade()--> PARTIAL
    (unsettled) MISSING --missing()----> MISSING
    PARTIAL --degrade()--> PARTIAL

Anything else is a `ValidationContractError`.
"""

from __future__ import annotations

from .merge import merge
from .model import (
    ValidationContractError,
    ValidationMessage,
    ValidationResult,
    ValidationType,
)

__all__ = ["ValidationPass"]


class ValidationPass:
    """Mutable state of a single validation pass.

    Args:
        aspects: Names of the aspects this pass must settle, in merge order.
    """

    def __init__(self, *aspects: str) -> None:
        if not aspects:
            raise ValidationContractError("a validation pass needs at least one aspect")
        if len(set(aspects)) != len(aspects):
            raise ValidationContractError(f"duplicate aspect names: {aspects}")
        self._statuses: dict[str, ValidationType] = dict.fromkeys(aspects, ValidationType.MISSING)
        self._settled: set[str] = set()
        self._messages: list[ValidationMessage] = []
        self.summary: str | None = None

    @property
    def messages(self) -> tuple[ValidationMessage, ...]:
        return tuple(self._messages)

    def status(self, aspect: str) -> ValidationType:
        self._require_aspect(aspect)
        return self._statuses[aspect]

    def info(self, text: str) -> None:
        """Append an informational message."""
        self._messages.append(ValidationMessage.info(text))

    def installed(self, aspect: str, message: str | None = None) -> None:
        """Record that the aspect's presence probe succeeded."""
        self._require_unsettled(aspect)
        self._statuses[aspect] = ValidationType.INSTALLED
        self._settled.add(aspect)
        if message is not None:
            self.info(message)

    def missing(self, aspect: str, message: str) -> None:
        """Record that the aspect's presence probe failed, with remediation."""
        self._require_unsettled(aspect)
        self._settled.add(aspect)
        self._messages.append(ValidationMessage.error(message))

    def degrade(self, aspect: str, message: str) -> None:
        """Record a failed secondary check on an installed aspect."""
        self._require_aspect(aspect)
        if aspect not in self._settled or self._statuses[aspect] == ValidationType.MISSING:
            raise ValidationContractError(f"cannot degrade {aspect!r}: it is not installed")
        self._statuses[aspect] = ValidationType.PARTIAL
        self._messages.append(ValidationMessage.error(message))

    def result(self) -> ValidationResult:
        """Merge the aspect statuses into the final result.

        Raises:
            ValidationContractError: If some aspect was never settled.
        """
        unsettled = [a for a in self._statuses if a not in self._settled]
        if unsettled:
            raise ValidationContractError(f"aspects never probed: {', '.join(unsettled)}")
        return ValidationResult(
            overall_type=merge(self._statuses.values()),
            messages=tuple(self._messages),
            summary=self.summary,
        )

    def _require_aspect(self, aspect: str) -> None:
        if aspect not in self._statuses:
            raise ValidationContractError(f"unknown aspect: {aspect!r}")

    def _require_unsettled(self, aspect: str) -> None:
        self._require_aspect(aspect)
        if aspect in self._settled:
            raise ValidationContractError(f"aspect {aspect!r} already settled in this pass")
