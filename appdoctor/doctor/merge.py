# SPDX-License-Identifier: MIT
"""Reduction of per-aspect statuses into one overall status.

Two equal statuses stay as they are; any two different statuses collapse to
PARTIAL. This is not min(): INSTALLED next to MISSING gives PARTIAL.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from .model import ValidationContractError, ValidationType

__all__ = ["combine", "merge"]


def _require_type(value: object) -> ValidationType:
    if not isinstance(value, ValidationType):
        raise ValidationContractError(f"not a ValidationType: {value!r}")
    return value


def combine(a: ValidationType, b: ValidationType) -> ValidationType:
    """Combine two statuses: a if equal, otherwise PARTIAL."""
    a = _require_type(a)
    b = _require_type(b)
    return a if a == b else ValidationType.PARTIAL


def merge(types: Iterable[ValidationType]) -> ValidationType:
    """Left-fold `combine` over a non-empty sequence of statuses.

    Raises:
        ValidationContractError: If types is empty or holds a non-status value.
    """
    items = [_require_type(t) for t in types]
    if not items:
        raise ValidationContractError("merge() requires at least one ValidationType")
    return reduce(combine, items)
