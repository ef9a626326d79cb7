"""Version parsing and minimum-version comparison.

Tools print their versions in many shapes ("Xcode 10.1", "1.11.3",
"ios-deploy 1.9.2\n"). Only the first dotted number in the text matters;
missing minor/patch components count as zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Version", "parse_version", "meets_minimum"]

_VERSION_RE = re.compile(r"(?<![\d.])(\d+)(?:\.(\d+))?(?:\.(\d+))?")


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """A MAJOR.MINOR.PATCH version, ordered component-wise."""

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str | None) -> Version | None:
    """Parse the first version number found in text.

    Returns None if text is empty or contains no digits.
    """
    if not text:
        return None
    match = _VERSION_RE.search(text)
    if not match:
        return None
    major, minor, patch = match.groups()
    return Version(int(major), int(minor or 0), int(patch or 0))


def meets_minimum(actual: Version, required: Version) -> bool:
    """Return True if actual is at or above the required floor."""
    return actual >= required
