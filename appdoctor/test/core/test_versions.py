"""Tests for appdoctor.core.versions."""

from __future__ import annotations

import pytest

from appdoctor.core.versions import Version, meets_minimum, parse_version


class TestParseVersion:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.11.3", Version(1, 11, 3)),
            ("Xcode 10.1", Version(10, 1, 0)),
            ("ios-deploy 1.9.2\n", Version(1, 9, 2)),
            ("9", Version(9, 0, 0)),
            ("v2.3", Version(2, 3, 0)),
            ("1.2.3.4", Version(1, 2, 3)),
        ],
    )
    def test_parses_first_version(self, text: str, expected: Version) -> None:
        assert parse_version(text) == expected

    @pytest.mark.parametrize("text", ["", None, "unknown", "no digits here"])
    def test_returns_none_without_digits(self, text: str | None) -> None:
        assert parse_version(text) is None


class TestVersion:
    def test_str(self) -> None:
        assert str(Version(9, 0, 0)) == "9.0.0"

    def test_ordering_is_numeric(self) -> None:
        assert Version(1, 10, 0) > Version(1, 9, 9)
        assert Version(10, 0, 0) > Version(9, 4, 1)

    def test_frozen(self) -> None:
        version = Version(1)
        with pytest.raises(AttributeError):
            version.major = 2  # type: ignore[misc]


class TestMeetsMinimum:
    def test_equal_meets(self) -> None:
        assert meets_minimum(Version(9, 0, 0), Version(9, 0, 0)) is True

    def test_above_meets(self) -> None:
        assert meets_minimum(Version(15, 2), Version(9)) is True

    def test_below_fails(self) -> None:
        assert meets_minimum(Version(8, 3, 3), Version(9)) is False

    def test_patch_matters(self) -> None:
        assert meets_minimum(Version(1, 9, 1), Version(1, 9, 2)) is False
