"""Tests for appdoctor.platform.detection module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from appdoctor.platform.detection import (
    Arch,
    Platform,
    PlatformInfo,
    detect,
    detect_arch,
    detect_platform,
    platform_from_sys,
)


class TestPlatformEnum:
    def test_str(self) -> None:
        assert str(Platform.MACOS) == "macos"
        assert str(Platform.LINUX) == "linux"


class TestPlatformFromSys:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("darwin", Platform.MACOS),
            ("linux", Platform.LINUX),
            ("linux2", Platform.LINUX),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("freebsd13", Platform.UNKNOWN),
        ],
    )
    def test_mapping(self, value: str, expected: Platform) -> None:
        assert platform_from_sys(value) == expected


class TestDetection:
    def setup_method(self) -> None:
        detect_platform.cache_clear()
        detect_arch.cache_clear()
        detect.cache_clear()

    teardown_method = setup_method

    def test_detect_platform_uses_sys_platform(self) -> None:
        with patch("appdoctor.platform.detection._sys.platform", "darwin"):
            assert detect_platform() == Platform.MACOS

    def test_detect_arch_unix(self) -> None:
        with (
            patch("appdoctor.platform.detection._sys.platform", "darwin"),
            patch("appdoctor.platform.detection._platform.machine", return_value="arm64"),
        ):
            assert detect_arch() == Arch.ARM64

    def test_detect_arch_windows_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCESSOR_ARCHITECTURE", "AMD64")
        monkeypatch.delenv("PROCESSOR_ARCHITEW6432", raising=False)
        with patch("appdoctor.platform.detection._sys.platform", "win32"):
            assert detect_arch() == Arch.X64

    def test_detect_is_cached(self) -> None:
        assert detect() is detect()


class TestPlatformInfo:
    def test_str(self) -> None:
        assert str(PlatformInfo(Platform.MACOS, Arch.ARM64)) == "macos-arm64"
