"""Platform abstraction layer."""

from .detection import (
    Arch,
    Platform,
    PlatformInfo,
    detect,
    detect_platform,
    platform_from_sys,
)
from .process import (
    CompletedCommand,
    ProcessError,
    command_exists,
    run,
)

__all__ = [
    # detection
    "Arch",
    "Platform",
    "PlatformInfo",
    "detect",
    "detect_platform",
    "platform_from_sys",
    # process
    "CompletedCommand",
    "ProcessError",
    "command_exists",
    "run",
]
