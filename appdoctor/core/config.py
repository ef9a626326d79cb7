"""Typed configuration loading.

The config file only tunes the requirements the doctor checks against
(minimum versions, optional probes). Every field has a default, so an
absent file is equivalent to an empty one.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_float, get_str, get_table
from .versions import Version, parse_version

__all__ = [
    "DoctorConfig",
    "XcodeConfig",
    "CocoaPodsConfig",
    "IosDeployConfig",
    "ProbeConfig",
    "ConfigError",
    "load_config",
    "resolve_config_path",
    "CONFIG_FILE_NAME",
    "CONFIG_ENV_VAR",
    "XCODE_MIN_VERSION",
    "COCOAPODS_RECOMMENDED_VERSION",
    "IOS_DEPLOY_MIN_VERSION",
]

CONFIG_FILE_NAME = "appdoctor.toml"
CONFIG_ENV_VAR = "APPDOCTOR_CONFIG"

XCODE_MIN_VERSION = Version(9, 0, 0)
COCOAPODS_RECOMMENDED_VERSION = Version(1, 0, 0)
IOS_DEPLOY_MIN_VERSION = Version(1, 9, 2)


class ConfigValueError(ValueError):
    """Raised while mapping a parsed table onto the config dataclasses."""


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class XcodeConfig:
    min_version: Version = XCODE_MIN_VERSION


@dataclass(frozen=True, slots=True)
class CocoaPodsConfig:
    recommended_version: Version = COCOAPODS_RECOMMENDED_VERSION


@dataclass(frozen=True, slots=True)
class IosDeployConfig:
    """ios-deploy probing. Disabled unless the project deploys to devices."""

    check: bool = False
    min_version: Version = IOS_DEPLOY_MIN_VERSION


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    """Settings for spawning probe commands.

    Attributes:
        timeout: Seconds before a probe command counts as unavailable
            (None waits forever).
    """

    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class DoctorConfig:
    """Main configuration container."""

    xcode: XcodeConfig = field(default_factory=XcodeConfig)
    cocoapods: CocoaPodsConfig = field(default_factory=CocoaPodsConfig)
    ios_deploy: IosDeployConfig = field(default_factory=IosDeployConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> DoctorConfig:
        """Create a config from a parsed TOML mapping.

        Raises:
            ConfigValueError: If a version string cannot be parsed or the
                probe timeout is not positive.
        """
        xcode: StrDict = get_table(data, "xcode") or {}
        cocoapods: StrDict = get_table(data, "cocoapods") or {}
        ios_deploy: StrDict = get_table(data, "ios_deploy") or {}
        probe: StrDict = get_table(data, "probe") or {}

        timeout = get_float(probe, "timeout")
        if timeout is not None and timeout <= 0:
            raise ConfigValueError(f"probe.timeout must be positive, got {timeout}")

        return cls(
            xcode=XcodeConfig(
                min_version=_version(xcode, "min_version", "xcode", XCODE_MIN_VERSION),
            ),
            cocoapods=CocoaPodsConfig(
                recommended_version=_version(
                    cocoapods, "recommended_version", "cocoapods", COCOAPODS_RECOMMENDED_VERSION
                ),
            ),
            ios_deploy=IosDeployConfig(
                check=bool(get_bool(ios_deploy, "check")),
                min_version=_version(
                    ios_deploy, "min_version", "ios_deploy", IOS_DEPLOY_MIN_VERSION
                ),
            ),
            probe=ProbeConfig(timeout=timeout),
        )


def _version(table: Mapping[str, object], key: str, section: str, default: Version) -> Version:
    raw = get_str(table, key)
    if raw is None:
        return default
    version = parse_version(raw)
    if version is None:
        raise ConfigValueError(f"{section}.{key} is not a version: {raw!r}")
    return version


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, mapping I/O and syntax errors to ConfigError."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[DoctorConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(DoctorConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(DoctorConfig.from_dict(result.value))
    except ConfigValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def resolve_config_path(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """Locate the config file to use.

    Order: explicit path, then $APPDOCTOR_CONFIG, then appdoctor.toml in
    cwd. Returns None when nothing applies; explicit and env paths are
    returned even if missing so the caller can report them.
    """
    if explicit is not None:
        return explicit.expanduser()

    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()

    candidate = (cwd or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None
