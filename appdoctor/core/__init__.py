"""Core types shared by every layer."""

from .config import ConfigError, DoctorConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result
from .versions import Version, meets_minimum, parse_version

__all__ = [
    # config
    "ConfigError",
    "DoctorConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    # versions
    "Version",
    "meets_minimum",
    "parse_version",
]
