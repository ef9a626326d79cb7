from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from appdoctor.core.config import DoctorConfig, load_config, resolve_config_path
from appdoctor.core.errors import ErrorCode
from appdoctor.core.result import Err
from appdoctor.output.console import ConsoleProtocol, RichConsole
from appdoctor.platform.detection import PlatformInfo, detect


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: PlatformInfo
    config: DoctorConfig
    config_path: Path | None
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    path = resolve_config_path(config_path)

    config = DoctorConfig()
    if path is not None:
        config_result = load_config(path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value

    return CLIContext(
        platform=detect(),
        config=config,
        config_path=path,
        console=RichConsole(),
    )
