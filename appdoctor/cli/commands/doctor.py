from __future__ import annotations

from pathlib import Path

import typer

from appdoctor.cli.context import CLIContext, build_context
from appdoctor.core.errors import ErrorCode
from appdoctor.core.logging import setup_logging
from appdoctor.doctor import SystemProbe, ValidationContractError, ValidationType
from appdoctor.output.console import Style
from appdoctor.services.doctor import (
    DoctorReport,
    DoctorService,
    ValidatorReport,
    build_workflows,
)

_MARKS = {
    ValidationType.INSTALLED: ("[✓]", Style.SUCCESS),
    ValidationType.PARTIAL: ("[!]", Style.WARNING),
    ValidationType.MISSING: ("[✗]", Style.ERROR),
}


def doctor(
    strict: bool = typer.Option(
        False,
        "--strict/--no-strict",
        help="Exit non-zero when any toolchain is missing or incomplete.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to appdoctor.toml (default: $APPDOCTOR_CONFIG or ./appdoctor.toml).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log probe commands to stderr."),
) -> None:
    """Show information about the installed mobile toolchains."""
    setup_logging(verbose)
    ctx = build_context(config)

    probe = SystemProbe(timeout=ctx.config.probe.timeout)
    service = DoctorService(workflows=build_workflows(ctx.platform.platform, ctx.config, probe))

    try:
        report = service.run()
    except ValidationContractError as e:
        ctx.console.error(f"doctor validation logic failed: {e}")
        raise typer.Exit(code=int(ErrorCode.INTERNAL_ERROR))

    ctx.console.print(f"platform: {ctx.platform}", Style.DIM)
    if ctx.config_path is not None:
        ctx.console.print(f"config: {ctx.config_path}", Style.DIM)

    _print_report(ctx, report)

    if strict and report.has_issues():
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))


def _print_report(ctx: CLIContext, report: DoctorReport) -> None:
    console = ctx.console
    for workflow in report.workflows:
        mark, _ = _MARKS[workflow.overall_type]
        console.header(f"{mark} {workflow.name}")
        for validator in workflow.validators:
            _print_validator(ctx, validator)

    for name in report.skipped:
        console.print(f"skipped: {name} (not supported on {ctx.platform.platform})", Style.DIM)

    if not report.workflows:
        console.newline()
        console.print("No workflow applies to this platform.", Style.WARNING)
        return

    console.newline()
    if report.has_issues():
        console.print("Doctor found issues; see the messages above.", Style.WARNING)
    else:
        console.print("No issues found.", Style.SUCCESS)


def _print_validator(ctx: CLIContext, validator: ValidatorReport) -> None:
    console = ctx.console
    result = validator.result
    mark, style = _MARKS[result.overall_type]

    heading = f"{mark} {validator.title}"
    if result.summary:
        heading += f" ({result.summary})"
    console.print(heading, style)

    for message in result.messages:
        bullet = "✗" if message.is_error else "•"
        lines = message.text.splitlines() or [""]
        text = "\n".join([f"    {bullet} {lines[0]}", *(f"      {line}" for line in lines[1:])])
        console.print(text, Style.ERROR if message.is_error else Style.DEFAULT)
