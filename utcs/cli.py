"""
Командная строка для проверки кодов UTCS.

Использование:
    utcs validate <code>                  Проверить один код
    utcs suggest <partial>                Подсказать продолжения неполного кода
    utcs expand <installation>            Раскрыть блок установки в номера
    utcs check-immutable <old> <new>      Проверить принцип неизменяемости
    utcs scan <pattern>...                Проверить все коды в файлах (для CI)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from utcs.batch import render_summary, scan_files, write_junit_report
from utcs.logging_manager import configure_logging, get_logger
from utcs.validation import RangeUnit, SingleUnit, UTCSEngine, installation_count

logger = get_logger(__name__)

app = typer.Typer(help="Validate UTCS identification codes", no_args_is_help=True)


def _engine(ctx: typer.Context) -> UTCSEngine:
    config_dir: Optional[Path] = ctx.obj.get("config_dir") if ctx.obj else None
    try:
        return UTCSEngine.from_config_dir(config_dir)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Cannot load UTCS registries: {exc}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", "-c", help="Directory with domains/variants/trigrams YAML"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"config_dir": config_dir}


@app.command("validate")
def validate_cmd(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="UTCS code, e.g. 090101‑BWBQ100‑QNS‑[ALL]"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Validate a single code against the grammar and registries."""
    engine = _engine(ctx)
    result = engine.validate(code)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(engine.format_result(result), nl=False)
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command("suggest")
def suggest_cmd(
    ctx: typer.Context,
    partial: str = typer.Argument(..., help="Code prefix: classification, optionally with variant"),
) -> None:
    """Propose completions for a partial code."""
    suggestions = _engine(ctx).suggest(partial)
    if not suggestions:
        typer.echo("No suggestions")
        return
    for suggestion in suggestions:
        typer.echo(suggestion)


@app.command("expand")
def expand_cmd(
    ctx: typer.Context,
    installation: str = typer.Argument(..., help="Installation block without brackets, e.g. 1-10,17"),
) -> None:
    """Show how an installation block is split into units."""
    units = _engine(ctx).expand_installation(installation)
    for unit in units:
        if isinstance(unit, RangeUnit):
            detail = f"{unit.start}..{unit.end} ({unit.count} units)"
        elif isinstance(unit, SingleUnit):
            detail = str(unit.value)
        else:
            detail = "-"
        typer.echo(f"{unit.kind:<8} {unit.raw:<12} {detail}")
    covered = installation_count(units)
    if covered:
        typer.echo(f"Units covered: {covered}")


@app.command("check-immutable")
def check_immutable_cmd(
    ctx: typer.Context,
    old_code: str = typer.Argument(..., help="Previously published code"),
    new_code: str = typer.Argument(..., help="Revised code"),
) -> None:
    """Check that only the installation block changed between revisions."""
    result = _engine(ctx).check_immutable(old_code, new_code)
    if result.is_compliant:
        typer.echo("✅ Compliant: only the installation block changed")
        return
    for violation in result.violations:
        typer.echo(f"❌ {violation}")
    raise typer.Exit(code=1)


@app.command("scan")
def scan_cmd(
    ctx: typer.Context,
    patterns: List[str] = typer.Argument(..., help='File patterns, e.g. "docs/**/*.md"'),
    junit: Optional[Path] = typer.Option(
        None, "--junit", envvar="JUNIT_OUTPUT", help="Write a JUnit XML report to this path"
    ),
) -> None:
    """Scan files for UTCS codes and validate every one of them."""
    engine = _engine(ctx)
    summary = scan_files(patterns, engine)
    typer.echo(f"🔍 Scanned {summary.files_scanned} files for UTCS codes\n")
    for line in render_summary(summary):
        typer.echo(line)

    if junit is not None:
        write_junit_report(summary, junit)
        typer.echo(f"📋 JUnit report written to {junit}")

    if not summary.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
