"""
CLI entrypoint.

doctor:   print effective settings.
steps:    list registered step patterns.
validate: offline check that every step line resolves to a registered step.
run:      execute scenarios in a real browser, one fresh page per scenario.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from ..core import registry
from ..core.controller.runner import ScenarioOutcome, ScenarioRunner
from ..core.errors import StepNotFoundError
from ..core.log import setup_logging
from ..core.scenario import ScenarioSpec
from ..core.settings import settings
from ..io.playwright_page import PlaywrightDriver
from ..io.session import BrowserSession
from ..reporting.writer import build_report, write_report

import browser_assert.steps.definitions  # noqa: F401  注册步骤


app = typer.Typer(help="browser-assert CLI")
console = Console()


def _load_scenarios(path: Path, cmd: str) -> List[ScenarioSpec]:
    if not path.exists():
        typer.secho(f"[{cmd}] file not found: {path}", fg=typer.colors.RED)
        raise typer.Exit(code=2)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return TypeAdapter(list[ScenarioSpec]).validate_python(data)
    except (ValidationError, json.JSONDecodeError) as e:
        typer.secho(f"[{cmd}] invalid file format for ScenarioSpec[]", fg=typer.colors.RED)
        console.print(e)
        raise typer.Exit(code=2)


@app.callback()
def _main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override BASSERT_LOG_LEVEL"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Override BASSERT_LOG_FILE"),
) -> None:
    setup_logging(log_level, log_file)


@app.command("doctor")
def doctor() -> None:
    """Environment check: print key settings to confirm CLI is usable."""
    console.print("[bold green]browser-assert[/] environment")
    console.print(f"- base url:  {settings.base_url}")
    console.print(f"- browser:   {settings.browser} (headless: {settings.headless})")
    console.print(f"- timeout:   {settings.default_timeout_ms}ms")
    console.print(f"- artifacts: {settings.artifacts_dir or '-'}")


@app.command("steps")
def steps() -> None:
    """List registered step patterns."""
    table = Table(title="Registered Steps", show_header=True, header_style="bold")
    table.add_column("handler")
    table.add_column("pattern")
    for meta in registry.list_steps():
        table.add_row(meta.name, meta.pattern.pattern)
    console.print(table)


@app.command("validate")
def validate(
    script: Path = typer.Argument(..., help="Path to JSON file of ScenarioSpec[]"),
) -> None:
    """
    Offline validation: every step line must match a registered step and its
    captured values must satisfy the step's params model. Exits non-zero on
    any failure.
    """
    scenarios = _load_scenarios(script, "validate")

    table = Table(title="Validation Results", show_header=True, header_style="bold")
    table.add_column("scenario")
    table.add_column("#", justify="right", style="dim")
    table.add_column("step")
    table.add_column("result")
    table.add_column("detail")

    failures = 0
    for sc in scenarios:
        for i, text in enumerate(sc.steps, start=1):
            try:
                meta, _params = registry.resolve(text)
                table.add_row(sc.name, str(i), text, "[green]OK[/]", meta.name)
            except StepNotFoundError:
                failures += 1
                table.add_row(sc.name, str(i), text, "[red]Not Registered[/]", "-")
            except ValidationError as ve:
                failures += 1
                msg = ve.errors()[0].get("msg", "invalid args")
                table.add_row(sc.name, str(i), text, "[red]Invalid Args[/]", msg)

    console.print(table)
    if failures:
        raise typer.Exit(code=1)
    typer.secho("[validate] all steps resolved", fg=typer.colors.GREEN)


@app.command("run")
def run(
    script: Path = typer.Argument(..., help="Path to JSON file of ScenarioSpec[]"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override BASSERT_BASE_URL"),
    headless: bool = typer.Option(settings.headless, "--headless/--no-headless", help="Run browser headless"),
    artifacts_dir: Optional[Path] = typer.Option(
        settings.artifacts_dir, "--artifacts-dir", help="Where to save screenshots"
    ),
    report_dir: Optional[Path] = typer.Option(
        None, "--report-dir", help="Write report.json / report.csv here"
    ),
) -> None:
    """
    Execute scenarios: read JSON -> run each scenario on a fresh page.
    Prints a table of results; returns non-zero if any scenario failed.
    """
    scenarios = _load_scenarios(script, "run")
    url = base_url or settings.base_url

    driver = PlaywrightDriver(
        headless=headless,
        browser=settings.browser,
        slow_mo_ms=settings.slow_mo_ms,
        default_timeout_ms=settings.default_timeout_ms,
    )
    runner = ScenarioRunner(
        artifacts_dir=artifacts_dir,
        viewport=(settings.viewport_width, settings.viewport_height),
    )

    outcomes: list[ScenarioOutcome] = []
    driver.start()
    try:
        for sc in scenarios:
            page = driver.new_page()
            try:
                session = BrowserSession(page=page, base_url=url, artifacts_dir=artifacts_dir)
                outcomes.append(runner.run(session, sc))
            finally:
                driver.close_page(page)
    finally:
        driver.stop()

    table = Table(title="Run Results", show_header=True, header_style="bold")
    table.add_column("scenario")
    table.add_column("#", justify="right", style="dim")
    table.add_column("step")
    table.add_column("result")
    table.add_column("detail")
    styles = {"passed": "[green]OK[/]", "failed": "[red]FAIL[/]", "skipped": "[yellow]SKIP[/]"}
    for o in outcomes:
        for s in o.steps:
            detail = s.detail
            if s.artifact_path:
                detail = f"{detail} (artifact: {s.artifact_path})"
            table.add_row(o.name, str(s.index), s.text, styles[s.status], detail)
    console.print(table)

    if report_dir is not None:
        json_path, csv_path = write_report(build_report(url, outcomes), report_dir)
        console.print(f"[bold green]Report written[/]: {json_path}  |  {csv_path}")

    if not all(o.ok for o in outcomes):
        raise typer.Exit(code=1)
    typer.secho("[run] all scenarios passed", fg=typer.colors.GREEN)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
