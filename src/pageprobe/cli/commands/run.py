"""Run command for pageprobe CLI."""

from __future__ import annotations

import asyncio
import json
from enum import StrEnum
from pathlib import Path

import logfire
import typer
from playwright.async_api import Error as PlaywrightError
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pageprobe.cli.config import load_project_config, merge_overrides
from pageprobe.core.config import Settings
from pageprobe.probe import PageProbe, ProbeError, ProbeResult

app = typer.Typer()
console = Console()


class OutputFormat(StrEnum):
    """Supported output formats for the run command."""

    TEXT = "text"
    JSON = "json"


def execute_probe(settings: Settings) -> ProbeResult:
    """Run a probe to completion with the given settings."""
    probe = PageProbe(settings.to_probe_config())
    return asyncio.run(probe.run(headless=settings.headless))


def create_result_table(result: ProbeResult) -> Table:
    """Create a table displaying the probe observations."""
    table = Table(title=f"Probe of {result.url}")
    table.add_column("Observation", style="cyan", no_wrap=True)
    table.add_column("Value")

    def flag(value: bool | None) -> str:
        if value is None:
            return "-"
        return "[green]yes[/green]" if value else "[red]no[/red]"

    table.add_row("Final URL", result.final_url or "-")
    table.add_row("Content length", str(result.content_length))
    table.add_row("Password input visible", flag(result.password_visible))
    table.add_row("Logged in", flag(result.authenticated))
    if result.login_attempted:
        table.add_row("Buttons", ", ".join(escape(repr(text)) for text in result.buttons) or "-")
        table.add_row("Order Management visible", flag(result.order_management_visible))
        table.add_row("Order Management count", str(result.order_management_count))
    table.add_row("Console messages", str(len(result.console_messages)))
    table.add_row("Screenshots", escape("\n".join(result.screenshots)) or "-")
    table.add_row("Duration", f"{result.duration_seconds:.1f}s")
    return table


@app.callback(invoke_without_command=True)
def run(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Base URL of the application. Defaults to http://localhost:5174.",
    ),
    path: str | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Path of the admin page. Defaults to /admin.",
    ),
    password: str | None = typer.Option(
        None,
        "--password",
        help="Password to submit to the admin prompt.",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for the screenshots. Defaults to tests/e2e/results.",
    ),
    headed: bool = typer.Option(
        False,
        "--headed",
        help="Show the browser window.",
    ),
    settle: str | None = typer.Option(
        None,
        "--settle",
        help="How to wait after login: 'delay' (fixed wait) or 'selector' (wait for a button).",
    ),
    settle_delay: int | None = typer.Option(
        None,
        "--settle-delay",
        help="Fixed wait after login in milliseconds (with --settle delay).",
    ),
    require_password: bool = typer.Option(
        False,
        "--require-password",
        help="Fail if the admin page shows no password prompt.",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Project config file. Defaults to ./pageprobe.yml.",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format: text or json.",
    ),
) -> None:
    """Probe the admin page: screenshot it, log in if prompted, and list its buttons.

    Examples:

        pageprobe run

        pageprobe run --url http://localhost:4173 --headed

        pageprobe run --settle selector --format json
    """
    try:
        project_config = load_project_config(config_file)
        settings = Settings(
            **merge_overrides(
                project_config,
                base_url=url,
                admin_path=path,
                admin_password=password,
                output_dir=output_dir,
                headless=False if headed else None,
                settle_strategy=settle,
                settle_delay_ms=settle_delay,
                require_password=True if require_password else None,
            )
        )
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    try:
        result = execute_probe(settings)
    except (ProbeError, PlaywrightError) as e:
        logfire.error("Probe failed", error=str(e))
        console.print(f"[red]Probe failed:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if format == OutputFormat.JSON:
        console.print(
            json.dumps(result.to_dict(), indent=2),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    console.print(create_result_table(result))
    if not result.password_visible:
        console.print("[yellow]No password prompt was visible; login steps were skipped.[/yellow]")
