"""Pageprobe CLI for admin page diagnostics."""

from __future__ import annotations

import logfire
import typer
from pydantic import ValidationError
from rich.console import Console

from pageprobe import __version__
from pageprobe.cli.commands import run
from pageprobe.core.config import Settings, get_settings

app = typer.Typer(
    name="pageprobe",
    help="Playwright diagnostics for a password-protected admin page",
    no_args_is_help=True,
)
console = Console()

# Add command groups
app.add_typer(run.app, name="run", help="Probe the admin page")


@app.callback()
def configure_logging() -> None:
    """Configure Logfire before any command runs."""
    try:
        settings = get_settings()
    except ValidationError:
        # Invalid values are reported by the command that needs them
        settings = Settings.model_construct()

    logfire.configure(
        service_name="pageprobe",
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire="if-token-present",
        console=logfire.ConsoleOptions(min_log_level=settings.log_level),
    )


@app.command()
def version() -> None:
    """Show the CLI version."""
    console.print(f"pageprobe version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


__all__ = ["app", "main"]
