"""
Configuration Commands.

Commands for viewing and changing the stored base URL. No network access.
"""

from typing import Optional

import typer
from rich.text import Text

from archive_cli.cli.output import console, print_error, print_success
from archive_cli.core.config import DEFAULT_BASE_URL, ConfigStore
from archive_cli.core.exceptions import ConfigurationError
from archive_cli.core.logging import get_logger, log_with_source

app = typer.Typer(help="Manage CLI configuration", no_args_is_help=True)
logger = get_logger(__name__)


def _store(ctx: typer.Context) -> ConfigStore:
    return ctx.obj if isinstance(ctx.obj, ConfigStore) else ConfigStore()


@app.command("set")
def set_config(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL"),
) -> None:
    """
    Set configuration values.

    Examples:
        archive config set --base-url http://localhost:8080/services
    """
    if not base_url:
        print_error("No options provided. Use --base-url")
        return

    try:
        _store(ctx).set("baseUrl", base_url)
    except ConfigurationError as e:
        print_error(e.message)
        raise typer.Exit(1)

    log_with_source(logger, "config", "info", "Base URL updated", base_url=base_url)
    print_success("Base URL set")


@app.command()
def show(ctx: typer.Context) -> None:
    """
    Show current configuration.

    Prints the effective base URL: the configured value or the default.
    """
    try:
        base_url = _store(ctx).get("baseUrl")
    except ConfigurationError as e:
        print_error(e.message)
        raise typer.Exit(1)

    console.print("\n[bold]Internet Archive CLI Configuration[/bold]\n")
    console.print(
        Text.assemble("Base URL:  ", (base_url or DEFAULT_BASE_URL, "green")),
        soft_wrap=True,
    )
    console.print()


@app.command()
def clear(ctx: typer.Context) -> None:
    """
    Reset configuration to defaults.
    """
    _store(ctx).clear()
    log_with_source(logger, "config", "info", "Configuration cleared")
    print_success("Configuration reset to defaults")
