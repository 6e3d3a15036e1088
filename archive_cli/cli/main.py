"""
Internet Archive CLI.

Search the Internet Archive from your terminal.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    archive --help                                  # Show help

    # Search
    archive search "grateful dead"                  # Relevance-ranked search
    archive search "nasa" --size 10 --sort "downloads desc"
    archive scrape "collection:nasa"                # Cursor-paginated results
    archive scrape "collection:nasa" --cursor <c>   # Next page
    archive count "mediatype:movies"                # Total hits only
    archive fields                                  # Available metadata fields

    # Configuration
    archive config show                             # Show effective base URL
    archive config set --base-url <url>             # Override base URL
    archive config clear                            # Reset to defaults

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --json            Print the raw JSON payload (search commands)
    --help            Show help message
"""

from typing import Optional

import typer

from archive_cli import __version__
from archive_cli.cli.commands import config_app, count, list_fields, scrape, search
from archive_cli.cli.output import err_console
from archive_cli.core.config import ConfigStore
from archive_cli.core.logging import setup_logging

app = typer.Typer(
    name="archive",
    help="Internet Archive CLI - Search the Internet Archive from your terminal.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)

app.add_typer(config_app, name="config")
app.command("search")(search)
app.command("scrape")(scrape)
app.command("count")(count)
app.command("fields")(list_fields)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Internet Archive CLI.

    Search, scrape and count Internet Archive items, and list metadata fields.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if debug:
        setup_logging(level="DEBUG")
        err_console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()

    ctx.obj = ConfigStore()


if __name__ == "__main__":
    app()
