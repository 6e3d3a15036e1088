"""
Archive Search Commands.

search, scrape, count and fields. Each issues one request to the search
service while a spinner runs, then prints a table or, with --json, the
payload exactly as received.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Optional

import typer
from rich.text import Text

from archive_cli.cli.client import ArchiveClient
from archive_cli.cli.output import (
    Column,
    console,
    print_error,
    print_json,
    print_table,
    with_spinner,
)
from archive_cli.core.config import ConfigStore
from archive_cli.core.exceptions import ApplicationError
from archive_cli.schemas import CountResult, FieldList, ScrapePage, SearchPage

DETAILS_URL = "https://archive.org/details/<identifier>"

SEARCH_COLUMNS = [
    Column("identifier", "Identifier"),
    Column("title", "Title"),
    Column("type", "Type"),
    Column("date", "Date"),
]

SCRAPE_COLUMNS = [
    Column("identifier", "Identifier"),
    Column("title", "Title"),
]


def _require_query(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("Query must not be empty")
    return value


def _fetch(
    ctx: typer.Context,
    message: str,
    call: Callable[[ArchiveClient], Awaitable[Any]],
) -> Any:
    """
    Run one API call under the spinner.

    Any ApplicationError is reported as a single line and exits with status 1.
    """
    async def run() -> Any:
        config = ctx.obj if isinstance(ctx.obj, ConfigStore) else ConfigStore()
        client = ArchiveClient(config=config)
        try:
            return await with_spinner(message, lambda: call(client))
        finally:
            await client.close()

    try:
        return asyncio.run(run())
    except ApplicationError as e:
        print_error(e.message)
        raise typer.Exit(1)


def _heading(title: str, query: str) -> None:
    console.print()
    console.print(
        Text.assemble((f"{title} — \"", "bold"), (query, "bold cyan"), ("\"", "bold")),
        soft_wrap=True,
    )
    console.print()


def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query", callback=_require_query),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated metadata fields to return"),
    size: int = typer.Option(50, "--size", min=1, help="Number of results"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Sort by field (e.g., 'downloads desc')"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Search the Internet Archive.

    Examples:
        archive search "grateful dead"
        archive search "mediatype:texts" --size 10 --sort "downloads desc"
    """
    options: dict[str, Any] = {"size": size}
    if fields:
        options["fields"] = fields
    if sort:
        options["sort"] = sort

    data = _fetch(
        ctx,
        f'Searching for "{query}"...',
        lambda client: client.search_organic(query, **options),
    )

    if as_json:
        print_json(data)
        return

    page = SearchPage.from_payload(data)

    _heading("Search Results", query)

    if page.num_found is not None:
        console.print(Text(f"Total found: {page.num_found:,}", style="dim"))
        console.print()

    if not page.items:
        console.print("No results found.", style="yellow")
        return

    rows = [
        {
            "identifier": item.identifier,
            "title": item.short_title,
            "type": item.mediatype,
            "date": item.date,
        }
        for item in page.items
    ]
    print_table(rows, SEARCH_COLUMNS)

    console.print(Text(f"\nView item: {DETAILS_URL}", style="dim"), soft_wrap=True)


def scrape(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query", callback=_require_query),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated metadata fields"),
    size: int = typer.Option(100, "--size", min=1, help="Results per page"),
    cursor: Optional[str] = typer.Option(None, "--cursor", help="Pagination cursor"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Scrape results with cursor pagination.

    Pass the printed cursor back with --cursor to fetch the next page.

    Examples:
        archive scrape "collection:nasa"
        archive scrape "collection:nasa" --cursor W3siaWRlbnRpZmllciI6
    """
    options: dict[str, Any] = {"size": size}
    if fields:
        options["fields"] = fields
    if cursor:
        options["cursor"] = cursor

    data = _fetch(
        ctx,
        f'Scraping "{query}"...',
        lambda client: client.search_scrape(query, **options),
    )

    if as_json:
        print_json(data)
        return

    page = ScrapePage.from_payload(data)

    _heading("Scrape Results", query)

    if page.total is not None:
        console.print(Text(f"Total: {page.total:,}", style="dim"))
    if page.cursor:
        console.print(Text(f"Next cursor: {page.cursor}", style="dim"), soft_wrap=True)
    console.print()

    rows = [{"identifier": item.identifier, "title": item.short_title} for item in page.items]
    print_table(rows, SCRAPE_COLUMNS)


def count(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query", callback=_require_query),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Get total count for a search query.

    Examples:
        archive count "mediatype:movies"
    """
    data = _fetch(
        ctx,
        f'Counting results for "{query}"...',
        lambda client: client.get_count(query),
    )

    if as_json:
        print_json(data)
        return

    result = CountResult.from_payload(data)

    console.print("\n[bold]Search Count[/bold]\n")
    console.print(Text.assemble("Query:  ", (query, "cyan")), soft_wrap=True)
    console.print(Text.assemble("Total:  ", (f"{result.total:,}", "green")))
    console.print()


def list_fields(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List available metadata fields.
    """
    data = _fetch(ctx, "Fetching available fields...", lambda client: client.get_fields())

    if as_json:
        print_json(data)
        return

    field_list = FieldList.from_payload(data)

    console.print("\n[bold]Available Metadata Fields[/bold]\n")

    if not field_list.fields:
        console.print("No fields found.", style="yellow")
        return

    for field in field_list.fields:
        console.print(Text.assemble("  ", ("•", "cyan"), " ", field), soft_wrap=True)

    console.print(Text(f"\n{len(field_list.fields)} field(s) available", style="dim"))
