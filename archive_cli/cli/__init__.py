"""
CLI Client Module.

Command-line client built with Typer for searching the Internet Archive.

Architecture:
- CLI is a thin presentation layer over the search service
- CLI calls the service via HTTP (httpx)
- Output is a Rich-styled table or the raw JSON payload

Usage:
    archive --help
    archive search "grateful dead" --size 10
    archive scrape "collection:nasa" --cursor <cursor>
    archive count "mediatype:movies"
    archive fields
    archive config show
"""
