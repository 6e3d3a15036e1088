"""
CLI Commands.

Organized by domain/feature area.
"""

from archive_cli.cli.commands.archive import count, list_fields, scrape, search
from archive_cli.cli.commands.config import app as config_app

__all__ = [
    "config_app",
    "count",
    "list_fields",
    "scrape",
    "search",
]
