"""Response shapes returned by the search service."""

from archive_cli.schemas.search import (
    ArchiveItem,
    CountResult,
    FieldList,
    ScrapePage,
    SearchPage,
)

__all__ = [
    "ArchiveItem",
    "CountResult",
    "FieldList",
    "ScrapePage",
    "SearchPage",
]
