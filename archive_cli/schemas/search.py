"""
Search Schemas.

The service returns loosely-typed JSON. Each shape below reads the keys it
knows about and falls back to a documented default when a key is absent or
has an unexpected type. Building a shape never raises for bad payloads.

These models are used for rendering only; --json output bypasses them.
"""

from typing import Any

from pydantic import BaseModel, Field

TITLE_MAX_LENGTH = 50


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_int(value: Any) -> int | None:
    # bool is an int subclass but never a count
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _scalar(value: Any) -> str | None:
    """Display text for a string or number; anything else counts as missing."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return str(value) if value != "" else None


def _text(*candidates: Any, default: str) -> str:
    """First non-empty candidate as display text."""
    for value in candidates:
        if isinstance(value, list):
            parts = [_scalar(v) for v in value]
            text = ", ".join(p for p in parts if p is not None) or None
        else:
            text = _scalar(value)
        if text is not None:
            return text
    return default


class ArchiveItem(BaseModel):
    """One result document, reduced to its display columns."""

    identifier: str = "N/A"
    title: str = "Untitled"
    mediatype: str = "unknown"
    date: str = "N/A"

    @classmethod
    def from_doc(cls, doc: Any) -> "ArchiveItem":
        """Build from a raw document; non-mapping documents give placeholders."""
        if not isinstance(doc, dict):
            return cls()
        return cls(
            identifier=_text(doc.get("identifier"), doc.get("id"), default="N/A"),
            title=_text(doc.get("title"), default="Untitled"),
            mediatype=_text(doc.get("mediatype"), doc.get("type"), default="unknown"),
            date=_text(doc.get("date"), doc.get("publicdate"), default="N/A"),
        )

    @property
    def short_title(self) -> str:
        """Title truncated for table display."""
        return self.title[:TITLE_MAX_LENGTH]


class SearchPage(BaseModel):
    """
    Organic search response.

    Items come from response.docs when it is a non-empty list, otherwise
    from items. num_found is read from the top level, then from response.
    """

    num_found: int | None = None
    items: list[ArchiveItem] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchPage":
        data = payload if isinstance(payload, dict) else {}
        response = data.get("response")
        response = response if isinstance(response, dict) else {}

        docs = _as_list(response.get("docs"))
        raw_items = docs or _as_list(data.get("items"))

        num_found = _as_int(data.get("numFound"))
        if num_found is None:
            num_found = _as_int(response.get("numFound"))

        return cls(
            num_found=num_found,
            items=[ArchiveItem.from_doc(doc) for doc in raw_items],
        )


class ScrapePage(BaseModel):
    """Scrape response: one page of items plus the cursor for the next one."""

    total: int | None = None
    cursor: str | None = None
    items: list[ArchiveItem] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "ScrapePage":
        data = payload if isinstance(payload, dict) else {}
        cursor = data.get("cursor")
        return cls(
            total=_as_int(data.get("total")),
            cursor=str(cursor) if cursor not in (None, "") else None,
            items=[ArchiveItem.from_doc(doc) for doc in _as_list(data.get("items"))],
        )


class CountResult(BaseModel):
    """Count-only scrape response."""

    total: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "CountResult":
        data = payload if isinstance(payload, dict) else {}
        total = _as_int(data.get("total"))
        return cls(total=total if total is not None else 0)


class FieldList(BaseModel):
    """Available metadata fields, from a bare list or a {fields: [...]} object."""

    fields: list[str] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "FieldList":
        if isinstance(payload, dict):
            payload = payload.get("fields")
        return cls(fields=[str(field) for field in _as_list(payload)])
