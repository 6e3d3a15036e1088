"""
Unit Tests for Search Response Shapes.

Every fallback path of the response models: missing keys, wrong types,
and the two item-list shapes of the organic endpoint.
"""

import pytest

from archive_cli.schemas import (
    ArchiveItem,
    CountResult,
    FieldList,
    ScrapePage,
    SearchPage,
)


class TestArchiveItem:
    """Tests for per-document display fields."""

    def test_reads_primary_keys(self):
        item = ArchiveItem.from_doc({
            "identifier": "gd1977",
            "title": "Barton Hall",
            "mediatype": "etree",
            "date": "1977-05-08",
        })
        assert (item.identifier, item.title, item.mediatype, item.date) == (
            "gd1977", "Barton Hall", "etree", "1977-05-08",
        )

    def test_falls_back_to_alternate_keys(self):
        item = ArchiveItem.from_doc({"id": "x1", "type": "texts", "publicdate": "2001-01-01"})
        assert item.identifier == "x1"
        assert item.mediatype == "texts"
        assert item.date == "2001-01-01"

    def test_placeholders_for_empty_doc(self):
        item = ArchiveItem.from_doc({})
        assert item.identifier == "N/A"
        assert item.title == "Untitled"
        assert item.mediatype == "unknown"
        assert item.date == "N/A"

    @pytest.mark.parametrize("doc", [None, "gd1977", 42, ["a"]])
    def test_non_mapping_doc_gives_placeholders(self, doc):
        assert ArchiveItem.from_doc(doc) == ArchiveItem()

    def test_empty_strings_count_as_missing(self):
        item = ArchiveItem.from_doc({"identifier": "", "title": ""})
        assert item.identifier == "N/A"
        assert item.title == "Untitled"

    def test_list_values_are_joined(self):
        item = ArchiveItem.from_doc({"identifier": "x", "title": ["Part one", "Part two"]})
        assert item.title == "Part one, Part two"

    @pytest.mark.parametrize("value", [{"en": "x"}, True, [{"en": "x"}, None]])
    def test_non_scalar_values_count_as_missing(self, value):
        item = ArchiveItem.from_doc({"identifier": "x", "title": value, "mediatype": value})
        assert item.title == "Untitled"
        assert item.mediatype == "unknown"

    def test_numbers_are_displayed(self):
        item = ArchiveItem.from_doc({"identifier": 1234, "date": 1977})
        assert item.identifier == "1234"
        assert item.date == "1977"

    def test_short_title_is_truncated_to_fifty(self):
        title = "A very long title exceeding fifty characters for sure, and then some"
        item = ArchiveItem.from_doc({"identifier": "X", "title": title})
        assert item.short_title == title[:50]
        assert len(item.short_title) == 50


class TestSearchPage:
    """Tests for the organic search shape."""

    def test_response_docs(self, organic_payload):
        page = SearchPage.from_payload(organic_payload)
        assert page.num_found == 1234
        assert [item.identifier for item in page.items] == ["gd1977-05-08", "nasa-apollo-11"]

    def test_items_shape(self):
        page = SearchPage.from_payload({"items": [{"identifier": "a"}]})
        assert page.num_found is None
        assert [item.identifier for item in page.items] == ["a"]

    def test_docs_preferred_when_both_present(self):
        page = SearchPage.from_payload({
            "response": {"docs": [{"identifier": "from-docs"}]},
            "items": [{"identifier": "from-items"}],
        })
        assert [item.identifier for item in page.items] == ["from-docs"]

    def test_empty_docs_fall_back_to_items(self):
        page = SearchPage.from_payload({
            "response": {"docs": []},
            "items": [{"identifier": "from-items"}],
        })
        assert [item.identifier for item in page.items] == ["from-items"]

    def test_num_found_inside_response(self):
        page = SearchPage.from_payload({"response": {"numFound": 7, "docs": []}})
        assert page.num_found == 7

    @pytest.mark.parametrize("payload", [
        {},
        None,
        [],
        "oops",
        {"response": "oops", "items": "oops"},
        {"response": {"docs": {"identifier": "x"}}},
        {"numFound": "many"},
        {"numFound": True},
    ])
    def test_malformed_payloads_are_empty(self, payload):
        page = SearchPage.from_payload(payload)
        assert page.items == []
        assert page.num_found is None


class TestScrapePage:
    """Tests for the scrape shape."""

    def test_full_payload(self, scrape_payload):
        page = ScrapePage.from_payload(scrape_payload)
        assert page.total == 98765
        assert page.cursor == scrape_payload["cursor"]
        assert [item.title for item in page.items] == ["Earthrise", "Untitled"]

    def test_missing_keys(self):
        page = ScrapePage.from_payload({})
        assert page.total is None
        assert page.cursor is None
        assert page.items == []

    def test_last_page_has_no_cursor(self):
        page = ScrapePage.from_payload({"items": [], "total": 3, "cursor": ""})
        assert page.cursor is None


class TestCountResult:
    """Tests for the count-only shape."""

    def test_total(self):
        assert CountResult.from_payload({"total": 12345}).total == 12345

    @pytest.mark.parametrize("payload", [{}, None, {"total": None}, {"total": "lots"}])
    def test_defaults_to_zero(self, payload):
        assert CountResult.from_payload(payload).total == 0


class TestFieldList:
    """Tests for the fields shape."""

    def test_raw_list(self):
        assert FieldList.from_payload(["title", "date"]).fields == ["title", "date"]

    def test_wrapped_list(self):
        assert FieldList.from_payload({"fields": ["identifier"]}).fields == ["identifier"]

    @pytest.mark.parametrize("payload", [{}, None, {"fields": "title"}, 5])
    def test_anything_else_is_empty(self, payload):
        assert FieldList.from_payload(payload).fields == []
