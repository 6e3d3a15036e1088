"""
Unit Test Fixtures.

Fixtures for unit tests - the search service is never contacted.
Payloads below mirror what the /search/v1 endpoints return.
"""

from typing import Any

import pytest


@pytest.fixture
def organic_payload() -> dict[str, Any]:
    """Organic search response in the response.docs shape."""
    return {
        "numFound": 1234,
        "response": {
            "docs": [
                {
                    "identifier": "gd1977-05-08",
                    "title": "Grateful Dead Live at Barton Hall on 1977-05-08",
                    "mediatype": "etree",
                    "date": "1977-05-08T00:00:00Z",
                },
                {
                    "identifier": "nasa-apollo-11",
                    "title": "Apollo 11 Mission Audio",
                    "mediatype": "audio",
                    "date": "1969-07-20T00:00:00Z",
                },
            ],
        },
    }


@pytest.fixture
def scrape_payload() -> dict[str, Any]:
    """Scrape response with a cursor for the next page."""
    return {
        "items": [
            {"identifier": "nasa-img-001", "title": "Earthrise"},
            {"identifier": "nasa-img-002"},
        ],
        "count": 2,
        "total": 98765,
        "cursor": "W3siaWRlbnRpZmllciI6Im5hc2EtaW1nLTAwMiJ9XQ==",
    }
