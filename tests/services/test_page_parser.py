from datetime import datetime, timezone

import pytest

from seocrawl.domain import HttpResponse
from seocrawl.exceptions import PageParseError
from seocrawl.services.page_parser import SeoPageParser

FIXED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _parser():
    return SeoPageParser(clock=lambda: FIXED)


def test_extracts_seo_fields():
    html = (
        "<html><head><title> Books </title>"
        '<meta name="Description" content=" All the books ">'
        "</head><body><h1>First</h1><h1>Second</h1></body></html>"
    )
    record = _parser().extract_fields(HttpResponse(200, html, "text/html", "http://books.test/"))
    assert record.url == "http://books.test/"
    assert record.title == "Books"
    assert record.h1 == "First"
    assert record.meta_description == "All the books"
    assert record.status_code == 200
    assert record.crawled_at == FIXED


def test_missing_fields_are_none():
    record = _parser().extract_fields(HttpResponse(404, "<html><body><p>gone</p></body></html>", None, "http://books.test/x"))
    assert record.title is None
    assert record.h1 is None
    assert record.meta_description is None
    assert record.status_code == 404


def test_ignores_other_meta_tags():
    html = '<meta name="keywords" content="a,b"><meta property="og:description" content="og">'
    assert _parser().extract_fields(HttpResponse(200, html, None, "http://t/")).meta_description is None


def test_empty_body_is_a_parse_error():
    with pytest.raises(PageParseError):
        _parser().extract_fields(HttpResponse(200, "", None, "http://books.test/"))
