"""Text normalizer tests."""

import pytest

from src.scraper.models import RawExtraction, RawLink, RawTable
from src.scraper.normalize import normalize, normalize_extraction


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "hello world"),
        ("  padded  ", "padded"),
        ("multi\n\nline\ttext", "multi line text"),
        ("a \r\n\t b", "a b"),
        ("non\u00a0breaking", "non breaking"),
        ("", ""),
        ("   \n\t  ", ""),
    ],
)
def test_normalize(text, expected):
    assert normalize(text) == expected


@pytest.mark.parametrize("text", ["", " ", "x", "  a\n b  ", "\t\tlead and trail\n", "a  b"])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_normalize_extraction_cleans_every_prose_field():
    raw = RawExtraction(
        paragraphs=["  one\n two "],
        headings={"h1": [" Title\n"], "h2": []},
        links=[RawLink(text="  click\there ", href="https://example.com/a%20b?q= x")],
        tables=[RawTable(headers=[" Name ", "Age\n"], rows=[[" bob ", "\t42"]])],
    )

    page = normalize_extraction("https://example.com", raw)

    assert page.url == "https://example.com"
    assert page.paragraphs == ["one two"]
    assert page.headings == {"h1": ["Title"], "h2": []}
    assert page.links[0].text == "click here"
    # hrefs are structural and left untouched
    assert page.links[0].href == "https://example.com/a%20b?q= x"
    assert page.tables[0].headers == ["Name", "Age"]
    assert page.tables[0].rows == [["bob", "42"]]
