"""Field extraction from a rendered HTML document."""

from __future__ import annotations

from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from src.api.schemas import HEADING_LEVELS
from src.scraper.models import RawExtraction, RawLink, RawTable

# Structural or presentational elements dropped before any field is read.
NON_CONTENT_TAGS: list[str] = [
    "script",
    "style",
    "svg",
    "noscript",
    "iframe",
    "header",
    "footer",
    "nav",
    "img",
]


def _text(element: Tag) -> str:
    return element.get_text().strip()


def _strip_non_content(soup: BeautifulSoup) -> None:
    for element in soup.find_all(NON_CONTENT_TAGS):
        element.extract()
    # innerText renders <br> as a line break; get_text() would glue the words
    for br in soup.find_all("br"):
        br.replace_with("\n")


def _extract_tables(soup: BeautifulSoup) -> list[RawTable]:
    tables: list[RawTable] = []
    for table in soup.find_all("table"):
        headers = [_text(th) for th in table.find_all("th")]
        rows: list[list[str]] = []
        for tr in table.find_all("tr"):
            cells = [_text(td) for td in tr.find_all("td")]
            if cells:
                rows.append(cells)
        tables.append(RawTable(headers=headers, rows=rows))
    return tables


def _resolve_href(base_url: str, href: str) -> str:
    try:
        return urljoin(base_url, href)
    except ValueError:
        # a browser reports unparseable hrefs verbatim
        return href


def _document_base(soup: BeautifulSoup, base_url: str) -> str:
    base = soup.find("base", href=True)
    if base is None:
        return base_url
    return _resolve_href(base_url, base["href"])


def extract_fields(html: str, base_url: str = "") -> RawExtraction:
    """Read paragraphs, headings, links and tables out of *html*.

    Non-content elements (see :data:`NON_CONTENT_TAGS`) are removed first.
    Link targets are resolved the way a browser reports an anchor's
    ``href``: against the document's ``<base href>`` when present (itself
    resolved against *base_url*), else against *base_url*. Text is only
    trimmed here; whitespace collapsing is left to :mod:`src.scraper.normalize`.
    """
    soup = BeautifulSoup(html, "html.parser")
    document_base = _document_base(soup, base_url)
    _strip_non_content(soup)

    paragraphs = [_text(p) for p in soup.find_all("p")]
    headings = {
        level: [_text(h) for h in soup.find_all(level)]
        for level in HEADING_LEVELS
    }
    links = [
        RawLink(text=_text(a), href=_resolve_href(document_base, a["href"]))
        for a in soup.find_all("a", href=True)
    ]

    return RawExtraction(
        paragraphs=paragraphs,
        headings=headings,
        links=links,
        tables=_extract_tables(soup),
    )
