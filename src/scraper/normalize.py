"""Whitespace normalization for extracted text."""

from __future__ import annotations

import re

from src.api.schemas import ExtractedPage, Link, Table
from src.scraper.models import RawExtraction

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_extraction(url: str, raw: RawExtraction) -> ExtractedPage:
    """Build an :class:`ExtractedPage` from *raw*, normalizing every prose string.

    Link targets are structural and pass through untouched.
    """
    return ExtractedPage(
        url=url,
        paragraphs=[normalize(p) for p in raw.paragraphs],
        headings={
            level: [normalize(h) for h in texts]
            for level, texts in raw.headings.items()
        },
        links=[Link(text=normalize(link.text), href=link.href) for link in raw.links],
        tables=[
            Table(
                headers=[normalize(h) for h in table.headers],
                rows=[[normalize(cell) for cell in row] for row in table.rows],
            )
            for table in raw.tables
        ],
    )
