"""Data models for the scrape submodule."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RawTable:
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


@dataclass
class RawLink:
    text: str
    href: str


@dataclass
class RawExtraction:
    """Fields read from a rendered document before text normalization."""

    paragraphs: list[str] = field(default_factory=list)
    headings: dict[str, list[str]] = field(default_factory=dict)
    links: list[RawLink] = field(default_factory=list)
    tables: list[RawTable] = field(default_factory=list)
