"""Request/response Pydantic models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

HEADING_LEVELS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    href: str


class Table(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers: list[str] = []
    rows: list[list[str]] = []


class ExtractedPage(BaseModel):
    """Structured content of one rendered page, with every prose string normalized."""

    model_config = ConfigDict(frozen=True)

    url: str
    paragraphs: list[str] = []
    headings: dict[str, list[str]] = {}
    links: list[Link] = []
    tables: list[Table] = []


class ScrapeSuccess(BaseModel):
    success: Literal[True] = True
    data: ExtractedPage


class ScrapeFailure(BaseModel):
    success: Literal[False] = False
    error: str


ScrapeOutcome = ScrapeSuccess | ScrapeFailure


class BatchResult(BaseModel):
    results: list[ScrapeOutcome] = []


class ErrorResponse(BaseModel):
    error: str
