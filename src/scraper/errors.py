"""Exception taxonomy for the scrape pipeline."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for scrape pipeline errors."""


class BadRequestError(ScrapeError):
    """The batch input is malformed; no engine work is performed."""


class EngineStartupError(ScrapeError):
    """The shared rendering engine could not be started."""


class PageError(ScrapeError):
    """A single URL could not be loaded or extracted."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)
