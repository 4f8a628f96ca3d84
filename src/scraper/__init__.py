"""Concurrent page scraping over a shared headless browser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .batch import BAD_REQUEST_MESSAGE, BatchCoordinator, validate_urls
from .errors import BadRequestError, EngineStartupError, PageError, ScrapeError
from .events import BatchState, StateCallback
from .extract import extract_fields
from .normalize import normalize, normalize_extraction
from .session import BrowserLauncher, BrowserSession, PlaywrightLauncher, browser_session
from .worker import extract_page, scrape_url

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "BAD_REQUEST_MESSAGE",
    "BadRequestError",
    "BatchCoordinator",
    "BatchState",
    "BrowserLauncher",
    "BrowserSession",
    "EngineStartupError",
    "PageError",
    "PlaywrightLauncher",
    "ScrapeError",
    "StateCallback",
    "browser_session",
    "build_coordinator",
    "extract_fields",
    "extract_page",
    "normalize",
    "normalize_extraction",
    "scrape_url",
    "validate_urls",
]


def build_coordinator(settings: Settings, launcher: BrowserLauncher | None = None) -> BatchCoordinator:
    """Build a coordinator wired to a Playwright launcher configured from *settings*."""
    return BatchCoordinator(
        launcher if launcher is not None else PlaywrightLauncher(settings),
        navigation_timeout=settings.navigation_timeout_seconds,
        wait_until=settings.wait_until,
    )
