"""Single-page extraction worker."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from src.api.schemas import ExtractedPage, ScrapeFailure, ScrapeOutcome, ScrapeSuccess
from src.scraper.errors import PageError
from src.scraper.extract import extract_fields
from src.scraper.normalize import normalize_extraction
from src.scraper.session import BrowserSession

logger = logging.getLogger(__name__)

DEFAULT_NAVIGATION_TIMEOUT = 60.0
DEFAULT_WAIT_UNTIL = "networkidle"


async def extract_page(
    session: BrowserSession,
    url: str,
    timeout: float = DEFAULT_NAVIGATION_TIMEOUT,
    wait_until: str = DEFAULT_WAIT_UNTIL,
) -> ExtractedPage:
    """Load *url* in its own browsing context and return its normalized content.

    The context is closed on every exit path. Any failure while opening it,
    navigating, or reading the document is raised as :class:`PageError`.
    """
    try:
        context = await session.new_context()
    except Exception as exc:
        raise PageError(url, f"could not open browsing context: {exc}") from exc

    try:
        page = await context.new_page()
        await page.goto(url, wait_until=wait_until, timeout=timeout * 1000)
        html = await page.content()
        raw = await asyncio.to_thread(extract_fields, html, page.url or url)
        return normalize_extraction(url, raw)
    except PlaywrightTimeoutError as exc:
        raise PageError(url, f"timed out after {timeout:g}s loading {url}: {exc}") from exc
    except Exception as exc:
        raise PageError(url, str(exc) or type(exc).__name__) from exc
    finally:
        try:
            await context.close()
        except Exception:
            logger.warning("browsing context close failed", extra={"url": url}, exc_info=True)


async def scrape_url(
    session: BrowserSession,
    url: Any,
    timeout: float = DEFAULT_NAVIGATION_TIMEOUT,
    wait_until: str = DEFAULT_WAIT_UNTIL,
) -> ScrapeOutcome:
    """Run :func:`extract_page` and fold the result into a per-URL outcome."""
    if not isinstance(url, str):
        return ScrapeFailure(error="URL must be a string")

    try:
        page = await extract_page(session, url, timeout=timeout, wait_until=wait_until)
    except PageError as exc:
        logger.warning("page scrape failed", extra={"url": url, "reason": exc.reason})
        return ScrapeFailure(error=exc.reason)

    logger.debug(
        "page scraped",
        extra={
            "url": url,
            "paragraphs": len(page.paragraphs),
            "links": len(page.links),
            "tables": len(page.tables),
        },
    )
    return ScrapeSuccess(data=page)
