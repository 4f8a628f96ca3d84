"""Browser session lifecycle — one rendering engine per batch.

The coordinator and workers only see the protocols below. The Playwright
implementation is the production backend; tests substitute a fake engine
with the same shape.

Install the browser binary once per environment::

    playwright install chromium
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

from playwright.async_api import Browser, Playwright, async_playwright

from src.config import Settings
from src.scraper.errors import EngineStartupError

logger = logging.getLogger(__name__)


class Page(Protocol):
    """The subset of a Playwright page the worker relies on."""

    url: str

    async def goto(self, url: str, *, wait_until: Any, timeout: float) -> Any: ...

    async def content(self) -> str: ...


class BrowsingContext(Protocol):
    """An isolated, single-use browsing context owned by one worker."""

    async def new_page(self) -> Page: ...

    async def close(self) -> None: ...


class BrowserSession(Protocol):
    """A running rendering engine that hands out isolated contexts."""

    async def new_context(self) -> BrowsingContext: ...

    async def close(self) -> None: ...


class BrowserLauncher(Protocol):
    """Starts a rendering engine for one batch."""

    async def acquire(self) -> BrowserSession: ...


class PlaywrightSession:
    """A Playwright driver plus one launched browser."""

    def __init__(self, playwright: Playwright, browser: Browser, user_agent: str = "") -> None:
        self._playwright = playwright
        self._browser = browser
        self._user_agent = user_agent
        self._closed = False

    async def new_context(self) -> BrowsingContext:
        kwargs: dict[str, Any] = {}
        if self._user_agent:
            kwargs["user_agent"] = self._user_agent
        return await self._browser.new_context(**kwargs)

    async def close(self) -> None:
        """Close the browser and stop the driver. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


class PlaywrightLauncher:
    """Launches a fresh Playwright browser per batch from :class:`Settings`."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def acquire(self) -> PlaywrightSession:
        settings = self._settings
        try:
            playwright = await async_playwright().start()
        except Exception as exc:
            raise EngineStartupError(f"failed to start playwright: {exc}") from exc

        try:
            browser_type = getattr(playwright, settings.browser_type)
            browser = await browser_type.launch(
                headless=settings.headless,
                args=settings.browser_arg_list,
            )
        except Exception as exc:
            # Don't leave an orphaned driver process behind
            await playwright.stop()
            raise EngineStartupError(
                f"failed to launch {settings.browser_type}: {exc}"
            ) from exc

        logger.debug(
            "browser launched",
            extra={"browser_type": settings.browser_type, "headless": settings.headless},
        )
        return PlaywrightSession(playwright, browser, user_agent=settings.user_agent)


@asynccontextmanager
async def browser_session(launcher: BrowserLauncher) -> AsyncIterator[BrowserSession]:
    """Acquire a session from *launcher* and release it exactly once on exit."""
    try:
        session = await launcher.acquire()
    except EngineStartupError:
        raise
    except Exception as exc:
        raise EngineStartupError(str(exc)) from exc

    try:
        yield session
    finally:
        try:
            await session.close()
        except Exception:
            logger.warning("browser session close failed", exc_info=True)
