"""Batch coordinator: fans one worker per URL out over a shared browser session."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from src.api.schemas import BatchResult, ScrapeFailure, ScrapeOutcome
from src.scraper.errors import BadRequestError
from src.scraper.events import BatchState, StateCallback, emit_state
from src.scraper.session import BrowserLauncher, browser_session
from src.scraper.worker import DEFAULT_NAVIGATION_TIMEOUT, DEFAULT_WAIT_UNTIL, scrape_url

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "Please provide a non-empty array of URLs."


def validate_urls(urls: Any) -> list[Any]:
    """Return *urls* if it is a non-empty list, else raise :class:`BadRequestError`."""
    if not isinstance(urls, list) or not urls:
        raise BadRequestError(BAD_REQUEST_MESSAGE)
    return urls


def _as_outcome(url: Any, settled: ScrapeOutcome | BaseException) -> ScrapeOutcome:
    if isinstance(settled, BaseException):
        # scrape_url folds PageError itself; anything reaching here is a worker bug
        logger.error("page worker crashed", extra={"url": url}, exc_info=settled)
        return ScrapeFailure(error=str(settled) or type(settled).__name__)
    return settled


class BatchCoordinator:
    """Runs one batch of URLs against a freshly launched browser session.

    Every URL gets its own concurrent worker; a failing URL only affects its
    own outcome. Outcomes come back in input order, and the session is
    released once all workers have settled.
    """

    def __init__(
        self,
        launcher: BrowserLauncher,
        navigation_timeout: float = DEFAULT_NAVIGATION_TIMEOUT,
        wait_until: str = DEFAULT_WAIT_UNTIL,
    ) -> None:
        self._launcher = launcher
        self._navigation_timeout = navigation_timeout
        self._wait_until = wait_until

    async def run(
        self,
        urls: Any,
        on_state: StateCallback | None = None,
    ) -> BatchResult:
        """Scrape every URL in *urls* and return one outcome per input, in order.

        Raises:
            BadRequestError: *urls* is missing, not a list, or empty.
            EngineStartupError: the browser session could not be acquired.
        """
        urls = validate_urls(urls)
        started = time.monotonic()
        logger.info("scrape batch started", extra={"url_count": len(urls)})
        await emit_state(on_state, BatchState.IDLE)

        await emit_state(on_state, BatchState.SESSION_STARTING)
        try:
            async with browser_session(self._launcher) as session:
                await emit_state(on_state, BatchState.RUNNING, {"url_count": len(urls)})
                tasks = [
                    asyncio.create_task(
                        scrape_url(
                            session,
                            url,
                            timeout=self._navigation_timeout,
                            wait_until=self._wait_until,
                        )
                    )
                    for url in urls
                ]
                try:
                    await emit_state(on_state, BatchState.DRAINING)
                finally:
                    # workers must settle before the session closes
                    settled = await asyncio.gather(*tasks, return_exceptions=True)

                await emit_state(on_state, BatchState.SESSION_CLOSING)
        except Exception:
            logger.exception("scrape batch failed", extra={"url_count": len(urls)})
            raise
        finally:
            await emit_state(on_state, BatchState.DONE)

        outcomes = [_as_outcome(url, r) for url, r in zip(urls, settled)]
        succeeded = sum(1 for r in outcomes if r.success)
        logger.info(
            "scrape batch completed",
            extra={
                "url_count": len(urls),
                "succeeded": succeeded,
                "failed": len(outcomes) - succeeded,
                "duration_seconds": round(time.monotonic() - started, 3),
            },
        )
        return BatchResult(results=outcomes)
