"""Service layer between the API routes and the scrape coordinator."""

from __future__ import annotations

import logging
from typing import Any

from src.api.schemas import BatchResult
from src.scraper import BatchCoordinator

logger = logging.getLogger(__name__)


def extract_urls(payload: Any) -> Any:
    """Pull the ``urls`` field out of a decoded JSON body, or ``None`` if absent."""
    if isinstance(payload, dict):
        return payload.get("urls")
    return None


async def run_scrape_batch(coordinator: BatchCoordinator, payload: Any) -> BatchResult:
    """Run one batch for the decoded request *payload*.

    Validation happens inside the coordinator before any browser work, so a
    malformed body raises ``BadRequestError`` with no engine side effects.
    """
    urls = extract_urls(payload)
    logger.debug(
        "scrape request received",
        extra={"url_count": len(urls) if isinstance(urls, list) else None},
    )
    return await coordinator.run(urls)
