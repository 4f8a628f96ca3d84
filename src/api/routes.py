"""POST /scrape endpoint handler."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import BatchResult, ErrorResponse
from src.api.service import run_scrape_batch
from src.scraper import BadRequestError, BatchCoordinator, EngineStartupError

logger = logging.getLogger(__name__)

SCRAPE_FAILED_MESSAGE = "An error occurred while scraping."

router = APIRouter()


def _get_coordinator(request: Request) -> BatchCoordinator:
    return request.app.state.coordinator


@router.post(
    "/scrape",
    response_model=BatchResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scrape(
    request: Request,
    coordinator: BatchCoordinator = Depends(_get_coordinator),
):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        return await run_scrape_batch(coordinator, payload)
    except BadRequestError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except EngineStartupError:
        # already logged with traceback by the coordinator
        return JSONResponse(status_code=500, content={"error": SCRAPE_FAILED_MESSAGE})
    except Exception:
        logger.exception("scrape request failed")
        return JSONResponse(status_code=500, content={"error": SCRAPE_FAILED_MESSAGE})
