"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.scraper import build_coordinator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level, service=settings.service_name)
    logger.info("starting scrape service")

    # Browsers are launched per batch; nothing is started here
    app.state.settings = settings
    app.state.coordinator = build_coordinator(settings)

    logger.info(
        "scrape service ready",
        extra={
            "browser_type": settings.browser_type,
            "headless": settings.headless,
            "navigation_timeout_seconds": settings.navigation_timeout_seconds,
            "wait_until": settings.wait_until,
        },
    )

    yield

    logger.info("shutting down scrape service")


app = FastAPI(title="Scrape Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
