"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from pixelgate.api.v1 import reviews
from pixelgate.core.config import settings
from pixelgate.core.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV, dataset_file=settings.DATASET_FILE)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Pixel Contribution Review API",
    description="Validates single-pixel contributions to the shared pixel dataset",
    version="0.1.0",
    lifespan=lifespan,
)

API_PREFIX = "/api/v1"
app.include_router(reviews.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
