"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from trackpkg import __version__
from trackpkg.api import router
from trackpkg.config import settings
from trackpkg.services.carrier_loader import carrier_loader

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging()
    logger.info("Starting %s...", settings.app_name)
    carrier_loader.load_all()
    logger.info("Loaded %d carriers", len(carrier_loader.list_carriers()))

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Tracking number validation for UPS, FedEx and USPS",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "trackpkg.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
