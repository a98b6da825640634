"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stagescout import __version__
from stagescout.api.routes import health, shows
from stagescout.config import settings
from stagescout.services.pipeline import get_pipeline

logger = logging.getLogger(__name__)


async def warm_cache() -> None:
    """Run the pipeline so cache misses are paid outside of requests."""
    shows_found = await get_pipeline().run()
    logger.info(f"Cache warm complete: {len(shows_found)} shows")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: register the periodic cache warm
    scheduler = AsyncIOScheduler()
    if settings.warm_cache:
        scheduler.add_job(
            warm_cache,
            trigger=IntervalTrigger(minutes=settings.warm_interval_minutes),
            id="cache_warm",
            name="Warm the source cache",
            replace_existing=True,
        )
        scheduler.start()
        logger.info(
            f"Scheduler started, cache warm every {settings.warm_interval_minutes} minutes"
        )

        # Fire a one-off warm in the background
        asyncio.create_task(warm_cache())
        logger.info("Startup cache warm triggered in background")

    yield

    # Shutdown: stop the scheduler gracefully
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler shut down")


# Create FastAPI app
app = FastAPI(
    title="StageScout API",
    description="Currently running Broadway productions, merged from listing and reference sources",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(shows.router, prefix="/api", tags=["shows"])
