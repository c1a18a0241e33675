import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wanderer.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(os.environ.get("LOG_DIR", Path(__file__).resolve().parent.parent / "logs"))
_LOG_DIR.mkdir(parents=True, exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "wanderer.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("apscheduler").setLevel(logging.WARNING)

from wanderer.routers import (  # noqa: E402
    accommodations,
    auth,
    categories,
    itineraries,
    locations,
    maps,
    recommendations,
    restaurants,
    reviews,
    spots,
    users,
)

logger = logging.getLogger(__name__)


async def purge_expired_otps() -> int:
    from wanderer.database import async_session_factory
    from wanderer.services.otp_service import otp_service

    async with async_session_factory() as db:
        count = await otp_service.purge_expired(db)
        if count:
            logger.info(f"OTP cleanup: {count} stale codes removed")
        return count


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: launch background scheduler
    scheduler = None
    if settings.scheduler_enabled:
        try:
            from apscheduler.schedulers.asyncio import AsyncIOScheduler
            from apscheduler.triggers.interval import IntervalTrigger

            scheduler = AsyncIOScheduler()
            scheduler.add_job(
                purge_expired_otps,
                IntervalTrigger(hours=settings.otp_cleanup_interval_hours),
                id="purge_expired_otps",
            )
            scheduler.start()
            logger.info("Background scheduler started")
        except Exception as e:
            logger.error(f"Scheduler failed to start: {e}")
            scheduler = None

    # Create tables and load sample data on an empty database (dev convenience)
    if settings.seed_enabled:
        try:
            from wanderer.database import init_db
            from wanderer.seed import seed

            await init_db()
            await seed()
        except Exception as e:
            logger.warning(f"Auto-seed skipped: {e}")

    yield

    # Shutdown
    from wanderer.services.cache_service import cache_service
    from wanderer.services.email_client import email_client
    from wanderer.services.geo_client import geo_client
    from wanderer.services.psgc_client import psgc_client

    for client in (geo_client, psgc_client, email_client, cache_service):
        await client.close()
    if scheduler:
        scheduler.shutdown(wait=False)
        logger.info("Background scheduler stopped")


app = FastAPI(
    title="Wanderer Albay",
    description="Tourism guide and itinerary planner for Albay, Philippines",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(spots.router, prefix="/api/spots", tags=["spots"])
app.include_router(reviews.router, prefix="/api/spots", tags=["reviews"])
app.include_router(accommodations.router, prefix="/api/accommodations", tags=["accommodations"])
app.include_router(restaurants.router, prefix="/api/restaurants", tags=["restaurants"])
app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])
app.include_router(itineraries.router, prefix="/api/itineraries", tags=["itineraries"])
app.include_router(maps.router, prefix="/api/maps", tags=["maps"])
app.include_router(locations.router, prefix="/api/locations", tags=["locations"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "wanderer"}
