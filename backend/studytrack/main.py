import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from studytrack.config import get_settings
from studytrack.routers import reviews_router
from studytrack.srs.time import local_timezone

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    logging.basicConfig(level=settings.log_level_value())

    if settings.timezone:
        logger.info(f"Review days use timezone {settings.timezone}")
    else:
        logger.info(f"STUDYTRACK_TIMEZONE not set - review days use system zone {local_timezone()}")

    yield

    # Shutdown
    logger.info("Review API stopped")


app = FastAPI(
    title="StudyTrack Review API",
    description="Spaced-repetition (SM-2) scheduling for study items",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(reviews_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "StudyTrack Review API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/healthz",
            "next": "/reviews/next",
            "replay": "/reviews/replay",
            "overdue": "/reviews/overdue",
        },
    }


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "healthy"}
