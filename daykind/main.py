# daykind/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from daykind import __version__
from daykind.core.config import get_timezone, is_production
from daykind.core.logging_config import get_logger, setup_logging
from daykind.core.request_logging import RequestLoggingMiddleware
from daykind.core.sentry_config import init_sentry
from daykind.routes.day_kinds import router as day_kinds_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

# Initialize Sentry for error tracking (production only)
sentry_enabled = init_sentry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Fail at startup instead of on the first request if DAYKIND_TIMEZONE is wrong
    try:
        tz = get_timezone()
    except Exception as e:
        logger.error(f"Timezone configuration invalid: {e}", exc_info=True)
        raise

    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": is_production(),
                "timezone": tz.key,
                "sentry": sentry_enabled,
                "python_version": sys.version,
            }
        },
    )

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="daykind",
    description="Classification of calendar days into weekdays, days before holidays and holidays",
    version=__version__,
    lifespan=lifespan,
)

# CORS Configuration
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if is_production():
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(day_kinds_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "daykind",
        "version": __version__,
    }
