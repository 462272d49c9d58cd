# daykind/core/sentry_config.py
"""
Sentry configuration for error tracking in production.

Only unexpected failures reach Sentry; rejected input (400) does not.
"""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from daykind import __version__
from daykind.core.config import is_production
from daykind.core.errors import DayKindError

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """
    Initialize Sentry error tracking.

    Returns:
        True if Sentry was initialized, False otherwise.
    """
    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()

    if not is_production():
        logger.info("Sentry disabled in development mode")
        return False

    if not sentry_dsn:
        logger.warning(
            "SENTRY_DSN not set. Error tracking disabled. "
            "Set SENTRY_DSN environment variable to enable Sentry in production."
        )
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # Breadcrumbs from INFO and above
        event_level=logging.ERROR,  # Send errors and above as events
    )

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")
    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
            logging_integration,
        ],
        traces_sample_rate=0.1,
        sample_rate=1.0,
        release=os.getenv("RELEASE_VERSION", f"daykind@{__version__}"),
        environment=environment,
        send_default_pii=False,
        attach_stacktrace=True,
        before_send=before_send_hook,
    )

    logger.info(f"Sentry initialized successfully (environment: {environment})")
    return True


def before_send_hook(event, hint):
    """
    Drop events caused by invalid caller input.

    Args:
        event: Sentry event data
        hint: Additional context

    Returns:
        The event, or None to drop it
    """
    exc_info = hint.get("exc_info") if hint else None
    if exc_info and isinstance(exc_info[1], DayKindError):
        return None

    return event

