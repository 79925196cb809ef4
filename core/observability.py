"""
Error reporting through Sentry
"""
from logging import ERROR

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from core.config import Settings, settings


def init_sentry(config: Settings = settings) -> bool:
    """
    Initialize Sentry for the application.

    Must run before the FastAPI app is created so the integration can hook it.
    Nothing is sent when no DSN is configured or when running tests.

    Returns:
        bool: True if Sentry was initialized
    """
    if not config.sentry_dsn or config.environment == "test":
        return False

    sentry_sdk.init(
        dsn=config.sentry_dsn,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(level=None, event_level=ERROR),
        ],
        traces_sample_rate=config.sentry_trace_rate,
        environment=config.environment,
        release=config.app_version,
    )
    return True
