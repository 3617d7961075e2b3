"""
Monitoring and Tracing Configuration Module.

This module provides optional integration with Pydantic Logfire for tracing
markertrack requests and database access, plus a handful of helpers that
emit structured domain events (user registration, marker events, API calls).

Every helper is safe to call when Logfire is disabled: the event is then only
written to the standard logger at DEBUG level.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)

LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "markertrack-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Instruments SQLAlchemy and, when ``app`` is given, the FastAPI endpoints.
    The initialization is skipped unless ``LOGFIRE_ENABLED`` is set and a
    ``LOGFIRE_TOKEN`` is available.

    Args:
        app: FastAPI application instance to instrument (optional).

    Returns:
        True if Logfire was configured, False otherwise.
    """
    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return False

    try:
        import logfire

        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )

        if LOGFIRE_TRACE_SQLALCHEMY:
            try:
                logfire.instrument_sqlalchemy()
                logger.info("Logfire: SQLAlchemy instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument SQLAlchemy: {e}")

        if LOGFIRE_TRACE_FASTAPI and app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")

        logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")
        return True

    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with its outcome and latency.

    Args:
        method: HTTP method
        path: Request path
        status_code: Response status code
        duration_ms: Time spent handling the request in milliseconds
    """
    if not LOGFIRE_ENABLED:
        logger.debug(f"API request: {method} {path} -> {status_code} ({duration_ms:.2f}ms)")
        return
    try:
        import logfire

        logfire.info(
            "API request",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_user_registered(user_id: int, email: str) -> None:
    """
    Log a successful user registration.

    Args:
        user_id: Identifier of the new user
        email: Registered email address
    """
    if not LOGFIRE_ENABLED:
        logger.debug(f"User registered: user_id={user_id}")
        return
    try:
        import logfire

        logfire.info("User registered", user_id=user_id, email=email)
    except Exception:
        logger.debug(f"Could not log user registration to Logfire: user_id={user_id}")


def log_marker_recorded(user_id: int, marker_key: str, marker_count: int) -> None:
    """
    Log a recorded marker event.

    Args:
        user_id: Identifier of the user who reached the marker
        marker_key: Key of the marker
        marker_count: Number of marker events the user has after this one
    """
    if not LOGFIRE_ENABLED:
        logger.debug(f"Marker recorded: user_id={user_id}, marker={marker_key}, count={marker_count}")
        return
    try:
        import logfire

        logfire.info(
            "Marker recorded",
            user_id=user_id,
            marker_key=marker_key,
            marker_count=marker_count,
        )
    except Exception:
        logger.debug(f"Could not log marker event to Logfire: user_id={user_id}")
