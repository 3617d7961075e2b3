"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from markertrack.core.database import dispose_db, init_db
from markertrack.core.logging_config import get_logger, setup_logging
from markertrack.core.monitoring import initialize_logfire

from .api.v1 import health, markers, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Ensures the schema on startup and releases pooled connections on shutdown.
    """
    # Startup
    logger.info("Starting up markertrack server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down markertrack server...")
    await dispose_db()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    markertrack Server API

    Users register, reach markers and are ranked by how many markers they reached
    and how long it took them since registration.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware, slow_request_ms=settings.slow_request_ms)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/user")
app.include_router(markers.router, prefix=f"{constant.API_PREFIX}/marker")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
