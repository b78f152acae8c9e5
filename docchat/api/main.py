"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, docchat.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docchat.api import api_router
from docchat.api.deps.dependencies import get_service_cache
from docchat.boundary.db.create_tables import create_all_tables
from docchat.configs import get_settings
from docchat.configs.base import BaseSettings as CommonSettings
from docchat.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup validates configuration (missing provider settings fail here),
    configures logging, pre-warms provider clients, and creates tables.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    # Trigger property access to load instances
    _ = cache.template_store
    _ = cache.s3_client
    _ = cache.textract_client
    _ = cache.embedding_client
    _ = cache.completion_client
    _ = cache.search_index
    logger.info("Service cache pre-warmed")

    await create_all_tables()

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    common = CommonSettings()
    app = FastAPI(
        title="Document Chat API",
        debug=common.debug,
        description="Upload documents, search them, and chat over their contents",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Provider settings are validated in lifespan; only common settings are read here
    app.add_middleware(
        CORSMiddleware,
        allow_origins=common.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(api_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "docchat.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
