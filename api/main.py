#!/usr/bin/env python3
"""
AssetVerse API - HTTP API layer for the corporate asset-management system.

This FastAPI application serves the request-approval workflow:
- Employees submit and cancel asset requests
- HR approves or rejects them, with package-limit and stock gates
- Approvals maintain inventory counts and team affiliations
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assetverse.logging_config import configure_logging, get_logger

from .dependencies import authenticate_pb
from .error_handlers import register_error_handlers
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    if not settings.skip_pb_auth:
        await authenticate_pb()
    else:
        logger.warning("Skipping PocketBase authentication (SKIP_PB_AUTH=true)")

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="AssetVerse API", description="Corporate asset request workflow API", lifespan=lifespan)

    register_error_handlers(app)

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import affiliations, requests

    app.include_router(requests.router)
    app.include_router(affiliations.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "assetverse-api"}

    return app


# Create app instance for uvicorn
app = create_app()
