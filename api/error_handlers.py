"""
Translate domain errors into JSON HTTP responses.

Each AssetVerseError subclass carries its own status code; the body always
has the shape {"detail": "..."} to match FastAPI's HTTPException responses.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from assetverse.errors import AssetVerseError, StoreUnavailableError

logger = logging.getLogger(__name__)


async def assetverse_error_handler(request: Request, exc: AssetVerseError) -> JSONResponse:
    if isinstance(exc, StoreUnavailableError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an application."""
    app.add_exception_handler(AssetVerseError, assetverse_error_handler)  # type: ignore[arg-type]
