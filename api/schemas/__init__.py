"""
Pydantic schemas for the AssetVerse API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .affiliations import AffiliationResponse, RemoveAffiliateResponse
from .asset_requests import (
    AssetRequestCreate,
    AssetRequestResponse,
    CancelRequestResponse,
    ResolveRequestBody,
    ResolveRequestResponse,
)

__all__ = [
    # Affiliations
    "AffiliationResponse",
    "RemoveAffiliateResponse",
    # Asset Requests
    "AssetRequestCreate",
    "AssetRequestResponse",
    "CancelRequestResponse",
    "ResolveRequestBody",
    "ResolveRequestResponse",
]
