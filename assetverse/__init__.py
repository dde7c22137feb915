"""
AssetVerse - Core domain logic for the corporate asset-management backend.

This package contains:
- models: Domain models (User, Asset, AssetRequest, Affiliation)
- errors: Exception hierarchy shared by the data layer and the API
- data: PocketBase connection management and repositories
- logging_config: Unified logging format
"""

from assetverse.models import (
    Affiliation,
    Asset,
    AssetRequest,
    RequestStatus,
    User,
    UserRole,
)

__all__ = [
    "Affiliation",
    "Asset",
    "AssetRequest",
    "RequestStatus",
    "User",
    "UserRole",
]
