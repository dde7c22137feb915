"""Data repositories for the asset request workflow.

Provides database access layer for all entities."""

from __future__ import annotations

from .affiliation_repository import AffiliationRepository
from .asset_repository import AssetRepository
from .request_repository import RequestRepository
from .user_repository import UserRepository

__all__ = [
    "AffiliationRepository",
    "AssetRepository",
    "RequestRepository",
    "UserRepository",
]
