"""
Shared dependencies for the AssetVerse API.

This module provides:
- PocketBase client management (global instance, admin auth on startup)
- Repository factory shared by all services
- Service providers used with FastAPI's Depends (overridable in tests)
"""

from __future__ import annotations

import asyncio
import logging

from assetverse.data import ConnectionConfig, ConnectionManager, RepositoryFactory

from .services.request_lifecycle import RequestLifecycleManager
from .services.team_service import TeamService
from .settings import get_settings

logger = logging.getLogger(__name__)

# ========================================
# PocketBase Client
# ========================================

# One client for the whole process, authenticated as admin during startup.
# The SDK is synchronous; services call it through asyncio.to_thread.
_settings = get_settings()
connection_manager = ConnectionManager(
    ConnectionConfig(
        url=_settings.pocketbase_url,
        admin_email=_settings.pocketbase_admin_email,
        admin_password=_settings.pocketbase_admin_password,
    )
)
pb = connection_manager.get_client(authenticate=False)
repositories = RepositoryFactory(pb)


async def authenticate_pb() -> None:
    """Authenticate the shared client with PocketBase as admin."""
    await asyncio.to_thread(connection_manager.authenticate, pb)


# ========================================
# Services
# ========================================


def get_lifecycle_manager() -> RequestLifecycleManager:
    """FastAPI dependency providing the request lifecycle manager."""
    return RequestLifecycleManager.from_factory(
        repositories,
        default_package_limit=get_settings().default_package_limit,
    )


def get_team_service() -> TeamService:
    """FastAPI dependency providing the team service."""
    return TeamService.from_factory(repositories)


__all__ = [
    "pb",
    "connection_manager",
    "repositories",
    "authenticate_pb",
    "get_lifecycle_manager",
    "get_team_service",
]
