"""Data access layer: PocketBase connections and per-collection repositories."""

from __future__ import annotations

from .connection_manager import ConnectionConfig, ConnectionManager
from .repository_factory import RepositoryFactory

__all__ = [
    "ConnectionConfig",
    "ConnectionManager",
    "RepositoryFactory",
]
