"""
ConnectionManager - Centralized PocketBase connection management.

Builds the process-wide PocketBase client and authenticates it as a
superuser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pocketbase import PocketBase

logger = logging.getLogger(__name__)

DEFAULT_POCKETBASE_URL = "http://127.0.0.1:8090"


@dataclass
class ConnectionConfig:
    """Configuration for PocketBase connections."""

    url: str = DEFAULT_POCKETBASE_URL
    admin_email: str | None = None
    admin_password: str | None = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.admin_email and self.admin_password)


class ConnectionManager:
    """
    Owns the shared PocketBase client.

    Usage:
        manager = ConnectionManager(ConnectionConfig(url, email, password))
        client = manager.get_client(authenticate=False)
        manager.authenticate(client)
    """

    def __init__(self, config: ConnectionConfig):
        self._config = config
        self._client: PocketBase | None = None

    def get_client(self, authenticate: bool = True) -> PocketBase:
        """Get the shared PocketBase client, creating it on first use."""
        if self._client is None:
            self._client = PocketBase(self._config.url)
            if authenticate:
                self.authenticate(self._client)
        return self._client

    def authenticate(self, pb: PocketBase) -> None:
        """
        Authenticate with PocketBase using admin credentials.

        Uses PocketBase 0.23+ _superusers collection auth.
        """
        if not self._config.has_credentials:
            logger.warning("PocketBase admin credentials not provided, skipping authentication")
            return

        try:
            pb.collection("_superusers").auth_with_password(self._config.admin_email, self._config.admin_password)
            logger.info("Successfully authenticated with PocketBase")
        except Exception as e:
            logger.error(f"Failed to authenticate with PocketBase: {e}")
            raise
