"""
RepositoryFactory - Centralized repository instantiation.

Creates repositories lazily and caches them so every repository used by a
service shares the same PocketBase client.
"""

from __future__ import annotations

from pocketbase import PocketBase

from .repositories import (
    AffiliationRepository,
    AssetRepository,
    RequestRepository,
    UserRepository,
)


class RepositoryFactory:
    """
    Factory for creating and caching repository instances.

    Usage:
        factory = RepositoryFactory(pb_client)
        requests = factory.get_request_repository()
        affiliations = factory.get_affiliation_repository()
    """

    def __init__(self, pb_client: PocketBase):
        self._pb_client = pb_client

        self._user_repository: UserRepository | None = None
        self._asset_repository: AssetRepository | None = None
        self._request_repository: RequestRepository | None = None
        self._affiliation_repository: AffiliationRepository | None = None

    def get_user_repository(self) -> UserRepository:
        if self._user_repository is None:
            self._user_repository = UserRepository(self._pb_client)
        return self._user_repository

    def get_asset_repository(self) -> AssetRepository:
        if self._asset_repository is None:
            self._asset_repository = AssetRepository(self._pb_client)
        return self._asset_repository

    def get_request_repository(self) -> RequestRepository:
        if self._request_repository is None:
            self._request_repository = RequestRepository(self._pb_client)
        return self._request_repository

    def get_affiliation_repository(self) -> AffiliationRepository:
        if self._affiliation_repository is None:
            self._affiliation_repository = AffiliationRepository(self._pb_client)
        return self._affiliation_repository
