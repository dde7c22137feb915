"""Shared plumbing for PocketBase-backed repositories.

Repositories translate store failures into domain errors:
- a 404 on a single-record lookup means "absent" and becomes None
- anything else (connectivity, validation, write conflicts) becomes
  StoreUnavailableError so callers can abort the remaining steps
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import httpx
from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from pocketbase import PocketBase

from ...errors import StoreUnavailableError
from ...logging_config import TRACE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PocketBaseRepository:
    """Base class binding a repository to one PocketBase collection."""

    collection_name: str = ""

    def __init__(self, pb_client: PocketBase) -> None:
        """Initialize repository with PocketBase client.

        Args:
            pb_client: PocketBase client instance
        """
        self.pb = pb_client

    @property
    def collection(self) -> Any:
        return self.pb.collection(self.collection_name)

    def _execute(self, action: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a store call, converting transport and API failures."""
        logger.log(TRACE, f"{self.collection_name}.{action} args={args} kwargs={kwargs}")
        try:
            return fn(*args, **kwargs)
        except (ClientResponseError, httpx.HTTPError) as e:
            self._raise_unavailable(action, e)

    def _get_or_none(self, action: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T | None:
        """Run a single-record call, mapping 404 to None."""
        logger.log(TRACE, f"{self.collection_name}.{action} args={args} kwargs={kwargs}")
        try:
            return fn(*args, **kwargs)
        except ClientResponseError as e:
            if getattr(e, "status", None) == 404:
                return None
            self._raise_unavailable(action, e)
        except httpx.HTTPError as e:
            self._raise_unavailable(action, e)

    def _raise_unavailable(self, action: str, error: Exception) -> NoReturn:
        logger.error(f"Store call {self.collection_name}.{action} failed: {error}")
        raise StoreUnavailableError(f"Document store unavailable during {self.collection_name}.{action}") from error

    def _get_record(self, record_id: str) -> Any | None:
        return self._get_or_none("get_one", self.collection.get_one, record_id)

    def _first(self, filter_str: str) -> Any | None:
        return self._get_or_none("get_first_list_item", self.collection.get_first_list_item, filter_str)

    def _all(self, filter_str: str, sort: str | None = None) -> list[Any]:
        query_params: dict[str, Any] = {"filter": filter_str}
        if sort:
            query_params["sort"] = sort
        return self._execute("get_full_list", self.collection.get_full_list, query_params=query_params)

    def _count(self, filter_str: str) -> int:
        result = self._execute("get_list", self.collection.get_list, 1, 1, {"filter": filter_str})
        return int(result.total_items)

    def _create(self, data: dict[str, Any]) -> Any:
        return self._execute("create", self.collection.create, data)

    def _update(self, record_id: str, data: dict[str, Any]) -> Any:
        return self._execute("update", self.collection.update, record_id, data)

    def _delete(self, record_id: str) -> bool:
        """Delete a record; returns False when it was already gone."""
        try:
            self.collection.delete(record_id)
        except ClientResponseError as e:
            if getattr(e, "status", None) == 404:
                return False
            self._raise_unavailable("delete", e)
        except httpx.HTTPError as e:
            self._raise_unavailable("delete", e)
        return True
