"""User repository for data access.

Users are created by the signup flow; this repository only reads them and
maintains the HR's denormalized team counter."""

from __future__ import annotations

import logging
from typing import Any

from ...models import User, UserRole
from ..fields import quote, record_int, record_value
from .base import PocketBaseRepository

logger = logging.getLogger(__name__)


class UserRepository(PocketBaseRepository):
    """Repository for User data access"""

    collection_name = "users"

    def get_by_email(self, email: str) -> User | None:
        """Find a user by their unique email"""
        record = self._first(f"email = {quote(email)}")
        if record is None:
            return None
        return self._map_from_db(record)

    def increment_current_employees(self, user_id: str, amount: int = 1) -> None:
        """Bump the HR's team counter using the store's atomic number modifier"""
        self._update(user_id, {"current_employees+": amount})

    def set_current_employees(self, user_id: str, count: int) -> None:
        """Overwrite the HR's team counter with a recomputed value"""
        self._update(user_id, {"current_employees": max(count, 0)})

    def _map_from_db(self, record: Any) -> User:
        role_value = record_value(record, "role", UserRole.EMPLOYEE.value)
        try:
            role = UserRole(role_value)
        except ValueError:
            logger.warning(f"Unknown role {role_value!r} for user {record.id}, treating as employee")
            role = UserRole.EMPLOYEE

        package_limit = record_int(record, "package_limit", default=0)

        return User(
            id=record.id,
            email=record_value(record, "email", ""),
            name=record_value(record, "name", ""),
            role=role,
            package_limit=package_limit or None,
            current_employees=record_int(record, "current_employees"),
            subscription=record_value(record, "subscription"),
            company_name=record_value(record, "company_name"),
            company_logo=record_value(record, "company_logo"),
        )
