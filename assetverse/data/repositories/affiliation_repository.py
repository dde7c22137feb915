"""Affiliation repository for data access.

Affiliations are the source of truth for team size; the counter on the HR
user record is a cache of count_for_hr()."""

from __future__ import annotations

from typing import Any

from ...models import AFFILIATION_ROLE, Affiliation
from ..fields import from_pb_datetime, quote, record_value, to_pb_datetime
from .base import PocketBaseRepository


class AffiliationRepository(PocketBaseRepository):
    """Repository for Affiliation data access"""

    collection_name = "employee_affiliations"

    def get_by_id(self, affiliation_id: str) -> Affiliation | None:
        record = self._get_record(affiliation_id)
        if record is None:
            return None
        return self._map_from_db(record)

    def count_for_hr(self, hr_email: str) -> int:
        """Number of employees currently on the HR's team"""
        return self._count(f"hr_email = {quote(hr_email)}")

    def find_for_pair(self, employee_email: str, hr_email: str) -> Affiliation | None:
        record = self._first(f"employee_email = {quote(employee_email)} && hr_email = {quote(hr_email)}")
        if record is None:
            return None
        return self._map_from_db(record)

    def create(self, affiliation: Affiliation) -> Affiliation:
        record = self._create(self._map_to_db(affiliation))
        affiliation.id = record.id
        return affiliation

    def list_for_hr(self, hr_email: str) -> list[Affiliation]:
        records = self._all(f"hr_email = {quote(hr_email)}", sort="affiliation_date")
        return [self._map_from_db(r) for r in records]

    def list_for_employee(self, employee_email: str) -> list[Affiliation]:
        records = self._all(f"employee_email = {quote(employee_email)}", sort="affiliation_date")
        return [self._map_from_db(r) for r in records]

    def delete(self, affiliation_id: str) -> bool:
        return self._delete(affiliation_id)

    def _map_to_db(self, affiliation: Affiliation) -> dict[str, Any]:
        return {
            "employee_email": affiliation.employee_email,
            "employee_name": affiliation.employee_name,
            "hr_email": affiliation.hr_email,
            "company_name": affiliation.company_name or "",
            "company_logo": affiliation.company_logo or "",
            "affiliation_date": to_pb_datetime(affiliation.affiliation_date),
            "role": affiliation.role,
        }

    def _map_from_db(self, record: Any) -> Affiliation:
        return Affiliation(
            id=record.id,
            employee_email=record_value(record, "employee_email", ""),
            employee_name=record_value(record, "employee_name", ""),
            hr_email=record_value(record, "hr_email", ""),
            company_name=record_value(record, "company_name"),
            company_logo=record_value(record, "company_logo"),
            affiliation_date=from_pb_datetime(getattr(record, "affiliation_date", None)),
            role=record_value(record, "role", AFFILIATION_ROLE),
        )
