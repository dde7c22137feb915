"""Request repository for data access.

Handles all database operations related to AssetRequest records."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from ...models import AssetRequest, RequestStatus
from ..fields import from_pb_datetime, quote, record_value, to_pb_datetime
from .base import PocketBaseRepository

logger = logging.getLogger(__name__)

# Newest first, matching what both the HR queue and the employee history show
DEFAULT_SORT = "-request_date"


class RequestRepository(PocketBaseRepository):
    """Repository for AssetRequest data access"""

    collection_name = "requests"

    def get_by_id(self, request_id: str) -> AssetRequest | None:
        record = self._get_record(request_id)
        if record is None:
            return None
        return self._map_from_db(record)

    def create(self, request: AssetRequest) -> AssetRequest:
        """Insert a new request and return it with its store-assigned id"""
        record = self._create(self._map_to_db(request))
        request.id = record.id
        return request

    def list_for_hr(self, hr_email: str) -> list[AssetRequest]:
        records = self._all(f"hr_email = {quote(hr_email)}", sort=DEFAULT_SORT)
        return [self._map_from_db(r) for r in records]

    def list_for_requester(self, requester_email: str) -> list[AssetRequest]:
        records = self._all(f"requester_email = {quote(requester_email)}", sort=DEFAULT_SORT)
        return [self._map_from_db(r) for r in records]

    def resolve(self, request_id: str, status: RequestStatus, resolved_at: datetime) -> None:
        """Write a terminal status and its resolution timestamp"""
        self._update(
            request_id,
            {"request_status": status.value, "approval_date": to_pb_datetime(resolved_at)},
        )

    def delete(self, request_id: str) -> bool:
        return self._delete(request_id)

    def _map_to_db(self, request: AssetRequest) -> dict[str, Any]:
        return {
            "asset": request.asset_id,
            "asset_name": request.asset_name,
            "asset_type": request.asset_type or "",
            "requester_email": request.requester_email,
            "requester_name": request.requester_name,
            "hr_email": request.hr_email,
            "company_name": request.company_name or "",
            "company_logo": request.company_logo or "",
            "note": request.note,
            "request_status": request.request_status.value,
            "request_date": to_pb_datetime(request.request_date),
            "approval_date": to_pb_datetime(request.approval_date),
        }

    def _map_from_db(self, record: Any) -> AssetRequest:
        status_value = record_value(record, "request_status", RequestStatus.PENDING.value)
        try:
            status = RequestStatus(status_value)
        except ValueError:
            # Unknown values are surfaced as pending so they stay visible in the HR queue
            logger.warning(f"Unknown request_status {status_value!r} on request {record.id}")
            status = RequestStatus.PENDING

        return AssetRequest(
            id=record.id,
            asset_id=record_value(record, "asset", ""),
            asset_name=record_value(record, "asset_name", ""),
            asset_type=record_value(record, "asset_type"),
            requester_email=record_value(record, "requester_email", ""),
            requester_name=record_value(record, "requester_name", ""),
            hr_email=record_value(record, "hr_email", ""),
            company_name=record_value(record, "company_name"),
            company_logo=record_value(record, "company_logo"),
            note=record_value(record, "note", ""),
            request_status=status,
            request_date=from_pb_datetime(getattr(record, "request_date", None)),
            approval_date=from_pb_datetime(getattr(record, "approval_date", None)),
        )
