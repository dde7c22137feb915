"""Asset repository for data access.

Assets are created and edited by the (external) asset CRUD flow; the request
workflow only reads them and consumes stock."""

from __future__ import annotations

from typing import Any

from ...models import Asset
from ..fields import record_int, record_value
from .base import PocketBaseRepository


class AssetRepository(PocketBaseRepository):
    """Repository for Asset data access"""

    collection_name = "assets"

    def get_by_id(self, asset_id: str) -> Asset | None:
        record = self._get_record(asset_id)
        if record is None:
            return None
        return self._map_from_db(record)

    def decrement_available(self, asset_id: str, amount: int = 1) -> None:
        """Consume stock with the store's atomic number modifier.

        Callers are expected to have checked Asset.in_stock first; the store
        itself does not enforce a floor.
        """
        self._update(asset_id, {"available_quantity-": amount})

    def _map_from_db(self, record: Any) -> Asset:
        product_quantity = record_int(record, "product_quantity")
        return Asset(
            id=record.id,
            product_name=record_value(record, "product_name", ""),
            product_type=record_value(record, "product_type", ""),
            product_quantity=product_quantity,
            available_quantity=record_int(record, "available_quantity", default=product_quantity),
            hr_email=record_value(record, "hr_email", ""),
            company_name=record_value(record, "company_name"),
            product_image=record_value(record, "product_image"),
        )
