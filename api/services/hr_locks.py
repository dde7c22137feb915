"""
Per-HR serialization for multi-record transitions.

The document store has no multi-document transactions, so approvals,
cancellations and team removals for one HR are run one at a time inside this
process. An HR owns both the assets and the team being mutated, so the HR
email is the lock key.

The lock is process-local: running several API workers still allows two
approvals for the same HR to interleave across processes.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from assetverse.models import normalize_email


@dataclass
class _Slot:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0  # tasks holding or waiting for the lock


class HRLockRegistry:
    """One asyncio.Lock per HR email, dropped once nobody holds or waits for it."""

    def __init__(self) -> None:
        self._slots: dict[str, _Slot] = {}

    @asynccontextmanager
    async def hold(self, hr_email: str) -> AsyncIterator[None]:
        key = normalize_email(hr_email)
        slot = self._slots.get(key)
        if slot is None:
            slot = self._slots[key] = _Slot()
        slot.holders += 1
        try:
            async with slot.lock:
                yield
        finally:
            slot.holders -= 1
            if slot.holders == 0:
                del self._slots[key]

    def __len__(self) -> int:
        return len(self._slots)


# Shared by every service instance in the process
hr_locks = HRLockRegistry()
