"""
In-memory stand-ins for the PocketBase repositories.

The fakes expose the same method surface as the real repositories in
assetverse.data.repositories and hand out copies, so services only see
changes they wrote back. Every call is recorded in ``store.calls`` and any
operation named in ``store.fail_on`` raises StoreUnavailableError.
"""

from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import UTC, datetime

from assetverse.errors import StoreUnavailableError
from assetverse.models import Affiliation, Asset, AssetRequest, RequestStatus, User, UserRole

FIXED_NOW = datetime(2026, 3, 2, 9, 30, tzinfo=UTC)


class InMemoryStore:
    """Four collections plus call recording and failure injection."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.assets: dict[str, Asset] = {}
        self.requests: dict[str, AssetRequest] = {}
        self.affiliations: dict[str, Affiliation] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self._ids = itertools.count(1)

        self.user_repo = FakeUserRepository(self)
        self.asset_repo = FakeAssetRepository(self)
        self.request_repo = FakeRequestRepository(self)
        self.affiliation_repo = FakeAffiliationRepository(self)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def record(self, op: str) -> None:
        self.calls.append(op)
        if op in self.fail_on:
            raise StoreUnavailableError(f"Simulated store failure during {op}")

    def writes(self) -> list[str]:
        """Recorded calls that change data"""
        write_ops = {
            "requests.create",
            "requests.resolve",
            "requests.delete",
            "assets.decrement_available",
            "affiliations.create",
            "affiliations.delete",
            "users.increment_current_employees",
            "users.set_current_employees",
        }
        return [c for c in self.calls if c in write_ops]

    # Seeding helpers ---------------------------------------------------

    def add_user(self, email: str, role: str = "employee", **kwargs) -> User:
        user = User(email=email, role=UserRole(role), id=kwargs.pop("id", None) or self.next_id("user"), **kwargs)
        self.users[user.id] = user
        return user

    def add_asset(self, **kwargs) -> Asset:
        asset = Asset(**kwargs)
        self.assets[asset.id] = asset
        return asset

    def add_request(self, **kwargs) -> AssetRequest:
        kwargs.setdefault("request_status", RequestStatus.PENDING)
        request = AssetRequest(**kwargs)
        if request.id is None:
            request.id = self.next_id("req")
        self.requests[request.id] = request
        return request

    def add_affiliation(self, employee_email: str, hr_email: str, **kwargs) -> Affiliation:
        affiliation = Affiliation(employee_email=employee_email, hr_email=hr_email, **kwargs)
        if affiliation.id is None:
            affiliation.id = self.next_id("aff")
        self.affiliations[affiliation.id] = affiliation
        return affiliation

    # Lookups used by assertions ---------------------------------------

    def user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def affiliations_for(self, hr_email: str) -> list[Affiliation]:
        return [a for a in self.affiliations.values() if a.hr_email == hr_email]


class FakeUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def get_by_email(self, email: str) -> User | None:
        self.store.record("users.get_by_email")
        user = self.store.user_by_email(email)
        return replace(user) if user else None

    def increment_current_employees(self, user_id: str, amount: int = 1) -> None:
        self.store.record("users.increment_current_employees")
        self.store.users[user_id].current_employees += amount

    def set_current_employees(self, user_id: str, count: int) -> None:
        self.store.record("users.set_current_employees")
        self.store.users[user_id].current_employees = max(count, 0)


class FakeAssetRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def get_by_id(self, asset_id: str) -> Asset | None:
        self.store.record("assets.get_by_id")
        asset = self.store.assets.get(asset_id)
        return replace(asset) if asset else None

    def decrement_available(self, asset_id: str, amount: int = 1) -> None:
        self.store.record("assets.decrement_available")
        self.store.assets[asset_id].available_quantity -= amount


class FakeRequestRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def get_by_id(self, request_id: str) -> AssetRequest | None:
        self.store.record("requests.get_by_id")
        request = self.store.requests.get(request_id)
        return replace(request) if request else None

    def create(self, request: AssetRequest) -> AssetRequest:
        self.store.record("requests.create")
        request.id = self.store.next_id("req")
        self.store.requests[request.id] = replace(request)
        return request

    def list_for_hr(self, hr_email: str) -> list[AssetRequest]:
        self.store.record("requests.list_for_hr")
        return [replace(r) for r in self.store.requests.values() if r.hr_email == hr_email]

    def list_for_requester(self, requester_email: str) -> list[AssetRequest]:
        self.store.record("requests.list_for_requester")
        return [replace(r) for r in self.store.requests.values() if r.requester_email == requester_email]

    def resolve(self, request_id: str, status: RequestStatus, resolved_at: datetime) -> None:
        self.store.record("requests.resolve")
        stored = self.store.requests[request_id]
        stored.request_status = status
        stored.approval_date = resolved_at

    def delete(self, request_id: str) -> bool:
        self.store.record("requests.delete")
        return self.store.requests.pop(request_id, None) is not None


class FakeAffiliationRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def get_by_id(self, affiliation_id: str) -> Affiliation | None:
        self.store.record("affiliations.get_by_id")
        affiliation = self.store.affiliations.get(affiliation_id)
        return replace(affiliation) if affiliation else None

    def count_for_hr(self, hr_email: str) -> int:
        self.store.record("affiliations.count_for_hr")
        return len(self.store.affiliations_for(hr_email))

    def find_for_pair(self, employee_email: str, hr_email: str) -> Affiliation | None:
        self.store.record("affiliations.find_for_pair")
        match = next(
            (a for a in self.store.affiliations_for(hr_email) if a.employee_email == employee_email),
            None,
        )
        return replace(match) if match else None

    def create(self, affiliation: Affiliation) -> Affiliation:
        self.store.record("affiliations.create")
        affiliation.id = self.store.next_id("aff")
        self.store.affiliations[affiliation.id] = replace(affiliation)
        return affiliation

    def list_for_hr(self, hr_email: str) -> list[Affiliation]:
        self.store.record("affiliations.list_for_hr")
        return [replace(a) for a in self.store.affiliations_for(hr_email)]

    def list_for_employee(self, employee_email: str) -> list[Affiliation]:
        self.store.record("affiliations.list_for_employee")
        return [replace(a) for a in self.store.affiliations.values() if a.employee_email == employee_email]

    def delete(self, affiliation_id: str) -> bool:
        self.store.record("affiliations.delete")
        return self.store.affiliations.pop(affiliation_id, None) is not None
