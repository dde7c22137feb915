"""Core domain models for the asset request workflow.

These models represent the business records held in the document store and
are independent of the PocketBase SDK; repositories map between the two."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DEFAULT_PACKAGE_LIMIT = 5

# Role stamped on every affiliation created by an approval
AFFILIATION_ROLE = "employee"


def normalize_email(email: str) -> str:
    """Canonical form used for every stored and compared email"""
    return email.strip().lower()


class UserRole(Enum):
    """Account roles"""

    HR = "hr"
    EMPLOYEE = "employee"


class RequestStatus(Enum):
    """Lifecycle state of an asset request.

    pending -> approved and pending -> rejected are the only transitions;
    both resolved states are terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not RequestStatus.PENDING

    def can_transition_to(self, target: RequestStatus) -> bool:
        return self is RequestStatus.PENDING and target.is_terminal


@dataclass
class User:
    """An HR or employee account"""

    email: str
    name: str = ""
    role: UserRole = UserRole.EMPLOYEE
    id: str | None = None
    package_limit: int | None = None  # HR only
    current_employees: int = 0  # HR only, denormalized affiliation count
    subscription: str | None = None
    company_name: str | None = None
    company_logo: str | None = None

    @property
    def is_hr(self) -> bool:
        return self.role is UserRole.HR

    def effective_package_limit(self, default: int = DEFAULT_PACKAGE_LIMIT) -> int:
        """Package limit, falling back to the default when unset or zero"""
        return self.package_limit or default


@dataclass
class Asset:
    """An inventory item owned by one HR"""

    id: str
    product_name: str
    product_type: str
    product_quantity: int
    available_quantity: int
    hr_email: str
    company_name: str | None = None
    product_image: str | None = None

    @property
    def in_stock(self) -> bool:
        return self.available_quantity > 0


@dataclass
class AssetRequest:
    """An employee's request for one asset, resolved by the owning HR"""

    asset_id: str
    requester_email: str
    hr_email: str
    requester_name: str = ""
    asset_name: str = ""
    asset_type: str | None = None
    company_name: str | None = None
    company_logo: str | None = None
    note: str = ""
    request_status: RequestStatus = RequestStatus.PENDING
    request_date: datetime | None = None
    approval_date: datetime | None = None
    id: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.request_status is RequestStatus.PENDING


@dataclass
class Affiliation:
    """Link between an employee and an HR's team.

    At most one exists per (employee_email, hr_email) pair.
    """

    employee_email: str
    hr_email: str
    employee_name: str = ""
    company_name: str | None = None
    company_logo: str | None = None
    affiliation_date: datetime | None = None
    role: str = AFFILIATION_ROLE
    id: str | None = None
