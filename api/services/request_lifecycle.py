"""
Request Lifecycle Manager - submission, cancellation and resolution of asset requests.

Resolution is the only multi-record transition in the system:

    pending --reject--> rejected     (status + approval_date, nothing else)
    pending --approve-> approved     (status + approval_date, asset stock -1,
                                      affiliation created on first approval
                                      for the employee/HR pair, HR counter +1)

Both resolved states are terminal. Approval is gated twice before anything is
written: the HR's package limit (only when the approval would add a new team
member) and the asset's remaining stock. A gate that fails leaves every record
untouched and is reported as a result value, not an exception, so the caller
can offer an upgrade or restock flow.

Usage:
    manager = RequestLifecycleManager.from_factory(RepositoryFactory(pb))
    result = await manager.resolve_request(request_id, "approved")
    if result.limit_reached:
        ...
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum

from assetverse.data.repositories import (
    AffiliationRepository,
    AssetRepository,
    RequestRepository,
    UserRepository,
)
from assetverse.data.repository_factory import RepositoryFactory
from assetverse.errors import (
    AssetNotFoundError,
    InvalidStatusError,
    InvalidTransitionError,
    RequestNotFoundError,
    StoreUnavailableError,
)
from assetverse.models import (
    DEFAULT_PACKAGE_LIMIT,
    Affiliation,
    AssetRequest,
    RequestStatus,
    User,
    normalize_email,
)

from .hr_locks import HRLockRegistry, hr_locks

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ResolutionStatus(str, Enum):
    """Outcome of a resolve_request call"""

    REJECTED_OK = "rejected-ok"
    APPROVED_OK = "approved-ok"
    LIMIT_REACHED = "limit-reached"
    OUT_OF_STOCK = "out-of-stock"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class ResolutionResult:
    """Result of resolving one request.

    Attributes:
        status: Which protocol ran (or which gate stopped it)
        request_id: The id the caller asked about
        request: Request as it stands after the call (None when not found)
        affiliation_created: True when approval added the employee to the team
    """

    status: ResolutionStatus
    request_id: str
    request: AssetRequest | None = None
    affiliation_created: bool = False

    @property
    def limit_reached(self) -> bool:
        return self.status is ResolutionStatus.LIMIT_REACHED

    @property
    def out_of_stock(self) -> bool:
        return self.status is ResolutionStatus.OUT_OF_STOCK


def parse_resolution_status(value: str | RequestStatus) -> RequestStatus:
    """Accept only the two terminal statuses as resolution targets."""
    if isinstance(value, RequestStatus):
        status = value
    else:
        try:
            status = RequestStatus(str(value).strip().lower())
        except ValueError:
            raise InvalidStatusError(f"Invalid status '{value}'. Must be 'approved' or 'rejected'") from None

    if not status.is_terminal:
        raise InvalidStatusError(f"Invalid status '{status.value}'. Must be 'approved' or 'rejected'")
    return status


class RequestLifecycleManager:
    """Owns every state change of an asset request."""

    def __init__(
        self,
        requests: RequestRepository,
        assets: AssetRepository,
        users: UserRepository,
        affiliations: AffiliationRepository,
        default_package_limit: int = DEFAULT_PACKAGE_LIMIT,
        clock: Callable[[], datetime] = utc_now,
        locks: HRLockRegistry | None = None,
    ) -> None:
        self._requests = requests
        self._assets = assets
        self._users = users
        self._affiliations = affiliations
        self._default_package_limit = default_package_limit
        self._clock = clock
        self._locks = locks if locks is not None else hr_locks

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        default_package_limit: int = DEFAULT_PACKAGE_LIMIT,
    ) -> RequestLifecycleManager:
        return cls(
            requests=factory.get_request_repository(),
            assets=factory.get_asset_repository(),
            users=factory.get_user_repository(),
            affiliations=factory.get_affiliation_repository(),
            default_package_limit=default_package_limit,
        )

    # ------------------------------------------------------------------
    # Intake and queries
    # ------------------------------------------------------------------

    async def submit_request(
        self,
        asset_id: str,
        requester_email: str,
        requester_name: str = "",
        note: str = "",
    ) -> AssetRequest:
        """Create a pending request for an asset.

        The owning HR and company details are taken from the asset and its HR,
        not from the caller.
        The requester email is stored in normalized form so team membership
        and the per-HR lock key agree on identity.
        """
        requester_email = normalize_email(requester_email)
        asset = await asyncio.to_thread(self._assets.get_by_id, asset_id)
        if asset is None:
            raise AssetNotFoundError(f"Asset '{asset_id}' not found")

        hr_user = await asyncio.to_thread(self._users.get_by_email, asset.hr_email)

        request = AssetRequest(
            asset_id=asset.id,
            asset_name=asset.product_name,
            asset_type=asset.product_type,
            requester_email=requester_email,
            requester_name=requester_name,
            hr_email=asset.hr_email,
            company_name=asset.company_name or (hr_user.company_name if hr_user else None),
            company_logo=hr_user.company_logo if hr_user else None,
            note=note,
            request_status=RequestStatus.PENDING,
            request_date=self._clock(),
            approval_date=None,
        )
        created = await asyncio.to_thread(self._requests.create, request)
        logger.info(f"Request {created.id} submitted by {requester_email} for asset {asset.id} ({asset.product_name})")
        return created

    async def list_requests_for_hr(self, hr_email: str) -> list[AssetRequest]:
        return await asyncio.to_thread(self._requests.list_for_hr, hr_email)

    async def list_requests_for_requester(self, requester_email: str) -> list[AssetRequest]:
        return await asyncio.to_thread(self._requests.list_for_requester, normalize_email(requester_email))

    async def cancel_request(self, request_id: str) -> AssetRequest:
        """Delete a request that has not been resolved yet."""
        request = await self._load_request(request_id)
        if request is None:
            raise RequestNotFoundError(f"Request '{request_id}' not found")

        async with self._locks.hold(request.hr_email):
            request = await self._load_request(request_id)
            if request is None:
                raise RequestNotFoundError(f"Request '{request_id}' not found")
            if not request.is_pending:
                raise InvalidTransitionError(
                    f"Request '{request_id}' is already {request.request_status.value} and cannot be cancelled"
                )

            await asyncio.to_thread(self._requests.delete, request_id)

        logger.info(f"Request {request_id} cancelled by {request.requester_email}")
        return request

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def resolve_request(self, request_id: str, desired_status: str | RequestStatus) -> ResolutionResult:
        """Approve or reject a pending request.

        Raises:
            InvalidStatusError: desired_status is not approved/rejected
            InvalidTransitionError: the request is already resolved
            AssetNotFoundError: approval of a request whose asset is gone
            StoreUnavailableError: the document store failed mid-protocol
        """
        target = parse_resolution_status(desired_status)

        request = await self._load_request(request_id)
        if request is None:
            logger.info(f"Resolve {target.value} for unknown request {request_id}")
            return ResolutionResult(ResolutionStatus.NOT_FOUND, request_id)

        async with self._locks.hold(request.hr_email):
            # Re-read under the lock: a concurrent call may have resolved it
            request = await self._load_request(request_id)
            if request is None:
                return ResolutionResult(ResolutionStatus.NOT_FOUND, request_id)

            if not request.request_status.can_transition_to(target):
                raise InvalidTransitionError(
                    f"Request '{request_id}' is already {request.request_status.value}; "
                    f"only pending requests can be {target.value}"
                )

            if target is RequestStatus.REJECTED:
                return await self._reject(request)
            return await self._approve(request)

    async def _reject(self, request: AssetRequest) -> ResolutionResult:
        assert request.id is not None, "Database record missing ID"
        now = self._clock()

        await asyncio.to_thread(self._requests.resolve, request.id, RequestStatus.REJECTED, now)

        logger.info(f"Request {request.id} rejected by {request.hr_email}")
        return ResolutionResult(
            ResolutionStatus.REJECTED_OK,
            request.id,
            request=replace(request, request_status=RequestStatus.REJECTED, approval_date=now),
        )

    async def _approve(self, request: AssetRequest) -> ResolutionResult:
        assert request.id is not None, "Database record missing ID"
        hr_email = request.hr_email

        hr_user = await asyncio.to_thread(self._users.get_by_email, hr_email)
        limit = hr_user.effective_package_limit(self._default_package_limit) if hr_user else self._default_package_limit

        # Count from the affiliation records, not the cached counter on the user
        current_employees = await asyncio.to_thread(self._affiliations.count_for_hr, hr_email)
        existing = await asyncio.to_thread(self._affiliations.find_for_pair, request.requester_email, hr_email)

        if existing is None and current_employees >= limit:
            logger.info(
                f"Approval of request {request.id} blocked: {hr_email} has {current_employees}/{limit} employees"
            )
            return ResolutionResult(ResolutionStatus.LIMIT_REACHED, request.id, request=request)

        asset = await asyncio.to_thread(self._assets.get_by_id, request.asset_id)
        if asset is None:
            raise AssetNotFoundError(f"Asset '{request.asset_id}' for request '{request.id}' not found")
        if not asset.in_stock:
            logger.info(f"Approval of request {request.id} blocked: asset {asset.id} has no available stock")
            return ResolutionResult(ResolutionStatus.OUT_OF_STOCK, request.id, request=request)

        now = self._clock()
        committed: list[str] = []
        try:
            await asyncio.to_thread(self._requests.resolve, request.id, RequestStatus.APPROVED, now)
            committed.append("request approved")

            await asyncio.to_thread(self._assets.decrement_available, asset.id)
            committed.append("asset stock decremented")

            if existing is None:
                await asyncio.to_thread(self._affiliations.create, self._new_affiliation(request, hr_user, now))
                committed.append("affiliation created")

                if hr_user is not None and hr_user.id:
                    await asyncio.to_thread(self._users.increment_current_employees, hr_user.id)
                    committed.append("HR counter incremented")
                else:
                    logger.warning(f"No user record for HR {hr_email}; employee counter not updated")
        except StoreUnavailableError:
            if committed:
                logger.error(
                    f"Approval of request {request.id} aborted after partial commit ({', '.join(committed)}); "
                    "records need manual reconciliation"
                )
            raise

        logger.info(
            f"Request {request.id} approved by {hr_email}: asset {asset.id} now {asset.available_quantity - 1} "
            f"available, {'new' if existing is None else 'existing'} affiliation for {request.requester_email}"
        )
        return ResolutionResult(
            ResolutionStatus.APPROVED_OK,
            request.id,
            request=replace(request, request_status=RequestStatus.APPROVED, approval_date=now),
            affiliation_created=existing is None,
        )

    def _new_affiliation(self, request: AssetRequest, hr_user: User | None, now: datetime) -> Affiliation:
        return Affiliation(
            employee_email=request.requester_email,
            employee_name=request.requester_name,
            hr_email=request.hr_email,
            company_name=request.company_name or (hr_user.company_name if hr_user else None),
            company_logo=request.company_logo or (hr_user.company_logo if hr_user else None),
            affiliation_date=now,
        )

    async def _load_request(self, request_id: str) -> AssetRequest | None:
        return await asyncio.to_thread(self._requests.get_by_id, request_id)
