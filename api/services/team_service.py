"""
Team Service - read and prune HR teams (employee affiliations).

Affiliations are only ever created by request approval (see
request_lifecycle.py). Removal is an explicit HR action; afterwards the HR's
cached current_employees counter is recomputed from the affiliation records.
"""

from __future__ import annotations

import asyncio
import logging

from assetverse.data.repositories import AffiliationRepository, UserRepository
from assetverse.data.repository_factory import RepositoryFactory
from assetverse.errors import AffiliationNotFoundError
from assetverse.models import Affiliation, normalize_email

from .hr_locks import HRLockRegistry, hr_locks

logger = logging.getLogger(__name__)


class TeamService:
    """Queries and removals for employee/HR affiliations."""

    def __init__(
        self,
        affiliations: AffiliationRepository,
        users: UserRepository,
        locks: HRLockRegistry | None = None,
    ) -> None:
        self._affiliations = affiliations
        self._users = users
        self._locks = locks if locks is not None else hr_locks

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TeamService:
        return cls(
            affiliations=factory.get_affiliation_repository(),
            users=factory.get_user_repository(),
        )

    async def list_affiliates(self, hr_email: str) -> list[Affiliation]:
        """Every employee on the HR's team"""
        return await asyncio.to_thread(self._affiliations.list_for_hr, hr_email)

    async def list_affiliations(self, employee_email: str) -> list[Affiliation]:
        """Every HR team the employee belongs to"""
        return await asyncio.to_thread(self._affiliations.list_for_employee, normalize_email(employee_email))

    async def remove_affiliate(self, affiliation_id: str) -> Affiliation:
        """Remove an employee from a team and refresh the HR's counter.

        Assets already approved for the employee are not returned to stock.
        """
        affiliation = await asyncio.to_thread(self._affiliations.get_by_id, affiliation_id)
        if affiliation is None:
            raise AffiliationNotFoundError(f"Affiliation '{affiliation_id}' not found")

        async with self._locks.hold(affiliation.hr_email):
            deleted = await asyncio.to_thread(self._affiliations.delete, affiliation_id)
            if not deleted:
                raise AffiliationNotFoundError(f"Affiliation '{affiliation_id}' not found")

            remaining = await asyncio.to_thread(self._affiliations.count_for_hr, affiliation.hr_email)
            hr_user = await asyncio.to_thread(self._users.get_by_email, affiliation.hr_email)
            if hr_user is not None and hr_user.id:
                await asyncio.to_thread(self._users.set_current_employees, hr_user.id, remaining)

        logger.info(
            f"Removed {affiliation.employee_email} from team of {affiliation.hr_email} ({remaining} employees remain)"
        )
        return affiliation
