"""
Pydantic schemas for team/affiliation endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from assetverse.models import Affiliation


class AffiliationResponse(BaseModel):
    """Response model for an employee/HR affiliation."""

    id: str
    employee_email: str
    employee_name: str
    hr_email: str
    company_name: str | None = None
    company_logo: str | None = None
    affiliation_date: datetime | None = None
    role: str

    @classmethod
    def from_model(cls, affiliation: Affiliation) -> AffiliationResponse:
        return cls(
            id=affiliation.id or "",
            employee_email=affiliation.employee_email,
            employee_name=affiliation.employee_name,
            hr_email=affiliation.hr_email,
            company_name=affiliation.company_name,
            company_logo=affiliation.company_logo,
            affiliation_date=affiliation.affiliation_date,
            role=affiliation.role,
        )


class RemoveAffiliateResponse(BaseModel):
    """Response after removing an employee from a team."""

    success: bool
    affiliation_id: str
    employee_email: str
    hr_email: str
