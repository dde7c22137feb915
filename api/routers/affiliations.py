"""
Affiliations Router - Team membership endpoints.

HR uses these to view and prune its team; employees use them to see which
companies they belong to.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from ..dependencies import get_team_service
from ..schemas.affiliations import AffiliationResponse, RemoveAffiliateResponse
from ..services.team_service import TeamService

router = APIRouter(prefix="/api", tags=["affiliations"])

TeamDep = Annotated[TeamService, Depends(get_team_service)]


@router.get("/affiliates/{hr_email}", response_model=list[AffiliationResponse])
async def list_affiliates(hr_email: str, team: TeamDep) -> list[AffiliationResponse]:
    """List all employees affiliated with an HR."""
    affiliations = await team.list_affiliates(hr_email)
    return [AffiliationResponse.from_model(a) for a in affiliations]


@router.get("/my-affiliations/{email}", response_model=list[AffiliationResponse])
async def list_my_affiliations(email: str, team: TeamDep) -> list[AffiliationResponse]:
    """List every company an employee is affiliated with."""
    affiliations = await team.list_affiliations(email)
    return [AffiliationResponse.from_model(a) for a in affiliations]


@router.delete("/affiliates/{affiliation_id}", response_model=RemoveAffiliateResponse)
async def remove_affiliate(affiliation_id: str, team: TeamDep) -> RemoveAffiliateResponse:
    """Remove an employee from the HR's team."""
    affiliation = await team.remove_affiliate(affiliation_id)
    return RemoveAffiliateResponse(
        success=True,
        affiliation_id=affiliation_id,
        employee_email=affiliation.employee_email,
        hr_email=affiliation.hr_email,
    )
