"""
Requests Router - Asset request endpoints.

Employees submit and cancel requests; HR lists its queue and resolves
requests. Resolution runs the approval/rejection protocol in
RequestLifecycleManager.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_lifecycle_manager
from ..schemas.asset_requests import (
    AssetRequestCreate,
    AssetRequestResponse,
    CancelRequestResponse,
    ResolveRequestBody,
    ResolveRequestResponse,
)
from ..services.request_lifecycle import (
    RequestLifecycleManager,
    ResolutionResult,
    ResolutionStatus,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["requests"])

LifecycleDep = Annotated[RequestLifecycleManager, Depends(get_lifecycle_manager)]

_RESOLUTION_MESSAGES = {
    ResolutionStatus.APPROVED_OK: "Request approved and processed",
    ResolutionStatus.REJECTED_OK: "Request rejected",
    ResolutionStatus.LIMIT_REACHED: "Package limit reached. Please upgrade!",
    ResolutionStatus.OUT_OF_STOCK: "Asset is out of stock",
}


def build_resolution_response(result: ResolutionResult) -> ResolveRequestResponse:
    """Map a lifecycle result onto the HTTP response body.

    Raises:
        HTTPException: 404 when the request does not exist
    """
    if result.status is ResolutionStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Request not found")

    return ResolveRequestResponse(
        success=result.status in (ResolutionStatus.APPROVED_OK, ResolutionStatus.REJECTED_OK),
        status=result.status.value,
        message=_RESOLUTION_MESSAGES[result.status],
        limit_reached=result.limit_reached,
        out_of_stock=result.out_of_stock,
        request=AssetRequestResponse.from_model(result.request) if result.request else None,
    )


@router.post("/requests", response_model=AssetRequestResponse, status_code=201)
async def submit_request(body: AssetRequestCreate, manager: LifecycleDep) -> AssetRequestResponse:
    """Submit a pending request for an asset."""
    request = await manager.submit_request(
        asset_id=body.asset_id,
        requester_email=body.requester_email,
        requester_name=body.requester_name,
        note=body.note,
    )
    return AssetRequestResponse.from_model(request)


@router.get("/requests", response_model=list[AssetRequestResponse])
async def list_requests_for_hr(
    hr_email: Annotated[str, Query(alias="email", description="Owning HR email")],
    manager: LifecycleDep,
) -> list[AssetRequestResponse]:
    """List every request addressed to an HR (HR queue view)."""
    requests = await manager.list_requests_for_hr(hr_email)
    return [AssetRequestResponse.from_model(r) for r in requests]


@router.get("/my-requests/{email}", response_model=list[AssetRequestResponse])
async def list_my_requests(email: str, manager: LifecycleDep) -> list[AssetRequestResponse]:
    """List every request submitted by an employee."""
    requests = await manager.list_requests_for_requester(email)
    return [AssetRequestResponse.from_model(r) for r in requests]


@router.patch("/requests/{request_id}", response_model=ResolveRequestResponse)
async def resolve_request(
    request_id: str,
    body: ResolveRequestBody,
    manager: LifecycleDep,
) -> ResolveRequestResponse:
    """Approve or reject a pending request.

    A limit-reached or out-of-stock outcome is a normal 200 response with the
    matching flag set; the request stays pending.
    """
    result = await manager.resolve_request(request_id, body.status)
    return build_resolution_response(result)


@router.delete("/requests/{request_id}", response_model=CancelRequestResponse)
async def cancel_request(request_id: str, manager: LifecycleDep) -> CancelRequestResponse:
    """Cancel a request that is still pending."""
    await manager.cancel_request(request_id)
    return CancelRequestResponse(success=True, request_id=request_id)
