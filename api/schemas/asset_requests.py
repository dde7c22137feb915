"""
Pydantic schemas for asset request endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from assetverse.models import AssetRequest, normalize_email


class AssetRequestCreate(BaseModel):
    """Request body for submitting an asset request."""

    asset_id: str
    requester_email: str
    requester_name: str = ""
    note: str = ""

    @field_validator("asset_id", "requester_email")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("requester_email")
    @classmethod
    def normalize_requester_email(cls, v: str) -> str:
        return normalize_email(v)


class ResolveRequestBody(BaseModel):
    """Request body for approving or rejecting a request.

    The status is validated by the lifecycle manager so unknown values
    surface as an explicit invalid-status error.
    """

    status: str


class AssetRequestResponse(BaseModel):
    """Response model for asset requests."""

    id: str
    asset_id: str
    asset_name: str
    asset_type: str | None = None
    requester_email: str
    requester_name: str
    hr_email: str
    company_name: str | None = None
    company_logo: str | None = None
    note: str = ""
    request_status: str
    request_date: datetime | None = None
    approval_date: datetime | None = None

    @classmethod
    def from_model(cls, request: AssetRequest) -> AssetRequestResponse:
        return cls(
            id=request.id or "",
            asset_id=request.asset_id,
            asset_name=request.asset_name,
            asset_type=request.asset_type,
            requester_email=request.requester_email,
            requester_name=request.requester_name,
            hr_email=request.hr_email,
            company_name=request.company_name,
            company_logo=request.company_logo,
            note=request.note,
            request_status=request.request_status.value,
            request_date=request.request_date,
            approval_date=request.approval_date,
        )


class ResolveRequestResponse(BaseModel):
    """Response for a resolution.

    limit_reached and out_of_stock are business outcomes, not errors: the
    request is still pending and the client should offer an upgrade or
    restock instead.
    """

    success: bool
    status: str
    message: str
    limit_reached: bool = False
    out_of_stock: bool = False
    request: AssetRequestResponse | None = None


class CancelRequestResponse(BaseModel):
    """Response for a cancelled (deleted) request."""

    success: bool
    request_id: str
