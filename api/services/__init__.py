"""
API Services - Business logic for the AssetVerse API.

Services encapsulate the multi-record workflows used by the routers.
"""

from .hr_locks import HRLockRegistry, hr_locks
from .request_lifecycle import (
    RequestLifecycleManager,
    ResolutionResult,
    ResolutionStatus,
    parse_resolution_status,
)
from .team_service import TeamService

__all__ = [
    "HRLockRegistry",
    "hr_locks",
    "RequestLifecycleManager",
    "ResolutionResult",
    "ResolutionStatus",
    "parse_resolution_status",
    "TeamService",
]
