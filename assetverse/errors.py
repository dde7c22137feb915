"""Domain error classes.

Every failure the request workflow can surface to a caller derives from
AssetVerseError. The API layer maps each class to an HTTP status via
``status_code``.
"""

from __future__ import annotations


class AssetVerseError(Exception):
    """Base exception for request-workflow errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestNotFoundError(AssetVerseError):
    """Raised when a request id does not resolve to a record."""

    status_code = 404


class AssetNotFoundError(AssetVerseError):
    """Raised when a request references an asset that no longer exists."""

    status_code = 404


class AffiliationNotFoundError(AssetVerseError):
    """Raised when an affiliation id does not resolve to a record."""

    status_code = 404


class InvalidStatusError(AssetVerseError):
    """Raised when a resolution asks for a status other than approved/rejected."""

    status_code = 422


class InvalidTransitionError(AssetVerseError):
    """Raised when a request is not in a state that allows the transition."""

    status_code = 409


class StoreUnavailableError(AssetVerseError):
    """Raised when the document store cannot be reached or rejects a write."""

    status_code = 503
