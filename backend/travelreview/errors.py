"""Error taxonomy for the review core."""

from typing import Any


class TravelReviewError(Exception):
    """Base exception for all review core errors."""

    pass


class ValidationError(TravelReviewError):
    """Raised when input violates a constraint (rating range, date range, payload)."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(TravelReviewError):
    """Raised when a referenced row does not exist."""

    def __init__(self, entity: str, key: Any):
        super().__init__(f"{entity} {key!r} not found")
        self.entity = entity
        self.key = key


class ConflictError(TravelReviewError):
    """Raised on a duplicate unique key or a mutation of a missing row."""

    pass


class StorageError(TravelReviewError):
    """Raised when the durability layer is unavailable. Fatal to the unit of work."""

    pass
