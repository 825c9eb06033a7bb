"""Convenient imports for all model types."""

# Common types and enums
from .common import (
    RATING_MAX,
    RATING_MIN,
    HistoryOperation,
    PlaceCategory,
    validate_payload,
)

# Entity payloads
from .entities import (
    DestinationInput,
    PhotoInput,
    PlaceInput,
    ProfileUpdate,
    TripInput,
    TripPlaceInput,
    UserAccountInput,
)

# Review payloads
from .review import ReviewInput, ReviewUpdate

# Report rows
from .stats import PlaceStats

__all__ = [
    # Common
    "RATING_MIN",
    "RATING_MAX",
    "HistoryOperation",
    "PlaceCategory",
    "validate_payload",
    # Entities
    "DestinationInput",
    "PhotoInput",
    "PlaceInput",
    "ProfileUpdate",
    "TripInput",
    "TripPlaceInput",
    "UserAccountInput",
    # Reviews
    "ReviewInput",
    "ReviewUpdate",
    # Reports
    "PlaceStats",
]
