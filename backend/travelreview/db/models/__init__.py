"""ORM models for database tables."""

from .destination import Destination
from .photo import Photo
from .place import Place
from .review import Review
from .review_history import ReviewHistory
from .trip import Trip, TripPlace
from .user_account import UserAccount

__all__ = [
    "UserAccount",
    "Destination",
    "Place",
    "Review",
    "ReviewHistory",
    "Photo",
    "Trip",
    "TripPlace",
]
