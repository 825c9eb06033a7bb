"""Entity store for users, destinations, places, photos and trips."""

from .photos import add_photo, list_photos_for_place
from .places import (
    create_destination,
    create_place,
    get_destination,
    get_place,
    list_destinations,
    list_places,
)
from .trips import add_place_to_trip, create_trip, get_trip, list_trip_places
from .users import create_user, get_user, get_user_by_username, update_profile

__all__ = [
    "create_user",
    "get_user",
    "get_user_by_username",
    "update_profile",
    "create_destination",
    "get_destination",
    "list_destinations",
    "create_place",
    "get_place",
    "list_places",
    "add_photo",
    "list_photos_for_place",
    "create_trip",
    "get_trip",
    "add_place_to_trip",
    "list_trip_places",
]
