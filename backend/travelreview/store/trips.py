"""Trip store."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import exists, require
from backend.travelreview.db.models.place import Place
from backend.travelreview.db.models.trip import Trip, TripPlace
from backend.travelreview.db.models.user_account import UserAccount
from backend.travelreview.errors import ConflictError
from backend.travelreview.models.common import validate_payload
from backend.travelreview.models.entities import TripInput, TripPlaceInput

logger = logging.getLogger(__name__)


def create_trip(
    session: Session,
    payload: TripInput | Mapping[str, Any],
    *,
    trip_id: int | None = None,
) -> Trip:
    """
    Create a trip for a user.

    Args:
        session: SQLAlchemy session
        payload: Trip fields; ``start_date`` must not be after ``end_date``
        trip_id: Explicit id to use instead of the generated one

    Returns:
        The new Trip

    Raises:
        ValidationError: If the dates are inverted or the payload is invalid
        NotFoundError: If the user does not exist
        ConflictError: If ``trip_id`` is already taken
    """
    trip_in = validate_payload(TripInput, payload)
    require(session, UserAccount, trip_in.user_id)
    if trip_id is not None and exists(session, Trip, trip_id):
        raise ConflictError(f"Trip {trip_id} already exists")

    trip = Trip(trip_id=trip_id, **trip_in.model_dump())
    session.add(trip)
    session.flush()
    logger.info("trip_created", extra={"trip_id": trip.trip_id, "user_id": trip.user_id})
    return trip


def get_trip(session: Session, trip_id: int) -> Trip:
    return require(session, Trip, trip_id)


def add_place_to_trip(
    session: Session,
    trip_id: int,
    payload: TripPlaceInput | Mapping[str, Any],
) -> TripPlace:
    """
    Schedule a place within a trip.

    Raises:
        NotFoundError: If the trip or place does not exist
        ConflictError: If the place is already part of the trip
    """
    stop_in = validate_payload(TripPlaceInput, payload)
    require(session, Trip, trip_id)
    require(session, Place, stop_in.place_id)
    if exists(session, TripPlace, (trip_id, stop_in.place_id)):
        raise ConflictError(
            f"Place {stop_in.place_id} is already part of trip {trip_id}"
        )

    stop = TripPlace(trip_id=trip_id, **stop_in.model_dump())
    session.add(stop)
    session.flush()
    return stop


def list_trip_places(session: Session, trip_id: int) -> list[TripPlace]:
    """Places of a trip ordered by day, unscheduled ones last."""
    require(session, Trip, trip_id)
    stmt = (
        select(TripPlace)
        .where(TripPlace.trip_id == trip_id)
        .order_by(TripPlace.day_number.is_(None), TripPlace.day_number, TripPlace.place_id)
    )
    return list(session.execute(stmt).scalars().all())
