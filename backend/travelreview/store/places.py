"""Destination and place store."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import exists, require
from backend.travelreview.db.models.destination import Destination
from backend.travelreview.db.models.place import Place
from backend.travelreview.errors import ConflictError
from backend.travelreview.models.common import validate_payload
from backend.travelreview.models.entities import DestinationInput, PlaceInput

logger = logging.getLogger(__name__)


def create_destination(
    session: Session,
    payload: DestinationInput | Mapping[str, Any],
    *,
    destination_id: int | None = None,
) -> Destination:
    """
    Create a destination.

    Raises:
        ValidationError: If the payload is invalid
        ConflictError: If ``destination_id`` is already taken
    """
    dest_in = validate_payload(DestinationInput, payload)
    if destination_id is not None and exists(session, Destination, destination_id):
        raise ConflictError(f"Destination {destination_id} already exists")

    destination = Destination(destination_id=destination_id, **dest_in.model_dump())
    session.add(destination)
    session.flush()
    logger.info(
        "destination_created", extra={"destination_id": destination.destination_id}
    )
    return destination


def get_destination(session: Session, destination_id: int) -> Destination:
    return require(session, Destination, destination_id)


def list_destinations(session: Session) -> list[Destination]:
    stmt = select(Destination).order_by(Destination.destination_id)
    return list(session.execute(stmt).scalars().all())


def create_place(
    session: Session,
    payload: PlaceInput | Mapping[str, Any],
    *,
    place_id: int | None = None,
) -> Place:
    """
    Create a place in an existing destination.

    The place starts without an average rating; only the ledger sets it.

    Raises:
        ValidationError: If the payload is invalid (e.g. unknown category)
        NotFoundError: If the destination does not exist
        ConflictError: If ``place_id`` is already taken
    """
    place_in = validate_payload(PlaceInput, payload)
    require(session, Destination, place_in.destination_id)
    if place_id is not None and exists(session, Place, place_id):
        raise ConflictError(f"Place {place_id} already exists")

    data = place_in.model_dump()
    data["category"] = place_in.category.value
    place = Place(place_id=place_id, average_rating=None, **data)
    session.add(place)
    session.flush()
    logger.info(
        "place_created",
        extra={"place_id": place.place_id, "destination_id": place.destination_id},
    )
    return place


def get_place(session: Session, place_id: int) -> Place:
    return require(session, Place, place_id)


def list_places(session: Session, destination_id: int | None = None) -> list[Place]:
    """List places ordered by id, optionally restricted to one destination."""
    stmt = select(Place).order_by(Place.place_id)
    if destination_id is not None:
        require(session, Destination, destination_id)
        stmt = stmt.where(Place.destination_id == destination_id)
    return list(session.execute(stmt).scalars().all())
