"""Photo store."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import exists, require
from backend.travelreview.db.models.photo import Photo
from backend.travelreview.db.models.place import Place
from backend.travelreview.db.models.user_account import UserAccount
from backend.travelreview.errors import ConflictError
from backend.travelreview.models.common import validate_payload
from backend.travelreview.models.entities import PhotoInput


def add_photo(
    session: Session,
    payload: PhotoInput | Mapping[str, Any],
    *,
    photo_id: int | None = None,
) -> Photo:
    """
    Attach a photo to a (user, place) pair.

    Raises:
        ValidationError: If the payload is invalid
        NotFoundError: If the user or place does not exist
        ConflictError: If ``photo_id`` is already taken
    """
    photo_in = validate_payload(PhotoInput, payload)
    require(session, UserAccount, photo_in.user_id)
    require(session, Place, photo_in.place_id)
    if photo_id is not None and exists(session, Photo, photo_id):
        raise ConflictError(f"Photo {photo_id} already exists")

    photo = Photo(photo_id=photo_id, **photo_in.model_dump())
    session.add(photo)
    session.flush()
    return photo


def list_photos_for_place(session: Session, place_id: int) -> list[Photo]:
    """Photos of a place, oldest upload first."""
    require(session, Place, place_id)
    stmt = (
        select(Photo)
        .where(Photo.place_id == place_id)
        .order_by(Photo.uploaded_at, Photo.photo_id)
    )
    return list(session.execute(stmt).scalars().all())
