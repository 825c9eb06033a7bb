"""Review ledger: the only write path for Review rows.

Each mutation runs inside the caller's unit of work and, before returning,
has (a) written the review row, (b) appended the audit row(s) and
(c) recomputed the aggregate of every place it touched. Nothing is committed
here; the surrounding ``get_session`` block commits all three or none.

Updates are modelled as delete+insert: the old image is logged as DEL and
the new image as INS under the same review id.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import exists, require
from backend.travelreview.db.models.place import Place
from backend.travelreview.db.models.review import Review
from backend.travelreview.db.models.user_account import UserAccount
from backend.travelreview.errors import ConflictError, NotFoundError
from backend.travelreview.models.common import HistoryOperation, validate_payload
from backend.travelreview.models.review import ReviewInput, ReviewUpdate
from backend.travelreview.reviews import aggregate, audit

logger = logging.getLogger(__name__)

_IMAGE_FIELDS = ("place_id", "rating", "title", "review_text", "review_date")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def submit_review(
    session: Session,
    payload: ReviewInput | Mapping[str, Any],
    *,
    review_id: int | None = None,
    now: datetime | None = None,
) -> int:
    """
    Insert a review, audit it and refresh its place's average rating.

    Args:
        session: SQLAlchemy session of the current unit of work
        payload: Review fields (rating must be within 1..5)
        review_id: Explicit id to use instead of the generated one
        now: Audit timestamp (default: now, UTC)

    Returns:
        The review id

    Raises:
        ValidationError: If the payload is invalid; nothing is written
        NotFoundError: If the user or place does not exist
        ConflictError: If ``review_id`` is already taken
    """
    review_in = validate_payload(ReviewInput, payload)
    require(session, UserAccount, review_in.user_id)
    require(session, Place, review_in.place_id)
    if review_id is not None and exists(session, Review, review_id):
        raise ConflictError(f"Review {review_id} already exists")

    review = Review(review_id=review_id, **review_in.model_dump())
    session.add(review)
    session.flush()

    audit.record(session, review, HistoryOperation.INS, now or _utcnow())
    aggregate.recalculate(session, review.place_id)
    session.flush()

    logger.info(
        "review_submitted",
        extra={
            "review_id": review.review_id,
            "place_id": review.place_id,
            "operation": HistoryOperation.INS.value,
        },
    )
    return review.review_id


def delete_review(
    session: Session, review_id: int, *, now: datetime | None = None
) -> None:
    """
    Delete a review, audit its last image and refresh its place's average rating.

    Raises:
        ConflictError: If the review does not exist
    """
    review = session.get(Review, review_id)
    if review is None:
        raise ConflictError(f"Review {review_id} does not exist")

    place_id = review.place_id
    audit.record(session, review, HistoryOperation.DEL, now or _utcnow())
    session.delete(review)
    session.flush()

    aggregate.recalculate(session, place_id)
    session.flush()

    logger.info(
        "review_deleted",
        extra={
            "review_id": review_id,
            "place_id": place_id,
            "operation": HistoryOperation.DEL.value,
        },
    )


def update_review(
    session: Session,
    review_id: int,
    changes: ReviewUpdate | Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> Review:
    """
    Change a review as a delete of the old image plus an insert of the new one.

    Only fields present in ``changes`` are applied. When the review moves to
    another place both the old and the new place are recomputed. A change that
    leaves the review identical writes nothing.

    Raises:
        ValidationError: If the changes or the merged review are invalid
        NotFoundError: If the new place does not exist
        ConflictError: If the review does not exist
    """
    update = validate_payload(ReviewUpdate, changes)
    review = session.get(Review, review_id)
    if review is None:
        raise ConflictError(f"Review {review_id} does not exist")

    current = {field: getattr(review, field) for field in _IMAGE_FIELDS}
    merged = {**current, **update.model_dump(exclude_unset=True)}
    new_image = validate_payload(ReviewInput, {"user_id": review.user_id, **merged})
    target = new_image.model_dump(include=set(_IMAGE_FIELDS))
    if target == current:
        return review

    if target["place_id"] != review.place_id and not exists(
        session, Place, target["place_id"]
    ):
        raise NotFoundError("Place", target["place_id"])

    timestamp = now or _utcnow()
    old_place_id = review.place_id
    audit.record(session, review, HistoryOperation.DEL, timestamp)
    for field, value in target.items():
        setattr(review, field, value)
    session.flush()

    audit.record(session, review, HistoryOperation.INS, timestamp)
    aggregate.recalculate_many(session, {old_place_id, review.place_id})
    session.flush()

    logger.info(
        "review_updated",
        extra={
            "review_id": review_id,
            "place_id": review.place_id,
            "previous_place_id": old_place_id,
            "operation": "DEL+INS",
        },
    )
    return review


def get_review(session: Session, review_id: int) -> Review:
    """Get a review by id or raise NotFoundError."""
    return require(session, Review, review_id)


def list_reviews_for_place(session: Session, place_id: int) -> list[Review]:
    """Return the live reviews of a place ordered by id."""
    require(session, Place, place_id)
    stmt = select(Review).where(Review.place_id == place_id).order_by(Review.review_id)
    return list(session.execute(stmt).scalars().all())
