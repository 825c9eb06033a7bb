"""Maintenance of the cached Place.average_rating aggregate.

Invalidation rule: every review insert, update or delete recomputes the
aggregate of each place whose review set it touched, from the full current
review set. The stored value is therefore a pure function of the live
reviews and recomputing is idempotent.
"""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from backend.travelreview.db.models.place import Place
from backend.travelreview.db.models.review import Review
from backend.travelreview.errors import NotFoundError

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def mean_rating(ratings: Iterable[int]) -> Decimal | None:
    """
    Arithmetic mean of ratings, rounded half-up to 2 decimal places.

    Args:
        ratings: Individual review ratings

    Returns:
        Rounded mean, or None when there are no ratings
    """
    values = list(ratings)
    if not values:
        return None
    return round_rating(sum(values), len(values))


def round_rating(total: int, count: int) -> Decimal | None:
    """Round ``total / count`` half-up to 2 decimals, None when count is 0."""
    if not count:
        return None
    return (Decimal(total) / Decimal(count)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def lock_place(place_id: int) -> Select[tuple[Place]]:
    """Statement selecting one place row under a FOR NO KEY UPDATE lock."""
    return select(Place).where(Place.place_id == place_id).with_for_update(key_share=True)


def recalculate(session: Session, place_id: int) -> Decimal | None:
    """
    Recompute and store the average rating of one place.

    The place row is locked FOR NO KEY UPDATE so concurrent recomputes of the
    same place serialize; the last one to commit wins. The weaker lock does not
    conflict with the KEY SHARE lock the review foreign key already holds on
    the place, so two writers that both inserted a review queue instead of
    deadlocking.

    Args:
        session: SQLAlchemy session of the current unit of work
        place_id: Place whose aggregate should be refreshed

    Returns:
        The stored average, or None when the place has no reviews

    Raises:
        NotFoundError: If the place does not exist
    """
    place = session.execute(lock_place(place_id)).scalar_one_or_none()
    if place is None:
        raise NotFoundError("Place", place_id)

    ratings = session.execute(
        select(Review.rating).where(Review.place_id == place_id)
    ).scalars().all()

    place.average_rating = mean_rating(ratings)
    logger.debug(
        "place_rating_recalculated",
        extra={
            "place_id": place_id,
            "review_count": len(ratings),
            "average_rating": str(place.average_rating),
        },
    )
    return place.average_rating


def recalculate_many(session: Session, place_ids: Iterable[int]) -> dict[int, Decimal | None]:
    """
    Recompute several places, each once, in ascending id order.

    The fixed order keeps row locks acquired consistently when an update
    moves a review between two places.
    """
    return {place_id: recalculate(session, place_id) for place_id in sorted(set(place_ids))}


def recalculate_all(session: Session) -> int:
    """
    Recompute the aggregate of every place.

    Used to backfill after bulk loads that bypassed the ledger.

    Returns:
        Number of places recomputed
    """
    place_ids = session.execute(select(Place.place_id)).scalars().all()
    recalculate_many(session, place_ids)
    logger.info("place_ratings_backfilled", extra={"places": len(place_ids)})
    return len(place_ids)
