"""Read-only review statistics.

Both reports aggregate the Review table directly instead of reading the
cached Place.average_rating, so they double as a consistency check on it.
"""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import require
from backend.travelreview.db.models.destination import Destination
from backend.travelreview.db.models.place import Place
from backend.travelreview.db.models.review import Review
from backend.travelreview.models.stats import PlaceStats
from backend.travelreview.reviews.aggregate import round_rating


def place_stats(session: Session) -> list[PlaceStats]:
    """
    Review count and average rating of every place.

    Places are outer-joined to reviews, so a place without reviews is
    reported with ``review_count=0`` and ``avg_rating=None``.

    Args:
        session: SQLAlchemy session

    Returns:
        One PlaceStats per place, ordered by place id

    Example:
        for row in place_stats(session):
            print(row.name, row.destination_name, row.review_count, row.avg_rating)
    """
    stmt = (
        select(
            Place.place_id,
            Place.name,
            Place.category,
            Destination.name.label("destination_name"),
            func.count(Review.review_id).label("review_count"),
            func.sum(Review.rating).label("rating_total"),
        )
        .join(Destination, Place.destination_id == Destination.destination_id)
        .outerjoin(Review, Review.place_id == Place.place_id)
        .group_by(Place.place_id, Place.name, Place.category, Destination.name)
        .order_by(Place.place_id)
    )

    return [
        PlaceStats(
            place_id=row.place_id,
            name=row.name,
            category=row.category,
            destination_name=row.destination_name,
            review_count=row.review_count,
            avg_rating=round_rating(row.rating_total or 0, row.review_count),
        )
        for row in session.execute(stmt)
    ]


def avg_rating_by_destination(session: Session, destination_id: int) -> Decimal | None:
    """
    Mean rating over every review of every place in a destination.

    This is a straight average of review rows, not an average of place
    averages: a place with more reviews weighs more.

    Returns:
        Mean rounded to 2 decimals, or None if the destination has no reviews

    Raises:
        NotFoundError: If the destination does not exist
    """
    require(session, Destination, destination_id)

    stmt = (
        select(func.count(Review.review_id), func.sum(Review.rating))
        .join(Place, Review.place_id == Place.place_id)
        .where(Place.destination_id == destination_id)
    )
    count, total = session.execute(stmt).one()
    return round_rating(total or 0, count or 0)
