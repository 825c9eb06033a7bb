"""Append-only audit trail of review ledger mutations.

Rows are written only by the ledger, inside the same transaction as the
ledger change they describe. Nothing in this module updates or deletes a
history row.
"""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.models.review import Review
from backend.travelreview.db.models.review_history import ReviewHistory
from backend.travelreview.models.common import HistoryOperation


def record(
    session: Session,
    snapshot: Review,
    operation: HistoryOperation,
    timestamp: datetime | None = None,
) -> ReviewHistory:
    """
    Append one history row holding the full image of a review.

    Args:
        session: SQLAlchemy session of the ledger's unit of work
        snapshot: Review row image (post image for INS, pre image for DEL)
        operation: INS or DEL
        timestamp: Change time (default: now, UTC)

    Returns:
        The pending ReviewHistory row

    Note:
        Storage failures surface when the unit of work flushes or commits and
        abort the whole mutation.
    """
    entry = ReviewHistory(
        review_id=snapshot.review_id,
        user_id=snapshot.user_id,
        place_id=snapshot.place_id,
        rating=snapshot.rating,
        title=snapshot.title,
        review_text=snapshot.review_text,
        review_date=snapshot.review_date,
        changed_on=timestamp or datetime.now(timezone.utc),
        operation=HistoryOperation(operation).value,
    )
    session.add(entry)
    return entry


def history_for_review(session: Session, review_id: int) -> list[ReviewHistory]:
    """Return every history row of a review, oldest first."""
    stmt = (
        select(ReviewHistory)
        .where(ReviewHistory.review_id == review_id)
        .order_by(ReviewHistory.change_id)
    )
    return list(session.execute(stmt).scalars().all())


def history_for_place(session: Session, place_id: int) -> list[ReviewHistory]:
    """Return every history row recorded against a place, oldest first."""
    stmt = (
        select(ReviewHistory)
        .where(ReviewHistory.place_id == place_id)
        .order_by(ReviewHistory.change_id)
    )
    return list(session.execute(stmt).scalars().all())
