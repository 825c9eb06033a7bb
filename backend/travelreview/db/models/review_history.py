"""Review history ORM model."""

from datetime import date, datetime, timezone

from sqlalchemy import CheckConstraint, Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.travelreview.db.base import Base


class ReviewHistory(Base):
    """Review history table - append-only audit trail of review inserts and deletes.

    Review, user and place ids are plain integers rather than foreign keys:
    history rows outlive the reviews they describe.
    """

    __tablename__ = "review_history"

    change_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    review_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    place_id: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(120), nullable=True)
    review_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    review_date: Mapped[date] = mapped_column(Date, nullable=False)
    changed_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    operation: Mapped[str] = mapped_column(String(3), nullable=False)  # INS | DEL

    # Constraints
    __table_args__ = (
        CheckConstraint("operation IN ('INS', 'DEL')", name="ck_review_history_operation"),
        Index("idx_review_history_review", "review_id", "change_id"),
        Index("idx_review_history_place", "place_id", "change_id"),
    )

    def __repr__(self) -> str:
        return f"<ReviewHistory(change_id={self.change_id}, review_id={self.review_id}, operation={self.operation!r}, changed_on={self.changed_on})>"
