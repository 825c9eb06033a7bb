"""Review ORM model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .place import Place
    from .user_account import UserAccount


class Review(Base):
    """Review table - the ledger of ratings, source of truth for place aggregates."""

    __tablename__ = "review"

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user_account.user_id"), nullable=False
    )
    place_id: Mapped[int] = mapped_column(ForeignKey("place.place_id"), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(120), nullable=True)
    review_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    review_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    user: Mapped["UserAccount"] = relationship("UserAccount", back_populates="reviews")
    place: Mapped["Place"] = relationship("Place", back_populates="reviews")

    # Constraints
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_review_rating"),
        Index("idx_review_place", "place_id"),
    )

    def __repr__(self) -> str:
        return f"<Review(review_id={self.review_id}, place_id={self.place_id}, rating={self.rating})>"
