"""Photo ORM model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .place import Place
    from .user_account import UserAccount


class Photo(Base):
    """Photo table - media a user attached to a place."""

    __tablename__ = "photo"

    photo_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user_account.user_id"), nullable=False
    )
    place_id: Mapped[int] = mapped_column(ForeignKey("place.place_id"), nullable=False)
    uploaded_at: Mapped[date] = mapped_column(Date, nullable=False)
    url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    caption: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    user: Mapped["UserAccount"] = relationship("UserAccount", back_populates="photos")
    place: Mapped["Place"] = relationship("Place", back_populates="photos")

    __table_args__ = (Index("idx_photo_place", "place_id"),)

    def __repr__(self) -> str:
        return f"<Photo(photo_id={self.photo_id}, user_id={self.user_id}, place_id={self.place_id})>"
