"""User account ORM model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .photo import Photo
    from .review import Review
    from .trip import Trip


class UserAccount(Base):
    """User account table - identity plus mutable profile."""

    __tablename__ = "user_account"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str | None] = mapped_column(String(50), nullable=True)
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )

    # Relationships
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="user")
    photos: Mapped[list["Photo"]] = relationship("Photo", back_populates="user")
    trips: Mapped[list["Trip"]] = relationship("Trip", back_populates="user")

    def __repr__(self) -> str:
        return f"<UserAccount(user_id={self.user_id}, username={self.username!r})>"
