"""Place ORM model."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .destination import Destination
    from .photo import Photo
    from .review import Review


class Place(Base):
    """Place table - hotel, restaurant or attraction within a destination."""

    __tablename__ = "place"

    place_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(
        String(50), nullable=False
    )  # hotel | restaurant | attraction
    destination_id: Mapped[int] = mapped_column(
        ForeignKey("destination.destination_id"), nullable=False
    )
    price_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    address: Mapped[str | None] = mapped_column(String(150), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    website: Mapped[str | None] = mapped_column(String(200), nullable=True)
    # Cached mean of live review ratings, rewritten on every review mutation.
    # NULL means no reviews.
    average_rating: Mapped[Decimal | None] = mapped_column(
        Numeric(4, 2), nullable=True
    )

    # Relationships
    destination: Mapped["Destination"] = relationship(
        "Destination", back_populates="places"
    )
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="place")
    photos: Mapped[list["Photo"]] = relationship("Photo", back_populates="place")

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "category IN ('hotel', 'restaurant', 'attraction')",
            name="ck_place_category",
        ),
        Index("idx_place_destination", "destination_id"),
    )

    def __repr__(self) -> str:
        return f"<Place(place_id={self.place_id}, name={self.name!r}, category={self.category!r}, average_rating={self.average_rating})>"
