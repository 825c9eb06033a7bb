"""Trip and trip place ORM models."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .place import Place
    from .user_account import UserAccount


class Trip(Base):
    """Trip table - a user's named itinerary."""

    __tablename__ = "trip"

    trip_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user_account.user_id"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    user: Mapped["UserAccount"] = relationship("UserAccount", back_populates="trips")
    stops: Mapped[list["TripPlace"]] = relationship(
        "TripPlace", back_populates="trip", order_by="TripPlace.day_number"
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_trip_dates"),
    )

    def __repr__(self) -> str:
        return f"<Trip(trip_id={self.trip_id}, name={self.name!r}, start_date={self.start_date}, end_date={self.end_date})>"


class TripPlace(Base):
    """Trip place table - a place scheduled on a day of a trip."""

    __tablename__ = "trip_place"

    trip_id: Mapped[int] = mapped_column(ForeignKey("trip.trip_id"), primary_key=True)
    place_id: Mapped[int] = mapped_column(ForeignKey("place.place_id"), primary_key=True)
    day_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    trip: Mapped["Trip"] = relationship("Trip", back_populates="stops")
    place: Mapped["Place"] = relationship("Place")

    def __repr__(self) -> str:
        return f"<TripPlace(trip_id={self.trip_id}, place_id={self.place_id}, day_number={self.day_number})>"
