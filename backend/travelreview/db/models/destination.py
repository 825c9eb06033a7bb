"""Destination ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.travelreview.db.base import Base

if TYPE_CHECKING:
    from .place import Place


class Destination(Base):
    """Destination table - a city or region places belong to."""

    __tablename__ = "destination"

    destination_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(50), nullable=False)
    region: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships (no cascade: places are not deleted with their destination)
    places: Mapped[list["Place"]] = relationship("Place", back_populates="destination")

    def __repr__(self) -> str:
        return f"<Destination(destination_id={self.destination_id}, name={self.name!r}, country={self.country!r})>"
