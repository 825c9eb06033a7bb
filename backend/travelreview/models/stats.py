"""Report row models."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from .common import PlaceCategory


class PlaceStats(BaseModel):
    """Per-place review statistics."""

    place_id: int
    name: str
    category: PlaceCategory
    destination_name: str
    review_count: int = Field(ge=0)
    avg_rating: Decimal | None = Field(
        default=None, description="Mean rating to 2 decimals, None without reviews"
    )
