"""Review payload models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .common import RATING_MAX, RATING_MIN


class ReviewInput(BaseModel):
    """A new review submitted to the ledger."""

    user_id: int = Field(description="Author of the review")
    place_id: int = Field(description="Reviewed place")
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX, description="Rating from 1 to 5")
    title: str | None = Field(default=None, max_length=120)
    review_text: str | None = Field(default=None, max_length=255)
    review_date: date = Field(
        default_factory=date.today, description="Date the review was written"
    )


class ReviewUpdate(BaseModel):
    """Partial change to an existing review. Unset fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    place_id: int | None = None
    rating: int | None = Field(default=None, ge=RATING_MIN, le=RATING_MAX)
    title: str | None = Field(default=None, max_length=120)
    review_text: str | None = Field(default=None, max_length=255)
    review_date: date | None = None
