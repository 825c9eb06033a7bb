"""Payload models for the entity store."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .common import PlaceCategory


class UserAccountInput(BaseModel):
    """New user account."""

    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=100)
    country: str | None = Field(default=None, max_length=50)
    join_date: date = Field(default_factory=date.today)
    display_name: str | None = Field(default=None, max_length=100)
    password_hash: str | None = Field(default=None, max_length=255)
    is_verified: bool = False


class ProfileUpdate(BaseModel):
    """Mutable profile fields of a user account. Identity fields are not accepted."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(default=None, min_length=3, max_length=100)
    country: str | None = Field(default=None, max_length=50)
    display_name: str | None = Field(default=None, max_length=100)
    password_hash: str | None = Field(default=None, max_length=255)
    is_verified: bool | None = None

    @field_validator("email", "is_verified")
    @classmethod
    def _not_cleared(cls, v: object, info: ValidationInfo) -> object:
        """Email and verification status may change but never become null."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be cleared")
        return v


class DestinationInput(BaseModel):
    """New destination."""

    name: str = Field(min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=50)
    region: str = Field(min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=255)


class PlaceInput(BaseModel):
    """New place. The average rating is derived and never accepted here."""

    name: str = Field(min_length=1, max_length=100)
    category: PlaceCategory
    destination_id: int
    price_level: int | None = Field(default=None, ge=1, le=5)
    address: str | None = Field(default=None, max_length=150)
    phone: str | None = Field(default=None, max_length=30)
    website: str | None = Field(default=None, max_length=200)


class PhotoInput(BaseModel):
    """Photo attached by a user to a place."""

    user_id: int
    place_id: int
    uploaded_at: date = Field(default_factory=date.today)
    url: str | None = Field(default=None, max_length=255)
    caption: str | None = Field(default=None, max_length=255)


class TripInput(BaseModel):
    """New trip with an inclusive date range."""

    user_id: int
    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date

    @field_validator("end_date")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end date is not before start date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("End date must be on or after start date")
        return v


class TripPlaceInput(BaseModel):
    """A place scheduled within a trip."""

    place_id: int
    day_number: int | None = Field(default=None, ge=1)
    notes: str | None = Field(default=None, max_length=255)
