"""Common data types and enums used across the application."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from backend.travelreview.errors import ValidationError

RATING_MIN = 1
RATING_MAX = 5

ModelT = TypeVar("ModelT", bound=BaseModel)


class PlaceCategory(str, Enum):
    """Kind of point of interest."""

    hotel = "hotel"
    restaurant = "restaurant"
    attraction = "attraction"


class HistoryOperation(str, Enum):
    """Review ledger operation recorded in the audit trail."""

    INS = "INS"
    DEL = "DEL"


def validate_payload(model: type[ModelT], payload: ModelT | Mapping[str, Any]) -> ModelT:
    """
    Parse a payload into a pydantic model, raising the core ValidationError.

    Args:
        model: Pydantic model class to validate against
        payload: Already-built model instance or a plain mapping

    Returns:
        Validated model instance

    Raises:
        ValidationError: If the payload does not satisfy the model's constraints
    """
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False)
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in errors)
        raise ValidationError(
            f"invalid {model.__name__}: {fields}", errors=errors
        ) from exc
