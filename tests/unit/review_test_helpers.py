"""Helper functions for review ledger tests."""

from datetime import date
from typing import Any


def review_payload(user_id: int, place_id: int, rating: int, **extra: Any) -> dict[str, Any]:
    """Build a review payload for the ledger."""
    payload: dict[str, Any] = {
        "user_id": user_id,
        "place_id": place_id,
        "rating": rating,
        "title": f"Rated {rating}",
        "review_date": date(2024, 1, 5),
    }
    payload.update(extra)
    return payload
