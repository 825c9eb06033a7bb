"""Review ledger, audit trail and rating aggregate maintenance."""

from .aggregate import mean_rating, recalculate, recalculate_all, recalculate_many
from .audit import history_for_place, history_for_review, record
from .ledger import (
    delete_review,
    get_review,
    list_reviews_for_place,
    submit_review,
    update_review,
)

__all__ = [
    "submit_review",
    "update_review",
    "delete_review",
    "get_review",
    "list_reviews_for_place",
    "record",
    "history_for_review",
    "history_for_place",
    "mean_rating",
    "recalculate",
    "recalculate_many",
    "recalculate_all",
]
