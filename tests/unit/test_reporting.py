"""Tests for the read-only review statistics."""

from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from backend.travelreview.db.models import Destination, Place
from backend.travelreview.errors import NotFoundError
from backend.travelreview.models import PlaceCategory
from backend.travelreview.reporting import avg_rating_by_destination, place_stats
from backend.travelreview.reviews.ledger import delete_review, submit_review
from tests.unit.review_test_helpers import review_payload


@pytest.fixture
def rome(test_session: Session):
    """A second destination with one place."""
    destination = Destination(destination_id=2, name="Rome", country="Italy", region="Europe")
    place = Place(
        place_id=3,
        name="Colosseum",
        category="attraction",
        destination_id=2,
        price_level=5,
    )
    test_session.add_all([destination, place])
    test_session.commit()
    return destination


class TestPlaceStats:
    """Tests for place_stats."""

    def test_place_without_reviews_is_reported(self, test_session: Session, test_place):
        """A zero-review place appears with count 0 and unknown average."""
        rows = place_stats(test_session)

        assert len(rows) == 1
        row = rows[0]
        assert row.place_id == test_place.place_id
        assert row.name == "Paris City Hotel"
        assert row.category is PlaceCategory.hotel
        assert row.destination_name == "Paris"
        assert row.review_count == 0
        assert row.avg_rating is None

    def test_counts_and_averages_per_place(
        self, test_session: Session, test_user, test_place, second_place, rome
    ):
        for place_id, rating in [(1, 5), (1, 4), (1, 5), (2, 3), (3, 4), (3, 3)]:
            submit_review(test_session, review_payload(test_user.user_id, place_id, rating))

        rows = {row.place_id: row for row in place_stats(test_session)}

        assert [pid for pid in rows] == [1, 2, 3]
        assert (rows[1].review_count, rows[1].avg_rating) == (3, Decimal("4.67"))
        assert (rows[2].review_count, rows[2].avg_rating) == (1, Decimal("3.00"))
        assert (rows[3].review_count, rows[3].avg_rating) == (2, Decimal("3.50"))
        assert rows[3].destination_name == "Rome"

    def test_stats_agree_with_cached_average(
        self, test_session: Session, test_user, test_place
    ):
        """The report and Place.average_rating agree after deletes."""
        ids = [
            submit_review(test_session, review_payload(test_user.user_id, 1, rating))
            for rating in (1, 2, 4)
        ]
        delete_review(test_session, ids[0])

        (row,) = place_stats(test_session)
        assert row.avg_rating == test_place.average_rating == Decimal("3.00")


class TestAvgRatingByDestination:
    """Tests for avg_rating_by_destination."""

    def test_unknown_destination_raises(self, test_session: Session):
        with pytest.raises(NotFoundError):
            avg_rating_by_destination(test_session, 99)

    def test_destination_without_reviews_is_unknown(
        self, test_session: Session, test_place
    ):
        assert avg_rating_by_destination(test_session, test_place.destination_id) is None

    def test_average_is_over_review_rows_not_places(
        self, test_session: Session, test_user, test_place, second_place
    ):
        """Place 1 has 5,5,5 and place 2 has 1: row mean 4.00, not place mean 3.00."""
        for rating in (5, 5, 5):
            submit_review(test_session, review_payload(test_user.user_id, 1, rating))
        submit_review(test_session, review_payload(test_user.user_id, 2, 1))

        assert avg_rating_by_destination(test_session, 1) == Decimal("4.00")

    def test_other_destinations_are_excluded(
        self, test_session: Session, test_user, test_place, rome
    ):
        submit_review(test_session, review_payload(test_user.user_id, 1, 2))
        submit_review(test_session, review_payload(test_user.user_id, 3, 5))

        assert avg_rating_by_destination(test_session, 1) == Decimal("2.00")
        assert avg_rating_by_destination(test_session, 2) == Decimal("5.00")
