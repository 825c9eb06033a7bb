"""Tests for the place rating aggregate."""

from contextlib import contextmanager
from datetime import date
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from sqlalchemy import create_engine
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session, sessionmaker

from backend.travelreview.db.base import Base
from backend.travelreview.db.models import Destination, Place, Review, UserAccount
from backend.travelreview.errors import NotFoundError
from backend.travelreview.reviews.aggregate import (
    lock_place,
    mean_rating,
    recalculate,
    recalculate_all,
    recalculate_many,
    round_rating,
)
from backend.travelreview.reviews.ledger import delete_review, submit_review
from tests.unit.review_test_helpers import review_payload

ratings_strategy = st.lists(st.integers(min_value=1, max_value=5), max_size=25)


@contextmanager
def scratch_session():
    """Fresh in-memory database with one user and one place, per hypothesis example."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        session.add_all(
            [
                UserAccount(user_id=1, username="anna", email="anna@mail.com", join_date=date(2023, 3, 1)),
                Destination(destination_id=1, name="Sofia", country="Bulgaria", region="Europe"),
                Place(place_id=1, name="Happy Sofia Restaurant", category="restaurant", destination_id=1),
            ]
        )
        session.flush()
        yield session
    finally:
        session.close()
        engine.dispose()


class TestMeanRating:
    """Tests for the rounding rule."""

    def test_empty_is_unknown(self):
        assert mean_rating([]) is None

    def test_exact_mean(self):
        assert mean_rating([5, 4, 3]) == Decimal("4.00")

    def test_rounds_to_two_places(self):
        assert mean_rating([5, 4, 5]) == Decimal("4.67")
        assert mean_rating([1, 2, 2]) == Decimal("1.67")

    def test_rounds_half_up(self):
        # 15 / 8 = 1.875
        assert mean_rating([1, 2, 2, 2, 2, 2, 2, 2]) == Decimal("1.88")

    def test_round_rating_zero_count(self):
        assert round_rating(0, 0) is None

    @given(ratings_strategy.filter(bool))
    def test_mean_is_within_rating_bounds(self, ratings):
        """The rounded mean never leaves [min, max] of its inputs."""
        mean = mean_rating(ratings)
        assert Decimal(min(ratings)) <= mean <= Decimal(max(ratings))
        assert mean.as_tuple().exponent == -2


class TestRecalculate:
    """Tests for recalculate and its batch variants."""

    def test_place_lock_does_not_block_foreign_key_checks(self):
        """The place lock must coexist with the KEY SHARE lock taken by review inserts."""
        sql = str(lock_place(1).compile(dialect=postgresql.dialect()))

        assert sql.endswith("FOR NO KEY UPDATE")

    def test_unknown_place_raises_not_found(self, test_session: Session):
        with pytest.raises(NotFoundError):
            recalculate(test_session, 404)

    def test_no_reviews_gives_none(self, test_session: Session, test_place):
        test_place.average_rating = Decimal("3.00")

        assert recalculate(test_session, test_place.place_id) is None
        assert test_place.average_rating is None

    def test_recalculate_is_idempotent(self, test_session: Session, test_user, test_place):
        """Two recomputes with no change in between give the same value."""
        for rating in (5, 4, 5):
            submit_review(
                test_session, review_payload(test_user.user_id, test_place.place_id, rating)
            )

        first = recalculate(test_session, test_place.place_id)
        second = recalculate(test_session, test_place.place_id)

        assert first == second == Decimal("4.67")

    def test_recalculate_repairs_stale_value(
        self, test_session: Session, test_user, test_place
    ):
        """A cache overwritten out of band is restored from the review set."""
        submit_review(test_session, review_payload(test_user.user_id, test_place.place_id, 2))
        test_place.average_rating = Decimal("5.00")

        assert recalculate(test_session, test_place.place_id) == Decimal("2.00")

    def test_recalculate_many_deduplicates(
        self, test_session: Session, test_user, test_place, second_place
    ):
        submit_review(test_session, review_payload(test_user.user_id, second_place.place_id, 3))

        result = recalculate_many(
            test_session, [second_place.place_id, test_place.place_id, second_place.place_id]
        )

        assert list(result) == [test_place.place_id, second_place.place_id]
        assert result[second_place.place_id] == Decimal("3.00")
        assert result[test_place.place_id] is None

    def test_recalculate_all_backfills_bulk_loaded_reviews(
        self, test_session: Session, test_user, test_place, second_place
    ):
        """Reviews inserted around the ledger are picked up by the backfill."""
        test_session.add_all(
            [
                Review(user_id=test_user.user_id, place_id=test_place.place_id, rating=5, review_date=date(2024, 1, 5)),
                Review(user_id=test_user.user_id, place_id=test_place.place_id, rating=4, review_date=date(2024, 2, 1)),
            ]
        )
        test_session.flush()
        assert test_place.average_rating is None

        assert recalculate_all(test_session) == 2
        assert test_place.average_rating == Decimal("4.50")
        assert second_place.average_rating is None


class TestAggregateConsistency:
    """Property: after every ledger mutation the cache equals the live mean."""

    @settings(max_examples=25, deadline=None)
    @given(ratings=ratings_strategy, data=st.data())
    def test_average_tracks_live_reviews(self, ratings, data):
        with scratch_session() as session:
            live: dict[int, int] = {}
            for rating in ratings:
                review_id = submit_review(session, review_payload(1, 1, rating))
                live[review_id] = rating
                assert session.get(Place, 1).average_rating == mean_rating(live.values())

            to_delete = data.draw(st.lists(st.sampled_from(sorted(live)), unique=True) if live else st.just([]))
            for review_id in to_delete:
                delete_review(session, review_id)
                del live[review_id]
                assert session.get(Place, 1).average_rating == mean_rating(live.values())
