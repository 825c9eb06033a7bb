"""Tests for database-level constraints backing the core's validation."""

from datetime import date

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.travelreview.db.models import Place, Review, ReviewHistory, Trip, UserAccount


class TestSchemaConstraints:
    """Constraints that hold even for writes that bypass the store."""

    def test_rating_check_constraint(self, test_session: Session, test_user, test_place):
        test_session.add(
            Review(user_id=1, place_id=1, rating=6, review_date=date(2024, 1, 1))
        )
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_trip_date_check_constraint(self, test_session: Session, test_user):
        test_session.add(
            Trip(user_id=1, name="Backwards", start_date=date(2024, 1, 7), end_date=date(2024, 1, 1))
        )
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_history_operation_check_constraint(self, test_session: Session):
        test_session.add(
            ReviewHistory(
                review_id=1,
                user_id=1,
                place_id=1,
                rating=3,
                review_date=date(2024, 1, 1),
                operation="UPD",
            )
        )
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_place_category_check_constraint(self, test_session: Session, test_destination):
        test_session.add(Place(name="Spa", category="spa", destination_id=1))
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_review_foreign_keys_enforced(self, test_session: Session, test_user):
        test_session.add(Review(user_id=1, place_id=77, rating=3, review_date=date(2024, 1, 1)))
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_username_unique(self, test_session: Session, test_user):
        test_session.add(UserAccount(username="maria", email="x@mail.com", join_date=date(2024, 1, 1)))
        with pytest.raises(IntegrityError):
            test_session.flush()

    def test_history_has_no_foreign_keys(self, test_db_engine):
        """History rows must outlive the reviews, users and places they describe."""
        assert inspect(test_db_engine).get_foreign_keys("review_history") == []

    def test_trip_place_composite_key(self, test_db_engine):
        pk = inspect(test_db_engine).get_pk_constraint("trip_place")
        assert pk["constrained_columns"] == ["trip_id", "place_id"]
