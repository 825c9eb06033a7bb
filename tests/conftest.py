"""Pytest configuration and fixtures for testing."""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from backend.travelreview.db import models  # noqa: F401  (register tables)
from backend.travelreview.db.base import Base, enable_sqlite_foreign_keys


@pytest.fixture(scope="function")
def test_db_engine():
    """Create a test database engine with in-memory SQLite."""
    # Use SQLite in-memory for fast tests
    # Note: SELECT ... FOR UPDATE is a no-op on SQLite
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    # Create all tables
    Base.metadata.create_all(engine)

    yield engine

    # Cleanup
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_db_engine) -> sessionmaker[Session]:
    """Session factory bound to the test engine."""
    return sessionmaker(bind=test_db_engine, expire_on_commit=False)


@pytest.fixture(scope="function")
def test_session(session_factory):
    """Create a test database session."""
    session = session_factory()

    yield session

    session.close()


@pytest.fixture(scope="function")
def test_user(test_session: Session):
    """Create a test user."""
    from backend.travelreview.db.models import UserAccount

    user = UserAccount(
        user_id=1,
        username="maria",
        email="maria@mail.com",
        country="Bulgaria",
        join_date=date(2023, 1, 10),
        is_verified=True,
    )
    test_session.add(user)
    test_session.commit()

    return user


@pytest.fixture(scope="function")
def test_destination(test_session: Session):
    """Create a test destination."""
    from backend.travelreview.db.models import Destination

    destination = Destination(
        destination_id=1,
        name="Paris",
        country="France",
        region="Europe",
        description="Capital city, museums and landmarks",
    )
    test_session.add(destination)
    test_session.commit()

    return destination


@pytest.fixture(scope="function")
def test_place(test_session: Session, test_destination):
    """Create a test place without reviews."""
    from backend.travelreview.db.models import Place

    place = Place(
        place_id=1,
        name="Paris City Hotel",
        category="hotel",
        destination_id=test_destination.destination_id,
        price_level=4,
    )
    test_session.add(place)
    test_session.commit()

    return place


@pytest.fixture(scope="function")
def second_place(test_session: Session, test_destination):
    """Create a second place in the same destination."""
    from backend.travelreview.db.models import Place

    place = Place(
        place_id=2,
        name="Paris City Museum",
        category="attraction",
        destination_id=test_destination.destination_id,
        price_level=5,
    )
    test_session.add(place)
    test_session.commit()

    return place

