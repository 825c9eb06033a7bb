"""Development database seeding script.

Creates demo data for local development. Idempotent - safe to run multiple times.
Reviews are written through the ledger, so place averages and the review
history are populated exactly as in production.

Usage:
    python scripts/dev_seed.py
"""

import logging
from datetime import date

from sqlalchemy.orm import Session, sessionmaker

from backend.travelreview.db.base import Base, get_session
from backend.travelreview.db.lookup import exists
from backend.travelreview.db.models import (
    Destination,
    Photo,
    Place,
    Review,
    Trip,
    TripPlace,
    UserAccount,
)
from backend.travelreview.db.session import get_engine, get_session_factory
from backend.travelreview.logging_config import configure_logging
from backend.travelreview.reviews.ledger import submit_review
from backend.travelreview.store import (
    add_photo,
    add_place_to_trip,
    create_destination,
    create_place,
    create_trip,
    create_user,
)

logger = logging.getLogger(__name__)

USERS = [
    (1, "maria", "maria@mail.com", "Bulgaria", date(2023, 1, 10), "Maria Petrova", "hash_maria", True),
    (2, "ivan", "ivan@mail.com", "Italy", date(2023, 2, 15), "Ivan Rossi", "hash_ivan", False),
    (3, "anna", "anna@mail.com", "Germany", date(2023, 3, 1), "Anna Keller", "hash_anna", True),
    (4, "george", "george@mail.com", "Spain", date(2023, 4, 10), "George Sanchez", "hash_george", False),
    (5, "elena", "elena@mail.com", "Greece", date(2023, 5, 12), "Elena Dimitrou", "hash_elena", True),
]

DESTINATIONS = [
    (1, "Paris", "France", "Europe", "Capital city, museums and landmarks"),
    (2, "Rome", "Italy", "Europe", "Historic city with ancient sites"),
    (3, "Sofia", "Bulgaria", "Europe", "Capital city, culture and food"),
    (4, "Barcelona", "Spain", "Europe", "Sea, architecture and nightlife"),
]

PLACES = [
    (1, "Paris City Hotel", "hotel", 1, 4, "10 Rue Example, Paris", "+33 111 222", "https://pariscityhotel.example"),
    (2, "Colosseum", "attraction", 2, 5, "Piazza del Colosseo, Rome", "+39 333 444", "https://colosseum.example"),
    (3, "Happy Sofia Restaurant", "restaurant", 3, 3, "1 Vitosha Blvd, Sofia", "+359 888 111", "https://happysofia.example"),
    (4, "Sofia Center Hotel", "hotel", 3, 4, "5 Center St, Sofia", "+359 888 222", "https://sofiacenterhotel.example"),
    (5, "Rome Pizza House", "restaurant", 2, 3, "12 Pizza St, Rome", "+39 555 666", "https://romepizza.example"),
    (6, "Paris City Museum", "attraction", 1, 5, "20 Museum Rd, Paris", "+33 777 888", "https://parismuseum.example"),
    (7, "Barcelona Beach", "attraction", 4, 5, "Barceloneta, Barcelona", "+34 999 000", "https://barcelonabeach.example"),
    (8, "Barcelona Center Hotel", "hotel", 4, 4, "2 Center Ave, Barcelona", "+34 111 333", "https://barcelonahotel.example"),
    (9, "Tapas Barcelona", "restaurant", 4, 3, "7 Tapas St, Barcelona", "+34 444 555", "https://tapasbarcelona.example"),
]

REVIEWS = [
    (1, 1, 1, 5, "Excellent stay", "Great hotel in the center", date(2024, 1, 5)),
    (2, 2, 2, 4, "Must visit", "Very interesting place", date(2024, 1, 6)),
    (3, 1, 3, 3, "Okay", "Good food but slow service", date(2024, 1, 7)),
    (4, 2, 1, 4, "Nice", "Clean and comfortable hotel", date(2024, 2, 1)),
    (5, 3, 1, 5, "Amazing", "Amazing experience", date(2024, 2, 3)),
    (6, 4, 2, 3, "Crowded", "Too many people", date(2024, 2, 5)),
    (7, 5, 3, 4, "Tasty", "Very tasty food", date(2024, 2, 6)),
    (8, 1, 4, 5, "Modern", "New and modern hotel", date(2024, 2, 10)),
    (9, 3, 5, 4, "Authentic", "Real Italian pizza", date(2024, 2, 11)),
    (10, 4, 6, 5, "Great museum", "Incredible museum", date(2024, 2, 12)),
    (11, 5, 7, 5, "Perfect", "Perfect beach for holiday", date(2024, 3, 1)),
    (12, 3, 8, 4, "Good", "Good service", date(2024, 3, 2)),
    (13, 2, 9, 5, "Best tapas", "Best tapas ever!", date(2024, 3, 3)),
]

PHOTOS = [
    (1, 1, 1, date(2024, 1, 1), "https://img.example/p1.jpg", "Hotel lobby"),
    (2, 1, 2, date(2024, 1, 2), "https://img.example/p2.jpg", "Colosseum view"),
    (3, 2, 3, date(2024, 1, 3), "https://img.example/p3.jpg", "Dinner plate"),
    (4, 2, 1, date(2024, 1, 4), "https://img.example/p4.jpg", "Room photo"),
    (5, 1, 2, date(2024, 1, 5), "https://img.example/p5.jpg", "Ancient walls"),
    (6, 2, 3, date(2024, 1, 6), "https://img.example/p6.jpg", "Restaurant inside"),
    (7, 3, 4, date(2024, 2, 1), "https://img.example/p7.jpg", "Hotel exterior"),
    (8, 4, 5, date(2024, 2, 2), "https://img.example/p8.jpg", "Pizza closeup"),
    (9, 5, 6, date(2024, 2, 3), "https://img.example/p9.jpg", "Museum entrance"),
    (10, 1, 5, date(2024, 2, 4), "https://img.example/p10.jpg", "Pizza menu"),
    (11, 2, 6, date(2024, 2, 5), "https://img.example/p11.jpg", "Museum hall"),
    (12, 5, 7, date(2024, 3, 1), "https://img.example/p12.jpg", "Beach sunset"),
    (13, 3, 8, date(2024, 3, 2), "https://img.example/p13.jpg", "Hotel breakfast"),
    (14, 2, 9, date(2024, 3, 3), "https://img.example/p14.jpg", "Tapas table"),
]

TRIPS = [
    (1, 1, "Trip to Paris", date(2024, 1, 1), date(2024, 1, 7)),
    (2, 2, "Trip to Rome", date(2024, 2, 1), date(2024, 2, 5)),
    (3, 3, "Trip to Sofia", date(2024, 3, 1), date(2024, 3, 5)),
    (4, 4, "Trip around Europe", date(2024, 4, 1), date(2024, 4, 10)),
    (5, 5, "Trip to Barcelona", date(2024, 5, 1), date(2024, 5, 5)),
]

TRIP_PLACES = [
    (1, 1, 1, "Check-in and rest"),
    (1, 6, 2, "Museum visit"),
    (2, 2, 1, "Morning tour"),
    (2, 5, 2, "Lunch stop"),
    (3, 3, 1, "Dinner reservation"),
    (3, 4, 2, "Hotel stay"),
    (4, 1, 1, "Start in Paris"),
    (4, 2, 2, "Move to Rome"),
    (4, 5, 3, "Try pizza"),
    (5, 7, 1, "Beach day"),
    (5, 8, 2, "Hotel check-in"),
    (5, 9, 3, "Tapas night"),
]


def _seed_rows(session: Session) -> dict[str, int]:
    created = dict.fromkeys(
        ["users", "destinations", "places", "reviews", "photos", "trips", "trip_places"], 0
    )

    for user_id, username, email, country, join_date, display_name, pw_hash, verified in USERS:
        if not exists(session, UserAccount, user_id):
            create_user(
                session,
                {
                    "username": username,
                    "email": email,
                    "country": country,
                    "join_date": join_date,
                    "display_name": display_name,
                    "password_hash": pw_hash,
                    "is_verified": verified,
                },
                user_id=user_id,
            )
            created["users"] += 1

    for destination_id, name, country, region, description in DESTINATIONS:
        if not exists(session, Destination, destination_id):
            create_destination(
                session,
                {"name": name, "country": country, "region": region, "description": description},
                destination_id=destination_id,
            )
            created["destinations"] += 1

    for place_id, name, category, destination_id, price_level, address, phone, website in PLACES:
        if not exists(session, Place, place_id):
            create_place(
                session,
                {
                    "name": name,
                    "category": category,
                    "destination_id": destination_id,
                    "price_level": price_level,
                    "address": address,
                    "phone": phone,
                    "website": website,
                },
                place_id=place_id,
            )
            created["places"] += 1

    for review_id, user_id, place_id, rating, title, text, review_date in REVIEWS:
        if not exists(session, Review, review_id):
            submit_review(
                session,
                {
                    "user_id": user_id,
                    "place_id": place_id,
                    "rating": rating,
                    "title": title,
                    "review_text": text,
                    "review_date": review_date,
                },
                review_id=review_id,
            )
            created["reviews"] += 1

    for photo_id, user_id, place_id, uploaded_at, url, caption in PHOTOS:
        if not exists(session, Photo, photo_id):
            add_photo(
                session,
                {
                    "user_id": user_id,
                    "place_id": place_id,
                    "uploaded_at": uploaded_at,
                    "url": url,
                    "caption": caption,
                },
                photo_id=photo_id,
            )
            created["photos"] += 1

    for trip_id, user_id, name, start_date, end_date in TRIPS:
        if not exists(session, Trip, trip_id):
            create_trip(
                session,
                {"user_id": user_id, "name": name, "start_date": start_date, "end_date": end_date},
                trip_id=trip_id,
            )
            created["trips"] += 1

    for trip_id, place_id, day_number, notes in TRIP_PLACES:
        if not exists(session, TripPlace, (trip_id, place_id)):
            add_place_to_trip(
                session, trip_id, {"place_id": place_id, "day_number": day_number, "notes": notes}
            )
            created["trip_places"] += 1

    return created


def seed_database(session_factory: sessionmaker[Session] | None = None) -> dict[str, int]:
    """
    Seed the database with demo data.

    Args:
        session_factory: Factory to open the unit of work with
            (default: the configured application factory)

    Returns:
        Number of rows created per entity; all zero on a re-run
    """
    factory = session_factory or get_session_factory()
    with get_session(factory) as session:
        created = _seed_rows(session)

    for entity, count in created.items():
        if count:
            logger.info("✓ Created %d %s", count, entity)
        else:
            logger.info("✓ %s already seeded", entity.capitalize())
    return created


def main() -> None:
    configure_logging()
    Base.metadata.create_all(get_engine())
    seed_database()


if __name__ == "__main__":
    main()
