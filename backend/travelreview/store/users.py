"""User account store."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.travelreview.db.lookup import exists, require
from backend.travelreview.db.models.user_account import UserAccount
from backend.travelreview.errors import ConflictError
from backend.travelreview.models.common import validate_payload
from backend.travelreview.models.entities import ProfileUpdate, UserAccountInput

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    payload: UserAccountInput | Mapping[str, Any],
    *,
    user_id: int | None = None,
) -> UserAccount:
    """
    Create a user account.

    Raises:
        ValidationError: If the payload is invalid
        ConflictError: If the username or ``user_id`` is already taken
    """
    user_in = validate_payload(UserAccountInput, payload)
    if get_user_by_username(session, user_in.username) is not None:
        raise ConflictError(f"Username {user_in.username!r} already exists")
    if user_id is not None and exists(session, UserAccount, user_id):
        raise ConflictError(f"UserAccount {user_id} already exists")

    user = UserAccount(user_id=user_id, **user_in.model_dump())
    session.add(user)
    session.flush()
    logger.info("user_created", extra={"user_id": user.user_id})
    return user


def get_user(session: Session, user_id: int) -> UserAccount:
    """Get a user by id or raise NotFoundError."""
    return require(session, UserAccount, user_id)


def get_user_by_username(session: Session, username: str) -> UserAccount | None:
    stmt = select(UserAccount).where(UserAccount.username == username)
    return session.execute(stmt).scalar_one_or_none()


def update_profile(
    session: Session, user_id: int, changes: ProfileUpdate | Mapping[str, Any]
) -> UserAccount:
    """
    Apply profile changes. The user id and username never change.

    Raises:
        ValidationError: If a change is invalid or touches an identity field
        NotFoundError: If the user does not exist
    """
    update = validate_payload(ProfileUpdate, changes)
    user = require(session, UserAccount, user_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    session.flush()
    return user
