# app/core/permissions.py
"""
Authorization guards.

Each guard returns its subject unchanged when the check passes and raises a
typed error otherwise, so they can be chained or wrapped in dependencies.
"""
from typing import Any, Optional, TypeVar

from app.core.exceptions import AccountDisabled, Forbidden, Unauthenticated
from app.models.user import User

RecordT = TypeVar("RecordT")


def require_authenticated(user: Optional[User]) -> User:
    if user is None:
        raise Unauthenticated()
    return user


def require_role(user: User, role: str) -> User:
    if user.role != role:
        raise Forbidden(f"{role.capitalize()} access required")
    return user


def require_active(user: User) -> User:
    if not user.active:
        raise AccountDisabled()
    return user


def require_ownership(user: User, record: RecordT) -> RecordT:
    owner_id: Any = getattr(record, "creator_id", None)
    if owner_id != user.id:
        raise Forbidden("This record belongs to another creator")
    return record
