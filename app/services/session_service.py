# app/services/session_service.py
"""
Server-side sessions.

The client only ever holds an opaque random token; the database keeps its
SHA-256 next to the owning user id and an absolute expiry.
"""
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.auth_session import AuthSession
from app.models.user import User

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


def _hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is written in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def session_ttl() -> timedelta:
    return timedelta(hours=settings.SESSION_TTL_HOURS)


def establish_session(
    db: Session,
    user: User,
    *,
    ttl: timedelta | None = None,
) -> str:
    """Create a session for ``user`` and return the token to hand out."""
    token = secrets.token_urlsafe(TOKEN_BYTES)
    now = datetime.now(timezone.utc)
    row = AuthSession(
        token_hash=_hash_token(token),
        user_id=user.id,
        created_at=now,
        expires_at=now + (ttl if ttl is not None else session_ttl()),
    )
    db.add(row)
    db.commit()
    logger.info(f"Session established for user {user.id}")
    return token


def resolve_session(db: Session, token: str) -> Optional[User]:
    """
    Map a token to its user, or None.

    The user row is re-read on every call so role and active changes made
    by an admin apply to sessions that already exist.
    """
    row: Optional[AuthSession] = (
        db.query(AuthSession)
        .filter(AuthSession.token_hash == _hash_token(token))
        .first()
    )
    if row is None:
        return None

    if _as_utc(row.expires_at) <= datetime.now(timezone.utc):
        logger.info(f"Session for user {row.user_id} expired")
        db.delete(row)
        db.commit()
        return None

    user = db.get(User, row.user_id, populate_existing=True)
    if user is None:
        logger.warning(f"Session points at missing user {row.user_id}")
    return user


def end_session(db: Session, token: str) -> None:
    deleted = (
        db.query(AuthSession)
        .filter(AuthSession.token_hash == _hash_token(token))
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Session ended")


def purge_expired_sessions(db: Session) -> int:
    now = datetime.now(timezone.utc)
    deleted = (
        db.query(AuthSession)
        .filter(AuthSession.expires_at <= now)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info(f"Purged {deleted} expired sessions")
    return deleted
