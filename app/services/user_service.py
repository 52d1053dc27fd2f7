# app/services/user_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import (
    AccountDisabled,
    Forbidden,
    InvalidCredentials,
    NotFound,
    UsernameTaken,
)
from app.core.security import get_password_hash, verify_password
from app.models.user import User, ROLE_ADMIN, ROLE_CREATOR
from app.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)

_dummy_hash: str | None = None


def _timing_dummy_hash() -> str:
    # verified against when the username is unknown, so both failures cost one scrypt run
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = get_password_hash("not-a-real-password")
    return _dummy_hash


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(
    db: Session,
    *,
    username: str,
    password: str,
    role: str = ROLE_CREATOR,
) -> User:
    """Hash ``password`` and insert the user; the unique index decides races."""
    user = User(
        username=username,
        password=get_password_hash(password),
        role=role,
        active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UsernameTaken() from e
    db.refresh(user)
    return user


def register_user(db: Session, obj_in: RegisterRequest) -> User:
    if get_user_by_username(db, obj_in.username) is not None:
        logger.info(f"Registration rejected, username taken: {obj_in.username}")
        raise UsernameTaken()

    if obj_in.role == ROLE_ADMIN and not settings.ALLOW_ADMIN_REGISTRATION:
        raise Forbidden("Admin self-registration is disabled")

    user = create_user(
        db, username=obj_in.username, password=obj_in.password, role=obj_in.role
    )
    logger.info(f"Registered user {user.id} ({user.username}) as {user.role}")
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    """
    Unknown usernames and wrong passwords raise the same error.
    Disabled accounts are reported only once the password checks out.
    """
    logger.info(f"Login attempt for username: {username}")
    user = get_user_by_username(db, username)
    if user is None:
        verify_password(password, _timing_dummy_hash())
        logger.info(f"Login failed, unknown username: {username}")
        raise InvalidCredentials()

    if not verify_password(password, user.password):
        logger.info(f"Login failed, bad password for user {user.id}")
        raise InvalidCredentials()

    if not user.active:
        logger.info(f"Login refused, user {user.id} is disabled")
        raise AccountDisabled()

    return user


def list_creators(db: Session) -> List[User]:
    return db.query(User).filter(User.role == ROLE_CREATOR).order_by(User.id.asc()).all()


def toggle_creator_access(db: Session, creator_id: int) -> User:
    creator = db.get(User, creator_id, with_for_update=True)
    if creator is None or creator.role != ROLE_CREATOR:
        db.rollback()
        raise NotFound("Creator not found")

    creator.active = not creator.active
    db.add(creator)
    db.commit()
    db.refresh(creator)
    logger.info(f"Creator {creator.id} access set to active={creator.active}")
    return creator


def ensure_admin(db: Session, *, username: str, password: str) -> Optional[User]:
    """Create the bootstrap admin unless a user with that name exists."""
    existing = get_user_by_username(db, username)
    if existing is not None:
        logger.info(f"Admin bootstrap skipped, user {username} already exists")
        return None
    admin = create_user(db, username=username, password=password, role=ROLE_ADMIN)
    logger.info(f"Bootstrap admin {admin.username} created")
    return admin
