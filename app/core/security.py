# app/core/security.py
"""
Password hashing and request authentication.

Stored credentials have the form ``<hex scrypt key>.<hex salt>``. The salt is
fed to scrypt as its hex text, so hashes written by the previous Node.js
deployment keep verifying.
"""
import logging
import secrets

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer
from passlib.crypto.scrypt import scrypt
from passlib.utils import consteq
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.permissions import require_active, require_authenticated, require_role
from app.db.session import get_db
from app.models.user import User, ROLE_ADMIN, ROLE_CREATOR
from app.services import session_service

logger = logging.getLogger(__name__)

SALT_BYTES = 16
KEY_LENGTH = 64
SEPARATOR = "."


def _derive_key(password: str, salt: str) -> bytes:
    return scrypt(
        password.encode("utf-8"),
        salt.encode("utf-8"),
        n=settings.SCRYPT_N,
        r=settings.SCRYPT_R,
        p=settings.SCRYPT_P,
        keylen=KEY_LENGTH,
    )


def get_password_hash(password: str) -> str:
    salt = secrets.token_hex(SALT_BYTES)
    key = _derive_key(password, salt)
    return f"{key.hex()}{SEPARATOR}{salt}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check ``plain_password`` against a stored credential.

    Never raises: malformed hashes or scrypt failures count as a mismatch.
    """
    try:
        if SEPARATOR not in hashed_password:
            # legacy dev-only rows holding the plain password
            return consteq(
                plain_password.encode("utf-8"), hashed_password.encode("utf-8")
            )
        hashed, salt = hashed_password.split(SEPARATOR, 1)
        expected = bytes.fromhex(hashed)
        supplied = _derive_key(plain_password, salt)
        if len(expected) != len(supplied):
            return False
        return consteq(expected, supplied)
    except Exception as e:
        logger.warning(f"Password verification error: {type(e).__name__}")
        return False


# --- request authentication ---

bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_session_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    cookie_token: str | None = Depends(cookie_scheme),
) -> str | None:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return cookie_token


def get_optional_user(
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User | None:
    if not token:
        return None
    return session_service.resolve_session(db, token)


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    return require_authenticated(user)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    return require_active(current_user)


def get_current_admin(current_user: User = Depends(get_current_active_user)) -> User:
    return require_role(current_user, ROLE_ADMIN)


def get_current_creator(current_user: User = Depends(get_current_active_user)) -> User:
    return require_role(current_user, ROLE_CREATOR)
