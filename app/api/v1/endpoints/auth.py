# app/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_current_user, get_session_token
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserPublic
from app.services import session_service, user_service

router = APIRouter()


def _start_session(response: Response, db: Session, user: User) -> AuthResponse:
    token = session_service.establish_session(db, user)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(session_service.session_ttl().total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return AuthResponse(access_token=token, user=UserPublic.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Create an account (role defaults to creator) and log it in.
    """
    user = user_service.register_user(db, payload)
    return _start_session(response, db, user)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    user = user_service.authenticate_user(db, payload.username, payload.password)
    return _start_session(response, db, user)


@router.post("/logout")
def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    if token:
        session_service.end_session(db, token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"status": "ok"}


@router.get("/user", response_model=UserPublic)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
