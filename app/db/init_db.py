# app/db/init_db.py
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app import models  # noqa
from app.services import plan_service, session_service, user_service

logger = logging.getLogger(__name__)


def seed_reference_data(db: Session) -> None:
    plan_service.seed_pricing_plans(db)

    if settings.INITIAL_ADMIN_USERNAME and settings.INITIAL_ADMIN_PASSWORD:
        user_service.ensure_admin(
            db,
            username=settings.INITIAL_ADMIN_USERNAME,
            password=settings.INITIAL_ADMIN_PASSWORD,
        )
    else:
        logger.warning("INITIAL_ADMIN_PASSWORD not set, skipping admin bootstrap")

    session_service.purge_expired_sessions(db)


def init_db(bind: Engine = engine) -> None:
    Base.metadata.create_all(bind=bind)
    db = SessionLocal(bind=bind)
    try:
        seed_reference_data(db)
    finally:
        db.close()
