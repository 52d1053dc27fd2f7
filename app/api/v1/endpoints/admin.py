# app/api/v1/endpoints/admin.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.pricing import CreatorPlanPublic
from app.schemas.stats import AdminStats
from app.schemas.user import UserPublic
from app.services import plan_service, stats_service, user_service
from app.core.security import get_current_admin

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/creators", response_model=List[UserPublic])
def list_creators(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return user_service.list_creators(db)


@router.post("/creators/{creator_id}/toggle", response_model=UserPublic)
def toggle_creator_access(
    creator_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """
    Enable or disable a creator account.
    """
    return user_service.toggle_creator_access(db, creator_id)


@router.get("/creator-plans", response_model=List[CreatorPlanPublic])
def list_creator_plans(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return plan_service.list_all_creator_plans(db)


@router.get("/stats", response_model=AdminStats)
def admin_stats(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return stats_service.compute_admin_stats(db)
