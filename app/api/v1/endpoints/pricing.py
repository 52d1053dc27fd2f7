# app/api/v1/endpoints/pricing.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.pricing import CreatorPlanPublic, PlanUpgradeRequest, PricingPlanPublic
from app.services import plan_service
from app.core.security import get_current_creator

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/plans", response_model=List[PricingPlanPublic])
def list_plans(db: Session = Depends(get_db)):
    return plan_service.list_pricing_plans(db)


@router.get("/active-plan", response_model=Optional[CreatorPlanPublic])
def read_active_plan(
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    return plan_service.get_active_plan(db, current_creator.id)


@router.post("/upgrade", response_model=CreatorPlanPublic)
def upgrade_plan(
    obj_in: PlanUpgradeRequest,
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    """
    Switch the caller to another plan. No payment is taken.
    """
    return plan_service.upgrade_plan(
        db, creator_id=current_creator.id, plan_id=obj_in.plan_id
    )
