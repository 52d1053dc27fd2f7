# app/services/plan_service.py
"""
Pricing plans and creator subscriptions.

Upgrading is a self-declared switch, no billing happens here. A creator has at
most one active subscription; ``upgrade_plan`` swaps it inside a single
transaction and the partial unique index on creator_plans backs that up.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound
from app.models.creator_plan import CreatorPlan
from app.models.pricing import PricingPlan
from app.models.user import User

logger = logging.getLogger(__name__)


DEFAULT_PRICING_PLANS = [
    {
        "plan": "basic",
        "price": 29,
        "features": [
            "Up to 50 students",
            "5 courses",
            "Email support",
        ],
    },
    {
        "plan": "pro",
        "price": 79,
        "features": [
            "Up to 500 students",
            "Unlimited courses",
            "Student status tracking",
            "Priority support",
        ],
    },
    {
        "plan": "enterprise",
        "price": 199,
        "features": [
            "Unlimited students",
            "Unlimited courses",
            "Dedicated account manager",
            "Custom integrations",
        ],
    },
]


def seed_pricing_plans(db: Session) -> List[PricingPlan]:
    """Insert the default plans that are missing (idempotent)."""
    existing = {p.plan for p in db.query(PricingPlan).all()}
    created = []
    for config in DEFAULT_PRICING_PLANS:
        if config["plan"] in existing:
            continue
        plan = PricingPlan(
            plan=config["plan"],
            price=config["price"],
            features=list(config["features"]),
        )
        db.add(plan)
        created.append(plan)
    if created:
        db.commit()
        logger.info(f"Seeded pricing plans: {[p.plan for p in created]}")
    return created


def list_pricing_plans(db: Session) -> List[PricingPlan]:
    return db.query(PricingPlan).order_by(PricingPlan.price.asc(), PricingPlan.id.asc()).all()


def get_pricing_plan(db: Session, plan_id: int) -> Optional[PricingPlan]:
    return db.get(PricingPlan, plan_id)


def get_active_plan(db: Session, creator_id: int) -> Optional[CreatorPlan]:
    return (
        db.query(CreatorPlan)
        .filter(CreatorPlan.creator_id == creator_id, CreatorPlan.active.is_(True))
        .first()
    )


def list_creator_plans(db: Session, creator_id: int) -> List[CreatorPlan]:
    return (
        db.query(CreatorPlan)
        .filter(CreatorPlan.creator_id == creator_id)
        .order_by(CreatorPlan.id.asc())
        .all()
    )


def list_all_creator_plans(db: Session) -> List[CreatorPlan]:
    return db.query(CreatorPlan).order_by(CreatorPlan.id.asc()).all()


def upgrade_plan(db: Session, *, creator_id: int, plan_id: int) -> CreatorPlan:
    """
    NoActivePlan | ActivePlan(P) -> ActivePlan(Q).

    Re-selecting the current plan is allowed and simply supersedes the old row.
    """
    if get_pricing_plan(db, plan_id) is None:
        raise NotFound("Pricing plan not found")

    # row lock on the creator serializes concurrent upgrades for them
    creator = db.get(User, creator_id, with_for_update=True)
    if creator is None:
        db.rollback()
        raise NotFound("Creator not found")

    now = datetime.now(timezone.utc)
    try:
        superseded = (
            db.query(CreatorPlan)
            .filter(CreatorPlan.creator_id == creator_id, CreatorPlan.active.is_(True))
            .update(
                {CreatorPlan.active: False, CreatorPlan.end_date: now},
                synchronize_session="fetch",
            )
        )
        subscription = CreatorPlan(
            creator_id=creator_id,
            plan_id=plan_id,
            start_date=now,
            end_date=None,
            active=True,
        )
        db.add(subscription)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Concurrent plan change for creator {creator_id}: {e.orig}")
        raise Conflict("Plan change already in progress, retry") from e

    db.refresh(subscription)
    logger.info(
        f"Creator {creator_id} moved to plan {plan_id} "
        f"(subscription {subscription.id}, superseded {superseded})"
    )
    return subscription
