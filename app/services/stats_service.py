# app/services/stats_service.py
from datetime import datetime, timedelta, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.course import Course
from app.models.creator_plan import CreatorPlan
from app.models.pricing import PricingPlan
from app.models.student import Student
from app.models.user import User, ROLE_CREATOR
from app.schemas.stats import AdminStats, CreatorStats

GROWTH_WINDOW = timedelta(days=30)


def _count_by_creator(query) -> dict[int, int]:
    return {creator_id: count for creator_id, count in query.all()}


def compute_admin_stats(db: Session, *, now: datetime | None = None) -> AdminStats:
    """
    Per-creator aggregates for the admin dashboard, recomputed on each call.

    Revenue is the monthly price of the creator's active plan. Growth is the
    number of students enrolled within the last 30 days.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - GROWTH_WINDOW

    creators = (
        db.query(User).filter(User.role == ROLE_CREATOR).order_by(User.id.asc()).all()
    )

    students = _count_by_creator(
        db.query(Student.creator_id, func.count(Student.id)).group_by(Student.creator_id)
    )
    recent = _count_by_creator(
        db.query(Student.creator_id, func.count(Student.id))
        .filter(Student.enrolled_at >= cutoff)
        .group_by(Student.creator_id)
    )
    courses = _count_by_creator(
        db.query(Course.creator_id, func.count(Course.id)).group_by(Course.creator_id)
    )
    active_plans = {
        creator_id: (plan, price)
        for creator_id, plan, price in (
            db.query(CreatorPlan.creator_id, PricingPlan.plan, PricingPlan.price)
            .join(PricingPlan, PricingPlan.id == CreatorPlan.plan_id)
            .filter(CreatorPlan.active.is_(True))
            .all()
        )
    }

    rows = []
    for creator in creators:
        plan, price = active_plans.get(creator.id, (None, 0))
        rows.append(
            CreatorStats(
                creator_id=creator.id,
                username=creator.username,
                active=bool(creator.active),
                student_count=students.get(creator.id, 0),
                course_count=courses.get(creator.id, 0),
                plan=plan,
                revenue=price,
                new_students_30d=recent.get(creator.id, 0),
            )
        )

    return AdminStats(
        total_creators=len(rows),
        active_creators=sum(1 for r in rows if r.active),
        total_students=sum(r.student_count for r in rows),
        total_revenue=sum(r.revenue for r in rows),
        creators=rows,
    )
