# app/models/creator_plan.py
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, text
from app.db.base import Base


class CreatorPlan(Base):
    __tablename__ = "creator_plans"
    __table_args__ = (
        # at most one active subscription per creator
        Index(
            "uq_creator_plans_active_creator",
            "creator_id",
            unique=True,
            sqlite_where=text("active = 1"),
            postgresql_where=text("active"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey("pricing.id"), nullable=False)

    start_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    end_date = Column(DateTime(timezone=True), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
