# app/models/pricing.py
from sqlalchemy import JSON, Column, Integer, String
from app.db.base import Base

PLAN_NAMES = ("basic", "pro", "enterprise")


class PricingPlan(Base):
    __tablename__ = "pricing"

    id = Column(Integer, primary_key=True, index=True)
    plan = Column(String(20), unique=True, nullable=False)  # basic / pro / enterprise
    features = Column(JSON, nullable=False, default=list)
    price = Column(Integer, nullable=False)  # per month, whole currency units
