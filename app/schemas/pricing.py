# app/schemas/pricing.py
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class PricingPlanPublic(BaseModel):
    id: int
    plan: Literal["basic", "pro", "enterprise"]
    features: List[str]
    price: int

    model_config = {"from_attributes": True}


class CreatorPlanPublic(BaseModel):
    id: int
    creator_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime | None = None
    active: bool

    model_config = {"from_attributes": True}


class PlanUpgradeRequest(BaseModel):
    plan_id: int = Field(alias="planId")

    model_config = ConfigDict(populate_by_name=True)
