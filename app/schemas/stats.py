# app/schemas/stats.py
from typing import List

from pydantic import BaseModel


class CreatorStats(BaseModel):
    creator_id: int
    username: str
    active: bool
    student_count: int
    course_count: int
    plan: str | None = None
    revenue: int
    new_students_30d: int


class AdminStats(BaseModel):
    total_creators: int
    active_creators: int
    total_students: int
    total_revenue: int
    creators: List[CreatorStats]
