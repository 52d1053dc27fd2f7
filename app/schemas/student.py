# app/schemas/student.py
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

StudentStatus = Literal["pending", "active", "cancelled"]


class StudentCreate(BaseModel):
    """creator_id is never read from the payload; it comes from the session."""
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    course_id: int | None = Field(default=None, alias="courseId")
    status: StudentStatus = "pending"

    model_config = ConfigDict(populate_by_name=True)


class StudentStatusUpdate(BaseModel):
    status: StudentStatus


class StudentPublic(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    course_id: int | None = None
    creator_id: int
    status: StudentStatus
    enrolled_at: datetime

    model_config = {"from_attributes": True}
