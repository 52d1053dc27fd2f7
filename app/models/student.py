# app/models/student.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from app.db.base import Base

STUDENT_STATUSES = ("pending", "active", "cancelled")


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)

    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True
    )
    # owner; set once at creation
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # pending / active / cancelled
    status = Column(String(20), nullable=False, default="pending", index=True)

    enrolled_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
