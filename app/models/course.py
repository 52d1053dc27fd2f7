# app/models/course.py
from sqlalchemy import Column, ForeignKey, Integer, String, Text
from app.db.base import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # link to externally hosted course material
    drive_link = Column(Text, nullable=False)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
