# app/models/user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import func
from app.db.base import Base

ROLE_ADMIN = "admin"
ROLE_CREATOR = "creator"
ROLES = (ROLE_ADMIN, ROLE_CREATOR)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    # "<hex scrypt key>.<hex salt>"
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_CREATOR)  # 'admin' / 'creator'
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
