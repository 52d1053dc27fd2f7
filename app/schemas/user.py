# app/schemas/user.py
from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["admin", "creator"]


class UserPublic(BaseModel):
    id: int
    username: str
    role: Role
    active: bool

    model_config = ConfigDict(from_attributes=True)
