# app/schemas/course.py
from pydantic import BaseModel, ConfigDict, Field


class CourseCreate(BaseModel):
    name: str = Field(min_length=1)
    drive_link: str = Field(min_length=1, alias="driveLink")

    model_config = ConfigDict(populate_by_name=True)


class CoursePublic(BaseModel):
    id: int
    name: str
    drive_link: str
    creator_id: int

    model_config = {"from_attributes": True}
