# app/api/v1/endpoints/courses.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.course import CourseCreate, CoursePublic
from app.services import course_service
from app.core.config import settings
from app.core.security import get_current_creator

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CoursePublic, status_code=status.HTTP_201_CREATED)
def create_course(
    obj_in: CourseCreate,
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    return course_service.create_course(db, creator=current_creator, obj_in=obj_in)


@router.get("", response_model=List[CoursePublic])
def list_my_courses(
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
):
    return course_service.list_courses_for_creator(
        db, creator=current_creator, skip=skip, limit=limit
    )


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    course_service.delete_course(db, creator=current_creator, course_id=course_id)
    return None
