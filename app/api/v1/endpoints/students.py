# app/api/v1/endpoints/students.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.student import StudentCreate, StudentPublic, StudentStatusUpdate
from app.services import student_service
from app.core.config import settings
from app.core.security import get_current_creator

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=StudentPublic, status_code=status.HTTP_201_CREATED)
def create_student(
    obj_in: StudentCreate,
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    return student_service.create_student(db, creator=current_creator, obj_in=obj_in)


@router.get("", response_model=List[StudentPublic])
def list_my_students(
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
):
    """
    Students owned by the caller only.
    """
    return student_service.list_students_for_creator(
        db, creator=current_creator, skip=skip, limit=limit
    )


@router.patch("/{student_id}/status", response_model=StudentPublic)
def update_student_status(
    student_id: int,
    obj_in: StudentStatusUpdate,
    db: Session = Depends(get_db),
    current_creator: User = Depends(get_current_creator),
):
    return student_service.update_student_status(
        db, creator=current_creator, student_id=student_id, status=obj_in.status
    )
