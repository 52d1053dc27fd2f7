# app/services/student_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import Forbidden, NotFound
from app.core.permissions import require_ownership
from app.models.course import Course
from app.models.student import Student
from app.models.user import User
from app.schemas.student import StudentCreate

logger = logging.getLogger(__name__)


def create_student(
    db: Session,
    *,
    creator: User,
    obj_in: StudentCreate,
) -> Student:
    """
    creator enrolls a student; owner is always the caller
    """
    if obj_in.course_id is not None:
        course: Optional[Course] = db.get(Course, obj_in.course_id)
        if course is None:
            raise NotFound("Course not found")
        require_ownership(creator, course)

    db_obj = Student(
        name=obj_in.name,
        email=obj_in.email,
        phone=obj_in.phone,
        course_id=obj_in.course_id,
        creator_id=creator.id,
        status=obj_in.status,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Creator {creator.id} added student {db_obj.id}")
    return db_obj


def get_student(db: Session, student_id: int) -> Optional[Student]:
    return db.get(Student, student_id)


def list_students_for_creator(
    db: Session,
    *,
    creator: User,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Student]:
    query = (
        db.query(Student)
        .filter(Student.creator_id == creator.id)
        .order_by(Student.id.asc())
        .offset(skip)
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def update_student_status(
    db: Session,
    *,
    creator: User,
    student_id: int,
    status: str,
) -> Student:
    student: Optional[Student] = db.get(Student, student_id, with_for_update=True)
    try:
        if student is None:
            raise NotFound("Student not found")
        require_ownership(creator, student)
    except (NotFound, Forbidden):
        # release the row lock before bailing out
        db.rollback()
        raise

    student.status = status
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info(f"Student {student.id} status -> {status}")
    return student
