# app/services/course_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.core.permissions import require_ownership
from app.models.course import Course
from app.models.student import Student
from app.models.user import User
from app.schemas.course import CourseCreate

logger = logging.getLogger(__name__)


def create_course(
    db: Session,
    *,
    creator: User,
    obj_in: CourseCreate,
) -> Course:
    db_obj = Course(
        name=obj_in.name,
        drive_link=obj_in.drive_link,
        creator_id=creator.id,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Creator {creator.id} created course {db_obj.id}")
    return db_obj


def get_course(db: Session, course_id: int) -> Optional[Course]:
    return db.get(Course, course_id)


def list_courses_for_creator(
    db: Session,
    *,
    creator: User,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Course]:
    query = (
        db.query(Course)
        .filter(Course.creator_id == creator.id)
        .order_by(Course.id.asc())
        .offset(skip)
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def delete_course(db: Session, *, creator: User, course_id: int) -> None:
    """
    Delete a course the caller owns. Students enrolled in it stay, with
    their course reference cleared in the same transaction.
    """
    course = get_course(db, course_id)
    if course is None:
        raise NotFound("Course not found")
    require_ownership(creator, course)

    (
        db.query(Student)
        .filter(Student.course_id == course.id)
        .update({Student.course_id: None}, synchronize_session="fetch")
    )
    db.delete(course)
    db.commit()
    logger.info(f"Creator {creator.id} deleted course {course_id}")
