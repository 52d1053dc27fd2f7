"""Ownership rules for students and courses."""
import pytest

from app.core.exceptions import Forbidden, NotFound
from app.models.course import Course
from app.models.student import Student
from app.schemas.course import CourseCreate
from app.schemas.student import StudentCreate
from app.services import course_service, student_service


def _student(name="Sam", course_id=None, **extra):
    return StudentCreate(
        name=name, email=f"{name.lower()}@example.com", phone="555-0100",
        course_id=course_id, **extra,
    )


def test_create_course_stamps_owner(db_session, creator):
    course = course_service.create_course(
        db_session, creator=creator,
        obj_in=CourseCreate(name="Algebra", drive_link="https://x/y"),
    )
    assert course.creator_id == creator.id
    assert course.drive_link == "https://x/y"


def test_payload_cannot_set_owner(db_session, creator, other_creator):
    obj_in = StudentCreate.model_validate(
        {"name": "Sam", "email": "sam@example.com", "phone": "1", "creator_id": other_creator.id}
    )
    student = student_service.create_student(db_session, creator=creator, obj_in=obj_in)
    assert student.creator_id == creator.id


def test_student_defaults(db_session, creator):
    student = student_service.create_student(db_session, creator=creator, obj_in=_student())
    assert student.status == "pending"
    assert student.course_id is None
    assert student.enrolled_at is not None


def test_lists_are_scoped_to_creator(db_session, creator, other_creator):
    for i in range(3):
        student_service.create_student(db_session, creator=creator, obj_in=_student(f"A{i}"))
    for i in range(2):
        student_service.create_student(db_session, creator=other_creator, obj_in=_student(f"B{i}"))

    mine = student_service.list_students_for_creator(db_session, creator=creator)
    theirs = student_service.list_students_for_creator(db_session, creator=other_creator)
    assert len(mine) == 3
    assert len(theirs) == 2
    assert all(s.creator_id == creator.id for s in mine)


def test_lists_return_every_row_unless_limited(db_session, creator):
    db_session.add_all([
        Student(name=f"S{i}", email=f"s{i}@example.com", phone="1", creator_id=creator.id)
        for i in range(120)
    ])
    db_session.add_all([
        Course(name=f"C{i}", drive_link="https://x", creator_id=creator.id)
        for i in range(105)
    ])
    db_session.commit()

    students = student_service.list_students_for_creator(db_session, creator=creator)
    courses = course_service.list_courses_for_creator(db_session, creator=creator)
    assert len(students) == 120
    assert len(courses) == 105

    page = student_service.list_students_for_creator(
        db_session, creator=creator, skip=110, limit=50
    )
    assert [s.id for s in page] == [s.id for s in students[110:]]


def test_student_course_must_exist_and_be_owned(db_session, creator, other_creator):
    foreign = course_service.create_course(
        db_session, creator=other_creator,
        obj_in=CourseCreate(name="Theirs", drive_link="https://t"),
    )
    with pytest.raises(NotFound):
        student_service.create_student(db_session, creator=creator, obj_in=_student(course_id=9999))
    with pytest.raises(Forbidden):
        student_service.create_student(
            db_session, creator=creator, obj_in=_student(course_id=foreign.id)
        )


def test_update_status(db_session, creator):
    student = student_service.create_student(db_session, creator=creator, obj_in=_student())
    updated = student_service.update_student_status(
        db_session, creator=creator, student_id=student.id, status="active"
    )
    assert updated.status == "active"
    assert updated.enrolled_at == student.enrolled_at


def test_update_status_missing_or_foreign(db_session, creator, other_creator):
    student = student_service.create_student(db_session, creator=creator, obj_in=_student())
    with pytest.raises(NotFound):
        student_service.update_student_status(
            db_session, creator=creator, student_id=9999, status="active"
        )
    with pytest.raises(Forbidden):
        student_service.update_student_status(
            db_session, creator=other_creator, student_id=student.id, status="cancelled"
        )
    db_session.refresh(student)
    assert student.status == "pending"


def test_delete_course_clears_student_reference(db_session, creator):
    course = course_service.create_course(
        db_session, creator=creator, obj_in=CourseCreate(name="Algebra", drive_link="https://x")
    )
    student = student_service.create_student(
        db_session, creator=creator, obj_in=_student(course_id=course.id)
    )
    course_service.delete_course(db_session, creator=creator, course_id=course.id)

    assert course_service.get_course(db_session, course.id) is None
    remaining = db_session.get(Student, student.id)
    assert remaining is not None
    assert remaining.course_id is None


def test_delete_course_missing_or_foreign(db_session, creator, other_creator):
    course = course_service.create_course(
        db_session, creator=creator, obj_in=CourseCreate(name="Algebra", drive_link="https://x")
    )
    with pytest.raises(NotFound):
        course_service.delete_course(db_session, creator=creator, course_id=9999)
    with pytest.raises(Forbidden):
        course_service.delete_course(db_session, creator=other_creator, course_id=course.id)
    assert course_service.get_course(db_session, course.id) is not None
