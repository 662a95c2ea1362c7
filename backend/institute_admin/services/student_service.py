"""Student record service layer."""

import logging
from typing import List, Optional
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session
from institute_admin.errors import NotFoundError
from institute_admin.models.batch import Batch
from institute_admin.models.student import Student
from institute_admin.repositories import StudentRepository
from institute_admin.schemas.student import StudentCreate, StudentUpdate
from institute_admin.services import notification_service

logger = logging.getLogger(__name__)


def _clean_batch_number(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def get_students(db: Session, status: Optional[str] = None, batch_number: Optional[str] = None) -> List[Student]:
    q = db.query(Student)
    if status:
        q = q.filter(Student.status == status)
    if batch_number:
        q = q.filter(func.trim(Student.batch_number) == batch_number.strip())
    return q.order_by(Student.name.asc(), Student.id.asc()).all()


def get_student(db: Session, student_id: int) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise NotFoundError(f"Student {student_id} not found.")
    return student


def create_student(db: Session, data: StudentCreate) -> Student:
    payload = data.model_dump()
    payload["batch_number"] = _clean_batch_number(payload.get("batch_number"))
    student = Student(**payload)
    db.add(student)
    notification_service.add_notification(
        db,
        notification_service.STUDENT_ADMITTED,
        "Student Admitted",
        f'{student.name} has been admitted{" to " + student.batch_number if student.batch_number else ""}.',
        batch_id=student.batch_number,
        commit=False,
    )
    db.commit()
    db.refresh(student)
    return student


def update_student(db: Session, student_id: int, data: StudentUpdate) -> Student:
    student = get_student(db, student_id)
    payload = data.model_dump(exclude_none=True)
    if "batch_number" in payload:
        payload["batch_number"] = _clean_batch_number(payload["batch_number"])
    if "status" in payload:
        # A manual status change breaks the link to the completing batch
        student.completed_by_batch = None
    for k, v in payload.items():
        setattr(student, k, v)
    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int):
    student = get_student(db, student_id)
    db.delete(student)
    db.commit()


def get_students_by_batch(db: Session, batch_id: str) -> List[Student]:
    return StudentRepository(db).list_by_batch(batch_id)


def get_completed_students(
    db: Session, course_name: Optional[str] = None, search: Optional[str] = None
) -> List[Student]:
    q = db.query(Student).filter(Student.status == "Completed")
    if course_name:
        q = q.filter(Student.course_name == course_name)
    if search:
        pattern = f"%{search.strip()}%"
        q = q.filter(
            or_(
                Student.name.ilike(pattern),
                Student.email.ilike(pattern),
                Student.phone.ilike(pattern),
            )
        )
    return q.order_by(Student.name.asc()).all()


def reactivate_student(db: Session, student_id: int) -> Student:
    student = get_student(db, student_id)
    if student.status != "Active":
        student.status = "Active"
        student.completed_by_batch = None
        db.commit()
        db.refresh(student)
        logger.info("[students] reactivated student %s", student_id)
    return student


def get_orphaned_students(db: Session) -> List[Student]:
    """Students whose batch_number points at no existing batch."""
    key = func.trim(Student.batch_number)
    return (
        db.query(Student)
        .filter(
            Student.batch_number.isnot(None),
            key != "",
            ~key.in_(select(Batch.id)),
        )
        .order_by(Student.id.asc())
        .all()
    )
