"""Course service layer. A course's batch-id prefix is fixed here, at creation time."""

import logging
from typing import List
from sqlalchemy.orm import Session
from institute_admin.errors import ConflictError, NotFoundError
from institute_admin.models.course import Course
from institute_admin.schemas.course import CourseCreate, CourseUpdate
from institute_admin.services.batch_lifecycle import course_prefix

logger = logging.getLogger(__name__)


def get_courses(db: Session, active_only: bool = False) -> List[Course]:
    q = db.query(Course)
    if active_only:
        q = q.filter(Course.is_active == True)
    return q.order_by(Course.name.asc()).all()


def get_course(db: Session, course_id: int) -> Course:
    course = db.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise NotFoundError(f"Course {course_id} not found.")
    return course


def _ensure_unique_name(db: Session, name: str, exclude_id: int | None = None):
    q = db.query(Course).filter(Course.name == name)
    if exclude_id is not None:
        q = q.filter(Course.id != exclude_id)
    if q.first():
        raise ConflictError(f"Course '{name}' already exists.")


def create_course(db: Session, data: CourseCreate) -> Course:
    payload = data.model_dump()
    payload["name"] = payload["name"].strip()
    _ensure_unique_name(db, payload["name"])
    code = (payload.get("code") or "").strip().upper()
    payload["code"] = code or course_prefix(payload["name"])
    course = Course(**payload)
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("[courses] created %s with batch prefix %s", course.name, course.code)
    return course


def update_course(db: Session, course_id: int, data: CourseUpdate) -> Course:
    course = get_course(db, course_id)
    payload = data.model_dump(exclude_none=True)
    if "name" in payload:
        payload["name"] = payload["name"].strip()
        _ensure_unique_name(db, payload["name"], exclude_id=course_id)
    for k, v in payload.items():
        setattr(course, k, v)
    db.commit()
    db.refresh(course)
    return course


def delete_course(db: Session, course_id: int):
    course = get_course(db, course_id)
    db.delete(course)
    db.commit()
