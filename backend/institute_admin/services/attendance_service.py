"""Attendance service layer: daily record upserts and the aggregates behind the dashboard charts."""

import math
from datetime import date
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from institute_admin.errors import ValidationError
from institute_admin.models.attendance import AttendanceRecord
from institute_admin.models.course import Course
from institute_admin.schemas.attendance import AttendanceUpsert

PRESENT = "Present"
ABSENT = "Absent"
ON_LEAVE = "On Leave"


def _find_record(db: Session, person_type: str, person_id: str, on_date: date) -> Optional[AttendanceRecord]:
    return (
        db.query(AttendanceRecord)
        .filter(
            AttendanceRecord.person_type == person_type,
            AttendanceRecord.person_id == person_id,
            AttendanceRecord.date == on_date,
        )
        .first()
    )


def upsert_attendance(db: Session, records: List[AttendanceUpsert]) -> List[AttendanceRecord]:
    saved = []
    for record in records:
        payload = record.model_dump()
        row = _find_record(db, record.person_type, record.person_id, record.date)
        if row is None:
            row = AttendanceRecord(**payload)
            db.add(row)
        else:
            for k, v in payload.items():
                setattr(row, k, v)
        # Flush so a later duplicate in the same payload finds this row
        db.flush()
        saved.append(row)
    db.commit()
    for row in saved:
        db.refresh(row)
    return saved


def get_attendance_by_batch(db: Session, batch_id: str, on_date: date) -> List[AttendanceRecord]:
    return (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.batch_id == batch_id, AttendanceRecord.date == on_date)
        .order_by(AttendanceRecord.person_name.asc())
        .all()
    )


def get_attendance_report(
    db: Session,
    date_from: date,
    date_to: date,
    batch_id: Optional[str] = None,
    course_id: Optional[int] = None,
) -> List[AttendanceRecord]:
    if date_to < date_from:
        raise ValidationError("date_to must not be before date_from.")
    q = db.query(AttendanceRecord).filter(
        AttendanceRecord.date >= date_from,
        AttendanceRecord.date <= date_to,
    )
    if batch_id:
        q = q.filter(AttendanceRecord.batch_id == batch_id)
    if course_id:
        q = q.filter(AttendanceRecord.course_id == course_id)
    return q.order_by(AttendanceRecord.date.desc(), AttendanceRecord.person_name.asc()).all()


def get_attendance_stats(db: Session, batch_id: str, person_id: str) -> dict:
    rows = (
        db.query(AttendanceRecord.status, func.count(AttendanceRecord.id))
        .filter(AttendanceRecord.batch_id == batch_id, AttendanceRecord.person_id == person_id)
        .group_by(AttendanceRecord.status)
        .all()
    )
    counts = dict(rows)
    return {
        "present": counts.get(PRESENT, 0),
        "absent": counts.get(ABSENT, 0),
        "leave": counts.get(ON_LEAVE, 0),
    }


def _round_percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    return int(math.floor(numerator * 100 / denominator + 0.5))


def get_attendance_per_course(db: Session) -> List[dict]:
    """Attendance rate per active course, highest first."""
    courses = db.query(Course).filter(Course.is_active == True).all()
    stats = []
    for course in courses:
        total = db.query(AttendanceRecord).filter(AttendanceRecord.course_id == course.id).count()
        present = (
            db.query(AttendanceRecord)
            .filter(
                AttendanceRecord.course_id == course.id,
                func.lower(AttendanceRecord.status) == PRESENT.lower(),
            )
            .count()
        )
        stats.append({
            "course": course.name,
            "total_sessions": total,
            "present_count": present,
            "attendance_rate": _round_percent(present, total),
        })
    return sorted(stats, key=lambda s: s["attendance_rate"], reverse=True)


def get_person_attendance_percentage(db: Session, person_id: str, person_type: str = "student") -> dict:
    q = db.query(AttendanceRecord).filter(
        AttendanceRecord.person_id == person_id,
        AttendanceRecord.person_type == person_type,
    )
    total = q.count()
    present = q.filter(AttendanceRecord.status == PRESENT).count()
    percentage = round(present * 100 / total, 1) if total else 0.0
    return {"person_id": person_id, "total": total, "present": present, "percentage": percentage}
