"""Attendance API router."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from institute_admin.database import get_db
from institute_admin.schemas.attendance import (
    AttendanceBulkIn,
    AttendanceOut,
    AttendanceStatsOut,
    CourseAttendanceOut,
    PersonAttendanceOut,
)
from institute_admin.services import attendance_service

router = APIRouter(prefix="/api/attendance", tags=["attendance"])


@router.post("/bulk", response_model=List[AttendanceOut])
def bulk_upsert(data: AttendanceBulkIn, db: Session = Depends(get_db)):
    return attendance_service.upsert_attendance(db, data.records)


@router.get("/batch/{batch_id}", response_model=List[AttendanceOut])
def get_by_batch(
    batch_id: str,
    on_date: date | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    return attendance_service.get_attendance_by_batch(db, batch_id, on_date or date.today())


@router.get("/report", response_model=List[AttendanceOut])
def get_report(
    date_from: date,
    date_to: date,
    batch_id: Optional[str] = None,
    course_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return attendance_service.get_attendance_report(db, date_from, date_to, batch_id, course_id)


@router.get("/stats", response_model=AttendanceStatsOut)
def get_stats(batch_id: str, person_id: str, db: Session = Depends(get_db)):
    return attendance_service.get_attendance_stats(db, batch_id, person_id)


@router.get("/per-course", response_model=List[CourseAttendanceOut])
def get_per_course(db: Session = Depends(get_db)):
    return attendance_service.get_attendance_per_course(db)


@router.get("/person/{person_id}", response_model=PersonAttendanceOut)
def get_person_percentage(person_id: str, person_type: str = "student", db: Session = Depends(get_db)):
    return attendance_service.get_person_attendance_percentage(db, person_id, person_type)
