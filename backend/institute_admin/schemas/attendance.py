"""Attendance request/response schemas."""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel


class AttendanceUpsert(BaseModel):
    person_type: Literal["student", "teacher"] = "student"
    person_id: str
    person_name: str
    date: date
    status: Literal["Present", "Absent", "On Leave"]
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    notes: Optional[str] = None
    batch_id: Optional[str] = None
    course_id: Optional[int] = None


class AttendanceBulkIn(BaseModel):
    records: List[AttendanceUpsert]


class AttendanceOut(AttendanceUpsert):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AttendanceStatsOut(BaseModel):
    present: int
    absent: int
    leave: int


class CourseAttendanceOut(BaseModel):
    course: str
    total_sessions: int
    present_count: int
    attendance_rate: int


class PersonAttendanceOut(BaseModel):
    person_id: str
    total: int
    present: int
    percentage: float
