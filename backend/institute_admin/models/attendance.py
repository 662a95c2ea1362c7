"""Daily attendance records for students and teachers."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, UniqueConstraint
from sqlalchemy.sql import func

from institute_admin.database import Base


class AttendanceRecord(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    person_type = Column(String(10), nullable=False)  # student/teacher
    person_id = Column(String(50), nullable=False)
    person_name = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    check_in = Column(String(10))
    check_out = Column(String(10))
    status = Column(String(20), nullable=False)  # Present/Absent/On Leave
    notes = Column(Text)
    batch_id = Column(String(20), index=True)
    course_id = Column(Integer, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("person_type", "person_id", "date", name="uq_attendance_person_date"),
    )
