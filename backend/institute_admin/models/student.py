"""Student record model. ``batch_number`` is a loose string reference to ``batches.id``."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Index
from sqlalchemy.sql import func
from institute_admin.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150))
    phone = Column(String(30))
    qualification = Column(String(100))
    course_name = Column(String(150))
    batch_number = Column(String(20))
    batch_start = Column(Date)
    status = Column(String(20), nullable=False, default="Active")
    # Set when a batch completion cascade archived this record
    completed_by_batch = Column(String(20))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_students_batch_status", "batch_number", "status"),
    )
