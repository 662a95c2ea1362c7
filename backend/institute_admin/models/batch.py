"""Batch model. ``status`` is a cache of the date-derived status, never the source of truth."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text
from sqlalchemy.sql import func
from institute_admin.database import Base


class Batch(Base):
    __tablename__ = "batches"

    id = Column(String(20), primary_key=True)  # e.g. WDB1
    course_id = Column(Integer, nullable=True, index=True)
    course_name = Column(String(150), nullable=False)
    name = Column(String(150), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="Upcoming")  # Upcoming/Active/Completed
    trainer_name = Column(String(100))
    max_students = Column(Integer)
    description = Column(Text)
    completed_at = Column(DateTime)
    notification_sent_at = Column(DateTime)
    # Manual reactivation hold; cleared when the end date changes
    reactivated_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Batch(id={self.id}, course={self.course_name}, status={self.status})>"
