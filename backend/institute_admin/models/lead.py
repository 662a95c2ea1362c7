"""Enquiry leads and the exam results submitted for them through form webhooks."""

from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from institute_admin.database import Base


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, default="")
    email = Column(String(150), index=True)
    phone = Column(String(30), index=True)
    course = Column(String(150))
    qualification = Column(String(100))
    source = Column(String(100))
    status = Column(String(30), nullable=False, default="New Enquiry")
    remarks = Column(Text)
    entrance_score = Column(Float)
    final_score = Column(Float)
    # Matched student record, if the enquirer is already enrolled
    student_id = Column(Integer, ForeignKey("students.id", ondelete="SET NULL"))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class ExamResult(Base):
    __tablename__ = "exam_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    exam_type = Column(String(20), nullable=False)  # entrance_exam/main_exam/internal_exam
    name = Column(String(100))
    email = Column(String(150))
    phone = Column(String(30))
    course = Column(String(150))
    exam = Column(String(150))
    score = Column(Float)
    total_marks = Column(Float)
    lead_id = Column(Integer, ForeignKey("leads.id", ondelete="SET NULL"))
    student_id = Column(Integer, ForeignKey("students.id", ondelete="SET NULL"))
    submitted_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_exam_results_type_submitted", "exam_type", "submitted_at"),
    )
