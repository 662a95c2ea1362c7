"""Pydantic request/response contracts for student records."""

from pydantic import BaseModel
from typing import Literal, Optional
from datetime import date, datetime

StudentStatus = Literal["Active", "Completed", "Admitted", "Pending", "Alumni", "Dropped"]


class StudentBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    qualification: Optional[str] = None
    course_name: Optional[str] = None
    batch_number: Optional[str] = None
    batch_start: Optional[date] = None


class StudentCreate(StudentBase):
    status: StudentStatus = "Active"


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    qualification: Optional[str] = None
    course_name: Optional[str] = None
    batch_number: Optional[str] = None
    batch_start: Optional[date] = None
    status: Optional[StudentStatus] = None


class StudentOut(StudentBase):
    id: int
    status: str
    completed_by_batch: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
