"""Pydantic request/response contracts for batches."""

from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import date, datetime


class BatchCreate(BaseModel):
    course_id: Optional[int] = None
    course_name: Optional[str] = None
    name: Optional[str] = None
    start_date: date
    end_date: date
    trainer_name: Optional[str] = None
    max_students: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None


class BatchUpdate(BaseModel):
    course_name: Optional[str] = None
    name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    trainer_name: Optional[str] = None
    max_students: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    version: Optional[int] = None


class BatchOut(BaseModel):
    id: str
    course_id: Optional[int] = None
    course_name: str
    name: str
    start_date: date
    end_date: date
    status: Literal["Upcoming", "Active", "Completed"]
    total_students: int
    trainer_name: Optional[str] = None
    max_students: Optional[int] = None
    description: Optional[str] = None
    completed_at: Optional[datetime] = None
    notification_sent_at: Optional[datetime] = None
    reactivated_at: Optional[datetime] = None
    duration_days: int
    version: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LifecycleRunOut(BaseModel):
    batches_checked: int
    batches_completed: int
    students_completed: int
    warnings_sent: int
