"""SQLAlchemy model package."""

from institute_admin.models.batch import Batch
from institute_admin.models.course import Course
from institute_admin.models.student import Student
from institute_admin.models.notification import Notification
from institute_admin.models.attendance import AttendanceRecord
from institute_admin.models.lead import ExamResult, Lead

__all__ = [
    "Batch",
    "Course",
    "Student",
    "Notification",
    "AttendanceRecord",
    "Lead",
    "ExamResult",
]
