"""Repository package. Repositories wrap a SQLAlchemy session for the lifecycle manager."""

from institute_admin.repositories.batch_repository import BatchRepository
from institute_admin.repositories.course_repository import CourseRepository
from institute_admin.repositories.student_repository import StudentRepository

__all__ = ["BatchRepository", "CourseRepository", "StudentRepository"]
