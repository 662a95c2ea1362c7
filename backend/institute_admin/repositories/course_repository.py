from typing import Optional

from institute_admin.models.course import Course
from institute_admin.repositories.base import BaseRepository


class CourseRepository(BaseRepository):
    def get(self, course_id: int) -> Optional[Course]:
        return self._read(lambda: self.db.query(Course).filter(Course.id == course_id).first())
