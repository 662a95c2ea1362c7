from typing import Dict, List

from sqlalchemy import func

from institute_admin.models.student import Student
from institute_admin.repositories.base import BaseRepository

ACTIVE = "Active"
COMPLETED = "Completed"


class StudentRepository(BaseRepository):
    """
    Student records as seen by the batch lifecycle.

    Students point at batches through the free-text ``batch_number`` column, so
    every lookup compares the trimmed value against the batch id.
    """

    def _batch_key(self):
        return func.trim(Student.batch_number)

    def count_by_batch(self) -> Dict[str, int]:
        key = self._batch_key()
        rows = self._read(
            lambda: self.db.query(key, func.count(Student.id))
            .filter(Student.batch_number.isnot(None))
            .group_by(key)
            .all()
        )
        return {batch_id: count for batch_id, count in rows if batch_id}

    def list_by_batch(self, batch_id: str) -> List[Student]:
        return self._read(
            lambda: self.db.query(Student)
            .filter(self._batch_key() == batch_id)
            .order_by(Student.name.asc())
            .all()
        )

    def complete_for_batch(self, batch_id: str) -> int:
        """Archive the batch's active students. Returns how many records changed."""
        rows = self._read(
            lambda: self.db.query(Student)
            .filter(self._batch_key() == batch_id, Student.status == ACTIVE)
            .all()
        )
        for row in rows:
            row.status = COMPLETED
            row.completed_by_batch = batch_id
        self.flush()
        return len(rows)

    def reactivate_for_batch(self, batch_id: str) -> int:
        """Undo ``complete_for_batch`` for exactly the records it archived."""
        rows = self._read(
            lambda: self.db.query(Student)
            .filter(
                self._batch_key() == batch_id,
                Student.status == COMPLETED,
                Student.completed_by_batch == batch_id,
            )
            .all()
        )
        for row in rows:
            row.status = ACTIVE
            row.completed_by_batch = None
        self.flush()
        return len(rows)
