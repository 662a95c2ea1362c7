from typing import List, Optional

from institute_admin.models.batch import Batch
from institute_admin.repositories.base import BaseRepository


class BatchRepository(BaseRepository):
    """Persistence for the ``batches`` table."""

    def list(self) -> List[Batch]:
        return self._read(
            lambda: self.db.query(Batch).order_by(Batch.start_date.asc(), Batch.id.asc()).all()
        )

    def get(self, batch_id: str) -> Optional[Batch]:
        return self._read(lambda: self.db.query(Batch).filter(Batch.id == batch_id).first())

    def add(self, batch: Batch) -> Batch:
        self.db.add(batch)
        self.flush()
        return batch

    def delete(self, batch: Batch) -> None:
        self.db.delete(batch)
        self.flush()
