import logging
from typing import Callable, TypeVar

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from institute_admin.config import settings
from institute_admin.errors import ConflictError, StorageUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository:
    """
    Shared session handling for repositories.

    Reads are retried ``STORAGE_RETRY_ATTEMPTS`` times on operational errors and
    then surfaced as ``StorageUnavailable``. Writes are only flushed here; the
    caller decides when the unit of work is committed.
    """

    def __init__(self, db: Session):
        self.db = db

    def _read(self, fn: Callable[[], T]) -> T:
        attempts = 1 + max(0, settings.STORAGE_RETRY_ATTEMPTS)
        for attempt in range(1, attempts + 1):
            try:
                return fn()
            except OperationalError as exc:
                self.db.rollback()
                if attempt >= attempts:
                    logger.error("[storage] read failed after %s attempt(s): %s", attempt, exc)
                    raise StorageUnavailable("Storage is unavailable.") from exc
                logger.warning("[storage] read failed (attempt %s/%s), retrying: %s", attempt, attempts, exc)

    def flush(self) -> None:
        try:
            self.db.flush()
        except (IntegrityError, StaleDataError) as exc:
            self.db.rollback()
            raise ConflictError("The record was changed or already exists.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("[storage] flush failed: %s", exc)
            raise StorageUnavailable("Storage is unavailable.") from exc

    def commit(self) -> None:
        try:
            self.db.commit()
        except (IntegrityError, StaleDataError) as exc:
            self.db.rollback()
            raise ConflictError("The record was changed or already exists.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("[storage] commit failed: %s", exc)
            raise StorageUnavailable("Storage is unavailable.") from exc

    def refresh(self, instance) -> None:
        self.db.refresh(instance)
