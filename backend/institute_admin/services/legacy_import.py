"""
Import of the browser-storage era JSON blobs (batch list and student records).

Records are validated against ``LegacyBatch`` / ``LegacyStudent``. Anything that
does not fit raises ``DecodeError`` naming the offending record instead of being
skipped silently.
"""

import logging
from typing import Dict, List

from pydantic import TypeAdapter, ValidationError as SchemaError
from sqlalchemy.orm import Session

from institute_admin.errors import DecodeError
from institute_admin.models.batch import Batch
from institute_admin.models.student import Student
from institute_admin.schemas.legacy import LegacyBatch, LegacyStudent
from institute_admin.services.batch_lifecycle import compute_status

logger = logging.getLogger(__name__)

_batch_list = TypeAdapter(List[LegacyBatch])
_student_list = TypeAdapter(List[LegacyStudent])


def _describe(label: str, exc: SchemaError) -> str:
    err = exc.errors()[0]
    where = label + "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in err.get("loc", ()))
    return f"{where}: {err['msg']}"


def _validate(adapter: TypeAdapter, raw: str, label: str) -> list:
    if not raw or not raw.strip():
        return []
    try:
        return adapter.validate_json(raw)
    except SchemaError as exc:
        raise DecodeError(_describe(label, exc)) from exc


def decode_batches(raw: str) -> List[Batch]:
    return [
        Batch(
            id=record.id,
            course_name=record.course,
            name=(record.name or "").strip() or record.id,
            start_date=record.start_date,
            end_date=record.end_date,
            status=compute_status(record.start_date, record.end_date),
            trainer_name=record.trainer,
            max_students=record.max_students,
            description=record.description,
            completed_at=record.completed_at,
            notification_sent_at=record.notification_sent_at,
        )
        for record in _validate(_batch_list, raw, "batches")
    ]


def decode_students(raw: str) -> List[Student]:
    return [
        Student(
            name=record.name,
            email=record.email,
            phone=record.phone,
            qualification=record.qualification,
            course_name=record.course,
            batch_number=record.batch_number,
            batch_start=record.batch_start,
            status=record.status,
        )
        for record in _validate(_student_list, raw, "student-records")
    ]


def import_legacy(db: Session, batches_raw: str = "", students_raw: str = "") -> Dict[str, int]:
    """Decode both blobs first, then insert in one transaction. Existing batch ids are kept."""
    batches = decode_batches(batches_raw)
    students = decode_students(students_raw)

    existing_ids = {row[0] for row in db.query(Batch.id).all()}
    imported_batches = 0
    skipped_batches = 0
    for batch in batches:
        if batch.id in existing_ids:
            logger.warning("[legacy-import] batch %s already exists, skipped", batch.id)
            skipped_batches += 1
            continue
        existing_ids.add(batch.id)
        db.add(batch)
        imported_batches += 1
    db.add_all(students)
    db.commit()

    logger.info(
        "[legacy-import] imported %s batch(es), %s student(s); skipped %s batch(es)",
        imported_batches,
        len(students),
        skipped_batches,
    )
    return {
        "batches_imported": imported_batches,
        "batches_skipped": skipped_batches,
        "students_imported": len(students),
    }
