"""
Batch lifecycle rules.

A batch's status is always derived from its date range and the current day:
before the start date it is Upcoming, from start to end (inclusive) it is
Active, after the end date it is Completed. The stored ``status`` column is a
cache refreshed on every write and ignored on reads.

The daily automation completes batches whose end date has passed, archives
their students, and warns once when a batch is inside its final week.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

from institute_admin.config import settings
from institute_admin.errors import ConflictError, NotFoundError, ValidationError
from institute_admin.models.batch import Batch
from institute_admin.repositories import BatchRepository, CourseRepository, StudentRepository

logger = logging.getLogger(__name__)

UPCOMING = "Upcoming"
ACTIVE = "Active"
COMPLETED = "Completed"

DateLike = Union[date, datetime, str, None]

# Substring -> canonical course name. Order matters: first match wins.
COURSE_ALIASES = [
    ("digital marketing", "Digital Marketing"),
    ("web develop", "Web Development"),
    ("full-stack web", "Web Development"),
    ("data science", "Data Science"),
    ("data analytic", "Data Analytics"),
    ("tally", "Tally ERP"),
    ("office admin", "Office Administration"),
]

COURSE_PREFIXES = {
    "Digital Marketing": "DM",
    "Digital Marketing + Graphic Designing": "DM",
    "Web Development": "WD",
    "Data Science": "DA",
    "Data Analytics": "DA",
    "Tally ERP": "TE",
    "Office Administration": "OA",
}

UPDATABLE_FIELDS = {
    "course_name",
    "name",
    "start_date",
    "end_date",
    "trainer_name",
    "max_students",
    "description",
}


def parse_date(value: DateLike) -> Optional[date]:
    """Best-effort conversion to ``date``. Returns None for anything unparsable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def compute_status(start_date: DateLike, end_date: DateLike, today: DateLike = None) -> str:
    start = parse_date(start_date)
    end = parse_date(end_date)
    current = parse_date(today) or date.today()
    if start is None or end is None:
        return UPCOMING
    if current < start:
        return UPCOMING
    if current > end:
        return COMPLETED
    return ACTIVE


def effective_status(batch: Batch, today: Optional[date] = None) -> str:
    """Derived status with a manual reactivation hold applied on top."""
    status = compute_status(batch.start_date, batch.end_date, today)
    if status == COMPLETED and batch.reactivated_at is not None and batch.completed_at is None:
        return ACTIVE
    return status


def normalize_course_name(course: Optional[str]) -> str:
    c = (course or "").strip().lower()
    for needle, canonical in COURSE_ALIASES:
        if needle in c:
            return canonical
    return course or "Course"


def course_prefix(course: Optional[str]) -> str:
    normalized = normalize_course_name(course)
    if normalized in COURSE_PREFIXES:
        return COURSE_PREFIXES[normalized]
    parts = normalized.split()
    first = parts[0][0] if len(parts) > 0 else "X"
    second = parts[1][0] if len(parts) > 1 else "X"
    return (first + second).upper()


def make_batch_id(prefix: str, sequence: int) -> str:
    # WDB1, WDB2, DMB1 (no year component)
    return f"{prefix}B{sequence}"


def legacy_batch_id(prefix: str, year: int, sequence: int) -> str:
    # Year-infixed variant used by older records, e.g. WD251
    return f"{prefix}{year % 100:02d}{sequence}"


def duration_days(start_date: DateLike, end_date: DateLike) -> int:
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        return 1
    return max(1, (end - start).days)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_date(value: DateLike, field: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD).")
    return parsed


class BatchLifecycleManager:
    """
    Reads, writes and automates batches over injected repositories.

    Each mutating operation is a single unit of work: the batch change, any
    student cascade and any notification are committed together.
    """

    def __init__(
        self,
        batches: BatchRepository,
        students: StudentRepository,
        courses: Optional[CourseRepository] = None,
        notifier=None,
        warning_days: Optional[int] = None,
    ):
        self.batches = batches
        self.students = students
        self.courses = courses
        self.notifier = notifier
        self.warning_days = settings.BATCH_WARNING_DAYS if warning_days is None else warning_days

    def _view(self, batch: Batch, counts: Dict[str, int], today: date) -> Dict[str, Any]:
        return {
            "id": batch.id,
            "course_id": batch.course_id,
            "course_name": batch.course_name,
            "name": batch.name,
            "start_date": batch.start_date,
            "end_date": batch.end_date,
            "status": effective_status(batch, today),
            "total_students": counts.get(batch.id, 0),
            "trainer_name": batch.trainer_name,
            "max_students": batch.max_students,
            "description": batch.description,
            "completed_at": batch.completed_at,
            "notification_sent_at": batch.notification_sent_at,
            "reactivated_at": batch.reactivated_at,
            "duration_days": duration_days(batch.start_date, batch.end_date),
            "version": batch.version,
            "created_at": batch.created_at,
            "updated_at": batch.updated_at,
        }

    def list_batches(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        today = today or date.today()
        counts = self.students.count_by_batch()
        return [self._view(batch, counts, today) for batch in self.batches.list()]

    def get_batch(self, batch_id: str, today: Optional[date] = None) -> Dict[str, Any]:
        today = today or date.today()
        batch = self._get_row(batch_id)
        return self._view(batch, self.students.count_by_batch(), today)

    def get_completed_batches(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        return [b for b in self.list_batches(today) if b["status"] == COMPLETED]

    def get_active_batches(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        return [b for b in self.list_batches(today) if b["status"] == ACTIVE]

    def _get_row(self, batch_id: str) -> Batch:
        batch = self.batches.get(batch_id)
        if batch is None:
            raise NotFoundError(f"Batch {batch_id} not found.")
        return batch

    def next_sequence(self, course_name: str, start_date: date, prefix: str) -> int:
        """
        Next free sequence number for a course within the start date's year.

        Counts existing batches of the same normalized course that start in the
        same calendar year, then skips any number whose id (plain or legacy
        year-infixed) is already taken.
        """
        existing = self.batches.list()
        normalized = normalize_course_name(course_name)
        year = start_date.year
        count = sum(
            1
            for b in existing
            if normalize_course_name(b.course_name) == normalized and b.start_date.year == year
        )
        taken = {b.id for b in existing}
        seq = count + 1
        while make_batch_id(prefix, seq) in taken or legacy_batch_id(prefix, year, seq) in taken:
            seq += 1
        return seq

    def _resolve_course(self, payload: Dict[str, Any]):
        course_id = payload.get("course_id")
        course_name = (payload.get("course_name") or "").strip()
        if course_id is not None and self.courses is not None:
            course = self.courses.get(course_id)
            if course is None:
                raise NotFoundError(f"Course {course_id} not found.")
            return course_id, course_name or course.name, course.code
        if not course_name:
            raise ValidationError("course_name or course_id is required.")
        return course_id, course_name, course_prefix(course_name)

    def create_batch(self, payload: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
        today = today or date.today()
        start = _require_date(payload.get("start_date"), "start_date")
        end = _require_date(payload.get("end_date"), "end_date")
        if end < start:
            raise ValidationError("end_date must not be before start_date.")

        course_id, course_name, prefix = self._resolve_course(payload)
        seq = self.next_sequence(course_name, start, prefix)
        batch_id = make_batch_id(prefix, seq)
        name = (payload.get("name") or "").strip() or batch_id

        batch = Batch(
            id=batch_id,
            course_id=course_id,
            course_name=course_name,
            name=name,
            start_date=start,
            end_date=end,
            status=compute_status(start, end, today),
            trainer_name=payload.get("trainer_name"),
            max_students=payload.get("max_students"),
            description=payload.get("description"),
        )
        self.batches.add(batch)
        self.batches.commit()
        self.batches.refresh(batch)
        logger.info("[batch-lifecycle] created batch %s (%s, %s..%s)", batch_id, course_name, start, end)
        return self._view(batch, {}, today)

    def update_batch(self, batch_id: str, patch: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
        today = today or date.today()
        batch = self._get_row(batch_id)
        patch = dict(patch)

        expected_version = patch.pop("version", None)
        if expected_version is not None and expected_version != batch.version:
            raise ConflictError(f"Batch {batch_id} was modified by someone else.")

        unknown = set(patch) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        if "start_date" in patch:
            patch["start_date"] = _require_date(patch["start_date"], "start_date")
        if "end_date" in patch:
            patch["end_date"] = _require_date(patch["end_date"], "end_date")
        start = patch.get("start_date", batch.start_date)
        end = patch.get("end_date", batch.end_date)
        if end < start:
            raise ValidationError("end_date must not be before start_date.")

        if "end_date" in patch and patch["end_date"] != batch.end_date:
            batch.reactivated_at = None
            batch.notification_sent_at = None
            if batch.completed_at is not None and compute_status(start, end, today) != COMPLETED:
                # Extended past today: reopen so the automation completes it again later
                batch.completed_at = None
                restored = self.students.reactivate_for_batch(batch_id)
                logger.info(
                    "[batch-lifecycle] batch %s reopened by new end date %s, %s student(s) restored",
                    batch_id,
                    end,
                    restored,
                )

        for k, v in patch.items():
            setattr(batch, k, v)
        batch.status = effective_status(batch, today)

        self.batches.commit()
        self.batches.refresh(batch)
        return self._view(batch, self.students.count_by_batch(), today)

    def delete_batch(self, batch_id: str) -> None:
        # Students keep their batch_number; see student_service.get_orphaned_students
        batch = self._get_row(batch_id)
        self.batches.delete(batch)
        self.batches.commit()
        logger.info("[batch-lifecycle] deleted batch %s", batch_id)

    def reactivate_batch(self, batch_id: str, today: Optional[date] = None) -> Dict[str, Any]:
        today = today or date.today()
        batch = self._get_row(batch_id)

        changed = False
        if batch.completed_at is not None:
            batch.completed_at = None
            changed = True
        if (
            compute_status(batch.start_date, batch.end_date, today) == COMPLETED
            and batch.reactivated_at is None
        ):
            batch.reactivated_at = _now()
            changed = True
        restored = self.students.reactivate_for_batch(batch_id)

        if changed or restored:
            batch.status = effective_status(batch, today)
            self.batches.commit()
            self.batches.refresh(batch)
            logger.info("[batch-lifecycle] reactivated batch %s, %s student(s) restored", batch_id, restored)
        return self._view(batch, self.students.count_by_batch(), today)

    def run_lifecycle_automation(self, today: Optional[date] = None) -> Dict[str, int]:
        """
        One pass of the daily lifecycle job.

        Completion is guarded by ``completed_at`` and the warning by
        ``notification_sent_at``, so running twice on the same day changes
        nothing the second time. Batches under a reactivation hold are skipped.
        """
        today = today or date.today()
        summary = {
            "batches_checked": 0,
            "batches_completed": 0,
            "students_completed": 0,
            "warnings_sent": 0,
        }

        for batch in self.batches.list():
            summary["batches_checked"] += 1
            if batch.reactivated_at is not None:
                continue

            if today > batch.end_date and batch.completed_at is None:
                batch.status = COMPLETED
                batch.completed_at = _now()
                archived = self.students.complete_for_batch(batch.id)
                if self.notifier is not None:
                    self.notifier.batch_completed(batch.name, batch.id)
                summary["batches_completed"] += 1
                summary["students_completed"] += archived
                logger.info("[batch-lifecycle] batch %s completed, %s student(s) archived", batch.id, archived)
                continue

            warn_from = batch.end_date - timedelta(days=self.warning_days)
            if (
                warn_from <= today < batch.end_date
                and today >= batch.start_date
                and batch.notification_sent_at is None
            ):
                days_remaining = (batch.end_date - today).days
                batch.notification_sent_at = _now()
                if self.notifier is not None:
                    self.notifier.batch_ending_soon(batch.name, batch.id, days_remaining)
                summary["warnings_sent"] += 1
                logger.info("[batch-lifecycle] batch %s ends in %s day(s), warning sent", batch.id, days_remaining)

        if summary["batches_completed"] or summary["warnings_sent"]:
            self.batches.commit()
        return summary

