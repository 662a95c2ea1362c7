"""Notification service layer. In-app notifications only, there is no delivery channel."""

import logging
from sqlalchemy.orm import Session
from institute_admin.errors import NotFoundError, ValidationError
from institute_admin.models.notification import Notification
from typing import List, Optional

logger = logging.getLogger(__name__)

BATCH_COMPLETION = "batch-completion"
BATCH_WARNING = "batch-warning"
STUDENT_ADMITTED = "student-admitted"

SUPPORTED_TYPES = {BATCH_COMPLETION, BATCH_WARNING, STUDENT_ADMITTED}


def get_notifications(db: Session, unread_only: bool = False) -> List[Notification]:
    q = db.query(Notification)
    if unread_only:
        q = q.filter(Notification.is_read == False)
    return q.order_by(Notification.created_at.desc(), Notification.id.desc()).limit(50).all()


def add_notification(
    db: Session,
    noti_type: str,
    title: str,
    message: Optional[str] = None,
    batch_id: Optional[str] = None,
    commit: bool = True,
) -> Notification:
    if noti_type not in SUPPORTED_TYPES:
        raise ValidationError(f"Unsupported notification type: {noti_type}")
    noti = Notification(
        noti_type=noti_type,
        title=title,
        message=message,
        batch_id=batch_id,
        is_read=False,
    )
    db.add(noti)
    if commit:
        db.commit()
        db.refresh(noti)
    else:
        db.flush()
    logger.info("[notifications] %s: %s", noti_type, title)
    return noti


def mark_read(db: Session, noti_id: int) -> Notification:
    noti = db.query(Notification).filter(Notification.id == noti_id).first()
    if not noti:
        raise NotFoundError(f"Notification {noti_id} not found.")
    noti.is_read = True
    db.commit()
    db.refresh(noti)
    return noti


def mark_all_read(db: Session) -> int:
    updated = db.query(Notification).filter(Notification.is_read == False).update({"is_read": True})
    db.commit()
    return updated


def clear_notifications(db: Session) -> int:
    deleted = db.query(Notification).delete()
    db.commit()
    return deleted


def create_batch_completion_notification(db: Session, batch_name: str, batch_id: str, commit: bool = True):
    return add_notification(
        db,
        BATCH_COMPLETION,
        "Batch Completed",
        f'Batch "{batch_name}" has been automatically marked as completed. All students have been archived.',
        batch_id=batch_id,
        commit=commit,
    )


def create_batch_warning_notification(
    db: Session, batch_name: str, batch_id: str, days_remaining: int, commit: bool = True
):
    return add_notification(
        db,
        BATCH_WARNING,
        "Batch Ending Soon",
        f'Batch "{batch_name}" will end in {days_remaining} days. Prepare for batch completion.',
        batch_id=batch_id,
        commit=commit,
    )


class NotificationSink:
    """Adds lifecycle notifications to the caller's unit of work without committing."""

    def __init__(self, db: Session):
        self.db = db

    def batch_completed(self, batch_name: str, batch_id: str) -> Notification:
        return create_batch_completion_notification(self.db, batch_name, batch_id, commit=False)

    def batch_ending_soon(self, batch_name: str, batch_id: str, days_remaining: int) -> Notification:
        return create_batch_warning_notification(self.db, batch_name, batch_id, days_remaining, commit=False)
