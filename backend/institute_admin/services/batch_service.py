"""Batch service layer. Binds the lifecycle manager to a request-scoped session."""

from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from institute_admin.repositories import BatchRepository, CourseRepository, StudentRepository
from institute_admin.schemas.batch import BatchCreate, BatchUpdate
from institute_admin.services.batch_lifecycle import BatchLifecycleManager
from institute_admin.services.notification_service import NotificationSink


def get_manager(db: Session) -> BatchLifecycleManager:
    return BatchLifecycleManager(
        batches=BatchRepository(db),
        students=StudentRepository(db),
        courses=CourseRepository(db),
        notifier=NotificationSink(db),
    )


def get_batches(db: Session, today: Optional[date] = None):
    return get_manager(db).list_batches(today)


def get_batch(db: Session, batch_id: str, today: Optional[date] = None):
    return get_manager(db).get_batch(batch_id, today)


def get_completed_batches(db: Session, today: Optional[date] = None):
    return get_manager(db).get_completed_batches(today)


def get_active_batches(db: Session, today: Optional[date] = None):
    return get_manager(db).get_active_batches(today)


def create_batch(db: Session, data: BatchCreate, today: Optional[date] = None):
    return get_manager(db).create_batch(data.model_dump(), today)


def update_batch(db: Session, batch_id: str, data: BatchUpdate, today: Optional[date] = None):
    return get_manager(db).update_batch(batch_id, data.model_dump(exclude_none=True), today)


def delete_batch(db: Session, batch_id: str):
    get_manager(db).delete_batch(batch_id)


def reactivate_batch(db: Session, batch_id: str, today: Optional[date] = None):
    return get_manager(db).reactivate_batch(batch_id, today)


def run_batch_lifecycle_automation(db: Session, today: Optional[date] = None) -> dict:
    return get_manager(db).run_lifecycle_automation(today)
