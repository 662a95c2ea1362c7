"""Notification API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from institute_admin.database import get_db
from institute_admin.schemas.notification import NotificationOut
from institute_admin.services import notification_service

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=List[NotificationOut])
def list_notifications(unread_only: bool = False, db: Session = Depends(get_db)):
    return notification_service.get_notifications(db, unread_only)


@router.patch("/{noti_id}/read", response_model=NotificationOut)
def mark_read(noti_id: int, db: Session = Depends(get_db)):
    return notification_service.mark_read(db, noti_id)


@router.post("/read-all")
def mark_all_read(db: Session = Depends(get_db)):
    updated = notification_service.mark_all_read(db)
    return {"message": "All notifications marked as read.", "updated": updated}


@router.delete("")
def clear_notifications(db: Session = Depends(get_db)):
    deleted = notification_service.clear_notifications(db)
    return {"message": "Notifications cleared.", "deleted": deleted}
