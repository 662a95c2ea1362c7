"""Pydantic response contracts for notifications."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class NotificationOut(BaseModel):
    id: int
    noti_type: str
    title: str
    message: Optional[str]
    batch_id: Optional[str]
    is_read: bool
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
