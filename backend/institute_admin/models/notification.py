from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index
from sqlalchemy.sql import func
from institute_admin.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    noti_type = Column(String(30), nullable=False)
    # batch-completion/batch-warning/student-admitted
    title = Column(String(200), nullable=False)
    message = Column(Text)
    batch_id = Column(String(20))
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_notification_read", "is_read", "created_at"),
    )
