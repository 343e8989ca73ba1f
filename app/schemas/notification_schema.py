# app/schemas/notification_schema.py

from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel


class NotificationRead(BaseModel):
    id: int
    user_id: int
    sleep_schedule_id: int
    notification_type: str
    message: str
    suggested_changes: Dict[str, Any]
    is_read: bool
    is_approved: Optional[bool]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
