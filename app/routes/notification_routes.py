import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.models.auth_models import User
from app.models.sleep_schedule_model import ScheduleNotification
from app.schemas.notification_schema import NotificationRead
from app.dependencies.auth import get_current_user
from app.utils.schedule_notifier import apply_suggested_changes
from config.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["schedule notifications"])


def _get_owned_notification(db: Session, notification_id: int, user: User) -> ScheduleNotification:
    notification = (
        db.query(ScheduleNotification)
        .filter_by(id=notification_id, user_id=user.id)
        .first()
    )
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found.")
    return notification


def _ensure_pending(notification: ScheduleNotification) -> None:
    if notification.is_approved is not None:
        raise HTTPException(status_code=409, detail="Notification was already answered.")


@router.get("", response_model=List[NotificationRead])
def list_notifications(
    unread_only: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(ScheduleNotification).filter(ScheduleNotification.user_id == current_user.id)
    if unread_only:
        query = query.filter(ScheduleNotification.is_read.is_(False))
    return query.order_by(ScheduleNotification.created_at.desc(), ScheduleNotification.id.desc()).all()


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = _get_owned_notification(db, notification_id, current_user)
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification


@router.post("/{notification_id}/approve", response_model=NotificationRead)
def approve_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Accepts the suggestion and writes the suggested changes onto the schedule."""
    notification = _get_owned_notification(db, notification_id, current_user)
    _ensure_pending(notification)

    apply_suggested_changes(notification.schedule, notification.suggested_changes or {})
    notification.is_approved = True
    notification.is_read = True

    db.commit()
    db.refresh(notification)
    logger.info(
        "User %s approved notification %s for schedule %s",
        current_user.id, notification.id, notification.sleep_schedule_id,
    )
    return notification


@router.post("/{notification_id}/reject", response_model=NotificationRead)
def reject_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = _get_owned_notification(db, notification_id, current_user)
    _ensure_pending(notification)

    notification.is_approved = False
    notification.is_read = True

    db.commit()
    db.refresh(notification)
    return notification


@router.delete("/{notification_id}")
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = _get_owned_notification(db, notification_id, current_user)
    db.delete(notification)
    db.commit()
    return {"msg": "Notification deleted successfully."}
