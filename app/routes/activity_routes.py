import logging
from datetime import datetime
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Body, Query
from sqlalchemy.orm import Session

from app.models.activity_log_model import ActivityLog
from app.models.auth_models import User
from app.schemas.activity_log_schema import (
    ActivityLogCreate,
    ActivityLogUpdate,
    ActivityLogRead,
    ActivityType,
)
from app.utils.time_utils import calculate_duration, to_naive_utc
from config.database import get_db
from app.dependencies.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activities", tags=["activities"])


def _derive_duration(log: ActivityLog) -> None:
    # Start and end times win over a duration typed in by hand
    if log.start_time and log.end_time:
        log.duration = calculate_duration(log.start_time, log.end_time)


def _get_owned_log(db: Session, log_id: int, user: User) -> ActivityLog:
    log = db.query(ActivityLog).filter_by(id=log_id, user_id=user.id).first()
    if not log:
        raise HTTPException(status_code=404, detail="Activity log not found.")
    return log


@router.post("", status_code=201)
def create_activity(
    # Body is a single ActivityLogCreate or a list of them
    activities: Union[ActivityLogCreate, List[ActivityLogCreate]] = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    A single object creates one record; a list creates them all in one
    transaction.
    """
    activity_list = activities if isinstance(activities, list) else [activities]

    created = []
    for data in activity_list:
        new_log = ActivityLog(user_id=current_user.id, **data.model_dump())
        _derive_duration(new_log)
        db.add(new_log)
        db.flush()  # assigns new_log.id before commit
        created.append({
            "id": new_log.id,
            "activity_type": new_log.activity_type,
            "duration": new_log.duration,
        })

    db.commit()
    logger.info("User %s logged %d activities", current_user.id, len(created))

    return {
        "msg": "Activities logged successfully.",
        "created": created,
    }


@router.get("", response_model=List[ActivityLogRead])
def list_activities(
    activity_type: Optional[ActivityType] = Query(None),
    since: Optional[datetime] = Query(None),
    until: Optional[datetime] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(ActivityLog).filter(ActivityLog.user_id == current_user.id)

    if activity_type:
        query = query.filter(ActivityLog.activity_type == activity_type)
    if since:
        query = query.filter(ActivityLog.created_at >= to_naive_utc(since))
    if until:
        query = query.filter(ActivityLog.created_at <= to_naive_utc(until))

    query = query.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


@router.get("/{log_id}", response_model=ActivityLogRead)
def get_activity(
    log_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return _get_owned_log(db, log_id, current_user)


@router.put("/{log_id}", response_model=ActivityLogRead)
def update_activity(
    log_id: int,
    log_update: ActivityLogUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    log = _get_owned_log(db, log_id, current_user)

    changes = log_update.model_dump(exclude_unset=True)
    if changes.get("activity_type") is None:
        changes.pop("activity_type", None)
    for field, value in changes.items():
        setattr(log, field, value)

    if log.activity_type == "sleep" and log.start_time is None:
        raise HTTPException(status_code=422, detail="start_time is required for sleep tracking")
    if log.activity_type == "custom" and not log.custom_activity_name:
        raise HTTPException(status_code=422, detail="custom_activity_name is required for custom activities")

    if "start_time" in changes or "end_time" in changes:
        if log.start_time and log.end_time:
            _derive_duration(log)
        elif "duration" not in changes:
            # A cleared time leaves nothing to derive the old duration from
            log.duration = None

    db.commit()
    db.refresh(log)
    logger.info("User %s updated activity %s", current_user.id, log.id)
    return log


@router.delete("/{log_id}")
def delete_activity(
    log_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    log = _get_owned_log(db, log_id, current_user)

    db.delete(log)
    db.commit()
    logger.info("User %s deleted activity %s", current_user.id, log_id)

    return {"msg": "Activity log deleted successfully."}
