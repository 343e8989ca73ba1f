import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.models.auth_models import User
from app.models.sleep_schedule_model import SleepSchedule
from app.schemas.sleep_schedule_schema import (
    Recommendation,
    SleepScheduleCreate,
    SleepScheduleRead,
    SleepScheduleUpdate,
)
from app.dependencies.auth import get_current_user
from app.utils.schedule_notifier import check_age_transition, parse_recorded_on
from app.utils.schedule_recommender import build_schedule_data, get_recommendation
from config.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["sleep schedules"])


def _get_owned_schedule(db: Session, schedule_id: int, user: User) -> SleepSchedule:
    schedule = db.query(SleepSchedule).filter_by(id=schedule_id, user_id=user.id).first()
    if not schedule:
        raise HTTPException(status_code=404, detail="Sleep schedule not found.")
    return schedule


def _deactivate_others(db: Session, user: User, keep_id: int) -> None:
    (
        db.query(SleepSchedule)
        .filter(
            SleepSchedule.user_id == user.id,
            SleepSchedule.id != keep_id,
            SleepSchedule.is_active.is_(True),
        )
        .update({SleepSchedule.is_active: False}, synchronize_session="fetch")
    )


@router.get("/recommendations", response_model=Recommendation)
def get_schedule_recommendation(age_months: int = Query(..., ge=0, le=60)):
    """Recommended timetable for the age range the baby falls into."""
    return get_recommendation(age_months)


@router.post("", status_code=201, response_model=SleepScheduleRead)
def create_schedule(
    data: SleepScheduleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    schedule_data = data.schedule_data or build_schedule_data(
        data.baby_age_months,
        data.current_bedtime,
        data.current_wake_time,
        data.sleep_challenges,
    )

    schedule = SleepSchedule(
        user_id=current_user.id,
        baby_age_months=data.baby_age_months,
        current_bedtime=data.current_bedtime,
        current_wake_time=data.current_wake_time,
        nap_habits=data.nap_habits,
        sleep_challenges=data.sleep_challenges,
        schedule_data=schedule_data,
        is_active=data.is_active,
    )
    db.add(schedule)
    db.flush()

    if schedule.is_active:
        _deactivate_others(db, current_user, schedule.id)

    db.commit()
    db.refresh(schedule)
    logger.info("User %s created sleep schedule %s", current_user.id, schedule.id)
    return schedule


@router.get("", response_model=List[SleepScheduleRead])
def list_schedules(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        db.query(SleepSchedule)
        .filter(SleepSchedule.user_id == current_user.id)
        .order_by(SleepSchedule.created_at.desc(), SleepSchedule.id.desc())
        .all()
    )


@router.get("/active", response_model=SleepScheduleRead)
def get_active_schedule(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Returns the active schedule. Reading it also runs the age check, which
    may leave a pending notification suggesting the next age range.
    """
    schedule = (
        db.query(SleepSchedule)
        .filter_by(user_id=current_user.id, is_active=True)
        .order_by(SleepSchedule.created_at.desc(), SleepSchedule.id.desc())
        .first()
    )
    if not schedule:
        raise HTTPException(status_code=404, detail="No active sleep schedule.")

    check_age_transition(db, schedule)
    return schedule


@router.get("/{schedule_id}", response_model=SleepScheduleRead)
def get_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return _get_owned_schedule(db, schedule_id, current_user)


@router.put("/{schedule_id}", response_model=SleepScheduleRead)
def update_schedule(
    schedule_id: int,
    schedule_update: SleepScheduleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    schedule = _get_owned_schedule(db, schedule_id, current_user)
    previous_recorded_on = (schedule.schedule_data or {}).get("age_recorded_on")

    changes = schedule_update.model_dump(exclude_unset=True)
    explicit_data = changes.pop("schedule_data", None)
    for field, value in changes.items():
        setattr(schedule, field, value)

    if explicit_data is not None:
        schedule.schedule_data = explicit_data
    elif changes.keys() & {"baby_age_months", "current_bedtime", "current_wake_time", "sleep_challenges"}:
        # The age clock only restarts when the age itself was edited
        recorded_on = None
        if "baby_age_months" not in changes:
            recorded_on = parse_recorded_on(previous_recorded_on)
        schedule.schedule_data = build_schedule_data(
            schedule.baby_age_months,
            schedule.current_bedtime,
            schedule.current_wake_time,
            schedule.sleep_challenges,
            recorded_on=recorded_on,
        )

    db.commit()
    db.refresh(schedule)
    logger.info("User %s updated sleep schedule %s", current_user.id, schedule.id)
    return schedule


@router.post("/{schedule_id}/activate", response_model=SleepScheduleRead)
def activate_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    schedule = _get_owned_schedule(db, schedule_id, current_user)
    schedule.is_active = True
    _deactivate_others(db, current_user, schedule.id)

    db.commit()
    db.refresh(schedule)
    return schedule


@router.delete("/{schedule_id}")
def delete_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    schedule = _get_owned_schedule(db, schedule_id, current_user)

    db.delete(schedule)
    db.commit()
    logger.info("User %s deleted sleep schedule %s", current_user.id, schedule_id)

    return {"msg": "Sleep schedule deleted successfully."}
