# app/utils/schedule_notifier.py

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.models.sleep_schedule_model import SleepSchedule, ScheduleNotification
from app.utils.schedule_recommender import build_schedule_data, get_age_range

logger = logging.getLogger(__name__)

AGE_TRANSITION = "age_transition"


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, never negative."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)


def parse_recorded_on(value) -> Optional[date]:
    """ISO date stored in schedule_data, or None when missing or unreadable."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _age_recorded_on(schedule: SleepSchedule, today: date) -> date:
    recorded = parse_recorded_on((schedule.schedule_data or {}).get("age_recorded_on"))
    if recorded:
        return recorded
    return schedule.created_at.date() if schedule.created_at else today


def current_age_months(schedule: SleepSchedule, today: Optional[date] = None) -> int:
    today = today or date.today()
    return schedule.baby_age_months + months_between(_age_recorded_on(schedule, today), today)


def check_age_transition(
    db: Session,
    schedule: SleepSchedule,
    today: Optional[date] = None,
) -> Optional[ScheduleNotification]:
    """
    Runs when the active schedule is read. If the baby has aged into a
    different recommendation range than the one stored on the schedule, a
    pending notification with the new recommendation is created, unless one
    targeting that range already exists for the schedule (pending or
    answered). Returns the created row or None.
    """
    today = today or date.today()
    age_now = current_age_months(schedule, today)
    stored_range = (schedule.schedule_data or {}).get("age_range") or get_age_range(schedule.baby_age_months)
    new_range = get_age_range(age_now)

    if new_range == stored_range:
        return None

    # A rejected suggestion for the same range is not offered again
    earlier = (
        db.query(ScheduleNotification)
        .filter(
            ScheduleNotification.sleep_schedule_id == schedule.id,
            ScheduleNotification.notification_type == AGE_TRANSITION,
        )
        .all()
    )
    if any((n.suggested_changes or {}).get("to_age_range") == new_range for n in earlier):
        return None

    baseline = (schedule.schedule_data or {}).get("baseline")
    if not isinstance(baseline, dict):
        baseline = {}
    suggested = {
        "from_age_range": stored_range,
        "to_age_range": new_range,
        "baby_age_months": age_now,
        "schedule_data": build_schedule_data(
            age_now,
            baseline.get("bedtime", schedule.current_bedtime),
            baseline.get("wake_time", schedule.current_wake_time),
            baseline.get("sleep_challenges", schedule.sleep_challenges),
            recorded_on=today,
        ),
    }

    notification = ScheduleNotification(
        user_id=schedule.user_id,
        sleep_schedule_id=schedule.id,
        notification_type=AGE_TRANSITION,
        message=(
            f"Your baby is now {age_now} months old. The recommended schedule for "
            f"{new_range} months has different wake windows and naps. Review the suggested update."
        ),
        suggested_changes=suggested,
        is_read=False,
        is_approved=None,
    )
    db.add(notification)
    db.commit()
    db.refresh(notification)

    logger.info(
        "Created age transition notification %s for schedule %s (%s -> %s)",
        notification.id, schedule.id, stored_range, new_range,
    )
    return notification


def apply_suggested_changes(schedule: SleepSchedule, suggested_changes: dict) -> None:
    if "baby_age_months" in suggested_changes:
        schedule.baby_age_months = suggested_changes["baby_age_months"]
    if "schedule_data" in suggested_changes:
        schedule.schedule_data = suggested_changes["schedule_data"]
