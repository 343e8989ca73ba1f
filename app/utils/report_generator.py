# app/utils/report_generator.py

from datetime import datetime, date, timedelta
from typing import List, Optional
from sqlalchemy import or_, and_
from sqlalchemy.orm import Session
from app.models.activity_log_model import ActivityLog
from app.utils.activity_aggregator import MAX_SLEEP_MINUTES, logged_minutes


def fetch_recent_activities(
    db: Session,
    user_id: int,
    days_back: int,
    now: Optional[datetime] = None,
) -> List[ActivityLog]:
    cutoff = (now or datetime.utcnow()) - timedelta(days=days_back)
    return (
        db.query(ActivityLog)
        .filter(ActivityLog.user_id == user_id, ActivityLog.created_at >= cutoff)
        .order_by(ActivityLog.created_at.asc())
        .all()
    )


def generate_daily_summary(db: Session, user_id: int, day: date):
    # Day interval (00:00 to 23:59)
    day_start = datetime.combine(day, datetime.min.time())
    day_end = datetime.combine(day, datetime.max.time())

    # Records belong to the day of start_time, or created_at when start_time is missing
    activities = db.query(ActivityLog).filter(
        ActivityLog.user_id == user_id,
        or_(
            ActivityLog.start_time.between(day_start, day_end),
            and_(
                ActivityLog.start_time.is_(None),
                ActivityLog.created_at.between(day_start, day_end),
            ),
        ),
    ).order_by(ActivityLog.start_time).all()

    total_sleep = 0
    longest_sleep = 0
    total_feeds = 0
    total_diapers = 0
    total_custom = 0

    for activity in activities:
        if activity.activity_type == "sleep":
            minutes = logged_minutes(activity, MAX_SLEEP_MINUTES) or 0
            total_sleep += minutes
            longest_sleep = max(longest_sleep, minutes)
        elif activity.activity_type == "feeding":
            total_feeds += 1
        elif activity.activity_type == "diaper":
            total_diapers += 1
        elif activity.activity_type == "custom":
            total_custom += 1

    return {
        "date": day.isoformat(),
        "total_sleep_minutes": total_sleep,
        "longest_sleep_minutes": longest_sleep,
        "total_feeds": total_feeds,
        "total_diapers": total_diapers,
        "total_custom": total_custom,
    }
