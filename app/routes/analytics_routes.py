from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from config.database import get_db
from config.settings import ANALYTICS_WINDOW_DAYS, ANALYTICS_MAX_DAYS
from app.models.auth_models import User
from app.dependencies.auth import get_current_user
from app.schemas.report_schema import (
    AnalyticsSummary,
    DailyReportResponse,
    FeedingDayOut,
    SleepDayOut,
)
from app.utils.activity_aggregator import aggregate_feeding, aggregate_sleep
from app.utils.expert_tips import (
    average_feedings,
    average_sleep,
    average_wakings,
    build_expert_tips,
    sleep_trend,
)
from app.utils.report_generator import fetch_recent_activities, generate_daily_summary

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/daily", response_model=DailyReportResponse)
def get_daily_report(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Totals for one day (today by default):
    - total_sleep_minutes / longest_sleep_minutes
    - total_feeds, total_diapers, total_custom
    """
    return generate_daily_summary(db, current_user.id, day or date.today())


@router.get("/sleep", response_model=List[SleepDayOut])
def get_sleep_analytics(
    days: int = Query(ANALYTICS_WINDOW_DAYS, ge=1, le=365),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    activities = fetch_recent_activities(db, current_user.id, days)
    return aggregate_sleep(activities, max_days=ANALYTICS_MAX_DAYS)


@router.get("/feeding", response_model=List[FeedingDayOut])
def get_feeding_analytics(
    days: int = Query(ANALYTICS_WINDOW_DAYS, ge=1, le=365),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    activities = fetch_recent_activities(db, current_user.id, days)
    return aggregate_feeding(activities, max_days=ANALYTICS_MAX_DAYS)


@router.get("/summary", response_model=AnalyticsSummary)
def get_analytics_summary(
    days: int = Query(ANALYTICS_WINDOW_DAYS, ge=1, le=365),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Averages, sleep trend and expert tips over the recent window."""
    activities = fetch_recent_activities(db, current_user.id, days)
    sleep_days = aggregate_sleep(activities, max_days=ANALYTICS_MAX_DAYS)
    feeding_days = aggregate_feeding(activities, max_days=ANALYTICS_MAX_DAYS)

    return {
        "days_tracked": len(sleep_days),
        "average_sleep_minutes": round(average_sleep(sleep_days), 1),
        "average_night_wakings": round(average_wakings(sleep_days), 1),
        "average_feedings": round(average_feedings(feeding_days), 1),
        "trend": sleep_trend(sleep_days),
        "tips": build_expert_tips(sleep_days, feeding_days),
    }
