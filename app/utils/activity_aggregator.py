# app/utils/activity_aggregator.py
"""
Rolls raw activity_logs rows into per-day sleep and feeding summaries.

Both aggregations are a single forward pass over the records; anything with
missing or out-of-range fields is skipped for the metric it cannot feed.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from config.settings import (
    ANALYTICS_MAX_DAYS,
    NIGHT_END_HOUR,
    NIGHT_START_HOUR,
    NIGHT_WAKING_MAX_MINUTES,
)
from app.utils.time_utils import calculate_duration, format_hhmm

MAX_SLEEP_MINUTES = 24 * 60
MAX_FEEDING_MINUTES = 120

BEDTIME_HOURS = range(18, 24)
WAKE_HOURS = range(5, 11)


def _record_moment(activity) -> Optional[datetime]:
    return activity.start_time or activity.created_at


def _record_date(activity) -> Optional[date]:
    moment = _record_moment(activity)
    return moment.date() if moment else None


def _minutes_from_times(activity, upper_bound: int) -> Optional[int]:
    if not (activity.start_time and activity.end_time):
        return None
    minutes = calculate_duration(activity.start_time, activity.end_time)
    if 0 < minutes < upper_bound:
        return minutes
    return None


def logged_minutes(activity, upper_bound: int) -> Optional[int]:
    if activity.duration and activity.duration > 0:
        return activity.duration
    return _minutes_from_times(activity, upper_bound)


def in_night_window(hour: int, start_hour: int = NIGHT_START_HOUR, end_hour: int = NIGHT_END_HOUR) -> bool:
    if start_hour > end_hour:
        return hour >= start_hour or hour <= end_hour
    return start_hour <= hour <= end_hour


def _last_days(daily: Dict[date, Dict[str, Any]], max_days: int) -> List[Dict[str, Any]]:
    ordered = [daily[day] for day in sorted(daily)]
    return ordered[-max_days:] if max_days else ordered


def aggregate_sleep(
    activities: Iterable,
    night_start_hour: int = NIGHT_START_HOUR,
    night_end_hour: int = NIGHT_END_HOUR,
    waking_max_minutes: int = NIGHT_WAKING_MAX_MINUTES,
    max_days: int = ANALYTICS_MAX_DAYS,
) -> List[Dict[str, Any]]:
    """
    Per calendar date: total sleep minutes, night wakings, earliest evening
    bedtime and latest morning wake time. Returns the last `max_days` dates
    that have sleep data, oldest first.
    """
    daily: Dict[date, Dict[str, Any]] = {}

    for activity in activities:
        if activity.activity_type != "sleep":
            continue
        day = _record_date(activity)
        if day is None:
            continue

        summary = daily.setdefault(day, {
            "date": day.isoformat(),
            "total_sleep": 0,
            "night_wakings": 0,
            "bedtime": None,
            "wake_time": None,
        })

        minutes = logged_minutes(activity, MAX_SLEEP_MINUTES)
        if minutes:
            summary["total_sleep"] += minutes

        if activity.sleep_type != "nighttime":
            continue

        started = _record_moment(activity)
        short_stretch = not activity.duration or activity.duration < waking_max_minutes
        if in_night_window(started.hour, night_start_hour, night_end_hour) and short_stretch:
            summary["night_wakings"] += 1

        # "HH:MM" strings are zero padded, so they compare chronologically
        if started.hour in BEDTIME_HOURS:
            bedtime = format_hhmm(started)
            if summary["bedtime"] is None or bedtime < summary["bedtime"]:
                summary["bedtime"] = bedtime

        if activity.end_time and activity.end_time.hour in WAKE_HOURS:
            wake_time = format_hhmm(activity.end_time)
            if summary["wake_time"] is None or wake_time > summary["wake_time"]:
                summary["wake_time"] = wake_time

    return _last_days(daily, max_days)


def aggregate_feeding(activities: Iterable, max_days: int = ANALYTICS_MAX_DAYS) -> List[Dict[str, Any]]:
    """
    Per calendar date: number of feedings, running mean duration over the
    feeds that carry one, total and mean amount (ml).
    """
    daily: Dict[date, Dict[str, Any]] = {}
    counters: Dict[date, Dict[str, int]] = {}

    for activity in activities:
        if activity.activity_type != "feeding":
            continue
        day = _record_date(activity)
        if day is None:
            continue

        summary = daily.setdefault(day, {
            "date": day.isoformat(),
            "frequency": 0,
            "avg_duration": 0.0,
            "total_amount": 0,
            "avg_amount": 0.0,
        })
        seen = counters.setdefault(day, {"timed": 0, "measured": 0})

        summary["frequency"] += 1

        minutes = logged_minutes(activity, MAX_FEEDING_MINUTES)
        if minutes:
            seen["timed"] += 1
            summary["avg_duration"] += (minutes - summary["avg_duration"]) / seen["timed"]

        if activity.feeding_amount and activity.feeding_amount > 0:
            seen["measured"] += 1
            summary["total_amount"] += activity.feeding_amount
            summary["avg_amount"] += (activity.feeding_amount - summary["avg_amount"]) / seen["measured"]

    for summary in daily.values():
        summary["avg_duration"] = round(summary["avg_duration"], 1)
        summary["avg_amount"] = round(summary["avg_amount"], 1)

    return _last_days(daily, max_days)
