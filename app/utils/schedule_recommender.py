# app/utils/schedule_recommender.py

import copy
from datetime import date
from typing import Any, Dict, Optional

SLEEP_RECOMMENDATIONS: Dict[str, Dict[str, Any]] = {
    "0-2": {
        "total_sleep": "14-17 hours",
        "nap_count": "6-8 short naps",
        "wake_windows": "45-60 minutes",
        "schedule": [
            {"time": "7:00 AM", "activity": "Wake up & feed"},
            {"time": "8:00 AM", "activity": "Nap 1 (30-45 min)"},
            {"time": "9:30 AM", "activity": "Feed & play"},
            {"time": "10:30 AM", "activity": "Nap 2 (45-60 min)"},
            {"time": "12:00 PM", "activity": "Feed & play"},
            {"time": "1:00 PM", "activity": "Nap 3 (60-90 min)"},
            {"time": "3:00 PM", "activity": "Feed & play"},
            {"time": "4:00 PM", "activity": "Nap 4 (30-45 min)"},
            {"time": "5:30 PM", "activity": "Feed & bath routine"},
            {"time": "7:00 PM", "activity": "Final feed & bedtime"},
        ],
    },
    "3-4": {
        "total_sleep": "12-15 hours",
        "nap_count": "4-5 naps",
        "wake_windows": "1-1.5 hours",
        "schedule": [
            {"time": "7:00 AM", "activity": "Wake up & feed"},
            {"time": "8:15 AM", "activity": "Nap 1 (45-60 min)"},
            {"time": "10:00 AM", "activity": "Feed & play"},
            {"time": "11:30 AM", "activity": "Nap 2 (60-90 min)"},
            {"time": "1:30 PM", "activity": "Feed & play"},
            {"time": "3:00 PM", "activity": "Nap 3 (45-60 min)"},
            {"time": "4:30 PM", "activity": "Feed & play"},
            {"time": "6:00 PM", "activity": "Short catnap (20-30 min)"},
            {"time": "7:00 PM", "activity": "Bath & bedtime routine"},
            {"time": "7:30 PM", "activity": "Final feed & sleep"},
        ],
    },
    "5-6": {
        "total_sleep": "12-14 hours",
        "nap_count": "3-4 naps",
        "wake_windows": "1.5-2.5 hours",
        "schedule": [
            {"time": "7:00 AM", "activity": "Wake up & feed"},
            {"time": "9:00 AM", "activity": "Nap 1 (60-90 min)"},
            {"time": "11:00 AM", "activity": "Feed & play"},
            {"time": "1:00 PM", "activity": "Nap 2 (60-90 min)"},
            {"time": "3:00 PM", "activity": "Feed & play"},
            {"time": "5:00 PM", "activity": "Nap 3 (30-45 min)"},
            {"time": "6:30 PM", "activity": "Bath & dinner"},
            {"time": "7:30 PM", "activity": "Bedtime routine & sleep"},
        ],
    },
    "7-12": {
        "total_sleep": "12-14 hours",
        "nap_count": "2 naps",
        "wake_windows": "2.5-3.5 hours",
        "schedule": [
            {"time": "7:00 AM", "activity": "Wake up & breakfast"},
            {"time": "10:00 AM", "activity": "Morning nap (60-90 min)"},
            {"time": "12:00 PM", "activity": "Lunch & play"},
            {"time": "2:30 PM", "activity": "Afternoon nap (60-90 min)"},
            {"time": "4:30 PM", "activity": "Snack & play"},
            {"time": "6:30 PM", "activity": "Dinner & bath"},
            {"time": "7:30 PM", "activity": "Bedtime routine & sleep"},
        ],
    },
    "13-18": {
        "total_sleep": "11-14 hours",
        "nap_count": "1 nap",
        "wake_windows": "4-6 hours",
        "schedule": [
            {"time": "7:00 AM", "activity": "Wake up & breakfast"},
            {"time": "12:00 PM", "activity": "Lunch"},
            {"time": "1:00 PM", "activity": "Afternoon nap (90-120 min)"},
            {"time": "3:30 PM", "activity": "Snack & play"},
            {"time": "6:00 PM", "activity": "Dinner"},
            {"time": "7:00 PM", "activity": "Bath & bedtime routine"},
            {"time": "7:30 PM", "activity": "Bedtime"},
        ],
    },
}


def get_age_range(age_in_months: int) -> str:
    if age_in_months <= 2:        # newborn
        return "0-2"
    elif age_in_months <= 4:
        return "3-4"
    elif age_in_months <= 6:
        return "5-6"
    elif age_in_months <= 12:
        return "7-12"
    else:                         # toddlers share the one-nap plan
        return "13-18"


def get_recommendation(age_in_months: int) -> Dict[str, Any]:
    age_range = get_age_range(age_in_months)
    recommendation = copy.deepcopy(SLEEP_RECOMMENDATIONS[age_range])
    recommendation["age_range"] = age_range
    return recommendation


def build_schedule_data(
    age_in_months: int,
    current_bedtime: str,
    current_wake_time: str,
    sleep_challenges: Optional[str] = None,
    recorded_on: Optional[date] = None,
) -> Dict[str, Any]:
    """
    The blob stored in sleep_schedules.schedule_data: the age recommendation,
    the date the age was recorded on, and the baseline the parent entered.
    """
    data = get_recommendation(age_in_months)
    data["age_recorded_on"] = (recorded_on or date.today()).isoformat()
    data["baseline"] = {
        "bedtime": current_bedtime,
        "wake_time": current_wake_time,
        "sleep_challenges": sleep_challenges,
    }
    return data
