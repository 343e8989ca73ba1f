# app/utils/expert_tips.py

from statistics import mean
from typing import Any, Dict, List

from app.utils.time_utils import format_minutes

TREND_WINDOW_DAYS = 7
TREND_THRESHOLD_MINUTES = 30


def average_sleep(sleep_days: List[Dict[str, Any]]) -> float:
    if not sleep_days:
        return 0.0
    return mean(day["total_sleep"] for day in sleep_days)


def average_wakings(sleep_days: List[Dict[str, Any]]) -> float:
    if not sleep_days:
        return 0.0
    return mean(day["night_wakings"] for day in sleep_days)


def average_feedings(feeding_days: List[Dict[str, Any]]) -> float:
    if not feeding_days:
        return 0.0
    return mean(day["frequency"] for day in feeding_days)


def sleep_trend(sleep_days: List[Dict[str, Any]]) -> str:
    """Compares the first and last week of total sleep."""
    if len(sleep_days) < TREND_WINDOW_DAYS:
        return "neutral"

    first_week = mean(day["total_sleep"] for day in sleep_days[:TREND_WINDOW_DAYS])
    last_week = mean(day["total_sleep"] for day in sleep_days[-TREND_WINDOW_DAYS:])

    if last_week > first_week + TREND_THRESHOLD_MINUTES:
        return "improving"
    if last_week < first_week - TREND_THRESHOLD_MINUTES:
        return "declining"
    return "stable"


def _tip(title: str, description: str, priority: str) -> Dict[str, str]:
    return {"title": title, "description": description, "priority": priority}


def build_expert_tips(
    sleep_days: List[Dict[str, Any]],
    feeding_days: List[Dict[str, Any]],
) -> List[Dict[str, str]]:
    """
    Canned advice chosen from the daily aggregates. Always returns at least
    one tip.
    """
    avg_sleep = average_sleep(sleep_days)
    avg_wakings = average_wakings(sleep_days)
    avg_feedings = average_feedings(feeding_days)
    trend = sleep_trend(sleep_days)

    tips = []

    if 0 < avg_sleep < 600:
        tips.append(_tip(
            "Optimize Sleep Duration",
            f"Current average: {format_minutes(round(avg_sleep))}. Most babies need 11-14 hours "
            "of sleep per day. Consider adjusting nap schedules or bedtime routine.",
            "high",
        ))

    if avg_wakings > 2.5:
        tips.append(_tip(
            "Reduce Night Wakings",
            f"Average {round(avg_wakings, 1)} wakings per night. This may indicate hunger, "
            "discomfort, or sleep associations. Consider gentle sleep training or environmental "
            "adjustments.",
            "medium",
        ))

    if avg_feedings > 12:
        tips.append(_tip(
            "Monitor Feeding Frequency",
            f"High feeding frequency ({round(avg_feedings)} per day) may indicate growth spurts "
            "or insufficient intake per feeding. Consult your pediatrician if concerned.",
            "medium",
        ))
    elif 0 < avg_feedings < 6:
        tips.append(_tip(
            "Feeding Frequency Check",
            f"Lower feeding frequency ({round(avg_feedings)} per day). Ensure baby is getting "
            "adequate nutrition. Monitor weight gain and consult pediatrician.",
            "medium",
        ))

    if trend == "improving":
        tips.append(_tip(
            "Excellent Progress!",
            "Sleep patterns are improving consistently. Your current routine is working well - "
            "maintain consistency for continued success.",
            "low",
        ))
    elif trend == "declining":
        tips.append(_tip(
            "Sleep Pattern Concerns",
            "Sleep duration has been decreasing. Consider reviewing recent changes in routine, "
            "environment, or developmental milestones that might be affecting sleep.",
            "high",
        ))

    if len(sleep_days) > TREND_WINDOW_DAYS:
        recent = mean(day["night_wakings"] for day in sleep_days[-TREND_WINDOW_DAYS:])
        earlier = mean(day["night_wakings"] for day in sleep_days[:TREND_WINDOW_DAYS])
        if recent > earlier + 1:
            tips.append(_tip(
                "Sleep Regression Alert",
                "Recent increase in night wakings may indicate a sleep regression, growth spurt, "
                "or developmental leap. These are temporary phases.",
                "medium",
            ))

    if not tips:
        tips.append(_tip(
            "Healthy Sleep Patterns",
            "Your baby's sleep and feeding patterns look healthy! Continue with your current "
            "routine and monitor for any changes.",
            "low",
        ))

    return tips
