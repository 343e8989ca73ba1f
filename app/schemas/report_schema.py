# app/schemas/report_schema.py

from typing import List, Optional
from pydantic import BaseModel


class DailyReportResponse(BaseModel):
    date: str
    total_sleep_minutes: int
    longest_sleep_minutes: int
    total_feeds: int
    total_diapers: int
    total_custom: int


class SleepDayOut(BaseModel):
    date: str
    total_sleep: int
    night_wakings: int
    bedtime: Optional[str]
    wake_time: Optional[str]


class FeedingDayOut(BaseModel):
    date: str
    frequency: int
    avg_duration: float
    total_amount: int
    avg_amount: float


class ExpertTip(BaseModel):
    title: str
    description: str
    priority: str


class AnalyticsSummary(BaseModel):
    days_tracked: int
    average_sleep_minutes: float
    average_night_wakings: float
    average_feedings: float
    trend: str
    tips: List[ExpertTip]
