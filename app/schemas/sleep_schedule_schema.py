# app/schemas/sleep_schedule_schema.py

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

CLOCK_PATTERN = r"^([01]?\d|2[0-3]):[0-5]\d$"


class SleepScheduleCreate(BaseModel):
    baby_age_months: int = Field(..., ge=0, le=60)
    current_bedtime: str = Field(..., pattern=CLOCK_PATTERN)
    current_wake_time: str = Field(..., pattern=CLOCK_PATTERN)
    nap_habits: str = Field(..., min_length=1)
    sleep_challenges: Optional[str] = None
    schedule_data: Optional[Dict[str, Any]] = None
    is_active: bool = True


class SleepScheduleUpdate(BaseModel):
    baby_age_months: Optional[int] = Field(None, ge=0, le=60)
    current_bedtime: Optional[str] = Field(None, pattern=CLOCK_PATTERN)
    current_wake_time: Optional[str] = Field(None, pattern=CLOCK_PATTERN)
    nap_habits: Optional[str] = Field(None, min_length=1)
    sleep_challenges: Optional[str] = None
    schedule_data: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        # Omit a field to leave it unchanged; only sleep_challenges can be cleared
        for field in ("baby_age_months", "current_bedtime", "current_wake_time", "nap_habits"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class SleepScheduleRead(BaseModel):
    id: int
    user_id: int
    baby_age_months: int
    current_bedtime: str
    current_wake_time: str
    nap_habits: str
    sleep_challenges: Optional[str]
    schedule_data: Dict[str, Any]
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class ScheduleItem(BaseModel):
    time: str
    activity: str


class Recommendation(BaseModel):
    age_range: str
    total_sleep: str
    nap_count: str
    wake_windows: str
    schedule: List[ScheduleItem]
