# app/schemas/activity_log_schema.py

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.utils.time_utils import to_naive_utc

ActivityType = Literal["sleep", "feeding", "diaper", "custom"]
SleepType = Literal["nap", "nighttime"]
FeedingType = Literal["nursing", "formula", "bottle", "solids"]
DiaperType = Literal["wet", "dirty", "both"]


class ActivityLogBase(BaseModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = Field(None, description="Minutes")
    sleep_type: Optional[SleepType] = None
    sleep_location: Optional[str] = Field(None, max_length=50)
    feeding_type: Optional[FeedingType] = None
    feeding_amount: Optional[int] = Field(None, ge=0, description="Amount in ml")
    diaper_type: Optional[DiaperType] = None
    custom_activity_name: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def store_as_utc(cls, value):
        return to_naive_utc(value)


class ActivityLogCreate(ActivityLogBase):
    activity_type: ActivityType

    @model_validator(mode="after")
    def check_required_fields(self):
        if self.activity_type == "sleep" and self.start_time is None:
            raise ValueError("start_time is required for sleep tracking")
        if self.activity_type == "custom" and not self.custom_activity_name:
            raise ValueError("custom_activity_name is required for custom activities")
        return self


class ActivityLogUpdate(ActivityLogBase):
    activity_type: Optional[ActivityType] = None


class ActivityLogRead(ActivityLogBase):
    id: int
    user_id: int
    activity_type: str
    sleep_type: Optional[str] = None
    feeding_type: Optional[str] = None
    diaper_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
