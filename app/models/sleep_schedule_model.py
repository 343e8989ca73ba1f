# app/models/sleep_schedule_model.py

from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, JSON, func
from sqlalchemy.orm import relationship
from config.database import Base


class SleepSchedule(Base):
    __tablename__ = "sleep_schedules"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    baby_age_months = Column(Integer, nullable=False)
    current_bedtime = Column(String(10), nullable=False)
    current_wake_time = Column(String(10), nullable=False)
    nap_habits = Column(Text, nullable=False)
    sleep_challenges = Column(Text, nullable=True)
    schedule_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="sleep_schedules")
    notifications = relationship(
        "ScheduleNotification", back_populates="schedule", cascade="all, delete"
    )


class ScheduleNotification(Base):
    __tablename__ = "schedule_notifications"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    sleep_schedule_id = Column(
        Integer, ForeignKey("sleep_schedules.id", ondelete="CASCADE"), nullable=False
    )
    notification_type = Column(String(50), nullable=False)
    message = Column(Text, nullable=False)
    suggested_changes = Column(JSON, nullable=False, default=dict)

    is_read = Column(Boolean, nullable=False, default=False)
    # None means the suggestion is still pending
    is_approved = Column(Boolean, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    schedule = relationship("SleepSchedule", back_populates="notifications")
