"""Unit tests for daily sleep/feeding aggregation"""
from datetime import datetime

from app.models.activity_log_model import ActivityLog
from app.utils.activity_aggregator import (
    aggregate_feeding,
    aggregate_sleep,
    in_night_window,
)


def sleep(start, end=None, duration=None, sleep_type="nap", created_at=None):
    return ActivityLog(
        activity_type="sleep",
        start_time=start,
        end_time=end,
        duration=duration,
        sleep_type=sleep_type,
        created_at=created_at,
    )


def feeding(start, duration=None, amount=None, end=None):
    return ActivityLog(
        activity_type="feeding",
        start_time=start,
        end_time=end,
        duration=duration,
        feeding_amount=amount,
        feeding_type="formula",
    )


class TestAggregateSleep:
    """Per-day sleep totals"""

    def test_same_day_records_sum_into_one_total(self):
        """Two sleep records on the same date produce one daily total"""
        logs = [
            sleep(datetime(2024, 3, 1, 9, 0), duration=45),
            sleep(datetime(2024, 3, 1, 13, 0), duration=90),
        ]
        days = aggregate_sleep(logs)

        assert len(days) == 1
        assert days[0]["date"] == "2024-03-01"
        assert days[0]["total_sleep"] == 135

    def test_different_days_are_separate_and_ordered(self):
        logs = [
            sleep(datetime(2024, 3, 2, 9, 0), duration=30),
            sleep(datetime(2024, 3, 1, 9, 0), duration=60),
        ]
        days = aggregate_sleep(logs)

        assert [d["date"] for d in days] == ["2024-03-01", "2024-03-02"]
        assert [d["total_sleep"] for d in days] == [60, 30]

    def test_duration_computed_from_times_when_missing(self):
        logs = [sleep(datetime(2024, 3, 1, 9, 0), end=datetime(2024, 3, 1, 10, 30))]
        assert aggregate_sleep(logs)[0]["total_sleep"] == 90

    def test_out_of_range_computed_duration_is_skipped(self):
        """End before start or stretches of a day or more add nothing"""
        logs = [
            sleep(datetime(2024, 3, 1, 9, 0), end=datetime(2024, 3, 1, 8, 0)),
            sleep(datetime(2024, 3, 1, 10, 0), end=datetime(2024, 3, 2, 10, 0)),
        ]
        days = aggregate_sleep(logs)
        assert days[0]["total_sleep"] == 0

    def test_falls_back_to_created_at_for_the_date(self):
        logs = [sleep(None, duration=40, created_at=datetime(2024, 3, 5, 14, 0))]
        assert aggregate_sleep(logs)[0]["date"] == "2024-03-05"

    def test_records_without_any_timestamp_are_skipped(self):
        assert aggregate_sleep([sleep(None, duration=40)]) == []

    def test_non_sleep_records_are_ignored(self):
        logs = [feeding(datetime(2024, 3, 1, 9, 0), duration=20)]
        assert aggregate_sleep(logs) == []

    def test_only_last_days_are_kept(self):
        logs = [sleep(datetime(2024, 3, day, 9, 0), duration=30) for day in range(1, 21)]
        days = aggregate_sleep(logs, max_days=14)

        assert len(days) == 14
        assert days[0]["date"] == "2024-03-07"
        assert days[-1]["date"] == "2024-03-20"


class TestNightWakings:
    """Night waking heuristic"""

    def test_nighttime_record_inside_window_counts(self):
        logs = [sleep(datetime(2024, 3, 1, 2, 15), duration=30, sleep_type="nighttime")]
        assert aggregate_sleep(logs)[0]["night_wakings"] == 1

    def test_nap_inside_window_does_not_count(self):
        logs = [sleep(datetime(2024, 3, 1, 2, 15), duration=30, sleep_type="nap")]
        assert aggregate_sleep(logs)[0]["night_wakings"] == 0

    def test_nighttime_record_outside_window_does_not_count(self):
        logs = [sleep(datetime(2024, 3, 1, 14, 0), duration=30, sleep_type="nighttime")]
        assert aggregate_sleep(logs)[0]["night_wakings"] == 0

    def test_long_stretch_is_not_a_waking(self):
        logs = [sleep(datetime(2024, 3, 1, 20, 0), duration=600, sleep_type="nighttime")]
        assert aggregate_sleep(logs)[0]["night_wakings"] == 0

    def test_window_edges_are_inclusive(self):
        assert in_night_window(20)
        assert in_night_window(7)
        assert in_night_window(0)
        assert not in_night_window(8)
        assert not in_night_window(19)

    def test_custom_window_is_respected(self):
        logs = [sleep(datetime(2024, 3, 1, 21, 0), duration=30, sleep_type="nighttime")]
        days = aggregate_sleep(logs, night_start_hour=22, night_end_hour=6)
        assert days[0]["night_wakings"] == 0

    def test_non_wrapping_window(self):
        assert in_night_window(3, start_hour=1, end_hour=5)
        assert not in_night_window(23, start_hour=1, end_hour=5)


class TestBedtimeAndWakeTime:
    def test_earliest_evening_start_is_bedtime(self):
        logs = [
            sleep(datetime(2024, 3, 1, 19, 45), duration=500, sleep_type="nighttime"),
            sleep(datetime(2024, 3, 1, 19, 10), duration=20, sleep_type="nighttime"),
        ]
        assert aggregate_sleep(logs)[0]["bedtime"] == "19:10"

    def test_latest_morning_end_is_wake_time(self):
        logs = [
            sleep(datetime(2024, 3, 1, 2, 0), end=datetime(2024, 3, 1, 5, 30), sleep_type="nighttime"),
            sleep(datetime(2024, 3, 1, 6, 0), end=datetime(2024, 3, 1, 7, 5), sleep_type="nighttime"),
        ]
        assert aggregate_sleep(logs)[0]["wake_time"] == "07:05"

    def test_naps_do_not_set_bedtime(self):
        logs = [sleep(datetime(2024, 3, 1, 19, 0), duration=30, sleep_type="nap")]
        day = aggregate_sleep(logs)[0]
        assert day["bedtime"] is None
        assert day["wake_time"] is None


class TestAggregateFeeding:
    def test_frequency_and_amounts(self):
        logs = [
            feeding(datetime(2024, 3, 1, 6, 0), amount=120),
            feeding(datetime(2024, 3, 1, 9, 0), amount=90),
            feeding(datetime(2024, 3, 1, 12, 0)),
        ]
        day = aggregate_feeding(logs)[0]

        assert day["frequency"] == 3
        assert day["total_amount"] == 210
        assert day["avg_amount"] == 105.0

    def test_average_duration_ignores_untimed_feeds(self):
        logs = [
            feeding(datetime(2024, 3, 1, 6, 0), duration=20),
            feeding(datetime(2024, 3, 1, 9, 0), duration=10),
            feeding(datetime(2024, 3, 1, 12, 0)),
        ]
        assert aggregate_feeding(logs)[0]["avg_duration"] == 15.0

    def test_duration_from_times_must_be_under_two_hours(self):
        logs = [
            feeding(datetime(2024, 3, 1, 6, 0), end=datetime(2024, 3, 1, 6, 25)),
            feeding(datetime(2024, 3, 1, 9, 0), end=datetime(2024, 3, 1, 12, 0)),
        ]
        assert aggregate_feeding(logs)[0]["avg_duration"] == 25.0

    def test_empty_input(self):
        assert aggregate_feeding([]) == []
