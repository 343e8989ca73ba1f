"""API tests for sleep schedules and age-transition notifications"""
from datetime import date, timedelta

import pytest

from app.models.sleep_schedule_model import SleepSchedule
from app.utils.schedule_recommender import build_schedule_data

SCHEDULE = {
    "baby_age_months": 5,
    "current_bedtime": "19:30",
    "current_wake_time": "06:45",
    "nap_habits": "three naps, the last one is short",
    "sleep_challenges": "early waking",
}


def create_schedule(client, headers, **overrides):
    return client.post("/api/schedules", json={**SCHEDULE, **overrides}, headers=headers)


class TestRecommendations:
    def test_recommendation_for_age(self, client):
        response = client.get("/api/schedules/recommendations", params={"age_months": 3})

        assert response.status_code == 200
        body = response.json()
        assert body["age_range"] == "3-4"
        assert body["wake_windows"] == "1-1.5 hours"
        assert len(body["schedule"]) == 10

    def test_negative_age_is_rejected(self, client):
        response = client.get("/api/schedules/recommendations", params={"age_months": -1})
        assert response.status_code == 422


class TestScheduleCrud:
    def test_create_derives_schedule_data(self, client, auth_headers):
        response = create_schedule(client, auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["is_active"] is True
        assert body["schedule_data"]["age_range"] == "5-6"
        assert body["schedule_data"]["baseline"]["bedtime"] == "19:30"

    def test_explicit_schedule_data_is_kept(self, client, auth_headers):
        response = create_schedule(client, auth_headers, schedule_data={"custom": True})
        assert response.json()["schedule_data"] == {"custom": True}

    def test_invalid_clock_time_is_rejected(self, client, auth_headers):
        response = create_schedule(client, auth_headers, current_bedtime="7pm")
        assert response.status_code == 422

    def test_only_one_schedule_stays_active(self, client, auth_headers):
        first = create_schedule(client, auth_headers).json()["id"]
        second = create_schedule(client, auth_headers, baby_age_months=6).json()["id"]

        schedules = {s["id"]: s for s in client.get("/api/schedules", headers=auth_headers).json()}
        assert schedules[first]["is_active"] is False
        assert schedules[second]["is_active"] is True

        client.post(f"/api/schedules/{first}/activate", headers=auth_headers)
        active = client.get("/api/schedules/active", headers=auth_headers).json()
        assert active["id"] == first

    def test_update_age_rebuilds_schedule_data(self, client, auth_headers):
        schedule_id = create_schedule(client, auth_headers).json()["id"]

        response = client.put(
            f"/api/schedules/{schedule_id}",
            json={"baby_age_months": 9},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["schedule_data"]["age_range"] == "7-12"

    def test_update_nap_habits_keeps_schedule_data(self, client, auth_headers):
        created = create_schedule(client, auth_headers).json()

        response = client.put(
            f"/api/schedules/{created['id']}",
            json={"nap_habits": "two naps"},
            headers=auth_headers,
        )
        assert response.json()["schedule_data"] == created["schedule_data"]

    def test_delete(self, client, auth_headers):
        schedule_id = create_schedule(client, auth_headers).json()["id"]

        assert client.delete(f"/api/schedules/{schedule_id}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/schedules/{schedule_id}", headers=auth_headers).status_code == 404

    def test_no_active_schedule_is_404(self, client, auth_headers):
        assert client.get("/api/schedules/active", headers=auth_headers).status_code == 404

    def test_other_users_cannot_touch_schedule(self, client, auth_headers, other_auth_headers):
        schedule_id = create_schedule(client, auth_headers).json()["id"]

        assert client.get(f"/api/schedules/{schedule_id}", headers=other_auth_headers).status_code == 404
        assert client.put(
            f"/api/schedules/{schedule_id}", json={"nap_habits": "x"}, headers=other_auth_headers
        ).status_code == 404

    @pytest.mark.parametrize("field", [
        "baby_age_months", "current_bedtime", "current_wake_time", "nap_habits",
    ])
    def test_required_fields_cannot_be_nulled(self, client, auth_headers, field):
        created = create_schedule(client, auth_headers).json()

        response = client.put(f"/api/schedules/{created['id']}", json={field: None}, headers=auth_headers)

        assert response.status_code == 422
        stored = client.get(f"/api/schedules/{created['id']}", headers=auth_headers).json()
        assert stored[field] == created[field]

    def test_sleep_challenges_can_be_cleared(self, client, auth_headers):
        schedule_id = create_schedule(client, auth_headers).json()["id"]

        response = client.put(
            f"/api/schedules/{schedule_id}", json={"sleep_challenges": None}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["sleep_challenges"] is None


class TestClientSuppliedScheduleData:
    """Hand-written schedule_data with an unreadable age date"""

    def test_active_schedule_still_loads(self, client, auth_headers):
        create_schedule(client, auth_headers, schedule_data={"age_recorded_on": "last spring"})

        response = client.get("/api/schedules/active", headers=auth_headers)

        assert response.status_code == 200
        assert client.get("/api/notifications", headers=auth_headers).json() == []

    def test_editing_bedtime_restarts_the_age_clock(self, client, auth_headers):
        schedule_id = create_schedule(
            client, auth_headers, schedule_data={"age_recorded_on": 20240115}
        ).json()["id"]

        response = client.put(
            f"/api/schedules/{schedule_id}", json={"current_bedtime": "20:00"}, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()["schedule_data"]
        assert body["age_recorded_on"] == date.today().isoformat()
        assert body["baseline"]["bedtime"] == "20:00"


def _store_aged_schedule(session_factory, user_id):
    """A 2-month schedule whose age was recorded about 100 days ago"""
    session = session_factory()
    try:
        recorded_on = date.today() - timedelta(days=100)
        schedule = SleepSchedule(
            user_id=user_id,
            baby_age_months=2,
            current_bedtime="19:00",
            current_wake_time="07:00",
            nap_habits="many short naps",
            schedule_data=build_schedule_data(2, "19:00", "07:00", recorded_on=recorded_on),
            is_active=True,
        )
        session.add(schedule)
        session.commit()
        return schedule.id
    finally:
        session.close()


class TestAgeTransitionNotifications:
    def test_reading_active_schedule_creates_one_notification(self, client, make_user, session_factory):
        user_id, headers = make_user()
        schedule_id = _store_aged_schedule(session_factory, user_id)

        client.get("/api/schedules/active", headers=headers)
        client.get("/api/schedules/active", headers=headers)

        notifications = client.get("/api/notifications", headers=headers).json()
        assert len(notifications) == 1
        assert notifications[0]["sleep_schedule_id"] == schedule_id
        assert notifications[0]["is_approved"] is None
        assert notifications[0]["suggested_changes"]["to_age_range"] == "5-6"

    def test_approving_updates_the_schedule(self, client, make_user, session_factory):
        user_id, headers = make_user()
        schedule_id = _store_aged_schedule(session_factory, user_id)
        client.get("/api/schedules/active", headers=headers)
        notification_id = client.get("/api/notifications", headers=headers).json()[0]["id"]

        response = client.post(f"/api/notifications/{notification_id}/approve", headers=headers)

        assert response.status_code == 200
        assert response.json()["is_approved"] is True
        assert response.json()["is_read"] is True

        schedule = client.get(f"/api/schedules/{schedule_id}", headers=headers).json()
        assert schedule["baby_age_months"] == 5
        assert schedule["schedule_data"]["age_range"] == "5-6"

        # Already on the new range: no further notification
        client.get("/api/schedules/active", headers=headers)
        assert len(client.get("/api/notifications", headers=headers).json()) == 1

    def test_rejecting_leaves_schedule_alone(self, client, make_user, session_factory):
        user_id, headers = make_user()
        schedule_id = _store_aged_schedule(session_factory, user_id)
        client.get("/api/schedules/active", headers=headers)
        notification_id = client.get("/api/notifications", headers=headers).json()[0]["id"]

        response = client.post(f"/api/notifications/{notification_id}/reject", headers=headers)

        assert response.json()["is_approved"] is False
        schedule = client.get(f"/api/schedules/{schedule_id}", headers=headers).json()
        assert schedule["baby_age_months"] == 2

        # Answered notifications cannot be answered again
        again = client.post(f"/api/notifications/{notification_id}/approve", headers=headers)
        assert again.status_code == 409

        client.get("/api/schedules/active", headers=headers)
        assert len(client.get("/api/notifications", headers=headers).json()) == 1
