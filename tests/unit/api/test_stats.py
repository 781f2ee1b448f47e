"""API tests for /api/stats and /api/goals."""

import pytest
from httpx import AsyncClient

from study_tracker.models.profile import Profile


async def _record(client: AsyncClient, profile, subject, day: str, minutes: int):
    response = await client.post(
        "/api/sessions",
        json={
            "profile_id": profile.id,
            "subject_id": subject.id,
            "study_date": day,
            "duration_minutes": minutes,
        },
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_weekly_stats_with_goal(
    async_client: AsyncClient, profile: Profile, subjects
):
    """Test: Weekly stats combine breakdown and goal progress."""
    # Arrange
    math, english = subjects["math"], subjects["english"]
    await _record(async_client, profile, math, "2024-01-01", 30)
    await _record(async_client, profile, math, "2024-01-01", 20)
    await _record(async_client, profile, english, "2024-01-02", 50)
    goal = await async_client.put(
        "/api/goals",
        json={
            "profile_id": profile.id,
            "subject_id": math.id,
            "year": 2024,
            "week_number": 1,
            "target_minutes": 200,
        },
    )
    assert goal.status_code == 200

    # Act
    response = await async_client.get(
        "/api/stats/weekly",
        params={"profile_id": profile.id, "ref_date": "2024-01-03"},
    )

    # Assert
    assert response.status_code == 200
    body = response.json()
    assert body["total_minutes"] == 100
    assert body["total_label"] == "1시간 40분"
    assert body["record_count"] == 3
    assert body["range_label"] == "1/1 - 1/7"
    assert {b["subject_id"]: b["minutes"] for b in body["breakdown"]} == {
        math.id: 50,
        english.id: 50,
    }
    assert [b["percentage"] for b in body["breakdown"]] == [50, 50]
    assert body["goals"][0]["current_minutes"] == 50
    assert body["goals"][0]["percentage"] == 25
    assert body["goals"][0]["target_label"] == "3시간 20분"


@pytest.mark.asyncio
async def test_monthly_stats_calendar(
    async_client: AsyncClient, profile: Profile, subjects
):
    """Test: Monthly stats list active days and a full calendar grid."""
    # Arrange
    math = subjects["math"]
    await _record(async_client, profile, math, "2024-01-31", 200)
    await _record(async_client, profile, math, "2024-02-05", 45)
    await _record(async_client, profile, math, "2024-02-20", 130)

    # Act
    response = await async_client.get(
        "/api/stats/monthly",
        params={"profile_id": profile.id, "year": 2024, "month": 2},
    )

    # Assert
    body = response.json()
    assert [d["study_date"] for d in body["days"]] == ["2024-02-05", "2024-02-20"]
    assert body["total_minutes"] == 175
    assert len(body["calendar"]) % 7 == 0
    assert body["weekday_labels"][0] == "월"
    cells = {c["day"]: c for c in body["calendar"]}
    assert cells["2024-02-05"]["intensity"] == 2
    assert cells["2024-02-20"]["intensity"] == 4
    # Out-of-month days in the grid are not filled from other months
    assert cells["2024-01-31"]["in_month"] is False
    assert cells["2024-01-31"]["total_minutes"] == 0


@pytest.mark.asyncio
async def test_today_stats(async_client: AsyncClient, profile: Profile, subjects):
    await _record(async_client, profile, subjects["math"], "2024-01-01", 25)
    await _record(async_client, profile, subjects["english"], "2024-01-01", 35)

    response = await async_client.get(
        "/api/stats/today", params={"profile_id": profile.id, "day": "2024-01-01"}
    )

    assert response.json()["total_minutes"] == 60
    assert response.json()["total_label"] == "1시간"
    assert len(response.json()["sessions"]) == 2


@pytest.mark.asyncio
async def test_monthly_stats_rejects_bad_month(
    async_client: AsyncClient, profile: Profile
):
    response = await async_client.get(
        "/api/stats/monthly",
        params={"profile_id": profile.id, "year": 2024, "month": 13},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_goal_upsert_replaces_target(
    async_client: AsyncClient, profile: Profile, subjects
):
    """Test: PUT /api/goals twice keeps one goal with the latest target."""
    payload = {
        "profile_id": profile.id,
        "subject_id": subjects["english"].id,
        "year": 2024,
        "week_number": 2,
        "target_minutes": 60,
    }
    await async_client.put("/api/goals", json=payload)
    await async_client.put("/api/goals", json={**payload, "target_minutes": 90})

    response = await async_client.get(
        "/api/goals",
        params={"profile_id": profile.id, "year": 2024, "week_number": 2},
    )

    goals = response.json()
    assert len(goals) == 1
    assert goals[0]["target_minutes"] == 90
    assert goals[0]["subject"]["name"] == "영어 독해"


@pytest.mark.asyncio
async def test_goal_for_unknown_profile(async_client: AsyncClient, subjects):
    response = await async_client.put(
        "/api/goals",
        json={
            "profile_id": 999,
            "subject_id": subjects["math"].id,
            "year": 2024,
            "week_number": 1,
            "target_minutes": 60,
        },
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_weekly_stats_by_week_number(
    async_client: AsyncClient, profile: Profile, subjects
):
    """Test: year and week_number select the ISO week instead of ref_date."""
    await _record(async_client, profile, subjects["math"], "2024-12-31", 40)

    response = await async_client.get(
        "/api/stats/weekly",
        params={"profile_id": profile.id, "year": 2025, "week_number": 1},
    )

    body = response.json()
    assert body["week_start"] == "2024-12-30"
    assert body["total_minutes"] == 40


@pytest.mark.asyncio
async def test_weekly_stats_rejects_missing_week(
    async_client: AsyncClient, profile: Profile
):
    """Test: 2024 has no ISO week 53."""
    response = await async_client.get(
        "/api/stats/weekly",
        params={"profile_id": profile.id, "year": 2024, "week_number": 53},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,params",
    [
        ("/api/stats/weekly", {"ref_date": "9999-12-31"}),
        ("/api/stats/monthly", {"year": 9999, "month": 12}),
    ],
)
async def test_stats_reject_dates_past_calendar_end(
    async_client: AsyncClient, profile: Profile, path: str, params: dict
):
    """Test: A window running past date.max is a bad request, not a crash."""
    response = await async_client.get(path, params={"profile_id": profile.id, **params})

    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"
