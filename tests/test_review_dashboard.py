# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from mindhaven.models.progress import Progress
from mindhaven.services.wellbeing_service import build_analysis, compute_overall_score, score_assessment


def test_dashboard_for_new_user(client, auth_headers):
    stats = client.get("/dashboard/stats", headers=auth_headers).json()

    assert stats == {
        "currentMood": "No entries yet",
        "journalEntries": 0,
        "activities": 0,
        "streak": 0,
        "totalActivities": 0,
    }


def test_dashboard_counts(client, auth_headers):
    client.post("/mood", json={"mood": "calm", "intensity": 6}, headers=auth_headers)
    client.post("/journal", json={"content": "hello"}, headers=auth_headers)
    activity = client.post(
        "/activities",
        json={"title": "Walk", "description": "outside", "type": "exercise", "duration": 10},
        headers=auth_headers,
    ).json()["data"]
    client.post(
        "/activities",
        json={"title": "Read", "description": "a chapter", "type": "leisure", "duration": 15},
        headers=auth_headers,
    )
    client.put(f"/activities/{activity['id']}/toggle", headers=auth_headers)

    stats = client.get("/dashboard/stats", headers=auth_headers).json()

    assert stats["currentMood"] == "calm"
    assert stats["journalEntries"] == 1
    assert stats["activities"] == 1
    assert stats["totalActivities"] == 2
    assert stats["streak"] == 1


def test_review_without_data(client, auth_headers):
    review = client.get("/review", headers=auth_headers).json()

    assert review["success"] is True
    assert review["data"]["overallScore"] == 0
    assert review["data"]["moodDistribution"] == {}
    assert review["data"]["weeklyTrend"] == [0] * 7


def test_review_mood_distribution(client, auth_headers):
    for mood in ("happy", "happy", "sad"):
        client.post("/mood", json={"mood": mood, "intensity": 6}, headers=auth_headers)

    data = client.get("/review/mood-distribution", headers=auth_headers).json()["data"]

    assert data == {"moodDistribution": {"happy": "67%", "sad": "33%"}, "totalMoodEntries": 3}


def test_review_weekly_trend_has_labels(client, auth_headers):
    data = client.get("/review/weekly-trend", headers=auth_headers).json()["data"]
    assert data["labels"][0] == "Mon"
    assert len(data["weeklyTrend"]) == 7


def test_overall_score():
    progress = Progress(mood_data=[8, 8, 0, 0, 0, 0, 0], activities_completed=5, streak=3)
    # mood 4 * 20 + 5/5 * 40 + 3 * 4, capped at 100
    assert compute_overall_score(progress) == 100

    progress = Progress(mood_data=[4, 0, 0, 0, 0, 0, 0], activities_completed=1, streak=1)
    # 2 * 20 + 1/5 * 40 + 1 * 4
    assert compute_overall_score(progress) == 52


def test_analysis_for_low_mood():
    progress = Progress(mood_data=[2, 4, 0, 0, 0, 0, 0], activities_completed=0, streak=1)
    analysis = build_analysis(progress)

    assert analysis["insights"][0].startswith("Your mood has been lower than usual")
    assert "Try a guided meditation to lift your spirits" in analysis["recommendations"]


def test_analysis_without_progress():
    assert build_analysis(None) == {"overallScore": 0, "insights": [], "recommendations": []}


def test_score_assessment_levels():
    assert score_assessment({"q1": 5, "q2": 4})["scoreLevel"] == "high"
    assert score_assessment({"q1": 3, "q2": 2})["scoreLevel"] == "moderate"

    low = score_assessment({"q1": 1, "q2": 2})
    assert low["scoreLevel"] == "low"
    assert low["score"] == "1.5"
    assert len(low["recommendations"]) == 4
