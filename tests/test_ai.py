# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import json

import pytest

from mindhaven.services import ai_content_service
from mindhaven.services.gemini_ai_service import AIServiceError


@pytest.fixture
def model_down(monkeypatch):
    def fail(prompt):
        raise AIServiceError("unreachable")
    monkeypatch.setattr(ai_content_service, "generate_ai_reply", fail)


@pytest.fixture
def model_reply(monkeypatch):
    prompts = []

    def install(text):
        def reply(prompt):
            prompts.append(prompt)
            return text
        monkeypatch.setattr(ai_content_service, "generate_ai_reply", reply)
        return prompts

    return install


def test_mood_summary_falls_back_when_model_is_down(client, auth_headers, model_down):
    response = client.post("/ai/mood-summary", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "dailySummary": "Unable to generate summary at this time",
        "weeklyTrend": "Data analysis temporarily unavailable",
        "topTriggers": ["Continue tracking"],
        "nextSteps": ["Maintain current routine"],
        "success": False,
    }


def test_mood_summary_uses_recent_entries(client, auth_headers, model_reply):
    client.post("/mood", json={"mood": "anxious", "intensity": 3, "notes": "deadline"}, headers=auth_headers)
    prompts = model_reply(json.dumps({
        "dailySummary": "Stressful day",
        "weeklyTrend": "Dipping",
        "topTriggers": ["work"],
        "nextSteps": ["rest"],
    }))

    body = client.post("/ai/mood-summary", headers=auth_headers).json()

    assert body["success"] is True
    assert body["dailySummary"] == "Stressful day"
    assert "anxious" in prompts[0]
    assert "deadline" in prompts[0]


def test_fenced_json_reply_is_accepted(client, auth_headers, model_reply):
    model_reply('```json\n{"riskLevel": "HIGH", "signals": ["poor sleep"]}\n```')

    body = client.post("/ai/relapse-signals", headers=auth_headers).json()

    assert body["success"] is True
    assert body["riskLevel"] == "high"
    assert body["signals"] == ["poor sleep"]
    assert body["copingTasks"] == ["Practice deep breathing"]


def test_unknown_risk_level_becomes_low(client, auth_headers, model_reply):
    model_reply('{"riskLevel": "extreme"}')
    assert client.post("/ai/relapse-signals", headers=auth_headers).json()["riskLevel"] == "low"


def test_unparseable_reply_uses_parse_fallback(client, auth_headers, model_reply):
    model_reply("Sorry, here is some prose instead of JSON.")

    body = client.post("/ai/create-plan", headers=auth_headers).json()

    assert body == {"plan": [], "icsCalendar": "", "success": False}


def test_wellness_plan_items_are_normalised(client, auth_headers, model_reply):
    model_reply(json.dumps({
        "plan": [{"day": 1, "title": "Walk", "description": "Short walk"}, "junk"],
        "icsCalendar": "BEGIN:VCALENDAR",
    }))

    body = client.post("/ai/create-plan", headers=auth_headers).json()

    assert body["success"] is True
    assert body["plan"] == [{
        "day": "1",
        "title": "Walk",
        "description": "Short walk",
        "timeEstimate": "",
        "whyItHelps": "",
        "prompt": "",
    }]


def test_cbt_requires_negative_thought(client, auth_headers):
    response = client.post("/ai/cbt-thought-record", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Negative thought is required"


def test_cbt_falls_back_with_the_thought(client, auth_headers, model_down):
    body = client.post(
        "/ai/cbt-thought-record",
        json={"negativeThought": "I always fail"},
        headers=auth_headers,
    ).json()

    assert body["success"] is False
    assert body["automaticThought"] == "I always fail"
    assert body["situation"] == "Unable to analyze at this time"


def test_ai_routes_require_auth(client):
    assert client.post("/ai/mood-summary").status_code == 401


def test_assessment_generate_and_history(client, auth_headers, other_headers):
    first = client.post(
        "/ai/assessment/generate", json={"answers": {"q1": 5, "q2": 5}}, headers=auth_headers
    ).json()
    second = client.post(
        "/ai/assessment/generate", json={"answers": {"q1": 1, "q2": 1}}, headers=auth_headers
    ).json()

    assert first["scoreLevel"] == "high"
    assert first["score"] == "5.0"
    assert second["scoreLevel"] == "low"

    history = client.get("/ai/assessment/history", headers=auth_headers).json()["assessments"]
    assert [a["id"] for a in history] == [second["id"], first["id"]]

    assert client.get("/v1/assessment/history", headers=auth_headers).json()["assessments"] == history
    assert client.get("/ai/assessment/history", headers=other_headers).json() == {"assessments": []}


def test_assessment_requires_answers(client, auth_headers):
    response = client.post("/ai/assessment/generate", json={"answers": {}}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Answers are required"


def test_analysis_endpoint(client, auth_headers):
    assert client.get("/ai/analysis", headers=auth_headers).json() == {
        "overallScore": 0,
        "insights": [],
        "recommendations": [],
    }

    client.post("/mood", json={"mood": "happy", "intensity": 10}, headers=auth_headers)
    analysis = client.get("/ai/analysis", headers=auth_headers).json()
    assert analysis["overallScore"] == 100
    assert analysis["insights"][0].startswith("You've been maintaining a positive mood")


def test_static_quote_requires_auth(client, auth_headers):
    assert client.get("/ai/quotes/positive").status_code == 401
    assert client.get("/ai/quotes/positive", headers=auth_headers).json()["quote"]


def test_public_quote_falls_back_without_model(client, model_down):
    response = client.get("/v1/quotes/positive")

    assert response.status_code == 200
    assert response.json()["quote"] in ai_content_service.FALLBACK_QUOTES
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"


def test_public_quote_uses_model_reply(client, model_reply):
    model_reply("  Breathe in, breathe out.  ")
    assert client.get("/v1/quotes/positive").json() == {"quote": "Breathe in, breathe out."}
