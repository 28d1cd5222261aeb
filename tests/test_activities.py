# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


def create_activity(client, headers, **overrides):
    payload = {"title": "Evening walk", "description": "20 minutes outside", "type": "exercise", "duration": 20}
    payload.update(overrides)
    response = client.post("/activities", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_activity(client, auth_headers):
    activity = create_activity(client, auth_headers)

    assert activity["completed"] is False
    assert activity["type"] == "exercise"
    assert activity["duration"] == 20


def test_missing_fields(client, auth_headers):
    response = client.post("/activities", json={"title": "Walk"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Title, description, type, and duration are required"


def test_toggle_twice_restores_state(client, auth_headers):
    activity = create_activity(client, auth_headers)

    first = client.put(f"/activities/{activity['id']}/toggle", headers=auth_headers).json()["data"]
    second = client.put(f"/activities/{activity['id']}/toggle", headers=auth_headers).json()["data"]

    assert first["completed"] is True
    assert second["completed"] is False


def test_completed_and_pending_lists(client, auth_headers):
    done = create_activity(client, auth_headers, title="Meditate", type="mindfulness")
    create_activity(client, auth_headers, title="Stretch")
    client.put(f"/activities/{done['id']}/toggle", headers=auth_headers)

    completed = client.get("/activities/completed", headers=auth_headers).json()
    pending = client.get("/activities/pending", headers=auth_headers).json()
    mindful = client.get("/activities/type/mindfulness", headers=auth_headers).json()

    assert [a["title"] for a in completed] == ["Meditate"]
    assert [a["title"] for a in pending] == ["Stretch"]
    assert [a["title"] for a in mindful] == ["Meditate"]


def test_update_activity(client, auth_headers):
    activity = create_activity(client, auth_headers)

    response = client.put(
        f"/activities/{activity['id']}",
        json={"title": "Long walk", "description": "An hour", "type": "exercise", "duration": 60, "completed": True},
        headers=auth_headers,
    )

    data = response.json()["data"]
    assert data["title"] == "Long walk"
    assert data["duration"] == 60
    assert data["completed"] is True


def test_other_users_cannot_touch_activity(client, auth_headers, other_headers):
    activity = create_activity(client, auth_headers)

    response = client.put(f"/activities/{activity['id']}/toggle", headers=other_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Activity not found"
    assert client.delete(f"/activities/{activity['id']}", headers=other_headers).status_code == 404


def test_delete_activity(client, auth_headers):
    activity = create_activity(client, auth_headers)

    assert client.delete(f"/activities/{activity['id']}", headers=auth_headers).status_code == 200
    assert client.get("/activities", headers=auth_headers).json() == []
