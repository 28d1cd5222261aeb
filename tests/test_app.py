# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


def test_root(client):
    assert client.get("/").json() == {"message": "MindHaven API is running"}


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"


def test_unknown_route(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Route not found",
        "path": "/does-not-exist",
        "method": "GET",
    }


def test_cors_preflight(client):
    response = client.options(
        "/journal",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"
