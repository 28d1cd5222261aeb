# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import os

from cryptography.fernet import Fernet

# Modules read their settings at import time, so these must be set first
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["FERNET_SECRET"] = Fernet.generate_key().decode()
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENABLE_SCHEDULER"] = "false"
os.environ.pop("GEMINI_API_KEY", None)
os.environ.pop("GOOGLE_CLIENT_ID", None)
os.environ.pop("GOOGLE_CLIENT_SECRET", None)

import pytest
from fastapi.testclient import TestClient

from mindhaven.main import app
from mindhaven.models import database
from mindhaven.services import chatbot_service


@pytest.fixture(autouse=True)
def fresh_database():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    chatbot_service.reset_all_states()
    yield


@pytest.fixture
def db_session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    # No context manager: the lifespan (scheduler) stays off in tests
    return TestClient(app)


def register(client, name="Asha", email="asha@example.com", password="secret123"):
    response = client.post("/auth/register", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    # Each caller authenticates with its own header, not the shared cookie jar
    client.cookies.clear()
    return response.json()


@pytest.fixture
def auth_headers(client):
    body = register(client)
    return {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def other_headers(client):
    body = register(client, name="Ravi", email="ravi@example.com")
    return {"Authorization": f"Bearer {body['token']}"}
