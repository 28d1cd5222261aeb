# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import pytest
import requests

from mindhaven.services import gemini_ai_service
from mindhaven.services.gemini_ai_service import AIServiceError, get_gemini_reply
from mindhaven.utils.ai_engine import parse_ai_json


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.exceptions.HTTPError(f"{self.status} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(gemini_ai_service, "GEMINI_API_KEY", "test-key")


def stub_post(monkeypatch, response):
    calls = []

    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(gemini_ai_service.requests, "post", fake_post)
    return calls


def test_joins_candidate_parts(monkeypatch, api_key):
    calls = stub_post(monkeypatch, FakeResponse(
        {"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "world"}]}}]}
    ))

    assert get_gemini_reply("hi") == "Hello world"

    url, kwargs = calls[0]
    assert url.endswith(":generateContent")
    assert kwargs["params"] == {"key": "test-key"}
    assert kwargs["json"] == {"contents": [{"parts": [{"text": "hi"}]}]}


def test_missing_key_raises(monkeypatch):
    monkeypatch.setattr(gemini_ai_service, "GEMINI_API_KEY", None)
    with pytest.raises(AIServiceError):
        get_gemini_reply("hi")


def test_http_error_is_wrapped(monkeypatch, api_key):
    stub_post(monkeypatch, FakeResponse({}, status=500))
    with pytest.raises(AIServiceError):
        get_gemini_reply("hi")


def test_network_error_is_wrapped(monkeypatch, api_key):
    stub_post(monkeypatch, requests.exceptions.ConnectionError("offline"))
    with pytest.raises(AIServiceError):
        get_gemini_reply("hi")


def test_non_json_body_is_wrapped(monkeypatch, api_key):
    stub_post(monkeypatch, FakeResponse(ValueError("bad json")))
    with pytest.raises(AIServiceError):
        get_gemini_reply("hi")


@pytest.mark.parametrize("payload", [
    {},
    {"candidates": []},
    {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
])
def test_unusable_payload_is_wrapped(monkeypatch, api_key, payload):
    stub_post(monkeypatch, FakeResponse(payload))
    with pytest.raises(AIServiceError):
        get_gemini_reply("hi")


def test_parse_ai_json_strips_fences():
    assert parse_ai_json('```json\n{"a": 1}\n```') == {"a": 1}
    assert parse_ai_json('{"a": 1}') == {"a": 1}


def test_parse_ai_json_rejects_non_objects():
    with pytest.raises(ValueError):
        parse_ai_json("[1, 2]")
    with pytest.raises(ValueError):
        parse_ai_json("not json at all")
