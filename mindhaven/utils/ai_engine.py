# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import re

from mindhaven.services.gemini_ai_service import get_gemini_reply

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def generate_ai_reply(prompt: str) -> str:
    """
    Wrapper function to generate an AI reply from a given prompt using Gemini.
    Keeps the services independent of the model provider.
    """
    return get_gemini_reply(prompt)


def parse_ai_json(text: str) -> dict:
    """
    Parses a model reply that is expected to be a JSON object.
    Markdown code fences around the object are tolerated; anything else raises ValueError.
    """
    cleaned = _CODE_FENCE.sub("", text.strip()).strip()
    parsed = json.loads(cleaned)
    if not isinstance(parsed, dict):
        raise ValueError("AI reply is not a JSON object")
    return parsed
