# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
import requests

# ---------------------------
# ✅ Logger Setup
# ---------------------------

logger = logging.getLogger(__name__)

# ---------------------------
# ✅ Environment Variables
# ---------------------------

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/models"
)
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "30"))

HEADERS = {"Content-Type": "application/json"}


class AIServiceError(Exception):
    """Raised when the generative-language API gives no usable text."""


# ---------------------------
# ✅ Gemini generateContent call
# ---------------------------

def get_gemini_reply(prompt: str) -> str:
    """
    Send a prompt to the Gemini generateContent endpoint and return the generated text.
    Exactly one attempt is made; every failure is raised as AIServiceError so callers
    can substitute their own fallback content.
    """
    if not GEMINI_API_KEY:
        raise AIServiceError("GEMINI_API_KEY is not configured")

    url = f"{GEMINI_API_URL.rstrip('/')}/{GEMINI_MODEL}:generateContent"
    body = {"contents": [{"parts": [{"text": prompt}]}]}

    try:
        logger.info("🔁 Sending prompt to Gemini model %s", GEMINI_MODEL)
        response = requests.post(
            url,
            params={"key": GEMINI_API_KEY},
            headers=HEADERS,
            json=body,
            timeout=GEMINI_TIMEOUT
        )
        response.raise_for_status()
        result = response.json()
    except requests.exceptions.RequestException as e:
        logger.warning("⚠️ Gemini request failed: %s", e)
        raise AIServiceError("Gemini request failed") from e
    except ValueError as e:
        raise AIServiceError("Gemini returned a non-JSON body") from e

    try:
        parts = result["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        logger.warning("⚠️ Unexpected Gemini response format: %s", result)
        raise AIServiceError("Unexpected Gemini response format") from e

    if not text.strip():
        raise AIServiceError("Gemini returned an empty reply")

    return text
