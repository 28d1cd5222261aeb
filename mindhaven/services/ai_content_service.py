# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import random
from typing import Callable, List

from mindhaven.utils.ai_engine import generate_ai_reply, parse_ai_json
from mindhaven.utils.prompt_templates import (
    mood_summary_prompt,
    cbt_thought_record_prompt,
    wellness_plan_prompt,
    relapse_signals_prompt,
    positive_quote_prompt,
)

logger = logging.getLogger(__name__)

FALLBACK_QUOTES = [
    "Every day is a new beginning.",
    "You are stronger than you think.",
    "Small steps lead to big changes.",
    "Your potential is limitless.",
    "Today is your day to shine.",
]

RISK_LEVELS = ("low", "medium", "high")


def _run_structured_prompt(
    kind: str,
    prompt: str,
    build: Callable[[dict], dict],
    parse_fallback: dict,
    error_fallback: dict,
) -> dict:
    """
    Calls the model once and shapes its JSON reply with `build`.

    Nothing is raised to the caller: an unreachable model yields `error_fallback`,
    an unparseable reply yields `parse_fallback`, both flagged with success False.
    """
    try:
        raw = generate_ai_reply(prompt)
    except Exception:
        logger.error("❌ %s generation failed", kind, exc_info=True)
        return {**error_fallback, "success": False}

    try:
        parsed = parse_ai_json(raw)
    except ValueError:
        logger.warning("⚠️ %s reply was not valid JSON, using fallback", kind)
        return {**parse_fallback, "success": False}

    return {**build(parsed), "success": True}


def _text(value, default: str) -> str:
    return value if isinstance(value, str) and value.strip() else default


def _string_list(value, default: List[str]) -> List[str]:
    if isinstance(value, list):
        items = [str(v) for v in value if v]
        if items:
            return items
    return default


# -------------------------
# Mood summary
# -------------------------

def generate_mood_summary(mood_data: list, journal_data: list) -> dict:
    def build(parsed):
        return {
            "dailySummary": _text(parsed.get("dailySummary"), "Unable to generate summary"),
            "weeklyTrend": _text(parsed.get("weeklyTrend"), "Unable to analyze trends"),
            "topTriggers": _string_list(parsed.get("topTriggers"), ["Data insufficient"]),
            "nextSteps": _string_list(parsed.get("nextSteps"), ["Continue current routine"]),
        }

    return _run_structured_prompt(
        "Mood summary",
        mood_summary_prompt(mood_data, journal_data),
        build,
        parse_fallback={
            "dailySummary": "Your mood data shows patterns worth exploring",
            "weeklyTrend": "Continue tracking to identify trends",
            "topTriggers": ["Keep observing triggers"],
            "nextSteps": ["Maintain current routine", "Continue journaling", "Stay consistent"],
        },
        error_fallback={
            "dailySummary": "Unable to generate summary at this time",
            "weeklyTrend": "Data analysis temporarily unavailable",
            "topTriggers": ["Continue tracking"],
            "nextSteps": ["Maintain current routine"],
        },
    )


# -------------------------
# CBT thought record
# -------------------------

def generate_cbt_thought_record(negative_thought: str) -> dict:
    def build(parsed):
        return {
            "situation": _text(parsed.get("situation"), "Situation unclear"),
            "automaticThought": _text(parsed.get("automaticThought"), negative_thought),
            "emotion": _text(parsed.get("emotion"), "Emotion to be determined"),
            "cognitiveDistortion": _text(parsed.get("cognitiveDistortion"), "Pattern to identify"),
            "evidence": _text(parsed.get("evidence"), "Evidence to gather"),
            "balancedAlternative": _text(parsed.get("balancedAlternative"), "Alternative perspective to develop"),
        }

    return _run_structured_prompt(
        "CBT thought record",
        cbt_thought_record_prompt(negative_thought),
        build,
        parse_fallback={
            "situation": "Reflect on what triggered this thought",
            "automaticThought": negative_thought,
            "emotion": "Rate your emotion intensity 0-100",
            "cognitiveDistortion": "Identify thinking patterns",
            "evidence": "Look for evidence for and against",
            "balancedAlternative": "Develop a more balanced view",
        },
        error_fallback={
            "situation": "Unable to analyze at this time",
            "automaticThought": negative_thought,
            "emotion": "Emotion analysis unavailable",
            "cognitiveDistortion": "Pattern identification needed",
            "evidence": "Evidence gathering required",
            "balancedAlternative": "Alternative development needed",
        },
    )


# -------------------------
# Wellness plan
# -------------------------

PLAN_FIELDS = ("day", "title", "description", "timeEstimate", "whyItHelps", "prompt")


def _plan_items(value) -> list:
    if not isinstance(value, list):
        return []
    return [
        {field: str(item.get(field, "")) for field in PLAN_FIELDS}
        for item in value
        if isinstance(item, dict)
    ]


def generate_wellness_plan(mood_data: list, journal_data: list) -> dict:
    def build(parsed):
        ics = parsed.get("icsCalendar")
        return {
            "plan": _plan_items(parsed.get("plan")),
            "icsCalendar": ics if isinstance(ics, str) else "",
        }

    return _run_structured_prompt(
        "Wellness plan",
        wellness_plan_prompt(mood_data, journal_data),
        build,
        parse_fallback={"plan": [], "icsCalendar": ""},
        error_fallback={"plan": [], "icsCalendar": ""},
    )


# -------------------------
# Relapse signals
# -------------------------

def detect_relapse_signals(mood_data: list, journal_data: list) -> dict:
    def build(parsed):
        risk = str(parsed.get("riskLevel", "")).strip().lower()
        return {
            "riskLevel": risk if risk in RISK_LEVELS else "low",
            "signals": _string_list(parsed.get("signals"), ["Continue monitoring"]),
            "copingTasks": _string_list(parsed.get("copingTasks"), ["Practice deep breathing"]),
            "checkInSchedule": _string_list(parsed.get("checkInSchedule"), ["Check in daily"]),
        }

    return _run_structured_prompt(
        "Relapse signals",
        relapse_signals_prompt(mood_data, journal_data),
        build,
        parse_fallback={
            "riskLevel": "low",
            "signals": ["Continue monitoring patterns"],
            "copingTasks": ["Practice deep breathing", "Take a short walk", "Call a friend"],
            "checkInSchedule": ["Check in daily", "Monitor mood changes"],
        },
        error_fallback={
            "riskLevel": "low",
            "signals": ["Analysis temporarily unavailable"],
            "copingTasks": ["Continue current routine"],
            "checkInSchedule": ["Maintain regular check-ins"],
        },
    )


# -------------------------
# Quotes
# -------------------------

def get_positive_quote() -> str:
    try:
        quote = generate_ai_reply(positive_quote_prompt()).strip()
        if quote:
            return quote
    except Exception:
        logger.error("❌ Positive quote generation failed", exc_info=True)

    return random.choice(FALLBACK_QUOTES)
