# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import json


def _dump(records: list) -> str:
    return json.dumps(records, default=str)


# -------------------------
# Chatbot
# -------------------------

CHATBOT_SYSTEM_MESSAGE = """You are a helpful mental health assistant in a wellness app called MindHaven.
You provide supportive, empathetic responses while maintaining professional boundaries.

When users want to add an activity or mood, follow these steps:

1. For Activities:
   - First ask: "What's the title of your activity?"
   - Then ask: "What type of activity is it? (e.g., exercise, meditation, reading)"
   - Then ask: "How long will it take in minutes?"
   - Finally ask: "Would you like to add a description? (optional)"
   - After getting all information, respond with: "ADD_ACTIVITY: {title}|{type}|{duration}|{description}"

2. For Moods:
   - First ask: "How are you feeling? (happy, neutral, or sad)"
   - Then ask: "Would you like to add a note about your mood? (optional)"
   - After getting all information, respond with: "ADD_MOOD: {mood}|{note}"

3. For Journal Entries:
   - First ask: "What would you like to write about?"
   - Then ask: "How are you feeling about this?"
   - After getting all information, respond with: "ADD_JOURNAL: {content}|{feeling}"

For all other queries, provide a helpful response based on your knowledge about mental health, wellness, and general support."""


def chatbot_prompt(state: dict, query: str) -> str:
    return f"""{CHATBOT_SYSTEM_MESSAGE}

Current conversation state:
{json.dumps(state)}

User query: {query}

Please provide a helpful response based on the conversation state and context."""


# -------------------------
# Quotes
# -------------------------

def positive_quote_prompt() -> str:
    return (
        "Generate a short, uplifting, and motivational quote about mental wellness, "
        "self-care, or personal growth. Keep it under 100 characters and make it inspiring."
    )


# -------------------------
# Insights
# -------------------------

def mood_summary_prompt(mood_data: list, journal_data: list) -> str:
    return f"""Analyze this mental health data and provide a concise, actionable summary:

Mood Data: {_dump(mood_data)}
Journal Data: {_dump(journal_data)}

Provide a structured response with:
1. Daily Summary (2-3 sentences)
2. Weekly Trend (2-3 sentences)
3. Top 3 Triggers (bullet points)
4. 3 Next Steps (actionable, specific)

Format as JSON: {{"dailySummary": "...", "weeklyTrend": "...", "topTriggers": ["...", "...", "..."], "nextSteps": ["...", "...", "..."]}}"""


def cbt_thought_record_prompt(negative_thought: str) -> str:
    return f"""Create a CBT thought record for this negative thought: "{negative_thought}"

Analyze and provide:
1. Situation (what happened)
2. Automatic Thought (the negative thought)
3. Emotion (0-100 intensity + emotion name)
4. Cognitive Distortion (identify the distortion type)
5. Evidence (for and against the thought)
6. Balanced Alternative (more realistic thought)

Format as JSON: {{"situation": "...", "automaticThought": "...", "emotion": "...", "cognitiveDistortion": "...", "evidence": "...", "balancedAlternative": "..."}}"""


def wellness_plan_prompt(mood_data: list, journal_data: list) -> str:
    return f"""Create a personalized 7-day wellness plan based on this data:

Mood Data: {_dump(mood_data)}
Journal Data: {_dump(journal_data)}

Generate a plan with:
- 1-2 activities per day
- Each activity includes: title, description, time estimate, why it helps, and a prompt
- Also generate an ICS calendar format for all activities

Format as JSON: {{"plan": [{{"day": "Day 1", "title": "...", "description": "...", "timeEstimate": "...", "whyItHelps": "...", "prompt": "..."}}], "icsCalendar": "BEGIN:VCALENDAR..."}}"""


def relapse_signals_prompt(mood_data: list, journal_data: list) -> str:
    return f"""Analyze this mental health data for relapse signals and risk indicators:

Mood Data: {_dump(mood_data)}
Journal Data: {_dump(journal_data)}

Provide:
1. Risk Level (low/medium/high)
2. 3-5 specific signals detected with brief evidence
3. 5 proactive coping tasks (90-second starters)
4. Check-in schedule for next 72 hours

Format as JSON: {{"riskLevel": "low/medium/high", "signals": ["...", "..."], "copingTasks": ["...", "..."], "checkInSchedule": ["...", "..."]}}"""
