# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from collections import Counter
from typing import Dict, List, Optional

from mindhaven.models.mood import MoodEntry
from mindhaven.models.progress import Progress

# Mood chart holds intensities on 1-10; insights reason on a 1-5 level
MOOD_LEVEL_DIVISOR = 2
ACTIVITIES_PER_DAY_TARGET = 5


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _mood_levels(progress: Progress) -> List[float]:
    return [value / MOOD_LEVEL_DIVISOR for value in (progress.mood_data or []) if value > 0]


def compute_overall_score(progress: Optional[Progress]) -> int:
    if progress is None:
        return 0

    levels = _mood_levels(progress)
    mood_score = (sum(levels) / len(levels)) * 20 if levels else 0
    activity_score = (progress.activities_completed / ACTIVITIES_PER_DAY_TARGET) * 40
    streak_score = min(progress.streak * 4, 40)
    return min(100, _round_half_up(mood_score + activity_score + streak_score))


def build_analysis(progress: Optional[Progress]) -> Dict:
    """
    Rule-based wellbeing analysis over the user's progress record.
    Returns zero score and empty lists when the user has no progress yet.
    """
    if progress is None:
        return {"overallScore": 0, "insights": [], "recommendations": []}

    levels = _mood_levels(progress)
    insights = []
    recommendations = []

    if levels:
        avg_level = sum(levels) / len(levels)
        if avg_level < 3:
            insights.append("Your mood has been lower than usual. Consider trying some mood-lifting activities.")
        elif avg_level > 4:
            insights.append("You've been maintaining a positive mood! Keep up the great work!")

    completed = progress.activities_completed or 0
    if completed > 0:
        follow_up = (
            "Great job staying active!" if completed >= 3
            else "Try to complete a few more activities to boost your wellbeing."
        )
        insights.append(f"You've completed {completed} activities. {follow_up}")

    if progress.streak > 0:
        insights.append(f"You're on a {progress.streak}-day streak! Consistency is key to mental wellbeing.")

    if levels and levels[-1] < 3:
        recommendations.extend([
            "Try a guided meditation to lift your spirits",
            "Take a short walk outside to refresh your mind",
            "Practice deep breathing exercises for 5 minutes",
        ])

    if completed < 3:
        recommendations.extend([
            "Add a quick meditation session to your routine",
            "Try a 10-minute stretching exercise",
            "Write down three things you're grateful for today",
        ])

    if progress.streak > 0:
        recommendations.extend([
            "Maintain your streak by planning tomorrow's activities",
            "Reflect on what's been working well for you",
        ])

    return {
        "overallScore": compute_overall_score(progress),
        "insights": insights,
        "recommendations": recommendations,
    }


def mood_distribution(moods: List[MoodEntry]) -> Dict[str, str]:
    """Share of each mood label as a whole-number percentage string."""
    if not moods:
        return {}
    counts = Counter(m.mood for m in moods)
    total = len(moods)
    return {
        mood: f"{_round_half_up(count * 100 / total)}%"
        for mood, count in counts.most_common()
    }


# -------------------------
# Self-assessment
# -------------------------

ASSESSMENT_RESULTS = {
    "high": (
        "Your mental health assessment indicates a positive state of well-being. "
        "You show good emotional resilience and coping mechanisms.",
        [
            "Continue maintaining your current healthy habits",
            "Share your positive coping strategies with others",
            "Consider journaling to track what contributes to your well-being",
        ],
    ),
    "moderate": (
        "Your assessment shows some areas that could benefit from attention. While you are "
        "managing, there is room for improvement in certain aspects of your mental well-being.",
        [
            "Practice regular mindfulness or meditation",
            "Ensure you are getting adequate sleep and exercise",
            "Consider talking to a mental health professional for additional support",
        ],
    ),
    "low": (
        "Your assessment suggests you may be experiencing significant challenges with your "
        "mental well-being. It is important to take these results seriously and seek support.",
        [
            "Reach out to a mental health professional for support",
            "Consider talking to trusted friends or family members",
            "Practice self-care and stress management techniques",
            "Consider joining a support group",
        ],
    ),
}


def score_assessment(answers: Dict[str, float]) -> Dict:
    average = sum(answers.values()) / len(answers)

    if average >= 4:
        level = "high"
    elif average >= 2.5:
        level = "moderate"
    else:
        level = "low"

    analysis, recommendations = ASSESSMENT_RESULTS[level]
    return {
        "score": f"{average:.1f}",
        "scoreLevel": level,
        "analysis": analysis,
        "recommendations": list(recommendations),
    }
