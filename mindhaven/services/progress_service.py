# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from mindhaven.models.progress import Progress, WEEK_LABELS, empty_week

logger = logging.getLogger(__name__)

# activities_completed value -> achievement awarded on reaching it
ACTIVITY_ACHIEVEMENTS = {
    5: ("achievement_5", "Activity Starter", "Completed 5 wellness activities"),
    10: ("achievement_10", "Wellness Enthusiast", "Completed 10 wellness activities"),
    25: ("achievement_25", "Mental Health Champion", "Completed 25 wellness activities"),
}


def get_or_create_progress(db: Session, user_id: int) -> Progress:
    progress = db.query(Progress).filter(Progress.user_id == user_id).first()
    if progress:
        return progress

    progress = Progress(
        user_id=user_id,
        weekly_average=0,
        streak=1,
        activities_completed=0,
        mood_data=empty_week(),
        activity_data=empty_week(),
        achievements=[],
        completed_challenges=[],
    )
    db.add(progress)
    db.commit()
    db.refresh(progress)
    return progress


def serialize_progress(progress: Progress) -> dict:
    return {
        "weeklyAverage": progress.weekly_average or 0,
        "streak": progress.streak,
        "activitiesCompleted": progress.activities_completed,
        "moodData": {"labels": list(WEEK_LABELS), "data": list(progress.mood_data or empty_week())},
        "activityData": {"labels": list(WEEK_LABELS), "data": list(progress.activity_data or empty_week())},
        "achievements": list(progress.achievements or []),
        "completedChallenges": list(progress.completed_challenges or []),
    }


def day_index(when: datetime) -> int:
    """Chart slot for a timestamp, Monday first."""
    return when.weekday()


def record_activity_completion(progress: Progress, now: Optional[datetime] = None):
    now = now or datetime.utcnow()
    progress.activities_completed = (progress.activities_completed or 0) + 1

    # JSON columns only notice reassignment, never in-place mutation
    chart = list(progress.activity_data or empty_week())
    chart[day_index(now)] += 1
    progress.activity_data = chart

    award = ACTIVITY_ACHIEVEMENTS.get(progress.activities_completed)
    if award:
        achievement_id, title, description = award
        earned = list(progress.achievements or [])
        if not any(a.get("id") == achievement_id for a in earned):
            earned.append({
                "id": achievement_id,
                "title": title,
                "description": description,
                "date": now.isoformat(),
            })
            progress.achievements = earned
            logger.info("🏆 User %s earned %s", progress.user_id, achievement_id)


def reset_activity_progress(progress: Progress):
    progress.activities_completed = 0
    progress.activity_data = empty_week()


def compute_streak(challenge_dates: Iterable[str], today: date) -> int:
    """Consecutive completed days ending today, never below 1."""
    done = set(challenge_dates)
    streak = 0
    day = today
    while day.isoformat() in done:
        streak += 1
        day -= timedelta(days=1)
    return max(streak, 1)


def record_challenge(progress: Progress, today: Optional[date] = None):
    today = today or datetime.utcnow().date()
    dates = list(progress.completed_challenges or [])
    if today.isoformat() not in dates:
        dates.append(today.isoformat())
        dates.sort()
        progress.completed_challenges = dates
    progress.streak = compute_streak(dates, today)


def record_mood(db: Session, user_id: int, intensity: int, when: Optional[datetime] = None) -> Progress:
    """Writes the day's mood slot (latest reading wins) and refreshes the weekly average."""
    when = when or datetime.utcnow()
    progress = get_or_create_progress(db, user_id)

    chart = list(progress.mood_data or empty_week())
    chart[day_index(when)] = intensity
    progress.mood_data = chart

    filled = [value for value in chart if value > 0]
    progress.weekly_average = round(sum(filled) / len(filled), 1) if filled else 0
    return progress


def reset_weekly_charts(db: Session) -> int:
    rows = db.query(Progress).all()
    for progress in rows:
        progress.mood_data = empty_week()
        progress.activity_data = empty_week()
        progress.weekly_average = 0
    db.commit()
    return len(rows)
