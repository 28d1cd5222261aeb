# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.mood import MoodEntry
from mindhaven.models.progress import Progress, WEEK_LABELS, empty_week
from mindhaven.models.user import User
from mindhaven.services.wellbeing_service import build_analysis, mood_distribution

router = APIRouter(prefix="/review", tags=["Review"])


def build_review(db: Session, user: User) -> dict:
    """Everything the review page shows, computed from the user's stored data."""
    progress = db.query(Progress).filter(Progress.user_id == user.id).first()
    moods = db.query(MoodEntry).filter(MoodEntry.user_id == user.id).all()
    analysis = build_analysis(progress)

    return {
        "overallScore": analysis["overallScore"],
        "insights": analysis["insights"],
        "recommendations": analysis["recommendations"],
        "moodDistribution": mood_distribution(moods),
        "totalMoodEntries": len(moods),
        "weeklyTrend": list(progress.mood_data) if progress else empty_week(),
        "achievements": list(progress.achievements or []) if progress else [],
    }


def _pick(review: dict, *keys) -> dict:
    return {"success": True, "data": {key: review[key] for key in keys}}


@router.get("")
def get_review(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return {"success": True, "data": build_review(db, user)}


@router.get("/insights")
def get_insights(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _pick(build_review(db, user), "insights", "weeklyTrend")


@router.get("/recommendations")
def get_recommendations(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _pick(build_review(db, user), "recommendations")


@router.get("/mood-distribution")
def get_mood_distribution(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _pick(build_review(db, user), "moodDistribution", "totalMoodEntries")


@router.get("/achievements")
def get_achievements(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _pick(build_review(db, user), "achievements")


@router.get("/score")
def get_score(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _pick(build_review(db, user), "overallScore")


@router.get("/weekly-trend")
def get_weekly_trend(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    response = _pick(build_review(db, user), "weeklyTrend")
    response["data"]["labels"] = list(WEEK_LABELS)
    return response
