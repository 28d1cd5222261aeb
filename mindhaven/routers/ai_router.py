# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import random
import logging
from datetime import datetime, timedelta
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.assessment import AssessmentRecord
from mindhaven.models.journal import JournalEntry
from mindhaven.models.mood import MoodEntry
from mindhaven.models.progress import Progress
from mindhaven.models.user import User
from mindhaven.schemas.ai_schemas import AssessmentRequest, CBTThoughtRequest
from mindhaven.services import ai_content_service
from mindhaven.services.wellbeing_service import build_analysis, score_assessment
from mindhaven.utils.rate_limit_utils import AI_RATE_LIMIT, limiter

router = APIRouter(prefix="/ai", tags=["AI"])
logger = logging.getLogger(__name__)

# Days of history handed to each generator
MOOD_SUMMARY_WINDOW_DAYS = 7
WELLNESS_PLAN_WINDOW_DAYS = 14
RELAPSE_WINDOW_DAYS = 10

STATIC_QUOTES = [
    "Every day is a new beginning.",
    "You are stronger than you think.",
    "Small steps lead to big changes.",
    "Your potential is limitless.",
    "Today is your day to shine.",
    "You've got this!",
    "Believe in yourself.",
    "Make today amazing.",
    "You are capable of great things.",
    "Keep going, you're doing great!",
]


def serialize_assessment(record: AssessmentRecord) -> dict:
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "score": record.score,
        "scoreLevel": record.score_level,
        "analysis": record.analysis,
        "recommendations": list(record.recommendations or []),
    }


def assessment_history(db: Session, user: User) -> dict:
    records = (
        db.query(AssessmentRecord)
        .filter(AssessmentRecord.user_id == user.id)
        .order_by(AssessmentRecord.date.desc(), AssessmentRecord.id.desc())
        .all()
    )
    return {"assessments": [serialize_assessment(r) for r in records]}


def recent_wellness_data(db: Session, user: User, days: int) -> Tuple[List[dict], List[dict]]:
    """Mood and journal records of the last `days` days, newest first, as prompt-ready dicts."""
    since = datetime.utcnow() - timedelta(days=days)

    moods = (
        db.query(MoodEntry)
        .filter(MoodEntry.user_id == user.id, MoodEntry.date >= since)
        .order_by(MoodEntry.date.desc())
        .all()
    )
    journals = (
        db.query(JournalEntry)
        .filter(JournalEntry.user_id == user.id, JournalEntry.created_at >= since)
        .order_by(JournalEntry.created_at.desc())
        .all()
    )

    mood_data = [
        {"mood": m.mood, "intensity": m.intensity, "note": m.note or "", "date": m.date.isoformat()}
        for m in moods
    ]
    journal_data = [
        {"title": j.title, "content": j.content, "mood": j.mood, "createdAt": j.created_at.isoformat()}
        for j in journals
    ]
    return mood_data, journal_data


# ---------------------- Self-assessment ----------------------

@router.get("/assessment/history")
def get_assessment_history(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return assessment_history(db, user)


@router.post("/assessment/generate")
def generate_assessment(
    payload: AssessmentRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    if not payload.answers:
        raise HTTPException(status_code=400, detail="Answers are required")

    result = score_assessment(payload.answers)
    record = AssessmentRecord(
        user_id=user.id,
        score=result["score"],
        score_level=result["scoreLevel"],
        analysis=result["analysis"],
        recommendations=result["recommendations"],
        date=datetime.utcnow(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info("📝 Stored %s assessment for user %s", record.score_level, user.id)
    return serialize_assessment(record)


# ---------------------- Quotes & analysis ----------------------

@router.get("/quotes/positive")
def static_positive_quote(user: User = Depends(get_current_user)):
    return {"quote": random.choice(STATIC_QUOTES)}


@router.get("/analysis")
def wellbeing_analysis(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    progress = db.query(Progress).filter(Progress.user_id == user.id).first()
    return build_analysis(progress)


# ---------------------- Generated insights ----------------------

@router.post("/mood-summary")
@limiter.limit(AI_RATE_LIMIT)
def mood_summary(request: Request, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    mood_data, journal_data = recent_wellness_data(db, user, MOOD_SUMMARY_WINDOW_DAYS)
    return ai_content_service.generate_mood_summary(mood_data, journal_data)


@router.post("/cbt-thought-record")
@limiter.limit(AI_RATE_LIMIT)
def cbt_thought_record(
    request: Request,
    payload: CBTThoughtRequest,
    user: User = Depends(get_current_user)
):
    thought = (payload.negative_thought or "").strip()
    if not thought:
        raise HTTPException(status_code=400, detail="Negative thought is required")

    return ai_content_service.generate_cbt_thought_record(thought)


@router.post("/create-plan")
@limiter.limit(AI_RATE_LIMIT)
def create_plan(request: Request, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    mood_data, journal_data = recent_wellness_data(db, user, WELLNESS_PLAN_WINDOW_DAYS)
    return ai_content_service.generate_wellness_plan(mood_data, journal_data)


@router.post("/relapse-signals")
@limiter.limit(AI_RATE_LIMIT)
def relapse_signals(request: Request, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    mood_data, journal_data = recent_wellness_data(db, user, RELAPSE_WINDOW_DAYS)
    return ai_content_service.detect_relapse_signals(mood_data, journal_data)
