# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import math
from collections import Counter, defaultdict
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.mood import MoodEntry, MIN_INTENSITY, MAX_INTENSITY
from mindhaven.models.user import User
from mindhaven.schemas.mood_schemas import MoodRequest
from mindhaven.services.progress_service import record_mood

router = APIRouter(prefix="/mood", tags=["Mood"])


def serialize_mood(entry: MoodEntry) -> dict:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "mood": entry.mood,
        "intensity": entry.intensity,
        "notes": entry.note or "",
        "date": entry.date.isoformat(),
    }


def _validated_fields(payload: MoodRequest) -> dict:
    mood = (payload.mood or "").strip()
    if not mood or payload.intensity is None:
        raise HTTPException(status_code=400, detail="Mood and intensity are required")

    if payload.intensity < MIN_INTENSITY or payload.intensity > MAX_INTENSITY:
        raise HTTPException(
            status_code=400,
            detail=f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}"
        )

    return {"mood": mood, "intensity": payload.intensity, "note": payload.notes or ""}


def _user_moods(db: Session, user: User):
    return db.query(MoodEntry).filter(MoodEntry.user_id == user.id)


def _get_owned_mood(db: Session, user: User, mood_id: int) -> MoodEntry:
    entry = _user_moods(db, user).filter(MoodEntry.id == mood_id).first()
    if not entry:
        raise HTTPException(status_code=404, detail="Mood entry not found")
    return entry


@router.get("")
def list_moods(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entries = _user_moods(db, user).order_by(MoodEntry.date.desc()).all()
    return [serialize_mood(e) for e in entries]


@router.post("", status_code=201)
def create_mood(payload: MoodRequest, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    fields = _validated_fields(payload)
    now = datetime.utcnow()

    entry = MoodEntry(user_id=user.id, date=now, **fields)
    db.add(entry)
    record_mood(db, user.id, entry.intensity, now)
    db.commit()
    db.refresh(entry)

    return {"success": True, "data": serialize_mood(entry)}


@router.get("/stats")
def mood_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """
    Aggregates over every mood entry of the user.
    weeklyTrend holds the average intensity of each of the last 7 days, oldest first (0 = no entry).
    """
    entries = _user_moods(db, user).all()
    if not entries:
        return {
            "totalEntries": 0,
            "averageIntensity": 0,
            "mostCommonMood": None,
            "moodDistribution": {},
            "weeklyTrend": [0] * 7,
        }

    counts = Counter(e.mood for e in entries)

    today = datetime.utcnow().date()
    first_day = today - timedelta(days=6)
    per_day = defaultdict(list)
    for e in entries:
        day = e.date.date()
        if first_day <= day <= today:
            per_day[day].append(e.intensity)

    weekly_trend = []
    for offset in range(7):
        values = per_day.get(first_day + timedelta(days=offset), [])
        weekly_trend.append(round(sum(values) / len(values), 1) if values else 0)

    return {
        "totalEntries": len(entries),
        "averageIntensity": round(sum(e.intensity for e in entries) / len(entries), 1),
        "mostCommonMood": counts.most_common(1)[0][0],
        "moodDistribution": dict(counts),
        "weeklyTrend": weekly_trend,
    }


@router.get("/history")
def mood_history(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    query = _user_moods(db, user)
    total = query.count()
    entries = (
        query.order_by(MoodEntry.date.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "success": True,
        "data": [serialize_mood(e) for e in entries],
        "pagination": {
            "currentPage": page,
            "totalPages": math.ceil(total / limit),
            "totalItems": total,
            "hasNext": page * limit < total,
            "hasPrev": page > 1,
        },
    }


@router.get("/{mood_id}")
def get_mood(mood_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return serialize_mood(_get_owned_mood(db, user, mood_id))


@router.put("/{mood_id}")
def update_mood(
    mood_id: int,
    payload: MoodRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    fields = _validated_fields(payload)
    entry = _get_owned_mood(db, user, mood_id)

    for key, value in fields.items():
        setattr(entry, key, value)

    db.commit()
    db.refresh(entry)
    return {"success": True, "data": serialize_mood(entry)}


@router.delete("/{mood_id}")
def delete_mood(mood_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entry = _get_owned_mood(db, user, mood_id)
    db.delete(entry)
    db.commit()
    return {"success": True, "message": "Mood entry deleted successfully"}
