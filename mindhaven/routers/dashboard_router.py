# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.activity import Activity
from mindhaven.models.journal import JournalEntry
from mindhaven.models.mood import MoodEntry
from mindhaven.models.progress import Progress
from mindhaven.models.user import User

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats")
def dashboard_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    latest_mood = (
        db.query(MoodEntry)
        .filter(MoodEntry.user_id == user.id)
        .order_by(MoodEntry.date.desc(), MoodEntry.id.desc())
        .first()
    )
    progress = db.query(Progress).filter(Progress.user_id == user.id).first()
    activities = db.query(Activity).filter(Activity.user_id == user.id)

    return {
        "currentMood": latest_mood.mood if latest_mood else "No entries yet",
        "journalEntries": db.query(JournalEntry).filter(JournalEntry.user_id == user.id).count(),
        "activities": activities.filter(Activity.completed.is_(True)).count(),
        "streak": progress.streak if progress else 0,
        "totalActivities": activities.count(),
    }
