# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.user import User
from mindhaven.schemas.progress_schemas import ProgressUpdateRequest
from mindhaven.services.progress_service import (
    get_or_create_progress,
    serialize_progress,
    record_activity_completion,
    reset_activity_progress,
    record_challenge,
)

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("")
def get_progress(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return serialize_progress(get_or_create_progress(db, user.id))


@router.post("/update")
def update_progress(
    payload: ProgressUpdateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    progress = get_or_create_progress(db, user.id)

    if payload.activity_completed is True:
        record_activity_completion(progress)
    elif payload.activity_completed is False:
        # Sent by the client after deleting an activity
        reset_activity_progress(progress)

    if payload.challenge_completed:
        record_challenge(progress)

    db.commit()
    db.refresh(progress)

    return {
        "success": True,
        "message": "Progress updated successfully",
        "data": serialize_progress(progress),
    }
