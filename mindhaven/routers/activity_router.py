# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.activity import Activity
from mindhaven.models.user import User
from mindhaven.schemas.activity_schemas import ActivityRequest

router = APIRouter(prefix="/activities", tags=["Activities"])


def serialize_activity(activity: Activity) -> dict:
    return {
        "id": activity.id,
        "userId": activity.user_id,
        "title": activity.title,
        "description": activity.description,
        "type": activity.type,
        "duration": activity.duration,
        "completed": bool(activity.completed),
        "date": activity.date.isoformat(),
        "updatedAt": activity.updated_at.isoformat() if activity.updated_at else None,
    }


def _validated_fields(payload: ActivityRequest) -> dict:
    title = (payload.title or "").strip()
    description = (payload.description or "").strip()
    activity_type = (payload.type or "").strip()

    if not title or not description or not activity_type or not payload.duration:
        raise HTTPException(
            status_code=400,
            detail="Title, description, type, and duration are required"
        )
    if payload.duration < 0:
        raise HTTPException(status_code=400, detail="Duration must be a positive number of minutes")

    return {
        "title": title,
        "description": description,
        "type": activity_type,
        "duration": payload.duration,
    }


def _user_activities(db: Session, user: User):
    return db.query(Activity).filter(Activity.user_id == user.id)


def _get_owned_activity(db: Session, user: User, activity_id: int) -> Activity:
    activity = _user_activities(db, user).filter(Activity.id == activity_id).first()
    if not activity:
        raise HTTPException(status_code=404, detail="Activity not found")
    return activity


@router.get("")
def list_activities(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activities = _user_activities(db, user).order_by(Activity.date.desc()).all()
    return [serialize_activity(a) for a in activities]


@router.post("", status_code=201)
def create_activity(payload: ActivityRequest, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activity = Activity(
        user_id=user.id,
        completed=False,
        date=datetime.utcnow(),
        **_validated_fields(payload)
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)

    return {"success": True, "data": serialize_activity(activity)}


@router.get("/completed")
def list_completed(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activities = _user_activities(db, user).filter(Activity.completed.is_(True)).order_by(Activity.date.desc()).all()
    return [serialize_activity(a) for a in activities]


@router.get("/pending")
def list_pending(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activities = _user_activities(db, user).filter(Activity.completed.is_(False)).order_by(Activity.date.desc()).all()
    return [serialize_activity(a) for a in activities]


@router.get("/type/{activity_type}")
def list_by_type(activity_type: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activities = _user_activities(db, user).filter(Activity.type == activity_type).order_by(Activity.date.desc()).all()
    return [serialize_activity(a) for a in activities]


@router.get("/{activity_id}")
def get_activity(activity_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return serialize_activity(_get_owned_activity(db, user, activity_id))


@router.put("/{activity_id}")
def update_activity(
    activity_id: int,
    payload: ActivityRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    fields = _validated_fields(payload)
    activity = _get_owned_activity(db, user, activity_id)

    for key, value in fields.items():
        setattr(activity, key, value)
    if payload.completed is not None:
        activity.completed = payload.completed
    activity.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(activity)
    return {"success": True, "data": serialize_activity(activity)}


@router.put("/{activity_id}/toggle")
def toggle_activity(activity_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activity = _get_owned_activity(db, user, activity_id)
    activity.completed = not activity.completed
    activity.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(activity)
    return {"success": True, "data": serialize_activity(activity)}


@router.delete("/{activity_id}")
def delete_activity(activity_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    activity = _get_owned_activity(db, user, activity_id)
    db.delete(activity)
    db.commit()
    return {"success": True, "message": "Activity deleted successfully"}
