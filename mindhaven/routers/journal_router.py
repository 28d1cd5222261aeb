# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.journal import JournalEntry
from mindhaven.models.user import User
from mindhaven.schemas.journal_schemas import JournalRequest

router = APIRouter(prefix="/journal", tags=["Journal"])

DEFAULT_MOOD = "neutral"
TITLE_PREVIEW_LENGTH = 30


def serialize_entry(entry: JournalEntry) -> dict:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "title": entry.title,
        "content": entry.content,
        "mood": entry.mood,
        "tags": list(entry.tags or []),
        "isShared": bool(entry.is_shared),
        "createdAt": entry.created_at.isoformat(),
        "updatedAt": entry.updated_at.isoformat() if entry.updated_at else None,
    }


def _validated_fields(payload: JournalRequest) -> dict:
    content = (payload.content or "").strip()
    if not content:
        raise HTTPException(status_code=400, detail="Content is required")

    title = (payload.title or "").strip() or content[:TITLE_PREVIEW_LENGTH] or "Untitled"
    return {
        "title": title,
        "content": content,
        "mood": (payload.mood or "").strip() or DEFAULT_MOOD,
        "tags": [t.strip() for t in (payload.tags or []) if t and t.strip()],
    }


def _get_owned_entry(db: Session, user: User, entry_id: int) -> JournalEntry:
    entry = db.query(JournalEntry).filter(
        JournalEntry.id == entry_id,
        JournalEntry.user_id == user.id
    ).first()
    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return entry


def _user_entries(db: Session, user: User):
    return db.query(JournalEntry).filter(JournalEntry.user_id == user.id)


@router.get("")
def list_entries(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entries = _user_entries(db, user).order_by(JournalEntry.created_at.desc()).all()
    return [serialize_entry(e) for e in entries]


@router.post("", status_code=201)
def create_entry(payload: JournalRequest, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    fields = _validated_fields(payload)

    entry = JournalEntry(
        user_id=user.id,
        is_shared=bool(payload.is_shared),
        created_at=datetime.utcnow(),
        **fields
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)

    return {"success": True, "data": serialize_entry(entry)}


@router.get("/shared")
def list_shared_entries(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """Entries any user marked as shared, with their author."""
    entries = (
        db.query(JournalEntry)
        .options(joinedload(JournalEntry.user))
        .filter(JournalEntry.is_shared.is_(True))
        .order_by(JournalEntry.created_at.desc())
        .all()
    )
    return [
        {**serialize_entry(e), "user": {"id": e.user.id, "name": e.user.name}}
        for e in entries
    ]


@router.get("/mood/{mood}")
def list_entries_by_mood(mood: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entries = (
        _user_entries(db, user)
        .filter(JournalEntry.mood == mood)
        .order_by(JournalEntry.created_at.desc())
        .all()
    )
    return [serialize_entry(e) for e in entries]


@router.get("/tag/{tag}")
def list_entries_by_tag(tag: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    # Tags live in a JSON column, so the membership test runs here
    entries = _user_entries(db, user).order_by(JournalEntry.created_at.desc()).all()
    return [serialize_entry(e) for e in entries if tag in (e.tags or [])]


@router.get("/{entry_id}")
def get_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return serialize_entry(_get_owned_entry(db, user, entry_id))


@router.put("/{entry_id}")
def update_entry(
    entry_id: int,
    payload: JournalRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    fields = _validated_fields(payload)
    entry = _get_owned_entry(db, user, entry_id)

    for key, value in fields.items():
        setattr(entry, key, value)
    if payload.is_shared is not None:
        entry.is_shared = payload.is_shared
    entry.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(entry)
    return {"success": True, "data": serialize_entry(entry)}


@router.delete("/{entry_id}")
def delete_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entry = _get_owned_entry(db, user, entry_id)
    db.delete(entry)
    db.commit()
    return {"success": True, "message": "Journal entry deleted successfully"}
