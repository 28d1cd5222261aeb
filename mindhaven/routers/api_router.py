# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from mindhaven.auth import get_current_user, get_db
from mindhaven.models.user import User
from mindhaven.routers.ai_router import assessment_history
from mindhaven.schemas.ai_schemas import ChatbotQueryRequest
from mindhaven.services.ai_content_service import get_positive_quote
from mindhaven.services.chatbot_service import process_chatbot_query
from mindhaven.utils.rate_limit_utils import AI_RATE_LIMIT, limiter

router = APIRouter(prefix="/v1", tags=["Chatbot"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/quotes/positive")
@limiter.limit(AI_RATE_LIMIT)
def positive_quote(request: Request, response: Response):
    # A fresh quote on every call, so browsers must not cache it
    response.headers.update(NO_CACHE_HEADERS)
    return {"quote": get_positive_quote()}


@router.post("/chatbot/query")
@limiter.limit(AI_RATE_LIMIT)
def chatbot_query(request: Request, payload: ChatbotQueryRequest, user: User = Depends(get_current_user)):
    query = (payload.query or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Query is required")

    return process_chatbot_query(query, str(user.id))


@router.get("/assessment/history")
def assessment_history_alias(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return assessment_history(db, user)
