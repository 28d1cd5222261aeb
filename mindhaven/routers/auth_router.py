# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from mindhaven.auth import AUTH_COOKIE_NAME, get_current_user, get_db
from mindhaven.models.user import User
from mindhaven.schemas.user_schemas import LoginRequest, RegisterRequest
from mindhaven.services import google_oauth_service
from mindhaven.utils.jwt_utils import ACCESS_TOKEN_EXPIRE_MINUTES, create_user_token
from mindhaven.utils.password_utils import MIN_PASSWORD_LENGTH, hash_password, verify_password

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)

OAUTH_STATE_KEY = "google_oauth_state"


def _public_user(user: User) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}


def _set_auth_cookie(response: Response, token: str, request: Request):
    response.set_cookie(
        AUTH_COOKIE_NAME,
        token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=request.url.scheme == "https",
        samesite="lax",
    )


# ---------------------- Email + password ----------------------

@router.post("/register", status_code=201)
def register(payload: RegisterRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    name = (payload.name or "").strip()
    email = (payload.email or "").strip().lower()
    password = payload.password or ""

    if not name or not email or not password:
        raise HTTPException(status_code=400, detail="Please provide all required fields")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )

    if db.query(User).filter(User.email == email).first():
        logger.info("Registration refused, email already in use")
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("🆕 Registered user %s", user.id)

    token = create_user_token(user.id)
    _set_auth_cookie(response, token, request)
    return {"user": _public_user(user), "token": token}


@router.post("/login")
def login(payload: LoginRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    email = (payload.email or "").strip().lower()
    if not email or not payload.password:
        raise HTTPException(status_code=400, detail="Please provide email and password")

    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("🔁 Successful login for user %s", user.id)
    token = create_user_token(user.id)
    _set_auth_cookie(response, token, request)
    return {"user": _public_user(user), "token": token}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(AUTH_COOKIE_NAME)
    return {"success": True, "message": "Logged out"}


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return _public_user(user)


@router.get("/verify-token")
def verify_token(user: User = Depends(get_current_user)):
    return {"id": str(user.id), "name": user.name, "email": user.email}


# ---------------------- Google OAuth ----------------------

@router.get("/google")
def google_login(request: Request, test: Optional[str] = None):
    if test == "true":
        return {
            "message": "Google OAuth route is accessible",
            "url": str(request.url),
            "path": request.url.path,
        }

    if not google_oauth_service.is_configured():
        logger.error("Google OAuth credentials are missing!")
        raise HTTPException(status_code=503, detail="Google sign-in is not configured")

    state = secrets.token_urlsafe(24)
    request.session[OAUTH_STATE_KEY] = state
    return RedirectResponse(google_oauth_service.build_authorization_url(state))


@router.get("/google/callback")
def google_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    db: Session = Depends(get_db),
):
    failure_url = f"{google_oauth_service.FRONTEND_URL}/login?error=authentication_failed"

    expected_state = request.session.pop(OAUTH_STATE_KEY, None)
    if not code or not state or state != expected_state:
        logger.warning("Google callback rejected: missing code or state mismatch")
        return RedirectResponse(failure_url)

    try:
        profile = google_oauth_service.fetch_google_profile(code)
        user = google_oauth_service.find_or_create_google_user(db, profile)
    except google_oauth_service.OAuthError:
        logger.exception("❌ Google sign-in failed")
        return RedirectResponse(failure_url)

    token = create_user_token(user.id)
    redirect = RedirectResponse(f"{google_oauth_service.FRONTEND_URL}/oauth-success?token={token}")
    _set_auth_cookie(redirect, token, request)
    return redirect
