# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
from typing import Optional
from urllib.parse import urlencode

import requests
from sqlalchemy.orm import Session

from mindhaven.models.user import User

logger = logging.getLogger(__name__)

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000").rstrip("/")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000").rstrip("/")

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
REQUEST_TIMEOUT = 15


class OAuthError(Exception):
    pass


def is_configured() -> bool:
    return bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET)


def callback_url() -> str:
    return f"{BACKEND_URL}/auth/google/callback"


def build_authorization_url(state: str) -> str:
    params = {
        "client_id": GOOGLE_CLIENT_ID,
        "redirect_uri": callback_url(),
        "response_type": "code",
        "scope": "openid profile email",
        "prompt": "select_account",
        "state": state,
    }
    return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"


def fetch_google_profile(code: str) -> dict:
    """Exchanges an authorization code for the signed-in Google profile."""
    try:
        token_response = requests.post(
            GOOGLE_TOKEN_URL,
            data={
                "code": code,
                "client_id": GOOGLE_CLIENT_ID,
                "client_secret": GOOGLE_CLIENT_SECRET,
                "redirect_uri": callback_url(),
                "grant_type": "authorization_code",
            },
            timeout=REQUEST_TIMEOUT,
        )
        token_response.raise_for_status()
        access_token = token_response.json()["access_token"]

        profile_response = requests.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=REQUEST_TIMEOUT,
        )
        profile_response.raise_for_status()
        return profile_response.json()
    except (requests.exceptions.RequestException, KeyError, ValueError) as e:
        raise OAuthError("Google code exchange failed") from e


def find_or_create_google_user(db: Session, profile: dict) -> User:
    """
    Resolves a Google profile to a local user: by Google id first, then by email
    (linking the Google id onto that account), otherwise a new password-less user.
    """
    google_id: Optional[str] = profile.get("sub")
    email: Optional[str] = (profile.get("email") or "").strip().lower()
    if not google_id:
        raise OAuthError("Google profile has no id")
    if not email:
        raise OAuthError("No email provided by Google")

    user = db.query(User).filter(User.google_id == google_id).first()
    if user:
        return user

    user = db.query(User).filter(User.email == email).first()
    if user:
        logger.info("🔗 Linking Google account to existing user %s", user.id)
        user.google_id = google_id
    else:
        user = User(
            name=profile.get("name") or email.split("@")[0],
            email=email,
            google_id=google_id,
        )
        db.add(user)
        logger.info("🆕 Creating user from Google profile")

    db.commit()
    db.refresh(user)
    return user
