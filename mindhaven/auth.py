# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Optional

from fastapi import Cookie, Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from mindhaven.models.database import SessionLocal
from mindhaven.models.user import User
from mindhaven.utils.jwt_utils import verify_access_token

AUTH_COOKIE_NAME = "auth_token"

# Bearer header is optional here because the auth_token cookie is accepted too
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_token: Optional[str] = Cookie(None),
    db: Session = Depends(get_db),
) -> User:
    token = token or auth_token
    if not token:
        raise HTTPException(status_code=401, detail="Not authorized, no token")

    payload = verify_access_token(token)

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Not authorized, token failed")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    return user
