# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import pytest

from mindhaven.models.user import User
from mindhaven.services.google_oauth_service import OAuthError, find_or_create_google_user
from mindhaven.utils.password_utils import hash_password


def test_creates_new_user_from_profile(db_session):
    user = find_or_create_google_user(
        db_session, {"sub": "g-1", "email": "new@example.com", "name": "New Person"}
    )
    assert user.id is not None
    assert user.google_id == "g-1"
    assert user.password_hash is None


def test_links_existing_account_by_email(db_session):
    existing = User(name="Asha", email="asha@example.com", password_hash=hash_password("secret123"))
    db_session.add(existing)
    db_session.commit()

    user = find_or_create_google_user(db_session, {"sub": "g-2", "email": "ASHA@example.com"})

    assert user.id == existing.id
    assert user.google_id == "g-2"
    assert db_session.query(User).count() == 1


def test_returns_same_user_on_repeat_sign_in(db_session):
    first = find_or_create_google_user(db_session, {"sub": "g-3", "email": "x@example.com"})
    second = find_or_create_google_user(db_session, {"sub": "g-3", "email": "x@example.com"})
    assert first.id == second.id


def test_profile_without_email_is_rejected(db_session):
    with pytest.raises(OAuthError):
        find_or_create_google_user(db_session, {"sub": "g-4"})
