"""Authentication service tests."""

from __future__ import annotations

import pytest

from dojodesk.errors import AuthenticationError, NotFound, ValidationError
from dojodesk.services import auth


def test_password_hashing_roundtrip():
    hashed = auth.hash_password("kiai-secret")

    assert hashed.startswith("$argon2")
    assert auth.verify_password(hashed, "kiai-secret")
    assert not auth.verify_password(hashed, "wrong-secret")
    assert not auth.verify_password("not-a-hash", "kiai-secret")


def test_create_and_authenticate(session_factory):
    assert not auth.any_users_exist(session_factory)
    user = auth.create_user(
        username=" admin ", password="black-belt", role="ADMIN", session_factory=session_factory
    )

    assert user.username == "admin"
    assert user.role == "admin"
    assert auth.any_users_exist(session_factory)

    logged_in = auth.authenticate(username="admin", password="black-belt", session_factory=session_factory)
    assert logged_in is not None
    assert logged_in.last_login is not None


def test_authenticate_rejects_bad_credentials(session_factory):
    auth.create_user(username="staff1", password="white-belt", session_factory=session_factory)

    assert auth.authenticate(username="staff1", password="nope-nope", session_factory=session_factory) is None
    assert auth.authenticate(username="ghost", password="white-belt", session_factory=session_factory) is None
    assert auth.authenticate(username="", password="", session_factory=session_factory) is None


def test_disabled_account_cannot_log_in(session_factory):
    user = auth.create_user(username="staff1", password="white-belt", session_factory=session_factory)
    auth.deactivate_user(user_id=user.id, session_factory=session_factory)

    with pytest.raises(AuthenticationError):
        auth.authenticate(username="staff1", password="white-belt", session_factory=session_factory)

    auth.activate_user(user_id=user.id, session_factory=session_factory)
    assert auth.authenticate(username="staff1", password="white-belt", session_factory=session_factory)


def test_create_user_validation(session_factory):
    auth.create_user(username="staff1", password="white-belt", session_factory=session_factory)

    with pytest.raises(ValidationError, match="already taken"):
        auth.create_user(username="staff1", password="white-belt", session_factory=session_factory)
    with pytest.raises(ValidationError):
        auth.create_user(username="staff2", password="short", session_factory=session_factory)
    with pytest.raises(ValidationError):
        auth.create_user(username="staff3", password="long-enough", role="owner", session_factory=session_factory)


def test_role_and_password_changes(session_factory):
    user = auth.create_user(username="staff1", password="white-belt", session_factory=session_factory)

    assert auth.set_role(user_id=user.id, role="admin", session_factory=session_factory).role == "admin"
    auth.reset_password(user_id=user.id, password="brown-belt", session_factory=session_factory)

    assert auth.authenticate(username="staff1", password="brown-belt", session_factory=session_factory)
    assert [u.username for u in auth.list_users(session_factory)] == ["staff1"]
    assert auth.get_user_by_username("staff1", session_factory).id == user.id
    with pytest.raises(NotFound):
        auth.get_user(999, session_factory)
