"""Authentication and user management services."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from sqlmodel import Session, select

from ..config import BaseConfig
from ..errors import AuthenticationError, NotFound, ValidationError
from ..logging_config import get_logger
from ..models.user import User
from . import validation

SessionFactory = Callable[[], Session]

_hasher = PasswordHasher()
logger = get_logger("auth")


def _normalize_role(role: str) -> str:
    role = (role or "staff").strip().lower()
    if role not in BaseConfig.USER_ROLES:
        raise ValidationError(f"Invalid role: {role}")
    return role


def _check_password(password: str) -> str:
    return validation.require_min_length(password, "Password", BaseConfig.MIN_PASSWORD_LENGTH)


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Return True when ``password`` matches the stored argon2 hash."""

    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, InvalidHash, VerificationError):
        return False


def list_users(session_factory: SessionFactory) -> list[User]:
    """Return all users ordered by creation time."""
    with session_factory() as session:
        users = list(session.exec(select(User).order_by(User.created_at)).all())
        session.expunge_all()
    return users


def get_user(user_id: int, session_factory: SessionFactory) -> User:
    with session_factory() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User", user_id)
        session.expunge(user)
        return user


def get_user_by_username(username: str, session_factory: SessionFactory) -> Optional[User]:
    """Fetch a user by username."""
    username = username.strip()
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user:
            session.expunge(user)
        return user


def any_users_exist(session_factory: SessionFactory) -> bool:
    """Determine if any users exist for bootstrapping the first admin."""
    with session_factory() as session:
        return session.exec(select(User.id)).first() is not None


def create_user(
    *,
    username: str,
    password: str,
    role: str = "staff",
    active: bool = True,
    session_factory: SessionFactory,
) -> User:
    """Create a new user with hashed password."""

    normalized_role = _normalize_role(role)
    username = validation.require_text(username, "Username")
    password_hash = hash_password(_check_password(password))
    with session_factory() as session:
        existing = session.exec(select(User).where(User.username == username)).first()
        if existing:
            raise ValidationError(f"Username '{username}' is already taken.")
        user = User(
            username=username, password_hash=password_hash, role=normalized_role, active=active
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
    logger.info("User created", extra={"user_id": user.id, "role": normalized_role})
    return user


def authenticate(
    *,
    username: str,
    password: str,
    session_factory: SessionFactory,
) -> Optional[User]:
    """Validate credentials and return the user when correct.

    Wrong credentials return None without saying which part was wrong.

    Raises:
        AuthenticationError: the credentials are right but the account is disabled.
    """

    username = (username or "").strip()
    if not username or not password:
        return None
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user is None or not verify_password(user.password_hash, password):
            logger.warning("Failed login attempt", extra={"username": username})
            return None
        if not user.active:
            raise AuthenticationError("This account is disabled. Contact an administrator.")

        if _hasher.check_needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
        user.last_login = datetime.now(timezone.utc)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


def set_role(*, user_id: int, role: str, session_factory: SessionFactory) -> User:
    """Update the role for a user."""

    normalized_role = _normalize_role(role)
    with session_factory() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User", user_id)
        user.role = normalized_role
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


def reset_password(*, user_id: int, password: str, session_factory: SessionFactory) -> User:
    """Reset a user's password to the provided value."""

    password_hash = hash_password(_check_password(password))
    with session_factory() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User", user_id)
        user.password_hash = password_hash
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


def _set_active(user_id: int, active: bool, session_factory: SessionFactory) -> User:
    with session_factory() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User", user_id)
        if user.active != active:
            user.active = active
            session.add(user)
            session.commit()
            session.refresh(user)
            logger.info(
                "User activated" if active else "User deactivated", extra={"user_id": user_id}
            )
        session.expunge(user)
        return user


def deactivate_user(*, user_id: int, session_factory: SessionFactory) -> User:
    return _set_active(user_id, False, session_factory)


def activate_user(*, user_id: int, session_factory: SessionFactory) -> User:
    return _set_active(user_id, True, session_factory)
