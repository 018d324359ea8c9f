"""Authentication and user management services."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..errors import Conflict, NotFound, ValidationFailed
from ..logging_config import get_logger
from ..models.user import User

SessionFactory = Callable[[], ContextManager[Session]]

logger = get_logger(__name__)

_hasher = PasswordHasher()
MIN_PASSWORD_LENGTH = 8


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def list_users(session_factory: SessionFactory) -> list[User]:
    """Return all users ordered by creation time."""
    with session_factory() as session:
        users = list(session.exec(select(User).order_by(User.created_at, User.id)).all())
        session.expunge_all()
    return users


def get_user(user_id: int, session_factory: SessionFactory) -> Optional[User]:
    with session_factory() as session:
        user = session.get(User, user_id)
        if user:
            session.expunge(user)
        return user


def get_user_by_email(email: str, session_factory: SessionFactory) -> Optional[User]:
    """Fetch a user by (case-insensitive) email."""
    email = _normalize_email(email)
    with session_factory() as session:
        user = session.exec(select(User).where(User.email == email)).first()
        if user:
            session.expunge(user)
        return user


def create_user(
    *,
    email: str,
    password: str,
    name: str = "",
    session_factory: SessionFactory,
) -> User:
    """Create a new user with an argon2 password hash."""

    email = _normalize_email(email)
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters.",
            details={"password": ["Too short"]},
        )
    password_hash = _hasher.hash(password)
    with session_factory() as session:
        existing = session.exec(select(User).where(User.email == email)).first()
        if existing:
            raise Conflict("An account with this email already exists.")
        user = User(email=email, name=name.strip(), password_hash=password_hash)
        session.add(user)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise Conflict("An account with this email already exists.") from exc
        session.refresh(user)
        session.expunge(user)
    logger.info("Created user", extra={"user_id": user.id})
    return user


def authenticate(
    *,
    email: str,
    password: str,
    session_factory: SessionFactory,
) -> Optional[User]:
    """Validate credentials and return the user when correct."""

    email = _normalize_email(email)
    if not email:
        return None
    with session_factory() as session:
        user = session.exec(select(User).where(User.email == email)).first()
        if user is None:
            return None
        try:
            _hasher.verify(user.password_hash, password)
        except (VerifyMismatchError, InvalidHash, VerificationError):
            logger.info("Failed sign-in", extra={"user_id": user.id})
            return None

        if _hasher.check_needs_rehash(user.password_hash):
            user.password_hash = _hasher.hash(password)
        user.last_login = datetime.now(timezone.utc)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


def reset_password(*, user_id: int, password: str, session_factory: SessionFactory) -> User:
    """Reset a user's password to the provided value."""

    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    password_hash = _hasher.hash(password)
    with session_factory() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User not found.")
        user.password_hash = password_hash
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user
