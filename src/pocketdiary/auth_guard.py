"""Request authentication helpers backed by Flask's signed session cookie."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar

from flask import g, session

from .errors import Unauthenticated

F = TypeVar("F", bound=Callable)

SESSION_USER_KEY = "user_id"


def current_user_id() -> Optional[int]:
    """Return the signed-in user id, or None for anonymous requests."""

    raw = session.get(SESSION_USER_KEY)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        session.pop(SESSION_USER_KEY, None)
        return None


def sign_in(user_id: int) -> None:
    session.clear()
    session[SESSION_USER_KEY] = user_id
    session.permanent = True


def sign_out() -> None:
    session.clear()


def login_required(view: F) -> F:
    """Reject anonymous callers with Unauthenticated; expose ``g.user_id``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user_id = current_user_id()
        if user_id is None:
            raise Unauthenticated()
        g.user_id = user_id
        return view(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
