"""Blueprint exports."""

from . import auth, diary, streak

__all__ = [
    "auth",
    "diary",
    "streak",
]
