"""SQLModel table exports."""

from .diary import DiaryEntry
from .streak import StreakRecord
from .user import User

__all__ = [
    "DiaryEntry",
    "StreakRecord",
    "User",
]
