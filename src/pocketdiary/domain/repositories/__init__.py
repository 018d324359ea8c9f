"""Repository protocol definitions for domain layer."""

from .diary import DiaryRepository
from .streak import StreakRepository

__all__ = [
    "DiaryRepository",
    "StreakRepository",
]
