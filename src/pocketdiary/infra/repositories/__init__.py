"""Concrete repository implementations using SQLModel."""

from .diary import SQLModelDiaryRepository
from .streak import SQLModelStreakRepository

__all__ = [
    "SQLModelDiaryRepository",
    "SQLModelStreakRepository",
]
