"""SQLModel implementation of the streak repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager, Optional

from sqlmodel import Session, select

from ...models.streak import StreakRecord
from ...services.streaks import StreakState


class SQLModelStreakRepository:
    """Stores one StreakRecord row per user and hands out StreakState values."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        self.session_factory = session_factory

    def get(self, *, user_id: int) -> Optional[StreakState]:
        with self.session_factory() as session:
            record = session.exec(
                select(StreakRecord).where(StreakRecord.user_id == user_id)
            ).first()
            if record is None:
                return None
            return StreakState(
                current_streak=record.current_streak,
                longest_streak=record.longest_streak,
                last_entry_date=record.last_entry_date,
            )

    def save(self, state: StreakState, *, user_id: int) -> StreakState:
        """Insert or replace the user's streak record."""
        if state.last_entry_date is None:
            raise ValueError("Cannot persist a streak without a last entry date")
        with self.session_factory() as session:
            record = session.exec(
                select(StreakRecord).where(StreakRecord.user_id == user_id)
            ).first()
            if record is None:
                record = StreakRecord(user_id=user_id, last_entry_date=state.last_entry_date)
            record.current_streak = state.current_streak
            record.longest_streak = state.longest_streak
            record.last_entry_date = state.last_entry_date
            record.updated_at = datetime.now(timezone.utc)
            session.add(record)
            session.commit()
            return state
