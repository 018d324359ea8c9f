"""Streak record repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...services.streaks import StreakState


class StreakRepository(Protocol):
    """Persistence for one streak record per user."""

    def get(self, *, user_id: int) -> Optional[StreakState]:
        ...

    def save(self, state: StreakState, *, user_id: int) -> StreakState:
        ...
