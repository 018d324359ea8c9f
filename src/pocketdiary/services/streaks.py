"""Streak bookkeeping: advancing, rebuilding and displaying writing streaks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class StreakState:
    """Snapshot of a user's streak counters.

    ``last_entry_date`` is the ``YYYY-MM-DD`` day the streak was last
    advanced, or ``None`` before the first entry.
    """

    current_streak: int = 0
    longest_streak: int = 0
    last_entry_date: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "lastEntryDate": self.last_entry_date,
        }


ZERO_STREAK = StreakState()


def previous_day(entry_date: str) -> str:
    """Return the ISO date one calendar day before ``entry_date``."""

    return (date.fromisoformat(entry_date) - timedelta(days=1)).isoformat()


def advance_streak(prior: Optional[StreakState], entry_date: str) -> StreakState:
    """Return the streak after a new entry dated ``entry_date`` is written.

    ISO dates compare chronologically as plain strings, so no parsing is
    needed beyond computing yesterday.
    """

    if prior is None or prior.last_entry_date is None:
        return StreakState(current_streak=1, longest_streak=1, last_entry_date=entry_date)

    yesterday = previous_day(entry_date)
    if prior.last_entry_date == yesterday:
        current = prior.current_streak + 1
        return StreakState(
            current_streak=current,
            longest_streak=max(prior.longest_streak, current),
            last_entry_date=entry_date,
        )
    if prior.last_entry_date < yesterday:
        return replace(prior, current_streak=1, last_entry_date=entry_date)

    # Already advanced for this day (or a later one).
    return prior


def compute_streaks(entry_dates: Iterable[str]) -> StreakState:
    """Rebuild streak counters from a user's complete entry history.

    The current streak is the run of consecutive days ending at the most
    recent entry; the longest streak is the longest such run anywhere.
    """

    days = sorted({date.fromisoformat(value) for value in entry_dates})
    if not days:
        return ZERO_STREAK

    longest = 0
    run = 0
    last_day: date | None = None
    for day in days:
        if last_day is not None and day == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day

    return StreakState(current_streak=run, longest_streak=longest, last_entry_date=days[-1].isoformat())


def display_streak(state: StreakState, *, today: str) -> int:
    """Streak still alive as of ``today``.

    A stored streak keeps counting while the last entry is today or
    yesterday; after a missed day it shows as zero until the next entry.
    """

    if state.last_entry_date is None:
        return 0
    if state.last_entry_date >= previous_day(today):
        return state.current_streak
    return 0


__all__ = [
    "StreakState",
    "ZERO_STREAK",
    "advance_streak",
    "compute_streaks",
    "display_streak",
    "previous_day",
]
