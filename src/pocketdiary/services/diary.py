"""Diary entry orchestration: one entry per day, same-day edits, streaks."""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..clock import Clock
from ..domain.repositories import DiaryRepository, StreakRepository
from ..errors import Conflict, Forbidden, NotFound, ValidationFailed
from ..logging_config import get_logger
from ..models.diary import DiaryEntry
from .editability import can_edit
from .streaks import ZERO_STREAK, StreakState, advance_streak, compute_streaks

logger = get_logger(__name__)


def normalize_entry_date(value: str) -> str:
    """Return ``value`` as a canonical ``YYYY-MM-DD`` string.

    Raises:
        ValidationFailed: when the value is not a calendar date in that form
    """

    value = (value or "").strip()
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        parsed = None
    if parsed is None or len(value) != 10:
        raise ValidationFailed(
            "Entry date must be a YYYY-MM-DD calendar date.",
            details={"entryDate": [f"Invalid date: {value!r}"]},
        )
    return parsed.isoformat()


def _require_text(title: str, content: str) -> tuple[str, str]:
    """Return stripped ``title``/``content``; both must be non-empty."""

    title = (title or "").strip()
    content = (content or "").strip()
    details: dict[str, list[str]] = {}
    if not title:
        details["title"] = ["Please provide a title."]
    if not content:
        details["content"] = ["Write something before saving."]
    if details:
        raise ValidationFailed(details=details)
    return title, content


class DiaryService:
    """Entry Service coordinating the entry store, streak store and clock."""

    def __init__(
        self,
        *,
        entries: DiaryRepository,
        streaks: StreakRepository,
        clock: Clock,
    ):
        self.entries = entries
        self.streaks = streaks
        self.clock = clock

    def create(self, user_id: int, title: str, content: str, entry_date: str) -> DiaryEntry:
        """Write the user's entry for ``entry_date`` and advance their streak."""

        title, content = _require_text(title, content)
        entry_date = normalize_entry_date(entry_date)
        today = self.clock.today_iso()
        if entry_date > today:
            raise ValidationFailed(
                "Entries cannot be written for future dates.",
                details={"entryDate": [f"{entry_date} is after {today}"]},
            )

        if self.entries.get_entry(entry_date, user_id=user_id) is not None:
            logger.info(
                "Rejected duplicate entry",
                extra={"user_id": user_id, "entry_date": entry_date},
            )
            raise Conflict()

        entry = self.entries.insert(
            DiaryEntry(user_id=user_id, title=title, content=content, entry_date=entry_date),
            user_id=user_id,
        )
        logger.info("Created diary entry", extra={"user_id": user_id, "entry_date": entry_date})

        prior = self.streaks.get(user_id=user_id)
        advanced = advance_streak(prior, entry_date)
        if advanced != prior:
            self.streaks.save(advanced, user_id=user_id)
            logger.info(
                "Streak advanced",
                extra={
                    "user_id": user_id,
                    "current_streak": advanced.current_streak,
                    "longest_streak": advanced.longest_streak,
                },
            )
        return entry

    def update(self, user_id: int, entry_date: str, title: str, content: str) -> DiaryEntry:
        """Rewrite today's entry. Past entries are locked."""

        title, content = _require_text(title, content)
        entry_date = normalize_entry_date(entry_date)
        if self.entries.get_entry(entry_date, user_id=user_id) is None:
            raise NotFound()
        if not can_edit(user_id, entry_date, clock=self.clock):
            logger.info(
                "Rejected edit of locked entry",
                extra={"user_id": user_id, "entry_date": entry_date},
            )
            raise Forbidden()

        updated = self.entries.update_content(
            entry_date, user_id=user_id, title=title, content=content
        )
        if updated is None:  # pragma: no cover - entries are never deleted
            raise NotFound()
        logger.info("Updated diary entry", extra={"user_id": user_id, "entry_date": entry_date})
        return updated

    def list_entries(self, user_id: int, entry_date: Optional[str] = None) -> list[DiaryEntry]:
        if entry_date is not None:
            entry_date = normalize_entry_date(entry_date)
        return self.entries.list_entries(user_id=user_id, entry_date=entry_date)

    def get_entry(self, user_id: int, entry_date: str) -> DiaryEntry:
        entry = self.entries.get_entry(normalize_entry_date(entry_date), user_id=user_id)
        if entry is None:
            raise NotFound()
        return entry

    def is_editable(self, user_id: int, entry: DiaryEntry) -> bool:
        """Editability of an entry already known to belong to ``user_id``."""

        if entry.user_id != user_id:
            return False
        return can_edit(user_id, entry.entry_date, clock=self.clock)

    def get_streak(self, user_id: int) -> StreakState:
        return self.streaks.get(user_id=user_id) or ZERO_STREAK

    def rebuild_streak(self, user_id: int) -> StreakState:
        """Recompute the stored streak from the user's entry history."""

        dates = self.entries.list_entry_dates(user_id=user_id)
        rebuilt = compute_streaks(dates)
        if rebuilt.last_entry_date is None:
            return rebuilt

        # The longest streak never shrinks, even if history suggests less.
        stored = self.streaks.get(user_id=user_id)
        if stored is not None and stored.longest_streak > rebuilt.longest_streak:
            rebuilt = StreakState(
                current_streak=rebuilt.current_streak,
                longest_streak=stored.longest_streak,
                last_entry_date=rebuilt.last_entry_date,
            )
        self.streaks.save(rebuilt, user_id=user_id)
        logger.info(
            "Rebuilt streak",
            extra={
                "user_id": user_id,
                "current_streak": rebuilt.current_streak,
                "longest_streak": rebuilt.longest_streak,
            },
        )
        return rebuilt


__all__ = ["DiaryService", "normalize_entry_date"]
