"""Diary entry repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.diary import DiaryEntry


class DiaryRepository(Protocol):
    """Persistence for diary entries keyed by (user, entry date)."""

    def get_entry(self, entry_date: str, *, user_id: int) -> Optional[DiaryEntry]:
        """Point lookup of one user's entry for a day."""
        ...

    def list_entries(self, *, user_id: int, entry_date: Optional[str] = None) -> list[DiaryEntry]:
        """List a user's entries ordered by entry date."""
        ...

    def list_entry_dates(self, *, user_id: int) -> list[str]:
        """Return every date the user has written on."""
        ...

    def insert(self, entry: DiaryEntry, *, user_id: int) -> DiaryEntry:
        """Insert a new entry; raise Conflict if the day is already taken."""
        ...

    def update_content(
        self, entry_date: str, *, user_id: int, title: str, content: str
    ) -> Optional[DiaryEntry]:
        """Overwrite title/content and bump updated_at."""
        ...
