"""SQLModel implementation of the diary repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...errors import Conflict
from ...models.diary import DiaryEntry


class SQLModelDiaryRepository:
    """SQLModel-based diary entry repository implementation."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        self.session_factory = session_factory

    def get_entry(self, entry_date: str, *, user_id: int) -> Optional[DiaryEntry]:
        """Get one user's entry for a day."""
        with self.session_factory() as session:
            obj = session.exec(
                select(DiaryEntry)
                .where(DiaryEntry.user_id == user_id)
                .where(DiaryEntry.entry_date == entry_date)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_entries(self, *, user_id: int, entry_date: Optional[str] = None) -> list[DiaryEntry]:
        """List entries ordered by entry date, optionally for one day."""
        with self.session_factory() as session:
            statement = select(DiaryEntry).where(DiaryEntry.user_id == user_id)
            if entry_date is not None:
                statement = statement.where(DiaryEntry.entry_date == entry_date)
            statement = statement.order_by(DiaryEntry.entry_date)  # type: ignore[arg-type]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_entry_dates(self, *, user_id: int) -> list[str]:
        with self.session_factory() as session:
            return list(
                session.exec(
                    select(DiaryEntry.entry_date)
                    .where(DiaryEntry.user_id == user_id)
                    .order_by(DiaryEntry.entry_date)  # type: ignore[arg-type]
                ).all()
            )

    def insert(self, entry: DiaryEntry, *, user_id: int) -> DiaryEntry:
        """Insert a new entry; the unique (user_id, entry_date) index decides races."""
        with self.session_factory() as session:
            entry.user_id = user_id
            session.add(entry)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise Conflict() from exc
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def update_content(
        self, entry_date: str, *, user_id: int, title: str, content: str
    ) -> Optional[DiaryEntry]:
        """Overwrite title/content for an existing entry."""
        with self.session_factory() as session:
            entry = session.exec(
                select(DiaryEntry)
                .where(DiaryEntry.user_id == user_id)
                .where(DiaryEntry.entry_date == entry_date)
            ).first()
            if entry is None:
                return None
            entry.title = title
            entry.content = content
            entry.updated_at = datetime.now(timezone.utc)
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry
