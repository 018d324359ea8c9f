"""Per-user streak counters."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class StreakRecord(SQLModel, table=True):
    """Current and longest run of consecutive writing days for one user."""

    __tablename__: ClassVar[str] = "streak_record"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, unique=True, index=True)
    current_streak: int = Field(default=0, nullable=False, ge=0)
    longest_streak: int = Field(default=0, nullable=False, ge=0)
    last_entry_date: str = Field(nullable=False, max_length=10)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
