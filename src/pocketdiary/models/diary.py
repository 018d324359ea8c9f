"""Diary entry table: one row per user per calendar day."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import Column, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .user import User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DiaryEntry(SQLModel, table=True):
    """A markdown journal entry dated with a ``YYYY-MM-DD`` string."""

    __tablename__: ClassVar[str] = "diary_entry"
    __table_args__ = (UniqueConstraint("user_id", "entry_date", name="uq_diary_entry_user_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=200)
    content: str = Field(sa_column=Column(Text, nullable=False))
    entry_date: str = Field(nullable=False, min_length=10, max_length=10, index=True)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=_utcnow, nullable=False)

    user: "User" = Relationship(sa_relationship=relationship("User", back_populates="entries"))

    def to_dict(self, *, is_editable: bool | None = None) -> dict:
        payload = {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "content": self.content,
            "entryDate": self.entry_date,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if is_editable is not None:
            payload["isEditable"] = is_editable
        return payload
