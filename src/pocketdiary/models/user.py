"""User model backing email/password authentication."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .diary import DiaryEntry


class User(SQLModel, table=True):
    """Diary author with hashed credentials."""

    __tablename__: ClassVar[str] = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    name: str = Field(default="", max_length=120)
    password_hash: str = Field(nullable=False, max_length=255)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    last_login: Optional[datetime] = Field(default=None)

    entries: list["DiaryEntry"] = Relationship(
        back_populates="user",
        sa_relationship=relationship("DiaryEntry", back_populates="user"),
    )

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name}
