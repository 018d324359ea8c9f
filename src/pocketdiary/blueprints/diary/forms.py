"""Diary entry payload models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 200


class EntryUpdatePayload(BaseModel):
    """Title/content submitted when rewriting an entry."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(default="", max_length=TITLE_MAX_LENGTH)
    content: str = Field(default="")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a title.")
        return value

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        if not value:
            raise ValueError("Write something before saving.")
        return value


class EntryPayload(EntryUpdatePayload):
    """Entry addressed by ``entryDate`` in the body.

    ``None`` means "not supplied"; an empty string is kept so the service
    rejects it as a malformed date.
    """

    entry_date: Optional[str] = Field(default=None, alias="entryDate")


__all__ = ["EntryPayload", "EntryUpdatePayload", "TITLE_MAX_LENGTH"]
