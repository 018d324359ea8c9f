"""Sign-up / sign-in payload models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CredentialsPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(default="", max_length=255)
    password: str = Field(default="", max_length=1024)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            raise ValueError("Enter a valid email address.")
        return value.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required.")
        return value


class SignUpPayload(CredentialsPayload):
    name: str = Field(default="", max_length=120)


__all__ = ["CredentialsPayload", "SignUpPayload"]
