"""Helpers binding request bodies to pydantic payload models."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ValidationFailed

M = TypeVar("M", bound=BaseModel)


def structured_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors into ``{field: [messages]}``."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def bind_payload(model: type[M], data: Mapping[str, Any] | None) -> M:
    """Validate ``data`` against ``model`` or raise ValidationFailed."""

    if not isinstance(data, Mapping):
        raise ValidationFailed("Request body must be a JSON object.")
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise ValidationFailed(details=structured_errors(exc)) from exc
