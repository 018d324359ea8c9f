"""Diary entries blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("diary", __name__, url_prefix="/api/diary")

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
