"""Streak blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("streak", __name__, url_prefix="/api/streak")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]
