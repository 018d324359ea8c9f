"""Streak routes."""

from __future__ import annotations

from flask import g, jsonify

from ...auth_guard import login_required
from ...extensions import get_clock, get_diary_service
from ...services.streaks import display_streak
from . import bp


@bp.get("")
@login_required
def get_streak():
    """Return the caller's streak record, zero-valued before the first entry."""

    state = get_diary_service().get_streak(g.user_id)
    payload = state.to_dict()
    payload["activeStreak"] = display_streak(state, today=get_clock().today_iso())
    return jsonify(payload)
