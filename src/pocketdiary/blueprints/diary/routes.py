"""Diary entry routes."""

from __future__ import annotations

from flask import g, jsonify, request

from ...auth_guard import login_required
from ...errors import ValidationFailed
from ...extensions import get_clock, get_diary_service
from ...models.diary import DiaryEntry
from ...services.diary import DiaryService
from ...validation import bind_payload
from . import bp
from .forms import EntryPayload, EntryUpdatePayload


def _serialize(service: DiaryService, entry: DiaryEntry) -> dict:
    return entry.to_dict(is_editable=service.is_editable(g.user_id, entry))


@bp.post("")
@login_required
def create_entry():
    """Write the caller's entry for a day (today unless ``entryDate`` is given)."""

    payload = bind_payload(EntryPayload, request.get_json(silent=True))
    service = get_diary_service()
    entry = service.create(
        g.user_id,
        payload.title,
        payload.content,
        payload.entry_date if payload.entry_date is not None else get_clock().today_iso(),
    )
    return jsonify(_serialize(service, entry)), 201


@bp.get("")
@login_required
def list_entries():
    """List the caller's entries, optionally filtered with ``?date=``."""

    service = get_diary_service()
    entry_date = request.args.get("date") or None
    entries = service.list_entries(g.user_id, entry_date)
    return jsonify([_serialize(service, entry) for entry in entries])


@bp.put("")
@login_required
def update_entry_from_body():
    """Update the entry named by ``entryDate`` in the request body."""

    payload = bind_payload(EntryPayload, request.get_json(silent=True))
    if payload.entry_date is None:
        raise ValidationFailed(details={"entryDate": ["Field required"]})
    return _apply_update(payload, payload.entry_date)


@bp.get("/<entry_date>")
@login_required
def get_entry(entry_date: str):
    service = get_diary_service()
    entry = service.get_entry(g.user_id, entry_date)
    return jsonify(_serialize(service, entry))


@bp.put("/<entry_date>")
@login_required
def update_entry(entry_date: str):
    """Update the entry for the date in the URL; only today's entry is editable."""

    payload = bind_payload(EntryUpdatePayload, request.get_json(silent=True))
    return _apply_update(payload, entry_date)


def _apply_update(payload: EntryUpdatePayload, entry_date: str):
    service = get_diary_service()
    entry = service.update(g.user_id, entry_date, payload.title, payload.content)
    return jsonify(_serialize(service, entry))
