"""Edit-window policy for diary entries."""

from __future__ import annotations

from ..clock import Clock


def can_edit(user_id: int, entry_date: str, *, clock: Clock) -> bool:
    """Return True when the entry dated ``entry_date`` may still be changed.

    Entries are editable only on the calendar day they are dated. The caller
    must already have confirmed that the entry belongs to ``user_id``.
    """

    return entry_date == clock.today_iso()


__all__ = ["can_edit"]
