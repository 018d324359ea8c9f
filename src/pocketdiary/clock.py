"""Single source of truth for "today"."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Supplies the current calendar date in one consistent time zone."""

    def today(self) -> date:
        ...

    def today_iso(self) -> str:
        ...


class SystemClock:
    """Wall-clock backed clock pinned to a configured zone."""

    def __init__(self, tz_name: str = "UTC"):
        self.tz = ZoneInfo(tz_name)

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def today_iso(self) -> str:
        return self.today().isoformat()


class FixedClock:
    """Clock frozen on a given day; ``advance`` moves it forward."""

    def __init__(self, current: date | str):
        self.current = date.fromisoformat(current) if isinstance(current, str) else current

    def today(self) -> date:
        return self.current

    def today_iso(self) -> str:
        return self.current.isoformat()

    def advance(self, days: int = 1) -> None:
        self.current = self.current + timedelta(days=days)


__all__ = ["Clock", "FixedClock", "SystemClock"]
