"""Database and service wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .clock import Clock, SystemClock
from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelDiaryRepository, SQLModelStreakRepository
from .services.diary import DiaryService

_EXTENSION_KEY = "pocketdiary"


def init_db(app: Flask) -> None:
    """Create the engine, ensure tables exist and attach services to the app."""

    config: BaseConfig = app.config["POCKETDIARY_CONFIG"]
    engine, session_factory = bootstrap_database(config)

    clock: Clock = app.config.get("POCKETDIARY_CLOCK") or SystemClock(config.TIMEZONE)
    app.config["POCKETDIARY_CLOCK"] = clock

    app.extensions[_EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
    }


def get_session_factory() -> SessionFactory:
    return current_app.extensions[_EXTENSION_KEY]["session_factory"]


def get_clock() -> Clock:
    return current_app.config["POCKETDIARY_CLOCK"]


def get_diary_service() -> DiaryService:
    """Build a DiaryService for the current app's store and clock."""

    session_factory = get_session_factory()
    return DiaryService(
        entries=SQLModelDiaryRepository(session_factory),
        streaks=SQLModelStreakRepository(session_factory),
        clock=get_clock(),
    )

