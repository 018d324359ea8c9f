"""Pytest configuration and shared fixtures for PocketDiary tests.

Each test gets its own temp-file SQLite database, a clock frozen on a known
day and, for HTTP tests, a Flask app wired to both.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from pocketdiary import create_app
from pocketdiary.clock import FixedClock
from pocketdiary.infra.database import create_session_factory
from pocketdiary.infra.repositories import SQLModelDiaryRepository, SQLModelStreakRepository
from pocketdiary.models import DiaryEntry, StreakRecord, User  # noqa: F401  # register tables
from pocketdiary.services.diary import DiaryService

TODAY = date(2024, 1, 11)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Transactional session factory matching the one the app uses."""
    return create_session_factory(db_engine)


@pytest.fixture
def user_factory(session_factory):
    """Factory persisting users with throwaway credentials."""

    counter = {"n": 0}

    def _create_user(email: str | None = None) -> User:
        counter["n"] += 1
        user = User(
            email=email or f"writer{counter['n']}@example.com",
            password_hash="dummy-hash",
        )
        with session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
        return user

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    return user_factory("tester@example.com")


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def diary_repo(session_factory) -> SQLModelDiaryRepository:
    return SQLModelDiaryRepository(session_factory)


@pytest.fixture
def streak_repo(session_factory) -> SQLModelStreakRepository:
    return SQLModelStreakRepository(session_factory)


@pytest.fixture
def diary_service(diary_repo, streak_repo, clock) -> DiaryService:
    return DiaryService(entries=diary_repo, streaks=streak_repo, clock=clock)


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch, clock):
    db_path = tmp_path / "diary.db"
    monkeypatch.setenv("POCKETDIARY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("POCKETDIARY_DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("POCKETDIARY_SECRET_KEY", "test-secret")
    app = create_app("testing", clock=clock)
    yield app
    app.extensions["pocketdiary"]["engine"].dispose()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def signed_in_client(client):
    """Client with a freshly registered, signed-in account."""

    response = client.post(
        "/api/auth/sign-up",
        json={"email": "writer@example.com", "password": "correct horse", "name": "Writer"},
    )
    assert response.status_code == 201
    return client
