"""Tests for entry creation, same-day editing and streak orchestration."""

from __future__ import annotations

import pytest

from pocketdiary.errors import Conflict, Forbidden, NotFound, ValidationFailed
from pocketdiary.models import DiaryEntry
from pocketdiary.services.diary import DiaryService
from pocketdiary.services.streaks import StreakState


class _BlindLookup:
    """Entry store whose existence check always misses, as if a racing writer got in first."""

    def __init__(self, inner):
        self._inner = inner

    def get_entry(self, entry_date, *, user_id):
        return None

    def __getattr__(self, name):
        return getattr(self._inner, name)


class TestCreate:
    def test_first_entry_creates_streak_of_one(self, diary_service, user):
        entry = diary_service.create(user.id, "Day one", "# Hello", "2024-01-11")

        assert entry.id is not None
        assert entry.user_id == user.id
        assert entry.entry_date == "2024-01-11"
        assert diary_service.get_streak(user.id) == StreakState(1, 1, "2024-01-11")

    def test_consecutive_days_advance_streak(self, diary_service, clock, user):
        clock.advance(-2)
        for _ in range(3):
            diary_service.create(user.id, "Entry", "Body", clock.today_iso())
            clock.advance()

        assert diary_service.get_streak(user.id) == StreakState(3, 3, "2024-01-11")

    def test_gap_resets_streak_but_keeps_longest(self, diary_service, streak_repo, user):
        streak_repo.save(StreakState(3, 5, "2024-01-05"), user_id=user.id)

        diary_service.create(user.id, "Back again", "Body", "2024-01-11")

        assert diary_service.get_streak(user.id) == StreakState(1, 5, "2024-01-11")

    def test_duplicate_day_conflicts_without_touching_streak(self, diary_service, user):
        diary_service.create(user.id, "First", "Body", "2024-01-11")
        before = diary_service.get_streak(user.id)

        with pytest.raises(Conflict):
            diary_service.create(user.id, "Second", "Other", "2024-01-11")

        assert diary_service.get_streak(user.id) == before
        entries = diary_service.list_entries(user.id)
        assert [e.title for e in entries] == ["First"]

    def test_same_day_is_scoped_per_user(self, diary_service, user_factory):
        alice = user_factory()
        bob = user_factory()

        diary_service.create(alice.id, "Alice", "Body", "2024-01-11")
        diary_service.create(bob.id, "Bob", "Body", "2024-01-11")

        assert len(diary_service.list_entries(alice.id)) == 1
        assert len(diary_service.list_entries(bob.id)) == 1

    def test_backfilled_entry_does_not_change_streak(self, diary_service, user):
        diary_service.create(user.id, "Today", "Body", "2024-01-11")

        diary_service.create(user.id, "Last week", "Body", "2024-01-04")

        assert diary_service.get_streak(user.id) == StreakState(1, 1, "2024-01-11")

    def test_future_dates_are_rejected(self, diary_service, user):
        with pytest.raises(ValidationFailed):
            diary_service.create(user.id, "Tomorrow", "Body", "2024-01-12")
        assert diary_service.list_entries(user.id) == []

    @pytest.mark.parametrize("bad_date", ["", "2024-1-11", "20240111", "2024-02-30", "yesterday"])
    def test_malformed_dates_are_rejected(self, diary_service, user, bad_date):
        with pytest.raises(ValidationFailed):
            diary_service.create(user.id, "Title", "Body", bad_date)

    @pytest.mark.parametrize(
        ("title", "content", "field"),
        [("", "Body", "title"), ("   ", "Body", "title"), ("Title", "", "content"), ("Title", "\n\t", "content")],
    )
    def test_blank_title_or_content_is_rejected(self, diary_service, user, title, content, field):
        with pytest.raises(ValidationFailed) as excinfo:
            diary_service.create(user.id, title, content, "2024-01-11")

        assert field in excinfo.value.details
        assert diary_service.list_entries(user.id) == []
        assert diary_service.get_streak(user.id) == StreakState(0, 0, None)

    def test_title_and_content_are_stripped(self, diary_service, user):
        entry = diary_service.create(user.id, "  Day one  ", "\nBody\n", "2024-01-11")

        assert (entry.title, entry.content) == ("Day one", "Body")

    def test_insert_race_conflicts_without_touching_streak(
        self, diary_repo, streak_repo, clock, user
    ):
        diary_repo.insert(
            DiaryEntry(user_id=user.id, title="Winner", content="Body", entry_date="2024-01-11"),
            user_id=user.id,
        )
        streak_repo.save(StreakState(1, 1, "2024-01-11"), user_id=user.id)
        service = DiaryService(entries=_BlindLookup(diary_repo), streaks=streak_repo, clock=clock)

        with pytest.raises(Conflict):
            service.create(user.id, "Loser", "Body", "2024-01-11")

        assert streak_repo.get(user_id=user.id) == StreakState(1, 1, "2024-01-11")
        assert [e.title for e in diary_repo.list_entries(user_id=user.id)] == ["Winner"]


class TestUpdate:
    def test_same_day_update_overwrites_content(self, diary_service, user):
        created = diary_service.create(user.id, "Draft", "v1", "2024-01-11")

        updated = diary_service.update(user.id, "2024-01-11", "Final", "v2")

        assert updated.id == created.id
        assert (updated.title, updated.content) == ("Final", "v2")
        assert updated.updated_at >= created.updated_at

    def test_update_does_not_touch_streak(self, diary_service, user):
        diary_service.create(user.id, "Draft", "v1", "2024-01-11")
        before = diary_service.get_streak(user.id)

        diary_service.update(user.id, "2024-01-11", "Final", "v2")

        assert diary_service.get_streak(user.id) == before

    def test_missing_entry_is_not_found(self, diary_service, user):
        with pytest.raises(NotFound):
            diary_service.update(user.id, "2024-01-11", "Title", "Body")

    def test_entry_locks_the_next_day(self, diary_service, clock, user):
        diary_service.create(user.id, "Draft", "v1", "2024-01-11")
        clock.advance()

        with pytest.raises(Forbidden):
            diary_service.update(user.id, "2024-01-11", "Late edit", "v2")

        assert diary_service.get_entry(user.id, "2024-01-11").title == "Draft"

    def test_other_users_entry_is_not_found(self, diary_service, user_factory):
        owner = user_factory()
        intruder = user_factory()
        diary_service.create(owner.id, "Mine", "Body", "2024-01-11")

        with pytest.raises(NotFound):
            diary_service.update(intruder.id, "2024-01-11", "Hijack", "Body")

    @pytest.mark.parametrize(("title", "content"), [("", "v2"), ("Final", "  ")])
    def test_blank_update_leaves_entry_intact(self, diary_service, user, title, content):
        diary_service.create(user.id, "Draft", "v1", "2024-01-11")

        with pytest.raises(ValidationFailed):
            diary_service.update(user.id, "2024-01-11", title, content)

        entry = diary_service.get_entry(user.id, "2024-01-11")
        assert (entry.title, entry.content) == ("Draft", "v1")


class TestRead:
    def test_list_is_ordered_by_entry_date(self, diary_service, user):
        for day in ["2024-01-11", "2024-01-02", "2024-01-07"]:
            diary_service.create(user.id, day, "Body", day)

        dates = [e.entry_date for e in diary_service.list_entries(user.id)]

        assert dates == ["2024-01-02", "2024-01-07", "2024-01-11"]

    def test_list_filters_by_date(self, diary_service, user):
        diary_service.create(user.id, "A", "Body", "2024-01-10")
        diary_service.create(user.id, "B", "Body", "2024-01-11")

        entries = diary_service.list_entries(user.id, "2024-01-10")

        assert [e.title for e in entries] == ["A"]

    def test_streak_defaults_to_zero(self, diary_service, user):
        assert diary_service.get_streak(user.id) == StreakState(0, 0, None)

    def test_is_editable_follows_the_clock(self, diary_service, clock, user):
        entry = diary_service.create(user.id, "Today", "Body", "2024-01-11")
        assert diary_service.is_editable(user.id, entry)

        clock.advance()

        assert not diary_service.is_editable(user.id, entry)

    def test_get_missing_entry_raises(self, diary_service, user):
        with pytest.raises(NotFound):
            diary_service.get_entry(user.id, "2024-01-11")


class TestRebuildStreak:
    def test_rebuild_repairs_stale_record(self, diary_service, diary_repo, user):
        # Entries written without the streak being advanced.
        for day in ["2024-01-09", "2024-01-10", "2024-01-11"]:
            diary_repo.insert(
                DiaryEntry(user_id=user.id, title=day, content="Body", entry_date=day),
                user_id=user.id,
            )

        rebuilt = diary_service.rebuild_streak(user.id)

        assert rebuilt == StreakState(3, 3, "2024-01-11")
        assert diary_service.get_streak(user.id) == rebuilt

    def test_rebuild_keeps_higher_recorded_longest(self, diary_service, streak_repo, user):
        diary_service.create(user.id, "Today", "Body", "2024-01-11")
        streak_repo.save(StreakState(1, 9, "2024-01-11"), user_id=user.id)

        rebuilt = diary_service.rebuild_streak(user.id)

        assert rebuilt == StreakState(1, 9, "2024-01-11")

    def test_rebuild_without_entries_is_zero(self, diary_service, user):
        assert diary_service.rebuild_streak(user.id) == StreakState(0, 0, None)
