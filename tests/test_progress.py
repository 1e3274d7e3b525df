"""
Unit tests for the weekly progress curve and its fail-open store boundary.
"""

import datetime as dt

import pytest

from app.schemas import CompletedSession
from app.services.progress import SessionProgressAggregator, aggregate, round_half_up
from app.services.result import Fallback, Ok, read_or_fallback

from conftest import FakeStore, completed


def _progress(points):
    return [p.progress for p in points]


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(37.5) == 38
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(8.33) == 8
        assert round_half_up(24.99) == 25


class TestAggregate:
    def test_no_sessions_gives_six_zero_weeks(self):
        points = aggregate([], 8.33)
        assert len(points) == 6
        assert _progress(points) == [0] * 6
        assert [p.label for p in points] == [f"Week {i}" for i in range(1, 7)]

    def test_single_session_holds_steady(self):
        points = aggregate(completed(1), 12.5)
        assert _progress(points) == [13] * 6
        assert points[0].label == "Week 1"
        assert points[-1].label == "Week 6"

    def test_each_session_opens_its_own_week(self):
        points = aggregate(completed(1, 1, 8), 10)
        assert _progress(points) == [10, 20, 30, 30, 30, 30]

    def test_non_completed_sessions_ignored(self):
        sessions = completed(1) + [CompletedSession(date=dt.date(2025, 1, 2), status="scheduled")]
        assert _progress(aggregate(sessions, 10)) == [10] * 6

    def test_only_non_completed_is_empty_curve(self):
        sessions = [CompletedSession(date=dt.date(2025, 1, 2), status="cancelled")]
        assert _progress(aggregate(sessions, 10)) == [0] * 6

    def test_sorted_by_date_before_bucketing(self):
        sessions = completed(15, 1)
        assert _progress(aggregate(sessions, 12.5)) == [13, 25, 25, 25, 25, 25]

    def test_progress_capped_at_100(self):
        points = aggregate(completed(*range(1, 12)), 12.5)
        assert len(points) == 11
        assert max(_progress(points)) == 100
        assert _progress(points)[-4:] == [100] * 4

    def test_more_than_six_weeks_not_truncated(self):
        points = aggregate(completed(*range(1, 10)), 5)
        assert len(points) == 9
        assert points[-1].label == "Week 9"
        assert points[-1].progress == 45

    def test_monotonic_and_bounded(self):
        points = aggregate(completed(*range(1, 21)), 8.33)
        values = _progress(points)
        assert values == sorted(values)
        assert all(0 <= v <= 100 for v in values)

    def test_calendar_week_grouping(self):
        # Jan 6 and Jan 8 2025 share ISO week 2; Jan 13 is week 3
        points = aggregate(completed(6, 8, 13), 10, by_calendar_week=True)
        assert _progress(points) == [20, 30, 30, 30, 30, 30]

    def test_custom_labels_and_length(self):
        points = aggregate([], 10, min_points=3, label_prefix="Sem")
        assert [p.label for p in points] == ["Sem 1", "Sem 2", "Sem 3"]


class TestReadOrFallback:
    @pytest.mark.anyio
    async def test_ok(self):
        async def read():
            return [1, 2]

        result = await read_or_fallback(read, [], "numbers")
        assert isinstance(result, Ok)
        assert result.value == [1, 2]

    @pytest.mark.anyio
    async def test_failure_becomes_fallback(self):
        async def read():
            raise RuntimeError("boom")

        result = await read_or_fallback(read, [], "numbers")
        assert isinstance(result, Fallback)
        assert result.value == []
        assert isinstance(result.error, RuntimeError)

    @pytest.mark.anyio
    async def test_synchronous_failure_is_caught(self):
        def read():
            raise AttributeError("no store")

        result = await read_or_fallback(read, None, "nothing")
        assert isinstance(result, Fallback)


class TestSessionProgressAggregator:
    @pytest.mark.anyio
    async def test_for_user_reads_store(self, settings):
        store = FakeStore(sessions=completed(1, 8))
        aggregator = SessionProgressAggregator(store, settings)
        points = await aggregator.for_user("u1", 12.5)
        assert _progress(points) == [13, 25, 25, 25, 25, 25]
        assert store.calls == [("sessions", "u1")]

    @pytest.mark.anyio
    async def test_store_failure_gives_zero_curve(self, settings):
        aggregator = SessionProgressAggregator(FakeStore(fail=True), settings)
        points = await aggregator.for_user("u1", 12.5)
        assert _progress(points) == [0] * 6
        assert [p.label for p in points] == [f"Week {i}" for i in range(1, 7)]

    @pytest.mark.anyio
    async def test_settings_drive_grouping(self):
        from app.config import Settings

        settings = Settings(_env_file=None, group_sessions_by_calendar_week=True, week_label_prefix="Sem")
        aggregator = SessionProgressAggregator(FakeStore(sessions=completed(6, 8)), settings)
        points = await aggregator.for_user("u1", 10)
        assert points[0].label == "Sem 1"
        assert _progress(points) == [20] * 6

    def test_curve_from_fallback(self, settings):
        aggregator = SessionProgressAggregator(FakeStore(), settings)
        points = aggregator.curve(Fallback([], RuntimeError("x")), 10)
        assert _progress(points) == [0] * 6
