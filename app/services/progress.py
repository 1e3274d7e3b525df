"""
Session progress aggregator — turns completed-session history into the
weekly reduction curve shown on the dashboard.

Sessions are bucketed in the order they are encountered. Each new bucket takes
the next "Week N" label, and with the default grouping every completed session
opens its own bucket. Setting `group_sessions_by_calendar_week` groups sessions
sharing an ISO week into one bucket instead.

The curve is cumulative, capped at 100 and padded to a minimum length by
holding the last value ("no new sessions yet, progress holds steady").
"""

import logging
import math
from collections.abc import Iterable
from typing import Optional

from app.config import Settings, get_settings
from app.schemas import CompletedSession, SessionStatus, WeeklyProgressPoint
from app.services.result import Fallback, ReadResult, read_or_fallback

logger = logging.getLogger(__name__)

MIN_POINTS = 6


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def empty_curve(min_points: int = MIN_POINTS, label_prefix: str = "Week") -> list[WeeklyProgressPoint]:
    return [
        WeeklyProgressPoint(label=f"{label_prefix} {i + 1}", progress=0)
        for i in range(min_points)
    ]


def aggregate(
    sessions: Iterable[CompletedSession],
    progress_per_session: float,
    *,
    min_points: int = MIN_POINTS,
    label_prefix: str = "Week",
    by_calendar_week: bool = False,
) -> list[WeeklyProgressPoint]:
    """Build the cumulative weekly progress curve.

    Returns at least ``min_points`` points, each in [0, 100], non-decreasing.
    """
    completed = sorted(
        (s for s in sessions if s.status == SessionStatus.COMPLETED.value),
        key=lambda s: s.date,
    )
    if not completed:
        return empty_curve(min_points, label_prefix)

    # bucket key -> session count, in insertion order
    buckets: dict = {}
    for session in completed:
        if by_calendar_week:
            key = session.date.isocalendar()[:2]
        else:
            key = len(buckets)
        buckets[key] = buckets.get(key, 0) + 1

    points = []
    cumulative = 0.0
    for n, count in enumerate(buckets.values(), start=1):
        cumulative += count * max(progress_per_session, 0)
        points.append(WeeklyProgressPoint(
            label=f"{label_prefix} {n}",
            progress=round_half_up(min(100, cumulative)),
        ))

    last_progress = points[-1].progress
    for i in range(len(points), min_points):
        points.append(WeeklyProgressPoint(label=f"{label_prefix} {i + 1}", progress=last_progress))

    return points


class SessionProgressAggregator:
    """Reads a user's session history from the record store and builds the curve.

    The store only needs ``get_completed_sessions(user_id)``. A failed read is
    treated as "no history yet" and yields the zero curve.
    """

    def __init__(self, store, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    async def load_sessions(self, user_id: str) -> ReadResult:
        return await read_or_fallback(
            lambda: self.store.get_completed_sessions(user_id),
            [],
            f"completed sessions for user {user_id}",
        )

    def history(self, sessions: ReadResult) -> list[CompletedSession]:
        """Session records from a read result; anything unusable counts as no history."""
        if isinstance(sessions, Fallback) or not sessions.value:
            return []
        try:
            return [CompletedSession.model_validate(s, from_attributes=True) for s in sessions.value]
        except Exception as e:
            logger.error(f"Unreadable session history: {str(e)}")
            return []

    def curve(self, sessions: ReadResult, progress_per_session: float) -> list[WeeklyProgressPoint]:
        history = self.history(sessions)
        if not history:
            return self._empty()
        try:
            return aggregate(
                history,
                progress_per_session,
                min_points=self.settings.min_progress_points,
                label_prefix=self.settings.week_label_prefix,
                by_calendar_week=self.settings.group_sessions_by_calendar_week,
            )
        except Exception as e:
            logger.error(f"Error building progress curve: {str(e)}")
            return self._empty()

    async def for_user(self, user_id: str, progress_per_session: float) -> list[WeeklyProgressPoint]:
        return self.curve(await self.load_sessions(user_id), progress_per_session)

    def _empty(self) -> list[WeeklyProgressPoint]:
        return empty_curve(self.settings.min_progress_points, self.settings.week_label_prefix)
