"""
TreatmentTracker — the request chain behind the dashboard.

Single entry point per view: build_plan(user_id) / weekly_progress(user_id).
The preference read and the session-history read run concurrently and are
joined before anything is computed from them.
"""

import asyncio
import logging
from typing import Optional

from app.config import Settings, get_settings
from app.schemas import TreatmentPlan, WeeklyProgressPoint
from app.services.intensity import recommend
from app.services.preferences import PreferenceResolver
from app.services.progress import SessionProgressAggregator
from app.services.treatment import calculate, completed_sessions_count, total_progress

logger = logging.getLogger(__name__)


class TreatmentTracker:
    def __init__(self, store, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.preferences = PreferenceResolver(store, settings)
        self.progress = SessionProgressAggregator(store, settings)

    async def build_plan(self, user_id: str) -> TreatmentPlan:
        preference, sessions = await asyncio.gather(
            self.preferences.resolve(user_id),
            self.progress.load_sessions(user_id),
        )

        calculation = calculate(preference.skin_tone, preference.hair_color)
        intensity = recommend(preference.skin_tone, preference.hair_color)
        weekly = self.progress.curve(sessions, calculation.progress_per_session)

        completed = completed_sessions_count(self.progress.history(sessions))
        logger.debug(f"Plan for user {user_id}: {completed}/{calculation.sessions} sessions completed")

        return TreatmentPlan(
            preference=preference,
            calculation=calculation,
            intensity=intensity,
            completed_sessions=completed,
            remaining_sessions=max(0, calculation.sessions - completed),
            total_progress=total_progress(completed, calculation.progress_per_session),
            weekly_progress=weekly,
        )

    async def weekly_progress(self, user_id: str) -> list[WeeklyProgressPoint]:
        preference, sessions = await asyncio.gather(
            self.preferences.resolve(user_id),
            self.progress.load_sessions(user_id),
        )
        calculation = calculate(preference.skin_tone, preference.hair_color)
        return self.progress.curve(sessions, calculation.progress_per_session)
