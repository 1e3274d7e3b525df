"""
Treatment repository — all DB access in one place.

`TreatmentRepository` works on a caller-provided session. `RecordStore` is the
read-only query surface the services consume; it opens a fresh session per read
so that concurrent reads never share one connection.
"""

import datetime as dt
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.db import TreatmentSession, UserPreference
from app.schemas import CompletedSession, PreferenceCreate, PreferenceSelection, SessionStatus

logger = logging.getLogger(__name__)


class TreatmentRepository:
    """Single repository for all DB operations."""

    async def get_latest_preference(self, db: AsyncSession, user_id: str) -> Optional[UserPreference]:
        result = await db.execute(
            select(UserPreference)
            .where(UserPreference.user_id == user_id)
            .order_by(UserPreference.created_at.desc(), UserPreference.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_completed_sessions(self, db: AsyncSession, user_id: str) -> list[TreatmentSession]:
        result = await db.execute(
            select(TreatmentSession)
            .where(
                TreatmentSession.user_id == user_id,
                TreatmentSession.status == SessionStatus.COMPLETED.value,
            )
            .order_by(TreatmentSession.session_date, TreatmentSession.id)
        )
        return list(result.scalars().all())

    async def get_sessions(self, db: AsyncSession, user_id: str) -> list[TreatmentSession]:
        result = await db.execute(
            select(TreatmentSession)
            .where(TreatmentSession.user_id == user_id)
            .order_by(TreatmentSession.session_date, TreatmentSession.id)
        )
        return list(result.scalars().all())

    async def add_preference(self, db: AsyncSession, user_id: str, data: PreferenceCreate) -> UserPreference:
        preference = UserPreference(user_id=user_id, **data.model_dump(mode="json"))
        db.add(preference)
        await db.commit()
        await db.refresh(preference)
        logger.info(f"Stored preferences for user {user_id}: {preference.skin_tone}/{preference.hair_color}")
        return preference

    async def add_session(
        self,
        db: AsyncSession,
        user_id: str,
        session_date: dt.date,
        status: SessionStatus = SessionStatus.SCHEDULED,
    ) -> TreatmentSession:
        session = TreatmentSession(
            user_id=user_id,
            session_date=session_date,
            status=SessionStatus(status).value,
        )
        db.add(session)
        await db.commit()
        await db.refresh(session)
        logger.info(f"Recorded {session.status} session on {session_date} for user {user_id}")
        return session


class RecordStore:
    """Read-only record store backed by the database."""

    def __init__(self, session_factory: async_sessionmaker, repo: Optional[TreatmentRepository] = None):
        self.session_factory = session_factory
        self.repo = repo or TreatmentRepository()

    async def get_latest_preference(self, user_id: str) -> Optional[PreferenceSelection]:
        async with self.session_factory() as db:
            preference = await self.repo.get_latest_preference(db, user_id)
        if preference is None:
            return None
        return PreferenceSelection(skin_tone=preference.skin_tone, hair_color=preference.hair_color)

    async def get_completed_sessions(self, user_id: str) -> list[CompletedSession]:
        async with self.session_factory() as db:
            sessions = await self.repo.get_completed_sessions(db, user_id)
        return [CompletedSession(date=s.session_date, status=s.status) for s in sessions]
