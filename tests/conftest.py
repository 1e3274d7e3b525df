import datetime as dt

import pytest

from app.config import Settings
from app.schemas import CompletedSession, PreferenceSelection


class FakeStore:
    """In-memory record store; set `fail=True` to make every read raise."""

    def __init__(self, preference=None, sessions=None, fail=False):
        self.preference = preference
        self.sessions = sessions or []
        self.fail = fail
        self.calls = []

    async def get_latest_preference(self, user_id):
        self.calls.append(("preference", user_id))
        if self.fail:
            raise ConnectionError("store unavailable")
        return self.preference

    async def get_completed_sessions(self, user_id):
        self.calls.append(("sessions", user_id))
        if self.fail:
            raise ConnectionError("store unavailable")
        return list(self.sessions)


def completed(*days: int) -> list[CompletedSession]:
    """Completed sessions on the given days of January 2025."""
    return [CompletedSession(date=dt.date(2025, 1, d), status="completed") for d in days]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def preference():
    return PreferenceSelection(skin_tone="branco", hair_color="preto")
