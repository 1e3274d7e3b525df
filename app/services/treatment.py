"""
Treatment calculator — session count, progress per session and expected
efficacy for a (skin tone, hair color) pair.

Lighter skin with darker hair needs fewer sessions and responds better; the
darkest skin bucket bottoms out at 10% efficacy. The matrix values are
calibrated constants, not derived.
"""

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional

from app.schemas import CompletedSession, SessionStatus, TreatmentCalculation
from app.services.classification import hair_bucket, skin_bucket

logger = logging.getLogger(__name__)

DEFAULT_CALCULATION = TreatmentCalculation(sessions=12, progress_per_session=8.33, efficacy=80)


def _row(**cells: tuple[int, float, int]) -> MappingProxyType:
    return MappingProxyType({
        hair.replace("_", "-"): TreatmentCalculation(
            sessions=sessions, progress_per_session=progress, efficacy=efficacy
        )
        for hair, (sessions, progress, efficacy) in cells.items()
    })


TREATMENT_MATRIX = MappingProxyType({
    "light": _row(
        black=(8, 12.5, 95),
        dark_brown=(10, 10, 90),
        medium_brown=(12, 8.33, 85),
        light_brown=(16, 6.25, 80),
        blonde=(18, 5.56, 75),
        red=(20, 5, 70),
    ),
    "medium-light": _row(
        black=(12, 8.33, 90),
        dark_brown=(12, 8.33, 85),
        medium_brown=(14, 7.1, 80),
        light_brown=(16, 6.25, 75),
        blonde=(18, 5.56, 70),
        red=(20, 5, 65),
    ),
    "medium": _row(
        black=(14, 7.1, 85),
        dark_brown=(14, 7.1, 80),
        medium_brown=(16, 6.25, 75),
        light_brown=(18, 5.56, 70),
        blonde=(20, 5, 65),
        red=(20, 5, 60),
    ),
    "dark": _row(
        black=(16, 6.25, 75),
        dark_brown=(16, 6.25, 70),
        medium_brown=(18, 5.56, 65),
        light_brown=(18, 5.56, 60),
        blonde=(20, 5, 55),
        red=(20, 5, 50),
    ),
    "very-dark": _row(
        black=(20, 5, 20),
        dark_brown=(20, 5, 20),
        medium_brown=(20, 5, 15),
        light_brown=(20, 5, 15),
        blonde=(20, 5, 10),
        red=(20, 5, 10),
    ),
})


def calculate(skin_tone: Optional[str], hair_color: Optional[str]) -> TreatmentCalculation:
    """Look up the treatment schedule; never raises."""
    skin = skin_bucket(skin_tone)
    hair = hair_bucket(hair_color)
    calculation = TREATMENT_MATRIX.get(skin, {}).get(hair)
    if calculation is None:
        logger.debug(f"No treatment cell for {skin}/{hair}, using default")
        return DEFAULT_CALCULATION
    return calculation


def completed_sessions_count(sessions: Iterable[CompletedSession]) -> int:
    return sum(1 for s in sessions if s.status == SessionStatus.COMPLETED.value)


def total_progress(completed_sessions: int, progress_per_session: float) -> float:
    """Cumulative hair reduction in percent, capped at 100."""
    return min(100, completed_sessions * progress_per_session)
