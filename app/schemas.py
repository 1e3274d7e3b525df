"""
Pydantic schemas — the single source of truth for all data contracts.

Value objects returned by the calculators are frozen: the same instance can be
handed to any number of callers without copying.
"""

from __future__ import annotations

import datetime as dt
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ────────────────────────────────────────────────────────────────────


class SkinTone(str, enum.Enum):
    BRANCO = "branco"
    BEGE = "bege"
    CASTANHO_CLARO = "castanho-claro"
    CASTANHO_MEDIO = "castanho-medio"
    CASTANHO_ESCURO = "castanho-escuro"
    CASTANHO_MUITO_ESCURO = "castanho-muito-escuro"


class HairColor(str, enum.Enum):
    PRETO = "preto"
    CASTANHO_ESCURO = "castanho-escuro"
    CASTANHO_MEDIO = "castanho-medio"
    CASTANHO_CLARO = "castanho-claro"
    LOIRO = "loiro"
    RUIVO = "ruivo"


class SessionStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ── Calculator outputs ───────────────────────────────────────────────────────


class TreatmentCalculation(BaseModel):
    """Session schedule for one (skin tone, hair color) pair."""

    model_config = ConfigDict(frozen=True)

    sessions: int = Field(ge=1)
    progress_per_session: float = Field(gt=0, le=100)
    efficacy: int = Field(ge=0, le=100, description="Expected hair reduction, in percent")


class IntensityRecommendation(BaseModel):
    """Advisory IPL intensity range.

    When ``is_recommended`` is False both intensity fields hold the
    "Não recomendado" sentinel; check the flag, never the strings.
    """

    model_config = ConfigDict(frozen=True)

    initial_intensity: str
    max_intensity: str
    observations: str
    is_recommended: bool


class WeeklyProgressPoint(BaseModel):
    label: str
    progress: int = Field(ge=0, le=100)


# ── Record store contracts ───────────────────────────────────────────────────


class PreferenceSelection(BaseModel):
    """The two classification inputs taken from a user's onboarding record."""

    model_config = ConfigDict(frozen=True)

    skin_tone: str
    hair_color: str


class CompletedSession(BaseModel):
    date: dt.date
    status: str = SessionStatus.COMPLETED.value


# ── API payloads ─────────────────────────────────────────────────────────────


class PreferenceCreate(BaseModel):
    skin_tone: SkinTone
    hair_color: HairColor
    gender: Optional[str] = None
    treatment_areas: list[str] = Field(default_factory=list)
    treatment_goals: Optional[str] = None
    treatment_frequency: Optional[str] = None


class SessionCreate(BaseModel):
    session_date: dt.date
    status: SessionStatus = SessionStatus.SCHEDULED


class SessionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_date: dt.date
    status: str


class TreatmentPlan(BaseModel):
    """Everything the dashboard shows for one user."""

    preference: PreferenceSelection
    calculation: TreatmentCalculation
    intensity: IntensityRecommendation
    completed_sessions: int = 0
    remaining_sessions: int = 0
    total_progress: float = Field(default=0, ge=0, le=100)
    weekly_progress: list[WeeklyProgressPoint] = Field(default_factory=list)
