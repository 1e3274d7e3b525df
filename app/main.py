from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import get_settings
from app.database import async_session, get_db
from app.repository import RecordStore, TreatmentRepository
from app.schemas import (
    IntensityRecommendation,
    PreferenceCreate,
    PreferenceSelection,
    SessionCreate,
    SessionRecord,
    TreatmentCalculation,
    TreatmentPlan,
    WeeklyProgressPoint,
)
from app.services.intensity import recommend
from app.services.treatment import calculate
from app.services.tracker import TreatmentTracker
import logging

# Set up logging
logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Taqcare IPL")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
treatment_repository = TreatmentRepository()
treatment_tracker = TreatmentTracker(RecordStore(async_session, treatment_repository))


def get_tracker() -> TreatmentTracker:
    return treatment_tracker


def get_repository() -> TreatmentRepository:
    return treatment_repository


@app.get("/")
async def health_check():
    return {"status": "healthy", "service": "Taqcare IPL"}


@app.get("/treatment/calculation", response_model=TreatmentCalculation)
async def treatment_calculation(skin_tone: Optional[str] = None, hair_color: Optional[str] = None):
    return calculate(skin_tone, hair_color)


@app.get("/treatment/intensity", response_model=IntensityRecommendation)
async def treatment_intensity(skin_tone: Optional[str] = None, hair_color: Optional[str] = None):
    return recommend(skin_tone, hair_color)


@app.get("/users/{user_id}/preferences", response_model=PreferenceSelection)
async def get_preferences(user_id: str, tracker: TreatmentTracker = Depends(get_tracker)):
    return await tracker.preferences.resolve(user_id)


@app.post("/users/{user_id}/preferences", response_model=PreferenceSelection, status_code=201)
async def create_preferences(
    user_id: str,
    data: PreferenceCreate,
    db: AsyncSession = Depends(get_db),
    repo: TreatmentRepository = Depends(get_repository),
):
    try:
        preference = await repo.add_preference(db, user_id, data)
    except Exception as e:
        logger.error(f"Error storing preferences: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to store preferences")
    return PreferenceSelection(skin_tone=preference.skin_tone, hair_color=preference.hair_color)


@app.post("/users/{user_id}/sessions", response_model=SessionRecord, status_code=201)
async def create_session(
    user_id: str,
    data: SessionCreate,
    db: AsyncSession = Depends(get_db),
    repo: TreatmentRepository = Depends(get_repository),
):
    try:
        session = await repo.add_session(db, user_id, data.session_date, data.status)
    except Exception as e:
        logger.error(f"Error recording session: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to record session")
    return SessionRecord.model_validate(session)


@app.get("/users/{user_id}/sessions", response_model=list[SessionRecord])
async def list_sessions(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    repo: TreatmentRepository = Depends(get_repository),
):
    """Full session history, scheduled and cancelled included."""
    try:
        sessions = await repo.get_sessions(db, user_id)
    except Exception as e:
        logger.error(f"Error loading sessions: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to load sessions")
    return [SessionRecord.model_validate(s) for s in sessions]


@app.get("/users/{user_id}/progress", response_model=list[WeeklyProgressPoint])
async def weekly_progress(user_id: str, tracker: TreatmentTracker = Depends(get_tracker)):
    return await tracker.weekly_progress(user_id)


@app.get("/users/{user_id}/plan", response_model=TreatmentPlan)
async def treatment_plan(user_id: str, tracker: TreatmentTracker = Depends(get_tracker)):
    return await tracker.build_plan(user_id)
