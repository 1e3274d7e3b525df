"""
SQLAlchemy models — two tables only.

`user_preferences`   — onboarding answers; a user may have several, the newest wins
`treatment_sessions` — one row per scheduled or completed IPL session
"""

from sqlalchemy import Column, Date, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func

from app.database import Base


class UserPreference(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    skin_tone = Column(String(50), nullable=False)
    hair_color = Column(String(50), nullable=False)
    gender = Column(String(20))
    treatment_areas = Column(JSON, default=list)
    treatment_goals = Column(Text)
    treatment_frequency = Column(String(50))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<UserPreference(id={self.id}, skin={self.skin_tone}, hair={self.hair_color})>"


class TreatmentSession(Base):
    __tablename__ = "treatment_sessions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    session_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="scheduled")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<TreatmentSession(id={self.id}, date={self.session_date}, status={self.status})>"
