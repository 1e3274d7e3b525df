from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""
    # Storage
    database_url: str = "sqlite+aiosqlite:///./taqcare.db"

    # Onboarding defaults used when a user has no stored preference
    default_skin_tone: str = "branco"
    default_hair_color: str = "preto"

    # Weekly progress chart
    min_progress_points: int = 6
    week_label_prefix: str = "Week"
    group_sessions_by_calendar_week: bool = False

    log_level: str = "INFO"

    class Config:
        env_file = '.env'


@lru_cache
def get_settings() -> Settings:
    return Settings()
