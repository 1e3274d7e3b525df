"""
Async engine, session factory and declarative base.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import get_settings

engine = create_async_engine(get_settings().database_url, echo=False)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db():
    """FastAPI dependency yielding one session per request."""
    async with async_session() as session:
        yield session


async def init_db(bind: Optional[AsyncEngine] = None, reset: bool = False) -> list[str]:
    """Create the tracker tables, optionally dropping them first.

    Returns the names of the tables now present in the metadata.
    """
    # Models must be imported so their tables are registered on Base.metadata
    import app.models.db  # noqa: F401

    async with (bind or engine).begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    return sorted(Base.metadata.tables)
