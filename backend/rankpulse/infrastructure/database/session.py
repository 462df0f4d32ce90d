"""SQLAlchemy database session and engine configuration."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rankpulse.config import get_settings

logger = logging.getLogger(__name__)


def to_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to its async-driver equivalent."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


settings = get_settings()

engine = create_async_engine(
    to_async_url(settings.database_url),
    echo=(settings.app_env == "development" and settings.log_level_sql.upper() == "DEBUG"),
    future=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — one session and one transaction per request.

    Mutating services commit through their repository before the endpoint
    returns. Any exception rolls the transaction back; anything still
    pending on success is committed on exit.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Rolling back request transaction")
            await session.rollback()
            raise
