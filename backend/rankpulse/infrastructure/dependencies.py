"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rankpulse.application.interfaces import ArticleRepository
from rankpulse.application.services import (
    ArticleService,
    RangeScopedMutator,
    WebsiteMetadataService,
)
from rankpulse.config import get_settings
from rankpulse.infrastructure.database.repositories import SQLAlchemyArticleRepository
from rankpulse.infrastructure.database.session import get_db_session
from rankpulse.infrastructure.http.httpx_website_fetcher import HttpxWebsiteFetcher


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the SQLAlchemy article repository bound to the request session."""
    yield SQLAlchemyArticleRepository(session)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)


async def get_range_scoped_mutator(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[RangeScopedMutator, None]:
    """Provides a RangeScopedMutator using the configured schedule timezone."""
    settings = get_settings()
    yield RangeScopedMutator(repository, tz=settings.schedule_tz)


async def get_website_metadata_service() -> AsyncGenerator[WebsiteMetadataService, None]:
    """Provides a WebsiteMetadataService backed by an httpx fetcher."""
    settings = get_settings()
    fetcher = HttpxWebsiteFetcher(
        user_agent=settings.metadata_user_agent,
        timeout=settings.metadata_timeout,
    )
    yield WebsiteMetadataService(fetcher, content_limit=settings.metadata_content_limit)
