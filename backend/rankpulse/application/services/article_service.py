"""Application service (use case) for Article operations."""

import logging
from typing import Any

from rankpulse.application.interfaces import ArticleRepository
from rankpulse.application.schemas import ArticleCreate
from rankpulse.application.text_utils import to_capitalized_case
from rankpulse.domain.entities import Article
from rankpulse.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def create_articles(
        self,
        data: list[ArticleCreate] | None,
        *,
        capitalize_titles: bool = False,
    ) -> list[Article]:
        """Bulk-insert candidate articles. Raises ValidationError on an empty batch."""
        if not data:
            raise ValidationError("Articles are required")

        articles = [
            Article(
                project_id=item.project_id,
                title=to_capitalized_case(item.title) if capitalize_titles else item.title,
                content=item.content,
                meta_description=item.meta_description,
                word_count=item.word_count,
                language=item.language,
                status=item.status,
                scheduled_at=item.scheduled_at,
                featured_image_url=item.featured_image_url,
            )
            for item in data
        ]
        created = await self._repository.create_many(articles)
        await self._repository.commit()
        logger.info("Created %d article(s)", len(created))
        return created

    async def get_latest_article(self, project_id: str | None = None) -> Article:
        article = await self._repository.get_latest(project_id)
        if article is None:
            raise EntityNotFoundError("Article", "latest")
        return article

    async def inspect_latest_columns(
        self, project_id: str | None = None
    ) -> tuple[Article, dict[str, Any]]:
        """Return the latest article and its raw row for column inspection."""
        article = await self.get_latest_article(project_id)
        row = await self._repository.get_latest_row(project_id)
        return article, row or {}
