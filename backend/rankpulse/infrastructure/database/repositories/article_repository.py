"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rankpulse.application.interfaces import ArticleRepository
from rankpulse.domain.entities import Article, ArticleStatus, ScopedDateRange
from rankpulse.domain.exceptions import StoreError
from rankpulse.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


def _to_utc(value: datetime | None) -> datetime | None:
    """Normalize to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Driver and SQL errors are re-raised as ``StoreError``; the session is
    left for the caller (the request dependency) to roll back.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            project_id=model.project_id,
            title=model.title,
            content=model.content,
            meta_description=model.meta_description,
            word_count=model.word_count,
            language=model.language,
            status=ArticleStatus(model.status),
            scheduled_at=_to_utc(model.scheduled_at),
            published_at=_to_utc(model.published_at),
            cms_post_id=model.cms_post_id,
            published_url=model.published_url,
            featured_image_url=model.featured_image_url,
            created_at=_to_utc(model.created_at),
            updated_at=_to_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=entity.id,
            project_id=entity.project_id,
            title=entity.title,
            content=entity.content,
            meta_description=entity.meta_description,
            word_count=entity.word_count,
            language=entity.language,
            status=entity.status.value,
            scheduled_at=_to_utc(entity.scheduled_at),
            published_at=_to_utc(entity.published_at),
            cms_post_id=entity.cms_post_id,
            published_url=entity.published_url,
            featured_image_url=entity.featured_image_url,
            created_at=_to_utc(entity.created_at),
            updated_at=_to_utc(entity.updated_at),
        )

    @staticmethod
    def _range_filters(scope: ScopedDateRange) -> tuple:
        return (
            ArticleModel.project_id == scope.project_id,
            ArticleModel.scheduled_at.is_not(None),
            ArticleModel.scheduled_at >= _to_utc(scope.start),
            ArticleModel.scheduled_at < _to_utc(scope.upper_bound),
        )

    def _latest_stmt(self, project_id: str | None):
        stmt = select(ArticleModel)
        if project_id is not None:
            stmt = stmt.where(ArticleModel.project_id == project_id)
        return stmt.order_by(ArticleModel.created_at.desc()).limit(1)

    async def create_many(self, articles: list[Article]) -> list[Article]:
        models = [self._to_model(article) for article in articles]
        try:
            self._session.add_all(models)
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.exception("Bulk insert of %d article(s) failed", len(models))
            raise StoreError("insert", str(exc)) from exc
        return [self._to_entity(model) for model in models]

    async def delete_in_range(self, scope: ScopedDateRange) -> int:
        stmt = delete(ArticleModel).where(*self._range_filters(scope))
        try:
            result = await self._session.execute(
                stmt, execution_options={"synchronize_session": False}
            )
        except SQLAlchemyError as exc:
            logger.exception("Range delete failed for project %s", scope.project_id)
            raise StoreError("delete", str(exc)) from exc
        return result.rowcount or 0

    async def list_in_range(self, scope: ScopedDateRange) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(*self._range_filters(scope))
            .order_by(ArticleModel.scheduled_at.asc(), ArticleModel.created_at.asc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("select", str(exc)) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_latest(self, project_id: str | None = None) -> Article | None:
        try:
            result = await self._session.execute(self._latest_stmt(project_id))
        except SQLAlchemyError as exc:
            raise StoreError("select", str(exc)) from exc
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_latest_row(self, project_id: str | None = None) -> dict[str, Any] | None:
        try:
            result = await self._session.execute(self._latest_stmt(project_id))
        except SQLAlchemyError as exc:
            raise StoreError("select", str(exc)) from exc
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return {
            attr.key: getattr(model, attr.key)
            for attr in inspect(ArticleModel).column_attrs
        }

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Commit failed")
            raise StoreError("commit", str(exc)) from exc
