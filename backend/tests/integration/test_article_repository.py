"""Integration tests for SQLAlchemyArticleRepository against a temporary SQLite database."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rankpulse.application.services import RangeScopedMutator
from rankpulse.domain.entities import Article, ArticleStatus, scoped_month_range
from rankpulse.domain.exceptions import StoreError, ValidationError
from rankpulse.infrastructure.database import Base
from rankpulse.infrastructure.database.models import ArticleModel
from rankpulse.infrastructure.database.repositories import SQLAlchemyArticleRepository


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@asynccontextmanager
async def _session(tmp_path: Path) -> AsyncIterator[AsyncSession]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'articles.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with factory() as session:
            yield session
    finally:
        await engine.dispose()


async def _seed(repo: SQLAlchemyArticleRepository) -> None:
    await repo.create_many(
        [
            Article(id="A", project_id="P1", title="A", scheduled_at=_utc(2025, 3, 15),
                    status=ArticleStatus.SCHEDULED, created_at=_utc(2025, 1, 1)),
            Article(id="B", project_id="P1", title="B", scheduled_at=_utc(2025, 4, 1),
                    created_at=_utc(2025, 1, 2)),
            Article(id="C", project_id="P2", title="C", scheduled_at=_utc(2025, 3, 20),
                    created_at=_utc(2025, 1, 3)),
            Article(id="D", project_id="P1", title="D", scheduled_at=None,
                    created_at=_utc(2025, 1, 4)),
            Article(id="E", project_id="P1", title="E", scheduled_at=_utc(2025, 3, 31, 22, 45),
                    created_at=_utc(2025, 1, 5), featured_image_url="https://img.example/e.png"),
        ]
    )


async def _ids(session: AsyncSession) -> set[str]:
    result = await session.execute(select(ArticleModel.id))
    return set(result.scalars().all())


@pytest.mark.asyncio
async def test_delete_in_range_scopes_by_project_and_month(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        deleted = await repo.delete_in_range(scoped_month_range("P1", 2, 2025))
        await session.commit()

        assert deleted == 2
        assert await _ids(session) == {"B", "C", "D"}


@pytest.mark.asyncio
async def test_delete_through_mutator_is_idempotent(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        mutator = RangeScopedMutator(repo)
        assert await mutator.delete_articles_in_month("P1", "2", "2025") == 2
        await session.commit()
        assert await mutator.delete_articles_in_month("P1", "2", "2025") == 0


@pytest.mark.asyncio
async def test_list_in_range_orders_by_schedule(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        articles = await repo.list_in_range(scoped_month_range("P1", 2, 2025))

        assert [a.id for a in articles] == ["A", "E"]
        assert articles[0].status is ArticleStatus.SCHEDULED
        assert articles[0].scheduled_at == _utc(2025, 3, 15)


@pytest.mark.asyncio
async def test_range_respects_non_utc_month_bounds(tmp_path: Path):
    tz = ZoneInfo("Asia/Tokyo")
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await repo.create_many(
            [
                # 28 Feb 15:30 UTC is already 1 March in Tokyo
                Article(id="tokyo-march", project_id="P1", title="T",
                        scheduled_at=_utc(2025, 2, 28, 15, 30)),
                Article(id="tokyo-feb", project_id="P1", title="T",
                        scheduled_at=_utc(2025, 2, 28, 14, 30)),
            ]
        )
        await session.commit()

        articles = await repo.list_in_range(scoped_month_range("P1", 2, 2025, tz))
        assert [a.id for a in articles] == ["tokyo-march"]


@pytest.mark.asyncio
async def test_get_latest_and_latest_row(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        latest = await repo.get_latest()
        assert latest.id == "E"
        assert latest.has_featured_image

        latest_p2 = await repo.get_latest("P2")
        assert latest_p2.id == "C"

        row = await repo.get_latest_row()
        assert row["id"] == "E"
        assert {"project_id", "scheduled_at", "featured_image_url", "status"} <= set(row)

        assert await repo.get_latest("missing") is None
        assert await repo.get_latest_row("missing") is None


@pytest.mark.asyncio
async def test_duplicate_insert_raises_store_error(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await repo.create_many([Article(id="dup", project_id="P1", title="first")])
        await session.commit()
        session.expunge_all()

        with pytest.raises(StoreError) as exc_info:
            await repo.create_many([Article(id="dup", project_id="P1", title="second")])
        assert exc_info.value.operation == "insert"
        assert "UNIQUE" in exc_info.value.message.upper()
        await session.rollback()


@pytest.mark.asyncio
async def test_uncommitted_delete_is_rolled_back(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        assert await repo.delete_in_range(scoped_month_range("P1", 2, 2025)) == 2
        await session.rollback()

        assert await _ids(session) == {"A", "B", "C", "D", "E"}


@pytest.mark.asyncio
async def test_range_operations_wrap_driver_errors(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await session.execute(text("DROP TABLE articles"))
        await session.commit()
        scope = scoped_month_range("P1", 2, 2025)

        with pytest.raises(StoreError) as delete_error:
            await repo.delete_in_range(scope)
        assert delete_error.value.operation == "delete"
        assert "no such table" in delete_error.value.message
        await session.rollback()

        with pytest.raises(StoreError) as select_error:
            await repo.list_in_range(scope)
        assert select_error.value.operation == "select"
        assert "no such table" in select_error.value.message
        await session.rollback()


@pytest.mark.asyncio
async def test_mutator_commits_the_delete(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        assert await RangeScopedMutator(repo).delete_articles_in_month("P1", 2, 2025) == 2
        await session.rollback()

        assert await _ids(session) == {"B", "C", "D"}


@pytest.mark.asyncio
async def test_unrepresentable_month_is_rejected_before_querying(tmp_path: Path):
    async with _session(tmp_path) as session:
        repo = SQLAlchemyArticleRepository(session)
        await _seed(repo)
        await session.commit()

        with pytest.raises(ValidationError):
            await RangeScopedMutator(repo).delete_articles_in_month("P1", "11", "9999")
        with pytest.raises(ValidationError):
            await RangeScopedMutator(repo, tz=ZoneInfo("Asia/Tokyo")).delete_articles_in_month(
                "P1", "0", "1"
            )

        assert await _ids(session) == {"A", "B", "C", "D", "E"}
