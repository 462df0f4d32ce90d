"""In-memory test doubles shared by unit and integration tests."""

from dataclasses import asdict
from typing import Any

from rankpulse.application.interfaces import ArticleRepository
from rankpulse.domain.entities import Article, ScopedDateRange
from rankpulse.domain.exceptions import StoreError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository; records every call so tests can assert on store access."""

    def __init__(self, articles: list[Article] | None = None):
        self._articles: dict[str, Article] = {a.id: a for a in articles or []}
        self.calls: list[str] = []

    @property
    def articles(self) -> list[Article]:
        return list(self._articles.values())

    def _matching(self, scope: ScopedDateRange) -> list[Article]:
        return [
            a
            for a in self._articles.values()
            if a.project_id == scope.project_id and scope.contains(a.scheduled_at)
        ]

    async def create_many(self, articles: list[Article]) -> list[Article]:
        self.calls.append("create_many")
        for article in articles:
            self._articles[article.id] = article
        return articles

    async def delete_in_range(self, scope: ScopedDateRange) -> int:
        self.calls.append("delete_in_range")
        matched = self._matching(scope)
        for article in matched:
            del self._articles[article.id]
        return len(matched)

    async def list_in_range(self, scope: ScopedDateRange) -> list[Article]:
        self.calls.append("list_in_range")
        return sorted(self._matching(scope), key=lambda a: a.scheduled_at)

    def _latest(self, project_id: str | None) -> Article | None:
        candidates = [
            a for a in self._articles.values()
            if project_id is None or a.project_id == project_id
        ]
        return max(candidates, key=lambda a: a.created_at, default=None)

    async def get_latest(self, project_id: str | None = None) -> Article | None:
        self.calls.append("get_latest")
        return self._latest(project_id)

    async def get_latest_row(self, project_id: str | None = None) -> dict[str, Any] | None:
        self.calls.append("get_latest_row")
        article = self._latest(project_id)
        if article is None:
            return None
        row = asdict(article)
        row["status"] = article.status.value
        return row

    async def commit(self) -> None:
        self.calls.append("commit")


class FailingArticleRepository(FakeArticleRepository):
    """Every store operation fails with the given driver message."""

    def __init__(self, message: str = "permission denied for table articles"):
        super().__init__()
        self._message = message

    async def create_many(self, articles: list[Article]) -> list[Article]:
        self.calls.append("create_many")
        raise StoreError("insert", self._message)

    async def delete_in_range(self, scope: ScopedDateRange) -> int:
        self.calls.append("delete_in_range")
        raise StoreError("delete", self._message)

    async def list_in_range(self, scope: ScopedDateRange) -> list[Article]:
        self.calls.append("list_in_range")
        raise StoreError("select", self._message)

    async def get_latest(self, project_id: str | None = None) -> Article | None:
        self.calls.append("get_latest")
        raise StoreError("select", self._message)


class CommitFailingArticleRepository(FakeArticleRepository):
    """Operations succeed in memory but the final commit is refused."""

    def __init__(self, articles: list[Article] | None = None, message: str = "database is locked"):
        super().__init__(articles)
        self._message = message

    async def commit(self) -> None:
        self.calls.append("commit")
        raise StoreError("commit", self._message)
