"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from rankpulse.domain.entities import Article, ScopedDateRange


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every range operation is scoped by ``scope.project_id`` and matches
    ``scheduled_at`` on the inclusive calendar days of the scope. Articles
    without a ``scheduled_at`` never match.
    """

    @abstractmethod
    async def create_many(self, articles: list[Article]) -> list[Article]:
        """Persist a batch of new articles and return them as stored."""
        ...

    @abstractmethod
    async def delete_in_range(self, scope: ScopedDateRange) -> int:
        """Hard-delete every matching article in one statement. Returns the row count."""
        ...

    @abstractmethod
    async def list_in_range(self, scope: ScopedDateRange) -> list[Article]:
        """Return matching articles ordered by ``scheduled_at``."""
        ...

    @abstractmethod
    async def get_latest(self, project_id: str | None = None) -> Article | None:
        """Return the most recently created article, optionally within one project."""
        ...

    @abstractmethod
    async def get_latest_row(self, project_id: str | None = None) -> dict[str, Any] | None:
        """Return the raw column → value mapping of the most recently created article."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make the pending writes durable. Raises StoreError when the store refuses."""
        ...