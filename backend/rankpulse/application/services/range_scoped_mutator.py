"""Tenant-scoped month operations on articles.

Every "do something to a project's articles in month M of year Y" request
goes through ``RangeScopedMutator.apply``: it validates the three inputs,
computes the calendar range and only then hands a ``ScopedDateRange`` to the
repository operation. Validation failures never reach the store.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import timezone, tzinfo
from typing import TypeVar

from rankpulse.application.interfaces import ArticleRepository
from rankpulse.domain.entities import Article, ScopedDateRange, scoped_month_range
from rankpulse.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RangeOperation = Callable[[ScopedDateRange], Awaitable[T]]

MISSING_INPUT_MESSAGE = "Project ID, month, and year are required"


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_int(value: int | str, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer, got '{value}'") from None


class RangeScopedMutator:
    """Applies operations to one project's articles within one calendar month.

    ``month`` is zero-indexed (0 = January) and validated against 0..11.
    ``tz`` defines the local midnight that bounds the month.
    """

    def __init__(self, repository: ArticleRepository, tz: tzinfo = timezone.utc):
        self._repository = repository
        self._tz = tz

    def resolve_scope(
        self,
        project_id: str | None,
        month: int | str | None,
        year: int | str | None,
    ) -> ScopedDateRange:
        """Validate inputs and build the scoped range. Raises ValidationError."""
        if _is_missing(project_id) or _is_missing(month) or _is_missing(year):
            raise ValidationError(MISSING_INPUT_MESSAGE)

        return scoped_month_range(
            project_id.strip(),
            _parse_int(month, "month"),
            _parse_int(year, "year"),
            self._tz,
        )

    async def apply(
        self,
        project_id: str | None,
        month: int | str | None,
        year: int | str | None,
        operation: RangeOperation[T],
    ) -> T:
        scope = self.resolve_scope(project_id, month, year)
        logger.debug(
            "Applying %s to project %s for %s .. %s",
            getattr(operation, "__name__", "operation"),
            scope.project_id,
            scope.start.date(),
            scope.end.date(),
        )
        return await operation(scope)

    async def delete_articles_in_month(
        self,
        project_id: str | None,
        month: int | str | None,
        year: int | str | None,
    ) -> int:
        """Hard-delete and commit the project's articles scheduled in the month.

        Returns the row count. A failed commit raises StoreError and nothing
        is removed.
        """
        deleted = await self.apply(project_id, month, year, self._repository.delete_in_range)
        await self._repository.commit()
        logger.info(
            "Deleted %d article(s) for project %s (month=%s, year=%s)",
            deleted,
            project_id,
            month,
            year,
        )
        return deleted

    async def list_articles_in_month(
        self,
        project_id: str | None,
        month: int | str | None,
        year: int | str | None,
    ) -> list[Article]:
        """Export the project's articles scheduled in the month, oldest first."""
        return await self.apply(project_id, month, year, self._repository.list_in_range)
