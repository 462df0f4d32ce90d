"""Calendar ranges used to scope bulk article operations to one month."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from rankpulse.domain.exceptions import ValidationError

MIN_MONTH = 0
MAX_MONTH = 11


@dataclass(frozen=True)
class ScopedDateRange:
    """A tenant-scoped, inclusive range of calendar days.

    ``start`` and ``end`` are both local midnights: ``start`` of the first
    day and ``end`` of the last day. A timestamp matches when it falls on any
    day from ``start`` through ``end``, so the last day counts in full.
    """

    project_id: str
    start: datetime
    end: datetime

    @property
    def upper_bound(self) -> datetime:
        """Exclusive upper bound: local midnight after the last day."""
        return self.end + timedelta(days=1)

    def contains(self, moment: datetime | None) -> bool:
        if moment is None:
            return False
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return self.start <= moment < self.upper_bound


def month_range(month: int, year: int, tz: tzinfo = timezone.utc) -> tuple[datetime, datetime]:
    """Return ``(first day, last day)`` of a zero-indexed month at local midnight.

    ``month`` is 0 for January through 11 for December. Out-of-range values
    are rejected rather than rolled over into a neighbouring year.
    """
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ValidationError(
            f"Month must be between {MIN_MONTH} and {MAX_MONTH} (0 = January), got {month}"
        )
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year must be between 1 and 9999, got {year}")

    calendar_month = month + 1
    last_day = calendar.monthrange(year, calendar_month)[1]
    start = datetime.combine(date(year, calendar_month, 1), time.min, tzinfo=tz)
    end = datetime.combine(date(year, calendar_month, last_day), time.min, tzinfo=tz)

    # Both bounds must also exist in UTC, where the store compares them.
    try:
        start.astimezone(timezone.utc)
        (end + timedelta(days=1)).astimezone(timezone.utc)
    except OverflowError:
        raise ValidationError(
            f"Month {month} of year {year} is outside the supported date range"
        ) from None
    return start, end


def scoped_month_range(
    project_id: str, month: int, year: int, tz: tzinfo = timezone.utc
) -> ScopedDateRange:
    start, end = month_range(month, year, tz)
    return ScopedDateRange(project_id=project_id, start=start, end=end)
