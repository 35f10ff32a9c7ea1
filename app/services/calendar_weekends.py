from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass, replace
from datetime import MAXYEAR, MINYEAR, date

from app.models import RegularMonthParams

logger = logging.getLogger("app.calendar")

# date.weekday(): Monday=0 ... Friday=4, Saturday=5
WEEKEND_WEEKDAYS = frozenset({4, 5})


@dataclass(frozen=True)
class MonthCalendar:
    days_in_month: int
    weekend_count: int


def _normalize_year_month(year: int, month: int) -> tuple[int, int]:
    # Month 13 rolls into January of the next year, month 0 into December before.
    month_index = year * 12 + (month - 1)
    norm_year = month_index // 12
    if not MINYEAR <= norm_year <= MAXYEAR:
        raise ValueError(f"year {norm_year} is out of range")
    return norm_year, month_index % 12 + 1


def count_calendar_weekend_days(year: int, month: int) -> MonthCalendar:
    norm_year, norm_month = _normalize_year_month(year, month)
    days_in_month = monthrange(norm_year, norm_month)[1]
    weekend_count = 0
    for day in range(1, days_in_month + 1):
        if date(norm_year, norm_month, day).weekday() in WEEKEND_WEEKDAYS:
            weekend_count += 1
    return MonthCalendar(days_in_month=days_in_month, weekend_count=weekend_count)


def sync_weekend_days(params: RegularMonthParams) -> RegularMonthParams:
    if params.manual_weekend:
        return params

    calendar_info = count_calendar_weekend_days(params.year, params.month)
    if params.weekend_days == calendar_info.weekend_count:
        return params

    logger.debug(
        "weekend_days_synchronized",
        extra={
            "year": params.year,
            "month": params.month,
            "previous_weekend_days": params.weekend_days,
            "weekend_days": calendar_info.weekend_count,
        },
    )
    return replace(params, weekend_days=calendar_info.weekend_count)
