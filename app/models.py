from __future__ import annotations

import enum
from dataclasses import dataclass


class Regime(str, enum.Enum):
    REGULAR = "REGULAR"
    RAMADAN = "RAMADAN"
    MIXED = "MIXED"


class LoadBand(str, enum.Enum):
    OVER = "OVER"
    UNDER = "UNDER"
    NEAR = "NEAR"


def non_coordinator_count(total_assistants: int, include_coordinator: bool) -> int:
    if include_coordinator:
        return max(total_assistants - 1, 0)
    return total_assistants


@dataclass(frozen=True)
class RegularMonthParams:
    """Inputs for a standard Gregorian month.

    ``active_days`` restricts the period to the first N days of coverage; zero
    or less means the whole month. ``weekend_days`` is only authoritative when
    ``manual_weekend`` is set, otherwise the calendar count wins.
    """

    year: int
    month: int
    total_assistants: int
    include_coordinator: bool
    base_assistant_month: float
    base_coordinator_month: float
    active_days: float = 0
    weekend_days: float = 0
    manual_weekend: bool = False
    vacation_assistant_days: float = 0
    vacation_coordinator_days: float = 0
    assistants_per_weekday: float = 0
    assistants_per_weekend_day: float = 0
    day_shift_hours: float = 0
    oncall_hours: float = 0
    oncall_count: float = 0

    @property
    def non_coordinator_count(self) -> int:
        return non_coordinator_count(self.total_assistants, self.include_coordinator)


@dataclass(frozen=True)
class RamadanParams:
    """Inputs for a Ramadan-only period.

    The monthly baselines already cover the whole Ramadan period per person.
    """

    total_days: float
    weekend_days: float
    total_assistants: int
    include_coordinator: bool
    base_assistant_month: float
    base_coordinator_month: float
    vacation_assistant_days: float = 0
    vacation_coordinator_days: float = 0
    assistants_per_weekday: float = 0
    assistants_per_weekend_day: float = 0
    day_shift_hours: float = 0
    oncall_hours: float = 0
    oncall_count: float = 0

    @property
    def non_coordinator_count(self) -> int:
        return non_coordinator_count(self.total_assistants, self.include_coordinator)


@dataclass(frozen=True)
class MixedSegmentParams:
    days: float
    weekend_days: float
    base_assistant_per_day: float
    base_coordinator_per_day: float
    vacation_assistant_days: float = 0
    vacation_coordinator_days: float = 0
    assistants_per_weekday: float = 0
    assistants_per_weekend_day: float = 0
    day_shift_hours: float = 0
    oncall_hours: float = 0
    oncall_count: float = 0


@dataclass(frozen=True)
class MixedPeriodParams:
    total_assistants: int
    include_coordinator: bool
    ramadan: MixedSegmentParams
    non_ramadan: MixedSegmentParams

    @property
    def non_coordinator_count(self) -> int:
        return non_coordinator_count(self.total_assistants, self.include_coordinator)
