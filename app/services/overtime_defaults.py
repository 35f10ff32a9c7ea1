from __future__ import annotations

from app.models import MixedPeriodParams, MixedSegmentParams, RamadanParams, RegularMonthParams

DEFAULT_REGULAR_PARAMS = RegularMonthParams(
    year=2025,
    month=11,
    total_assistants=13,
    include_coordinator=True,
    base_assistant_month=176,
    base_coordinator_month=158,
    active_days=0,
    weekend_days=8,
    manual_weekend=False,
    assistants_per_weekday=6,
    assistants_per_weekend_day=4,
    day_shift_hours=9,
    oncall_hours=16,
    oncall_count=0,
)

DEFAULT_RAMADAN_PARAMS = RamadanParams(
    total_days=30,
    weekend_days=8,
    total_assistants=13,
    include_coordinator=True,
    base_assistant_month=144,
    base_coordinator_month=129,
    assistants_per_weekday=6,
    assistants_per_weekend_day=4,
    day_shift_hours=6,
    oncall_hours=18,
    oncall_count=0,
)

DEFAULT_MIXED_PARAMS = MixedPeriodParams(
    total_assistants=13,
    include_coordinator=True,
    ramadan=MixedSegmentParams(
        days=10,
        weekend_days=4,
        base_assistant_per_day=4.8,
        base_coordinator_per_day=4.3,
        assistants_per_weekday=6,
        assistants_per_weekend_day=4,
        day_shift_hours=6,
        oncall_hours=18,
        oncall_count=0,
    ),
    non_ramadan=MixedSegmentParams(
        days=20,
        weekend_days=4,
        base_assistant_per_day=5.9,
        base_coordinator_per_day=5.3,
        assistants_per_weekday=6,
        assistants_per_weekend_day=4,
        day_shift_hours=9,
        oncall_hours=16,
        oncall_count=0,
    ),
)
