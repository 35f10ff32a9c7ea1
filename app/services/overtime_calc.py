from __future__ import annotations

from dataclasses import dataclass
from math import floor

from app.models import (
    LoadBand,
    MixedPeriodParams,
    MixedSegmentParams,
    RamadanParams,
    RegularMonthParams,
)
from app.services.calendar_weekends import MonthCalendar, count_calendar_weekend_days

OVERTIME_THRESHOLD_HOURS = 5.0

STANDARD_WORDING: dict[LoadBand, str] = {
    LoadBand.OVER: "Net overtime required",
    LoadBand.UNDER: "Under baseline capacity",
    LoadBand.NEAR: "Close to baseline load",
}

MIXED_WORDING: dict[LoadBand, str] = {
    LoadBand.OVER: "Net overtime for mixed period",
    LoadBand.UNDER: "Under combined baseline capacity",
    LoadBand.NEAR: "Close to combined baseline load",
}


@dataclass(frozen=True)
class OvertimeAssessment:
    overtime: float
    band: LoadBand
    descriptor: str
    load_ratio: float


@dataclass(frozen=True)
class RegularMonthResult:
    days_in_month: int
    weekend_count: int
    period_days: float
    weekend_days: float
    weekdays: float
    non_coordinator_count: int
    assistant_rate_per_day: float
    coordinator_rate_per_day: float
    baseline_total: float
    vacation_assistant_hours: float
    vacation_coordinator_hours: float
    effective_baseline: float
    day_shift_hours: float
    oncall_hours: float
    required_total: float
    overtime: float
    band: LoadBand
    descriptor: str
    load_ratio: float


@dataclass(frozen=True)
class RamadanResult:
    total_days: float
    weekend_days: float
    weekdays: float
    non_coordinator_count: int
    assistant_rate_per_day: float
    coordinator_rate_per_day: float
    baseline_total: float
    vacation_assistant_hours: float
    vacation_coordinator_hours: float
    effective_baseline: float
    day_shift_hours: float
    oncall_hours: float
    required_total: float
    overtime: float
    band: LoadBand
    descriptor: str
    load_ratio: float


@dataclass(frozen=True)
class SegmentResult:
    days: float
    weekend_days: float
    weekdays: float
    baseline_total: float
    vacation_hours: float
    effective_baseline: float
    day_shift_hours: float
    oncall_hours: float
    required: float
    # Unrounded; only the combined figure is rounded.
    overtime: float


@dataclass(frozen=True)
class MixedPeriodResult:
    non_coordinator_count: int
    ramadan: SegmentResult
    non_ramadan: SegmentResult
    combined_baseline: float
    combined_required: float
    combined_overtime: float
    band: LoadBand
    descriptor: str
    load_ratio: float


def round_overtime(value: float) -> float:
    """Round to one decimal, halves away from zero (7.45 -> 7.5, -7.45 -> -7.5)."""
    rounded = floor(abs(value) * 10 + 0.5) / 10
    if value < 0 and rounded:
        return -rounded
    return rounded


def describe_overtime(
    rounded_overtime: float,
    wording: dict[LoadBand, str] = STANDARD_WORDING,
) -> tuple[LoadBand, str]:
    if rounded_overtime > OVERTIME_THRESHOLD_HOURS:
        band = LoadBand.OVER
    elif rounded_overtime < -OVERTIME_THRESHOLD_HOURS:
        band = LoadBand.UNDER
    else:
        band = LoadBand.NEAR
    return band, wording[band]


def load_ratio(required_total: float, effective_baseline: float) -> float:
    if effective_baseline == 0:
        return 0.0
    return required_total / effective_baseline


def assess_overtime(
    *,
    required_total: float,
    effective_baseline: float,
    wording: dict[LoadBand, str] = STANDARD_WORDING,
) -> OvertimeAssessment:
    overtime = round_overtime(required_total - effective_baseline)
    band, descriptor = describe_overtime(overtime, wording)
    return OvertimeAssessment(
        overtime=overtime,
        band=band,
        descriptor=descriptor,
        load_ratio=load_ratio(required_total, effective_baseline),
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _per_day_rate(baseline: float, days: float) -> float:
    if days == 0:
        return 0.0
    return baseline / days


def _day_shift_hours(
    *,
    weekdays: float,
    weekend_days: float,
    assistants_per_weekday: float,
    assistants_per_weekend_day: float,
    day_shift_hours: float,
) -> float:
    return (
        weekdays * assistants_per_weekday * day_shift_hours
        + weekend_days * assistants_per_weekend_day * day_shift_hours
    )


def calculate_regular_month(
    params: RegularMonthParams,
    calendar_info: MonthCalendar | None = None,
) -> RegularMonthResult:
    if calendar_info is None:
        calendar_info = count_calendar_weekend_days(params.year, params.month)
    days_in_month = calendar_info.days_in_month

    period_days = params.active_days if params.active_days > 0 else days_in_month
    period_days = _clamp(period_days, 0, days_in_month)

    weekend_days = params.weekend_days if params.manual_weekend else calendar_info.weekend_count
    weekend_days = _clamp(weekend_days, 0, period_days)
    weekdays = period_days - weekend_days

    include_coordinator = params.include_coordinator
    non_coord = params.non_coordinator_count
    assistant_rate = _per_day_rate(params.base_assistant_month, days_in_month)
    coordinator_rate = _per_day_rate(params.base_coordinator_month, days_in_month)

    baseline_total = non_coord * assistant_rate * period_days
    if include_coordinator:
        baseline_total += coordinator_rate * period_days

    vacation_assistant_hours = params.vacation_assistant_days * assistant_rate
    vacation_coordinator_hours = (
        params.vacation_coordinator_days * coordinator_rate if include_coordinator else 0.0
    )
    effective_baseline = baseline_total - (vacation_assistant_hours + vacation_coordinator_hours)

    day_shift_hours = _day_shift_hours(
        weekdays=weekdays,
        weekend_days=weekend_days,
        assistants_per_weekday=params.assistants_per_weekday,
        assistants_per_weekend_day=params.assistants_per_weekend_day,
        day_shift_hours=params.day_shift_hours,
    )
    oncall_hours = params.oncall_count * params.oncall_hours
    required_total = day_shift_hours + oncall_hours

    assessment = assess_overtime(
        required_total=required_total,
        effective_baseline=effective_baseline,
    )
    return RegularMonthResult(
        days_in_month=days_in_month,
        weekend_count=calendar_info.weekend_count,
        period_days=period_days,
        weekend_days=weekend_days,
        weekdays=weekdays,
        non_coordinator_count=non_coord,
        assistant_rate_per_day=assistant_rate,
        coordinator_rate_per_day=coordinator_rate,
        baseline_total=baseline_total,
        vacation_assistant_hours=vacation_assistant_hours,
        vacation_coordinator_hours=vacation_coordinator_hours,
        effective_baseline=effective_baseline,
        day_shift_hours=day_shift_hours,
        oncall_hours=oncall_hours,
        required_total=required_total,
        overtime=assessment.overtime,
        band=assessment.band,
        descriptor=assessment.descriptor,
        load_ratio=assessment.load_ratio,
    )


def calculate_ramadan(params: RamadanParams) -> RamadanResult:
    total_days = params.total_days
    weekend_days = _clamp(params.weekend_days, 0, max(total_days, 0))
    weekdays = max(total_days - weekend_days, 0)

    include_coordinator = params.include_coordinator
    non_coord = params.non_coordinator_count
    assistant_rate = _per_day_rate(params.base_assistant_month, total_days)
    coordinator_rate = _per_day_rate(params.base_coordinator_month, total_days)

    # The monthly figures already cover the whole Ramadan period, so they are
    # not prorated; only vacation days go through the per-day rate.
    baseline_total = 0.0
    if total_days > 0:
        baseline_total = non_coord * params.base_assistant_month
        if include_coordinator:
            baseline_total += params.base_coordinator_month

    vacation_assistant_hours = params.vacation_assistant_days * assistant_rate
    vacation_coordinator_hours = (
        params.vacation_coordinator_days * coordinator_rate if include_coordinator else 0.0
    )
    effective_baseline = baseline_total - (vacation_assistant_hours + vacation_coordinator_hours)

    day_shift_hours = _day_shift_hours(
        weekdays=weekdays,
        weekend_days=weekend_days,
        assistants_per_weekday=params.assistants_per_weekday,
        assistants_per_weekend_day=params.assistants_per_weekend_day,
        day_shift_hours=params.day_shift_hours,
    )
    oncall_hours = params.oncall_count * params.oncall_hours
    required_total = day_shift_hours + oncall_hours

    assessment = assess_overtime(
        required_total=required_total,
        effective_baseline=effective_baseline,
    )
    return RamadanResult(
        total_days=total_days,
        weekend_days=weekend_days,
        weekdays=weekdays,
        non_coordinator_count=non_coord,
        assistant_rate_per_day=assistant_rate,
        coordinator_rate_per_day=coordinator_rate,
        baseline_total=baseline_total,
        vacation_assistant_hours=vacation_assistant_hours,
        vacation_coordinator_hours=vacation_coordinator_hours,
        effective_baseline=effective_baseline,
        day_shift_hours=day_shift_hours,
        oncall_hours=oncall_hours,
        required_total=required_total,
        overtime=assessment.overtime,
        band=assessment.band,
        descriptor=assessment.descriptor,
        load_ratio=assessment.load_ratio,
    )


def calculate_segment(
    segment: MixedSegmentParams,
    *,
    non_coordinator_count: int,
    include_coordinator: bool,
) -> SegmentResult:
    days = segment.days
    weekend_days = _clamp(segment.weekend_days, 0, max(days, 0))
    weekdays = max(days - weekend_days, 0)

    baseline_total = non_coordinator_count * segment.base_assistant_per_day * days
    vacation_hours = segment.vacation_assistant_days * segment.base_assistant_per_day
    if include_coordinator:
        baseline_total += segment.base_coordinator_per_day * days
        vacation_hours += segment.vacation_coordinator_days * segment.base_coordinator_per_day
    effective_baseline = baseline_total - vacation_hours

    day_shift_hours = _day_shift_hours(
        weekdays=weekdays,
        weekend_days=weekend_days,
        assistants_per_weekday=segment.assistants_per_weekday,
        assistants_per_weekend_day=segment.assistants_per_weekend_day,
        day_shift_hours=segment.day_shift_hours,
    )
    oncall_hours = segment.oncall_count * segment.oncall_hours
    required = day_shift_hours + oncall_hours

    return SegmentResult(
        days=days,
        weekend_days=weekend_days,
        weekdays=weekdays,
        baseline_total=baseline_total,
        vacation_hours=vacation_hours,
        effective_baseline=effective_baseline,
        day_shift_hours=day_shift_hours,
        oncall_hours=oncall_hours,
        required=required,
        overtime=required - effective_baseline,
    )


def calculate_mixed_period(params: MixedPeriodParams) -> MixedPeriodResult:
    non_coord = params.non_coordinator_count
    ramadan = calculate_segment(
        params.ramadan,
        non_coordinator_count=non_coord,
        include_coordinator=params.include_coordinator,
    )
    non_ramadan = calculate_segment(
        params.non_ramadan,
        non_coordinator_count=non_coord,
        include_coordinator=params.include_coordinator,
    )

    combined_baseline = ramadan.effective_baseline + non_ramadan.effective_baseline
    combined_required = ramadan.required + non_ramadan.required
    assessment = assess_overtime(
        required_total=combined_required,
        effective_baseline=combined_baseline,
        wording=MIXED_WORDING,
    )
    return MixedPeriodResult(
        non_coordinator_count=non_coord,
        ramadan=ramadan,
        non_ramadan=non_ramadan,
        combined_baseline=combined_baseline,
        combined_required=combined_required,
        combined_overtime=assessment.overtime,
        band=assessment.band,
        descriptor=assessment.descriptor,
        load_ratio=assessment.load_ratio,
    )
