from __future__ import annotations

from dataclasses import dataclass

from app.services.overtime_calc import MixedPeriodResult, RamadanResult, RegularMonthResult, SegmentResult


@dataclass(frozen=True)
class DisplayRow:
    label: str
    value: str
    unit: str | None = None


def format_hours(value: float) -> str:
    return f"{value:.1f}"


def format_signed_hours(value: float) -> str:
    prefix = "+" if value > 0 else ""
    return f"{prefix}{value:.1f}"


def format_rate(value: float) -> str:
    return f"{value:.2f}"


def format_load(load_ratio: float, descriptor: str) -> str:
    return f"{load_ratio:.2f}× · {descriptor}"


def format_composition(weekdays: float, weekend_days: float) -> str:
    return f"{weekdays:.1f} wk · {weekend_days:.1f} we"


def _vacation_and_required_rows(result: RegularMonthResult | RamadanResult) -> list[DisplayRow]:
    return [
        DisplayRow("Baseline hours (before vacation)", format_hours(result.baseline_total), "h"),
        DisplayRow("Vacation hours – assistants", format_hours(result.vacation_assistant_hours), "h"),
        DisplayRow("Vacation hours – coordinator", format_hours(result.vacation_coordinator_hours), "h"),
        DisplayRow("Effective baseline after vacation", format_hours(result.effective_baseline), "h"),
        DisplayRow("Required hours – day shifts", format_hours(result.day_shift_hours), "h"),
        DisplayRow("Required hours – on-calls", format_hours(result.oncall_hours), "h"),
        DisplayRow("Total required hours", format_hours(result.required_total), "h"),
    ]


def regular_display_rows(result: RegularMonthResult) -> list[DisplayRow]:
    return [
        DisplayRow("Days used in calculation", format_hours(result.period_days), "days"),
        DisplayRow("Weekdays vs weekends", format_composition(result.weekdays, result.weekend_days)),
        *_vacation_and_required_rows(result),
        DisplayRow("Group overtime (regular)", format_signed_hours(result.overtime), "h"),
        DisplayRow("Load vs effective baseline", format_load(result.load_ratio, result.descriptor)),
    ]


def ramadan_display_rows(result: RamadanResult) -> list[DisplayRow]:
    return [
        DisplayRow("Total Ramadan days", format_hours(result.total_days), "days"),
        DisplayRow("Weekdays vs weekends", format_composition(result.weekdays, result.weekend_days)),
        DisplayRow("Baseline per day (assistant)", format_rate(result.assistant_rate_per_day), "h"),
        DisplayRow("Baseline per day (coordinator)", format_rate(result.coordinator_rate_per_day), "h"),
        *_vacation_and_required_rows(result),
        DisplayRow("Group overtime (Ramadan)", format_signed_hours(result.overtime), "h"),
        DisplayRow("Load vs effective baseline", format_load(result.load_ratio, result.descriptor)),
    ]


def _segment_rows(title: str, segment: SegmentResult) -> list[DisplayRow]:
    days_value = f"{format_hours(segment.days)} days ({format_composition(segment.weekdays, segment.weekend_days)})"
    return [
        DisplayRow(f"{title} days", days_value),
        DisplayRow(f"{title} baseline (after vacation)", format_hours(segment.effective_baseline), "h"),
        DisplayRow(f"{title} required hours", format_hours(segment.required), "h"),
        DisplayRow(f"{title} overtime", format_signed_hours(segment.overtime), "h"),
    ]


def mixed_display_rows(result: MixedPeriodResult) -> list[DisplayRow]:
    return [
        *_segment_rows("Ramadan", result.ramadan),
        *_segment_rows("Non-Ramadan", result.non_ramadan),
        DisplayRow("Combined baseline (after vacations)", format_hours(result.combined_baseline), "h"),
        DisplayRow("Combined required hours", format_hours(result.combined_required), "h"),
        DisplayRow("Total overtime (mixed period)", format_signed_hours(result.combined_overtime), "h"),
        DisplayRow("Load vs combined baseline", format_load(result.load_ratio, result.descriptor)),
    ]
