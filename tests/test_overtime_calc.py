from __future__ import annotations

import unittest
from dataclasses import replace

from app.models import (
    LoadBand,
    MixedPeriodParams,
    MixedSegmentParams,
    RamadanParams,
    RegularMonthParams,
    non_coordinator_count,
)
from app.services.calendar_weekends import MonthCalendar
from app.services.overtime_calc import (
    MIXED_WORDING,
    calculate_mixed_period,
    calculate_ramadan,
    calculate_regular_month,
    describe_overtime,
    load_ratio,
    round_overtime,
)
from app.services.overtime_defaults import DEFAULT_MIXED_PARAMS, DEFAULT_RAMADAN_PARAMS


def _regular_params(**overrides) -> RegularMonthParams:
    base = RegularMonthParams(
        year=2025,
        month=11,
        total_assistants=13,
        include_coordinator=True,
        base_assistant_month=176,
        base_coordinator_month=158,
        assistants_per_weekday=6,
        assistants_per_weekend_day=4,
        day_shift_hours=9,
        oncall_hours=16,
        oncall_count=0,
    )
    return replace(base, **overrides)


def _segment(**overrides) -> MixedSegmentParams:
    base = MixedSegmentParams(
        days=10,
        weekend_days=4,
        base_assistant_per_day=4.8,
        base_coordinator_per_day=4.3,
        assistants_per_weekday=6,
        assistants_per_weekend_day=4,
        day_shift_hours=6,
        oncall_hours=18,
    )
    return replace(base, **overrides)


class OvertimePolicyTests(unittest.TestCase):
    def test_round_overtime_half_away_from_zero(self) -> None:
        self.assertEqual(round_overtime(7.449), 7.4)
        self.assertEqual(round_overtime(7.45), 7.5)
        self.assertEqual(round_overtime(-7.45), -7.5)
        self.assertEqual(round_overtime(-7.449), -7.4)
        self.assertEqual(round_overtime(0.04), 0.0)
        self.assertEqual(round_overtime(-0.04), 0.0)

    def test_descriptor_thresholds(self) -> None:
        self.assertEqual(describe_overtime(5.0), (LoadBand.NEAR, "Close to baseline load"))
        self.assertEqual(describe_overtime(5.1), (LoadBand.OVER, "Net overtime required"))
        self.assertEqual(describe_overtime(-5.0), (LoadBand.NEAR, "Close to baseline load"))
        self.assertEqual(describe_overtime(-5.1), (LoadBand.UNDER, "Under baseline capacity"))

    def test_descriptor_mixed_wording(self) -> None:
        self.assertEqual(describe_overtime(12.0, MIXED_WORDING)[1], "Net overtime for mixed period")
        self.assertEqual(describe_overtime(-12.0, MIXED_WORDING)[1], "Under combined baseline capacity")
        self.assertEqual(describe_overtime(0.0, MIXED_WORDING)[1], "Close to combined baseline load")

    def test_load_ratio_zero_baseline_is_zero(self) -> None:
        self.assertEqual(load_ratio(120.0, 0.0), 0.0)
        self.assertAlmostEqual(load_ratio(150.0, 100.0), 1.5)

    def test_non_coordinator_count(self) -> None:
        for total in range(0, 6):
            self.assertEqual(non_coordinator_count(total, True), max(total - 1, 0))
            self.assertEqual(non_coordinator_count(total, False), total)


class RegularMonthTests(unittest.TestCase):
    def test_reference_example_with_eight_weekend_days(self) -> None:
        result = calculate_regular_month(_regular_params(manual_weekend=True, weekend_days=8))

        self.assertEqual(result.days_in_month, 30)
        self.assertEqual(result.period_days, 30)
        self.assertEqual(result.weekend_days, 8)
        self.assertEqual(result.weekdays, 22)
        self.assertEqual(result.non_coordinator_count, 12)
        self.assertAlmostEqual(result.assistant_rate_per_day, 5.8667, places=4)
        self.assertAlmostEqual(result.coordinator_rate_per_day, 5.2667, places=4)
        self.assertAlmostEqual(result.day_shift_hours, 1476.0)
        self.assertAlmostEqual(result.required_total, 1476.0)
        self.assertAlmostEqual(result.baseline_total, 2270.0)
        self.assertAlmostEqual(result.effective_baseline, 2270.0)
        self.assertEqual(result.overtime, -794.0)
        self.assertEqual(result.band, LoadBand.UNDER)
        self.assertEqual(result.descriptor, "Under baseline capacity")
        self.assertAlmostEqual(result.load_ratio, 1476.0 / 2270.0)

    def test_calendar_weekend_count_used_without_manual_override(self) -> None:
        result = calculate_regular_month(_regular_params(weekend_days=3))

        self.assertEqual(result.weekend_count, 9)
        self.assertEqual(result.weekend_days, 9)
        self.assertEqual(result.weekdays, 21)
        self.assertAlmostEqual(result.required_total, 21 * 6 * 9 + 9 * 4 * 9)
        self.assertEqual(result.overtime, -812.0)

    def test_active_days_shorten_period(self) -> None:
        result = calculate_regular_month(_regular_params(active_days=10, manual_weekend=True, weekend_days=2))

        self.assertEqual(result.period_days, 10)
        self.assertEqual(result.weekdays, 8)
        self.assertAlmostEqual(result.baseline_total, 12 * (176 / 30) * 10 + (158 / 30) * 10)

    def test_active_days_clamped_to_month_length(self) -> None:
        result = calculate_regular_month(_regular_params(active_days=45))
        self.assertEqual(result.period_days, 30)

    def test_weekend_days_clamped_to_period(self) -> None:
        result = calculate_regular_month(_regular_params(active_days=10, manual_weekend=True, weekend_days=40))

        self.assertEqual(result.weekend_days, 10)
        self.assertEqual(result.weekdays, 0)

    def test_vacation_hours_use_per_day_rate(self) -> None:
        result = calculate_regular_month(
            _regular_params(vacation_assistant_days=3, vacation_coordinator_days=2)
        )

        self.assertAlmostEqual(result.vacation_assistant_hours, 3 * 176 / 30)
        self.assertAlmostEqual(result.vacation_coordinator_hours, 2 * 158 / 30)
        self.assertAlmostEqual(
            result.effective_baseline,
            result.baseline_total - result.vacation_assistant_hours - result.vacation_coordinator_hours,
        )

    def test_coordinator_excluded_when_not_included(self) -> None:
        result = calculate_regular_month(
            _regular_params(include_coordinator=False, vacation_coordinator_days=5)
        )

        self.assertEqual(result.non_coordinator_count, 13)
        self.assertAlmostEqual(result.baseline_total, 13 * 176)
        self.assertEqual(result.vacation_coordinator_hours, 0.0)

    def test_effective_baseline_may_go_negative(self) -> None:
        result = calculate_regular_month(_regular_params(total_assistants=1, vacation_coordinator_days=100))

        self.assertLess(result.effective_baseline, 0)
        self.assertLess(result.load_ratio, 0)
        self.assertEqual(result.band, LoadBand.OVER)

    def test_zero_length_month_does_not_raise(self) -> None:
        result = calculate_regular_month(
            _regular_params(oncall_count=2),
            MonthCalendar(days_in_month=0, weekend_count=0),
        )

        self.assertEqual(result.period_days, 0)
        self.assertEqual(result.assistant_rate_per_day, 0.0)
        self.assertEqual(result.coordinator_rate_per_day, 0.0)
        self.assertEqual(result.baseline_total, 0.0)
        self.assertEqual(result.load_ratio, 0.0)
        self.assertEqual(result.overtime, 32.0)

    def test_oncall_hours_added_to_required(self) -> None:
        result = calculate_regular_month(_regular_params(oncall_count=4))
        self.assertAlmostEqual(result.oncall_hours, 64.0)
        self.assertAlmostEqual(result.required_total, result.day_shift_hours + 64.0)

    def test_identical_inputs_give_identical_results(self) -> None:
        params = _regular_params(vacation_assistant_days=1.5)
        self.assertEqual(calculate_regular_month(params), calculate_regular_month(params))


class RamadanTests(unittest.TestCase):
    def test_defaults(self) -> None:
        result = calculate_ramadan(DEFAULT_RAMADAN_PARAMS)

        self.assertEqual(result.weekdays, 22)
        self.assertAlmostEqual(result.assistant_rate_per_day, 4.8)
        self.assertAlmostEqual(result.coordinator_rate_per_day, 4.3)
        self.assertAlmostEqual(result.baseline_total, 12 * 144 + 129)
        self.assertAlmostEqual(result.required_total, 22 * 6 * 6 + 8 * 4 * 6)
        self.assertEqual(result.overtime, -873.0)
        self.assertEqual(result.descriptor, "Under baseline capacity")

    def test_baseline_not_prorated_but_vacation_is(self) -> None:
        params = replace(DEFAULT_RAMADAN_PARAMS, total_days=20, weekend_days=6, vacation_assistant_days=2)
        result = calculate_ramadan(params)

        self.assertAlmostEqual(result.baseline_total, 12 * 144 + 129)
        self.assertAlmostEqual(result.vacation_assistant_hours, 2 * 144 / 20)
        self.assertAlmostEqual(result.effective_baseline, 12 * 144 + 129 - 2 * 144 / 20)

    def test_weekend_days_clamped_to_total(self) -> None:
        result = calculate_ramadan(replace(DEFAULT_RAMADAN_PARAMS, weekend_days=40))

        self.assertEqual(result.weekend_days, 30)
        self.assertEqual(result.weekdays, 0)

    def test_zero_days_does_not_raise(self) -> None:
        result = calculate_ramadan(replace(DEFAULT_RAMADAN_PARAMS, total_days=0, vacation_assistant_days=3))

        self.assertEqual(result.assistant_rate_per_day, 0.0)
        self.assertEqual(result.coordinator_rate_per_day, 0.0)
        self.assertEqual(result.baseline_total, 0.0)
        self.assertEqual(result.vacation_assistant_hours, 0.0)
        self.assertEqual(result.weekend_days, 0)
        self.assertEqual(result.load_ratio, 0.0)

    def test_overtime_required_when_understaffed(self) -> None:
        params = RamadanParams(
            total_days=30,
            weekend_days=8,
            total_assistants=3,
            include_coordinator=False,
            base_assistant_month=144,
            base_coordinator_month=129,
            assistants_per_weekday=6,
            assistants_per_weekend_day=4,
            day_shift_hours=6,
            oncall_hours=18,
            oncall_count=10,
        )
        result = calculate_ramadan(params)

        self.assertAlmostEqual(result.baseline_total, 432.0)
        self.assertAlmostEqual(result.required_total, 984.0 + 180.0)
        self.assertEqual(result.overtime, 732.0)
        self.assertEqual(result.band, LoadBand.OVER)
        self.assertEqual(result.descriptor, "Net overtime required")


class MixedPeriodTests(unittest.TestCase):
    def test_defaults(self) -> None:
        result = calculate_mixed_period(DEFAULT_MIXED_PARAMS)

        self.assertEqual(result.ramadan.weekdays, 6)
        self.assertAlmostEqual(result.ramadan.effective_baseline, 619.0)
        self.assertAlmostEqual(result.ramadan.required, 312.0)
        self.assertAlmostEqual(result.ramadan.overtime, -307.0)
        self.assertEqual(result.non_ramadan.weekdays, 16)
        self.assertAlmostEqual(result.non_ramadan.effective_baseline, 1522.0)
        self.assertAlmostEqual(result.non_ramadan.required, 1008.0)
        self.assertAlmostEqual(result.combined_baseline, 2141.0)
        self.assertAlmostEqual(result.combined_required, 1320.0)
        self.assertEqual(result.combined_overtime, -821.0)
        self.assertEqual(result.descriptor, "Under combined baseline capacity")

    def test_combined_totals_are_segment_sums(self) -> None:
        params = MixedPeriodParams(
            total_assistants=5,
            include_coordinator=True,
            ramadan=_segment(days=7.5, weekend_days=2, vacation_assistant_days=1.25, oncall_count=3),
            non_ramadan=_segment(days=22, weekend_days=6, vacation_coordinator_days=2, oncall_count=1),
        )
        result = calculate_mixed_period(params)

        self.assertEqual(result.combined_required, result.ramadan.required + result.non_ramadan.required)
        self.assertEqual(
            result.combined_baseline,
            result.ramadan.effective_baseline + result.non_ramadan.effective_baseline,
        )
        self.assertEqual(
            result.combined_overtime,
            round_overtime(result.combined_required - result.combined_baseline),
        )

    def test_segment_overtime_is_unrounded(self) -> None:
        params = MixedPeriodParams(
            total_assistants=2,
            include_coordinator=False,
            ramadan=_segment(days=1, weekend_days=0, base_assistant_per_day=0.333, assistants_per_weekday=0),
            non_ramadan=_segment(days=0, weekend_days=0),
        )
        result = calculate_mixed_period(params)

        self.assertAlmostEqual(result.ramadan.overtime, -0.666)
        self.assertEqual(result.combined_overtime, -0.7)
        self.assertEqual(result.band, LoadBand.NEAR)

    def test_weekend_clamped_per_segment(self) -> None:
        params = replace(DEFAULT_MIXED_PARAMS, ramadan=_segment(days=10, weekend_days=15))
        result = calculate_mixed_period(params)

        self.assertEqual(result.ramadan.weekend_days, 10)
        self.assertEqual(result.ramadan.weekdays, 0)

    def test_zero_length_segment(self) -> None:
        params = replace(DEFAULT_MIXED_PARAMS, non_ramadan=_segment(days=0, weekend_days=3))
        result = calculate_mixed_period(params)

        self.assertEqual(result.non_ramadan.baseline_total, 0.0)
        self.assertEqual(result.non_ramadan.weekend_days, 0)
        self.assertEqual(result.non_ramadan.required, 0.0)

    def test_coordinator_vacation_ignored_without_coordinator(self) -> None:
        params = MixedPeriodParams(
            total_assistants=4,
            include_coordinator=False,
            ramadan=_segment(vacation_coordinator_days=5, vacation_assistant_days=2),
            non_ramadan=_segment(days=0),
        )
        result = calculate_mixed_period(params)

        self.assertEqual(result.non_coordinator_count, 4)
        self.assertAlmostEqual(result.ramadan.vacation_hours, 2 * 4.8)
        self.assertAlmostEqual(result.ramadan.baseline_total, 4 * 4.8 * 10)


if __name__ == "__main__":
    unittest.main()
