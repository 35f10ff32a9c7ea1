#!/usr/bin/env python
from __future__ import annotations

import json
import sys
from dataclasses import asdict, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.models import LoadBand
from app.services.calendar_weekends import count_calendar_weekend_days, sync_weekend_days
from app.services.overtime_calc import calculate_mixed_period, calculate_ramadan, calculate_regular_month
from app.services.overtime_defaults import (
    DEFAULT_MIXED_PARAMS,
    DEFAULT_RAMADAN_PARAMS,
    DEFAULT_REGULAR_PARAMS,
)

# Eight manually entered weekend days; the calendar count for November 2025 is nine.
REFERENCE_OVERTIME = -794.0
CALENDAR_OVERTIME = -812.0


def run() -> dict[str, Any]:
    report: dict[str, Any] = {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "checks": [],
    }

    def add(name: str, ok: bool, details: dict[str, Any]) -> None:
        report["checks"].append(
            {
                "name": name,
                "status": "ok" if ok else "fail",
                "details": details,
            }
        )

    leap = count_calendar_weekend_days(2024, 2)
    november = count_calendar_weekend_days(2025, 11)
    add(
        "calendar_weekends",
        leap.days_in_month == 29 and november.days_in_month == 30 and november.weekend_count == 9,
        {"2024-02": asdict(leap), "2025-11": asdict(november)},
    )

    regular = calculate_regular_month(sync_weekend_days(DEFAULT_REGULAR_PARAMS))
    manual = calculate_regular_month(replace(DEFAULT_REGULAR_PARAMS, manual_weekend=True, weekend_days=8))
    add(
        "regular_reference_example",
        regular.overtime == CALENDAR_OVERTIME
        and manual.overtime == REFERENCE_OVERTIME
        and regular.band is LoadBand.UNDER,
        {
            "calendar_overtime": regular.overtime,
            "manual_weekend_overtime": manual.overtime,
            "descriptor": regular.descriptor,
        },
    )

    ramadan = calculate_ramadan(DEFAULT_RAMADAN_PARAMS)
    empty_ramadan = calculate_ramadan(replace(DEFAULT_RAMADAN_PARAMS, total_days=0))
    add(
        "ramadan_defaults",
        empty_ramadan.baseline_total == 0 and empty_ramadan.assistant_rate_per_day == 0,
        {
            "overtime": ramadan.overtime,
            "descriptor": ramadan.descriptor,
            "load_ratio": ramadan.load_ratio,
        },
    )

    mixed = calculate_mixed_period(DEFAULT_MIXED_PARAMS)
    segment_required = mixed.ramadan.required + mixed.non_ramadan.required
    segment_baseline = mixed.ramadan.effective_baseline + mixed.non_ramadan.effective_baseline
    add(
        "mixed_additivity",
        mixed.combined_required == segment_required and mixed.combined_baseline == segment_baseline,
        {
            "combined_required": mixed.combined_required,
            "combined_baseline": mixed.combined_baseline,
            "combined_overtime": mixed.combined_overtime,
        },
    )

    report["ok"] = all(check["status"] == "ok" for check in report["checks"])
    return report


if __name__ == "__main__":
    result = run()
    print(json.dumps(result, ensure_ascii=False, indent=2, default=str))
    sys.exit(0 if result["ok"] else 1)
