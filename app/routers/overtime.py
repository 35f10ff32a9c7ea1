from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from app.errors import invalid_period_error
from app.models import LoadBand, Regime
from app.schemas import (
    DisplayRowRead,
    MixedPeriodRequest,
    MixedPeriodResponse,
    MixedPeriodResultRead,
    MonthCalendarRead,
    OvertimeDefaultsResponse,
    RamadanRequest,
    RamadanResponse,
    RamadanResultRead,
    RegularMonthRequest,
    RegularMonthResponse,
    RegularMonthResultRead,
)
from app.services.calendar_weekends import MonthCalendar, count_calendar_weekend_days, sync_weekend_days
from app.services.overtime_calc import calculate_mixed_period, calculate_ramadan, calculate_regular_month
from app.services.overtime_defaults import (
    DEFAULT_MIXED_PARAMS,
    DEFAULT_RAMADAN_PARAMS,
    DEFAULT_REGULAR_PARAMS,
)
from app.services.presentation import (
    DisplayRow,
    mixed_display_rows,
    ramadan_display_rows,
    regular_display_rows,
)

router = APIRouter(prefix="/api", tags=["overtime"])
logger = logging.getLogger("app.overtime")


def _month_calendar(year: int, month: int) -> MonthCalendar:
    try:
        return count_calendar_weekend_days(year, month)
    except (ValueError, OverflowError) as exc:
        raise invalid_period_error(year, month) from exc


def _display(rows: list[DisplayRow]) -> list[DisplayRowRead]:
    return [DisplayRowRead.model_validate(row) for row in rows]


def _log_calculation(
    request: Request,
    *,
    regime: Regime,
    overtime: float,
    band: LoadBand,
    load_ratio: float,
) -> None:
    request.state.regime = regime.value
    logger.info(
        "overtime_calculated",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "regime": regime.value,
            "overtime": overtime,
            "band": band.value,
            "load_ratio": round(load_ratio, 4),
        },
    )


@router.get("/calendar/weekends", response_model=MonthCalendarRead)
def get_calendar_weekends(
    year: int = Query(ge=1, le=9999),
    month: int = Query(),
) -> MonthCalendarRead:
    calendar_info = _month_calendar(year, month)
    return MonthCalendarRead(
        year=year,
        month=month,
        days_in_month=calendar_info.days_in_month,
        weekend_count=calendar_info.weekend_count,
    )


@router.get("/overtime/defaults", response_model=OvertimeDefaultsResponse)
def get_overtime_defaults() -> OvertimeDefaultsResponse:
    return OvertimeDefaultsResponse(
        regular=RegularMonthRequest.model_validate(sync_weekend_days(DEFAULT_REGULAR_PARAMS)),
        ramadan=RamadanRequest.model_validate(DEFAULT_RAMADAN_PARAMS),
        mixed=MixedPeriodRequest.model_validate(DEFAULT_MIXED_PARAMS),
    )


@router.post("/overtime/regular", response_model=RegularMonthResponse)
def calculate_regular_endpoint(payload: RegularMonthRequest, request: Request) -> RegularMonthResponse:
    params = sync_weekend_days(payload.to_params())
    result = calculate_regular_month(params, _month_calendar(params.year, params.month))
    _log_calculation(
        request,
        regime=Regime.REGULAR,
        overtime=result.overtime,
        band=result.band,
        load_ratio=result.load_ratio,
    )
    return RegularMonthResponse(
        params=RegularMonthRequest.model_validate(params),
        result=RegularMonthResultRead.model_validate(result),
        display=_display(regular_display_rows(result)),
    )


@router.post("/overtime/ramadan", response_model=RamadanResponse)
def calculate_ramadan_endpoint(payload: RamadanRequest, request: Request) -> RamadanResponse:
    params = payload.to_params()
    result = calculate_ramadan(params)
    _log_calculation(
        request,
        regime=Regime.RAMADAN,
        overtime=result.overtime,
        band=result.band,
        load_ratio=result.load_ratio,
    )
    return RamadanResponse(
        params=payload,
        result=RamadanResultRead.model_validate(result),
        display=_display(ramadan_display_rows(result)),
    )


@router.post("/overtime/mixed", response_model=MixedPeriodResponse)
def calculate_mixed_endpoint(payload: MixedPeriodRequest, request: Request) -> MixedPeriodResponse:
    params = payload.to_params()
    result = calculate_mixed_period(params)
    _log_calculation(
        request,
        regime=Regime.MIXED,
        overtime=result.combined_overtime,
        band=result.band,
        load_ratio=result.load_ratio,
    )
    return MixedPeriodResponse(
        params=payload,
        result=MixedPeriodResultRead.model_validate(result),
        display=_display(mixed_display_rows(result)),
    )
