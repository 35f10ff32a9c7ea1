from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from app.models import (
    LoadBand,
    MixedPeriodParams,
    MixedSegmentParams,
    RamadanParams,
    RegularMonthParams,
)


NonNegativeNumber = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class CoveragePattern(BaseModel):
    vacation_assistant_days: NonNegativeNumber = 0
    vacation_coordinator_days: NonNegativeNumber = 0
    assistants_per_weekday: NonNegativeNumber = 0
    assistants_per_weekend_day: NonNegativeNumber = 0
    day_shift_hours: NonNegativeNumber = 0
    oncall_hours: NonNegativeNumber = 0
    oncall_count: NonNegativeNumber = 0

    model_config = ConfigDict(from_attributes=True)


class RegularMonthRequest(CoveragePattern):
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    total_assistants: int = Field(ge=0)
    include_coordinator: bool = True
    base_assistant_month: NonNegativeNumber = 0
    base_coordinator_month: NonNegativeNumber = 0
    active_days: NonNegativeNumber = 0
    weekend_days: NonNegativeNumber = 0
    manual_weekend: bool = False

    def to_params(self) -> RegularMonthParams:
        return RegularMonthParams(**self.model_dump())


class RamadanRequest(CoveragePattern):
    total_days: NonNegativeNumber = 0
    weekend_days: NonNegativeNumber = 0
    total_assistants: int = Field(ge=0)
    include_coordinator: bool = True
    base_assistant_month: NonNegativeNumber = 0
    base_coordinator_month: NonNegativeNumber = 0

    def to_params(self) -> RamadanParams:
        return RamadanParams(**self.model_dump())


class MixedSegmentRequest(CoveragePattern):
    days: NonNegativeNumber = 0
    weekend_days: NonNegativeNumber = 0
    base_assistant_per_day: NonNegativeNumber = 0
    base_coordinator_per_day: NonNegativeNumber = 0

    def to_params(self) -> MixedSegmentParams:
        return MixedSegmentParams(**self.model_dump())


class MixedPeriodRequest(BaseModel):
    total_assistants: int = Field(ge=0)
    include_coordinator: bool = True
    ramadan: MixedSegmentRequest
    non_ramadan: MixedSegmentRequest

    model_config = ConfigDict(from_attributes=True)

    def to_params(self) -> MixedPeriodParams:
        return MixedPeriodParams(
            total_assistants=self.total_assistants,
            include_coordinator=self.include_coordinator,
            ramadan=self.ramadan.to_params(),
            non_ramadan=self.non_ramadan.to_params(),
        )


class MonthCalendarRead(BaseModel):
    year: int
    month: int
    days_in_month: int
    weekend_count: int


class DisplayRowRead(BaseModel):
    label: str
    value: str
    unit: str | None = None

    model_config = ConfigDict(from_attributes=True)


class _AssessmentRead(BaseModel):
    band: LoadBand
    descriptor: str
    load_ratio: float

    model_config = ConfigDict(from_attributes=True)


class RegularMonthResultRead(_AssessmentRead):
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


class RamadanResultRead(_AssessmentRead):
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


class SegmentResultRead(BaseModel):
    days: float
    weekend_days: float
    weekdays: float
    baseline_total: float
    vacation_hours: float
    effective_baseline: float
    day_shift_hours: float
    oncall_hours: float
    required: float
    overtime: float

    model_config = ConfigDict(from_attributes=True)


class MixedPeriodResultRead(_AssessmentRead):
    non_coordinator_count: int
    ramadan: SegmentResultRead
    non_ramadan: SegmentResultRead
    combined_baseline: float
    combined_required: float
    combined_overtime: float


class RegularMonthResponse(BaseModel):
    params: RegularMonthRequest
    result: RegularMonthResultRead
    display: list[DisplayRowRead] = Field(default_factory=list)


class RamadanResponse(BaseModel):
    params: RamadanRequest
    result: RamadanResultRead
    display: list[DisplayRowRead] = Field(default_factory=list)


class MixedPeriodResponse(BaseModel):
    params: MixedPeriodRequest
    result: MixedPeriodResultRead
    display: list[DisplayRowRead] = Field(default_factory=list)


class OvertimeDefaultsResponse(BaseModel):
    regular: RegularMonthRequest
    ramadan: RamadanRequest
    mixed: MixedPeriodRequest
