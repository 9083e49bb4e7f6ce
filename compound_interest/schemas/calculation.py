"""Data contracts for compound interest calculations."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from compound_interest.core.frequency import CompoundingFrequency
from compound_interest.core.validation import MAX_BREAKDOWN_YEARS

SolveFor = Literal["principal", "rate", "time", "finalAmount"]


class CalculationParams(BaseModel):
    """Inputs of the "new calculation" form: strictly positive, whole years."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(..., gt=0, description="Initial invested amount.")
    rate: float = Field(
        ...,
        gt=0,
        description="Nominal annual rate expressed as a percentage (e.g. 5 for 5%).",
    )
    time: float = Field(
        ...,
        gt=0,
        le=MAX_BREAKDOWN_YEARS,
        description="Investment horizon in whole years.",
    )
    frequency: CompoundingFrequency = CompoundingFrequency.ANNUALLY
    startDate: Optional[dt.date] = None

    @field_validator("time")
    @classmethod
    def time_is_whole_years(cls, value: float) -> float:
        if not float(value).is_integer():
            raise ValueError("time must be a whole number of years")
        return value


class YearlyBreakdownRow(BaseModel):
    """Balance at the end of one (possibly partial) year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    amount: float
    interestEarned: float
    date: Optional[dt.date] = None


class CalculationRecord(BaseModel):
    """Flat row handed to whatever persists calculation history."""

    model_config = ConfigDict(frozen=True)

    principal: float
    rate: float
    time: float
    frequency: CompoundingFrequency
    finalAmount: float
    solveFor: SolveFor


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    finalAmount: float
    totalInterest: float
    yearlyBreakdown: List[YearlyBreakdownRow] = Field(default_factory=list)

    def to_record(self, params: CalculationParams) -> CalculationRecord:
        return CalculationRecord(
            principal=params.principal,
            rate=params.rate,
            time=params.time,
            frequency=params.frequency,
            finalAmount=self.finalAmount,
            solveFor="finalAmount",
        )


# -----------------------------
# Inverse solve requests
# -----------------------------


class _SolveRequestBase(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    frequency: CompoundingFrequency
    includeBreakdown: bool = False


class SolvePrincipalRequest(_SolveRequestBase):
    solveFor: Literal["principal"] = "principal"
    rate: float = Field(..., ge=0)
    time: float = Field(..., ge=0)
    finalAmount: float = Field(..., ge=0)


class SolveRateRequest(_SolveRequestBase):
    solveFor: Literal["rate"] = "rate"
    principal: float = Field(..., ge=0)
    time: float = Field(..., ge=0)
    finalAmount: float = Field(..., ge=0)


class SolveTimeRequest(_SolveRequestBase):
    solveFor: Literal["time"] = "time"
    principal: float = Field(..., ge=0)
    rate: float = Field(..., ge=0)
    finalAmount: float = Field(..., ge=0)


class SolveFinalAmountRequest(_SolveRequestBase):
    solveFor: Literal["finalAmount"] = "finalAmount"
    principal: float = Field(..., ge=0)
    rate: float = Field(..., ge=0)
    time: float = Field(..., ge=0)


SolveRequest = Annotated[
    Union[SolvePrincipalRequest, SolveRateRequest, SolveTimeRequest, SolveFinalAmountRequest],
    Field(discriminator="solveFor"),
]

solve_request_adapter: TypeAdapter[SolveRequest] = TypeAdapter(SolveRequest)


class SolveResult(BaseModel):
    """The solved value plus the now-complete parameter set."""

    model_config = ConfigDict(frozen=True)

    solveFor: SolveFor
    value: float
    principal: float
    rate: float
    time: float
    finalAmount: float
    frequency: CompoundingFrequency
    totalInterest: float
    yearlyBreakdown: List[YearlyBreakdownRow] = Field(default_factory=list)

    def to_record(self) -> CalculationRecord:
        return CalculationRecord(
            principal=self.principal,
            rate=self.rate,
            time=self.time,
            frequency=self.frequency,
            finalAmount=self.finalAmount,
            solveFor=self.solveFor,
        )


class FrequencyInfo(BaseModel):
    value: CompoundingFrequency
    label: str
    periodsPerYear: Optional[int] = None
