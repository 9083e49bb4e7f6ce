"""Inverse solvers: recover principal, rate, time or final amount from the other three."""

from __future__ import annotations

import logging
import math
from typing import List, Union

from compound_interest.core.compound import FrequencyLike, future_value, growth_factor, yearly_breakdown
from compound_interest.core.errors import MathematicallyUndefinedError
from compound_interest.core.frequency import CompoundingFrequency, periods_per_year
from compound_interest.core.validation import ensure_non_negative
from compound_interest.schemas.calculation import (
    SolveFinalAmountRequest,
    SolvePrincipalRequest,
    SolveRateRequest,
    SolveResult,
    SolveTimeRequest,
    YearlyBreakdownRow,
)

logger = logging.getLogger(__name__)

AnySolveRequest = Union[
    SolvePrincipalRequest, SolveRateRequest, SolveTimeRequest, SolveFinalAmountRequest
]


def _finite(field: str, value: float) -> float:
    if not math.isfinite(value):
        raise MathematicallyUndefinedError(f"{field} is not representable for these inputs", field=field)
    return value


def _growth_ratio(principal: float, final_amount: float) -> float:
    """A / P, rejecting every combination whose logarithm or root is undefined or zero."""
    if principal == 0:
        raise MathematicallyUndefinedError("principal must be > 0 to solve for growth", field="principal")
    if final_amount < principal:
        raise MathematicallyUndefinedError(
            "final amount below principal implies a negative rate", field="finalAmount"
        )
    if final_amount == principal:
        raise MathematicallyUndefinedError(
            "final amount equals principal, there is no growth to solve for", field="finalAmount"
        )
    return _finite("finalAmount", final_amount / principal)


def solve_principal(final_amount: float, rate: float, time: float, frequency: FrequencyLike) -> float:
    """P = A / (1 + r/n)^(nt), or A / e^(rt) when compounding continuously."""
    final_amount = ensure_non_negative("finalAmount", final_amount)
    rate = ensure_non_negative("rate", rate)
    time = ensure_non_negative("time", time)

    # factor >= 1 for non-negative rate and time
    principal = final_amount / growth_factor(rate, time, frequency)
    logger.debug("solved principal=%s", principal)
    return _finite("principal", principal)


def solve_final_amount(principal: float, rate: float, time: float, frequency: FrequencyLike) -> float:
    principal = ensure_non_negative("principal", principal)
    rate = ensure_non_negative("rate", rate)
    time = ensure_non_negative("time", time)

    final_amount = future_value(principal, rate, time, frequency)
    logger.debug("solved finalAmount=%s", final_amount)
    return final_amount


def solve_rate(principal: float, final_amount: float, time: float, frequency: FrequencyLike) -> float:
    """
    Nominal annual rate, in percent, that grows ``principal`` into ``final_amount``.

        discrete:   r = n((A/P)^(1/(nt)) - 1)
        continuous: r = ln(A/P) / t
    """
    principal = ensure_non_negative("principal", principal)
    final_amount = ensure_non_negative("finalAmount", final_amount)
    time = ensure_non_negative("time", time)
    member = CompoundingFrequency.parse(frequency)

    ratio = _growth_ratio(principal, final_amount)
    if time == 0:
        raise MathematicallyUndefinedError("time must be > 0 to solve for rate", field="time")

    if member.is_continuous:
        rate = math.log(ratio) / time
    else:
        n = periods_per_year(member)
        try:
            rate = n * (ratio ** (1.0 / (n * time)) - 1.0)
        except OverflowError:
            raise MathematicallyUndefinedError("rate is not representable for these inputs", field="rate") from None

    logger.debug("solved rate=%s%%", rate * 100.0)
    return _finite("rate", rate * 100.0)


def solve_time(principal: float, final_amount: float, rate: float, frequency: FrequencyLike) -> float:
    """
    Years needed to grow ``principal`` into ``final_amount`` at ``rate`` percent.

        discrete:   t = ln(A/P) / (n ln(1 + r/n))
        continuous: t = ln(A/P) / r
    """
    principal = ensure_non_negative("principal", principal)
    final_amount = ensure_non_negative("finalAmount", final_amount)
    rate = ensure_non_negative("rate", rate)
    member = CompoundingFrequency.parse(frequency)

    ratio = _growth_ratio(principal, final_amount)
    if rate == 0:
        raise MathematicallyUndefinedError("rate must be > 0 to solve for time", field="rate")

    r = rate / 100.0
    if member.is_continuous:
        time = math.log(ratio) / r
    else:
        n = periods_per_year(member)
        denominator = n * math.log1p(r / n)
        if denominator == 0:
            # r/n underflowed below float resolution
            raise MathematicallyUndefinedError("rate is too small to solve for time", field="rate")
        time = math.log(ratio) / denominator

    logger.debug("solved time=%s", time)
    return _finite("time", time)


def solve(request: AnySolveRequest) -> SolveResult:
    """Run the solver selected by ``request.solveFor`` and complete the parameter set."""
    frequency = request.frequency

    if isinstance(request, SolvePrincipalRequest):
        value = solve_principal(request.finalAmount, request.rate, request.time, frequency)
        principal, rate, time, final_amount = value, request.rate, request.time, request.finalAmount
    elif isinstance(request, SolveRateRequest):
        value = solve_rate(request.principal, request.finalAmount, request.time, frequency)
        principal, rate, time, final_amount = request.principal, value, request.time, request.finalAmount
    elif isinstance(request, SolveTimeRequest):
        value = solve_time(request.principal, request.finalAmount, request.rate, frequency)
        principal, rate, time, final_amount = request.principal, request.rate, value, request.finalAmount
    elif isinstance(request, SolveFinalAmountRequest):
        value = solve_final_amount(request.principal, request.rate, request.time, frequency)
        principal, rate, time, final_amount = request.principal, request.rate, request.time, value
    else:
        raise TypeError(f"unsupported solve request: {type(request).__name__}")

    breakdown: List[YearlyBreakdownRow] = []
    if request.includeBreakdown:
        breakdown = yearly_breakdown(principal, rate, time, frequency)

    return SolveResult(
        solveFor=request.solveFor,
        value=value,
        principal=principal,
        rate=rate,
        time=time,
        finalAmount=final_amount,
        frequency=frequency,
        totalInterest=final_amount - principal,
        yearlyBreakdown=breakdown,
    )
