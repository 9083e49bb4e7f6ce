"""Forward compounding: future value and the year-by-year balance table."""

from __future__ import annotations

import datetime as dt
import logging
import math
from typing import List, Optional, Union

from compound_interest.core.errors import InvalidInputError, MathematicallyUndefinedError
from compound_interest.core.frequency import CompoundingFrequency, periods_per_year
from compound_interest.core.validation import ensure_breakdown_years, ensure_non_negative
from compound_interest.schemas.calculation import CalculationResult, YearlyBreakdownRow

logger = logging.getLogger(__name__)

FrequencyLike = Union[CompoundingFrequency, str]

_YEAR_TOLERANCE = 1e-9


def growth_factor(rate: float, time: float, frequency: FrequencyLike) -> float:
    """
    Multiplier applied to the principal after ``time`` years.

        continuous: e^(r t)
        discrete:   (1 + r/n)^(n t)

    ``rate`` is a percentage; ``r`` above is ``rate / 100``.
    """
    member = CompoundingFrequency.parse(frequency)
    r = rate / 100.0
    try:
        if member.is_continuous:
            factor = math.exp(r * time)
        else:
            n = periods_per_year(member)
            factor = (1.0 + r / n) ** (n * time)
    except OverflowError:
        raise MathematicallyUndefinedError(
            "growth factor overflows for the given rate and time", field="rate"
        ) from None

    if not math.isfinite(factor):
        raise MathematicallyUndefinedError(
            "growth factor overflows for the given rate and time", field="rate"
        )
    return factor


def future_value(principal: float, rate: float, time: float, frequency: FrequencyLike) -> float:
    amount = principal * growth_factor(rate, time, frequency)
    if not math.isfinite(amount):
        raise MathematicallyUndefinedError("final amount is not representable", field="finalAmount")
    return amount


def _shift_years(start: dt.date, years: float) -> dt.date:
    """Move ``start`` forward by whole calendar years plus any fractional remainder in days."""
    whole = int(years)
    if start.year + math.ceil(years) > dt.MAXYEAR:
        raise InvalidInputError("breakdown dates run past the last representable year", field="startDate")
    try:
        shifted = start.replace(year=start.year + whole)
    except ValueError:
        # 29 February into a non-leap year
        shifted = start.replace(year=start.year + whole, day=28)

    fraction = years - whole
    if fraction > 0:
        shifted += dt.timedelta(days=round(fraction * 365))
    return shifted


def yearly_breakdown(
    principal: float,
    rate: float,
    time: float,
    frequency: FrequencyLike,
    start_date: Optional[dt.date] = None,
) -> List[YearlyBreakdownRow]:
    """
    One row per whole or partial year, 1..ceil(time), at most MAX_BREAKDOWN_YEARS.

    Each amount is recomputed from the closed form (not accumulated), and a
    trailing partial year is evaluated at ``time`` itself so the last row
    always matches the final amount.
    """
    rows: List[YearlyBreakdownRow] = []
    previous = principal
    # solved times like 3.0000000000000004 must not open a fourth year,
    # but any positive horizon gets at least one row
    last_year = max(1, math.ceil(time - _YEAR_TOLERANCE)) if time > 0 else 0
    ensure_breakdown_years(last_year)
    for year in range(1, last_year + 1):
        elapsed = time if year == last_year else float(year)
        amount = future_value(principal, rate, elapsed, frequency)
        rows.append(
            YearlyBreakdownRow(
                year=year,
                amount=amount,
                interestEarned=amount - previous,
                date=_shift_years(start_date, elapsed) if start_date is not None else None,
            )
        )
        previous = amount
    return rows


def compound(
    principal: float,
    rate: float,
    time: float,
    frequency: FrequencyLike,
    start_date: Optional[dt.date] = None,
) -> CalculationResult:
    """Compute final amount, total interest and the yearly breakdown."""
    principal = ensure_non_negative("principal", principal)
    rate = ensure_non_negative("rate", rate)
    time = ensure_non_negative("time", time)
    member = CompoundingFrequency.parse(frequency)

    final_amount = future_value(principal, rate, time, member)
    breakdown = yearly_breakdown(principal, rate, time, member, start_date)
    logger.debug(
        "compound principal=%s rate=%s time=%s frequency=%s -> %s",
        principal,
        rate,
        time,
        member.value,
        final_amount,
    )

    return CalculationResult(
        finalAmount=final_amount,
        totalInterest=final_amount - principal,
        yearlyBreakdown=breakdown,
    )
