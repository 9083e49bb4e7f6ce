"""Per-field numeric guards applied before any formula runs."""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from compound_interest.core.errors import InvalidInputError


def ensure_non_negative(field: str, value: Optional[float]) -> float:
    """Return ``value`` as a float, rejecting missing, non-finite and negative input."""
    if value is None:
        raise InvalidInputError(f"{field} is required", field=field)
    # bool is a Real subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{field} must be a number, got {type(value).__name__}", field=field)

    number = float(value)
    if not math.isfinite(number):
        raise InvalidInputError(f"{field} must be finite", field=field)
    if number < 0:
        raise InvalidInputError(f"{field} must be >= 0", field=field)
    return number


# upper bound on breakdown rows; each row is built in memory
MAX_BREAKDOWN_YEARS = 1000


def ensure_breakdown_years(years: int) -> int:
    if years > MAX_BREAKDOWN_YEARS:
        raise InvalidInputError(
            f"breakdown would span {years} years, the limit is {MAX_BREAKDOWN_YEARS}",
            field="time",
        )
    return years
