"""Compounding frequencies and their periods-per-year mapping."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

from compound_interest.core.errors import UnrecognizedFrequencyError


class CompoundingFrequency(str, Enum):
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi-annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    CONTINUOUSLY = "continuously"

    @property
    def is_continuous(self) -> bool:
        return self is CompoundingFrequency.CONTINUOUSLY

    @classmethod
    def parse(cls, value: Union["CompoundingFrequency", str]) -> "CompoundingFrequency":
        """Return the member for ``value``; anything outside the enum is rejected."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnrecognizedFrequencyError(value) from None


# discrete members only; continuously uses the exponential formula
_PERIODS_PER_YEAR: Dict[CompoundingFrequency, int] = {
    CompoundingFrequency.ANNUALLY: 1,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.WEEKLY: 52,
    CompoundingFrequency.DAILY: 365,
}


def periods_per_year(frequency: Union[CompoundingFrequency, str]) -> int:
    """
    Number of compounding periods in one year.

    Continuous compounding has no period count, so callers must branch on
    ``frequency.is_continuous`` first; passing it here is an error.
    """
    member = CompoundingFrequency.parse(frequency)
    try:
        return _PERIODS_PER_YEAR[member]
    except KeyError:
        raise UnrecognizedFrequencyError(member.value) from None
