"""Compound interest calculator: forward compounding and inverse solvers."""

from compound_interest.core.compound import compound, future_value, growth_factor, yearly_breakdown
from compound_interest.core.errors import (
    CalculationError,
    InvalidInputError,
    MathematicallyUndefinedError,
    UnrecognizedFrequencyError,
)
from compound_interest.core.frequency import CompoundingFrequency, periods_per_year
from compound_interest.core.solver import (
    solve,
    solve_final_amount,
    solve_principal,
    solve_rate,
    solve_time,
)

__version__ = "0.1.0"

__all__ = [
    "CalculationError",
    "CompoundingFrequency",
    "InvalidInputError",
    "MathematicallyUndefinedError",
    "UnrecognizedFrequencyError",
    "compound",
    "future_value",
    "growth_factor",
    "periods_per_year",
    "solve",
    "solve_final_amount",
    "solve_principal",
    "solve_rate",
    "solve_time",
    "yearly_breakdown",
]
