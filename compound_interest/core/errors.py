"""Error taxonomy raised by the compounding core."""

from __future__ import annotations

from typing import Any, Optional


class CalculationError(ValueError):
    """Base class for every failure the core reports instead of NaN/inf."""

    kind = "calculation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidInputError(CalculationError):
    """A known value is missing, non-finite, or outside its allowed range."""

    kind = "invalid_input"


class MathematicallyUndefinedError(CalculationError):
    """The supplied values are individually valid but jointly unsolvable."""

    kind = "mathematically_undefined"


class UnrecognizedFrequencyError(CalculationError):
    kind = "unrecognized_frequency"

    def __init__(self, value: Any):
        super().__init__(f"unrecognized compounding frequency: {value!r}", field="frequency")
        self.value = value
