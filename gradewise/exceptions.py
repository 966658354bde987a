# gradewise/exceptions.py
from typing import Optional

REQUIRED_TOTAL_WEIGHT = 100


class GradewiseError(Exception):
    """Base class for errors surfaced to the caller."""


class WeightSumError(GradewiseError):
    """The component weights do not add up to exactly 100%."""

    def __init__(self, total_weight: float, required_total: int = REQUIRED_TOTAL_WEIGHT):
        self.total_weight = total_weight
        self.required_total = required_total
        super().__init__(
            f"The total weight must be exactly {required_total}%. "
            f"Current total: {_format_percent(total_weight)}%."
        )


class SuggestionFetchError(GradewiseError):
    """The suggestion model failed or answered with something unusable."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Unable to produce suggestions.")


def _format_percent(value: float) -> str:
    # 90.0 -> "90", 33.5 -> "33.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
