"""Shared base model and numeric helpers for report models."""

import math

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MIN_SCORE = 1.0
MAX_SCORE = 5.0


class ReportModel(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict:
        """JSON-compatible dict using the external (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves away from negative infinity (5.25 -> 5.3, -1.5 -> -1).

    Python's built-in round() uses banker's rounding, which would move scores
    sitting exactly on a .5 boundary into the lower band.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def clamp_score(value: float, lower: float = MIN_SCORE, upper: float = MAX_SCORE) -> float:
    """Clamp a score into [lower, upper]. NaN maps to the lower bound."""
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))
