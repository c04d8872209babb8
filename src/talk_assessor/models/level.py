"""Proficiency level model."""

from enum import StrEnum


class ProficiencyLevel(StrEnum):
    """Ordered proficiency levels, lowest first."""

    BEGINNER = "Beginner"
    LOWER_INTERMEDIATE = "Lower Intermediate"
    INTERMEDIATE = "Intermediate"
    UPPER_INTERMEDIATE = "Upper Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def from_score(cls, score: float) -> "ProficiencyLevel":
        """Determine level from a 1-5 score. Band boundaries are closed below."""
        if score >= 4.5:
            return cls.ADVANCED
        elif score >= 3.5:
            return cls.UPPER_INTERMEDIATE
        elif score >= 2.5:
            return cls.INTERMEDIATE
        elif score >= 1.5:
            return cls.LOWER_INTERMEDIATE
        else:
            return cls.BEGINNER

    @classmethod
    def coerce(cls, level: "ProficiencyLevel | str") -> "ProficiencyLevel":
        """Resolve a level name, falling back to Intermediate when unknown."""
        try:
            return cls(level)
        except ValueError:
            return cls.INTERMEDIATE

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    @property
    def next(self) -> "ProficiencyLevel":
        """Level immediately above this one. Advanced is terminal."""
        levels = list(type(self))
        return levels[min(self.rank + 1, len(levels) - 1)]
