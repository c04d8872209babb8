"""Weighted aggregation, level mapping and TOEFL-equivalent calibration."""

from types import MappingProxyType

from talk_assessor.models.assessment import SubScores, ToeflEquivalent
from talk_assessor.models.base import MAX_SCORE, clamp_score, round_half_up
from talk_assessor.models.level import ProficiencyLevel

CRITERION_WEIGHTS = MappingProxyType({
    "fluency": 0.25,
    "pronunciation": 0.20,
    "vocabulary": 0.20,
    "grammar": 0.20,
    "coherence": 0.15,
})

TOEFL_SPEAKING_MAX = 30

# (minimum TOEFL speaking score, label), highest first
TOEFL_BANDS: tuple[tuple[int, str], ...] = (
    (27, "Excellent"),
    (23, "Good"),
    (18, "Fair"),
    (13, "Limited"),
    (0, "Weak"),
)

FALLBACK_FEEDBACK_KEY = 3

CRITERION_FEEDBACK = MappingProxyType({
    "fluency": MappingProxyType({
        5: "Excellent fluency with natural speech flow and appropriate pacing.",
        4: "Good fluency with minor interruptions and generally smooth delivery.",
        3: "Fair fluency with some hesitations and uneven pacing.",
        2: "Limited fluency with frequent pauses and choppy delivery.",
        1: "Poor fluency with excessive hesitations and very slow speech.",
    }),
    "pronunciation": MappingProxyType({
        5: "Clear pronunciation with excellent intonation and stress patterns.",
        4: "Good pronunciation with minor clarity issues.",
        3: "Fair pronunciation with some unclear words and basic intonation.",
        2: "Limited pronunciation with many unclear words.",
        1: "Poor pronunciation with significant clarity problems.",
    }),
    "vocabulary": MappingProxyType({
        5: "Rich vocabulary with precise word choice and appropriate usage.",
        4: "Good vocabulary with some variety and generally appropriate usage.",
        3: "Fair vocabulary with basic word choice and some inappropriate usage.",
        2: "Limited vocabulary with repetitive word choice.",
        1: "Poor vocabulary with very basic and often inappropriate word choice.",
    }),
    "grammar": MappingProxyType({
        5: "Excellent grammar with complex structures and high accuracy.",
        4: "Good grammar with minor errors and some complex structures.",
        3: "Fair grammar with noticeable errors but generally understandable.",
        2: "Limited grammar with frequent errors affecting comprehension.",
        1: "Poor grammar with many errors making speech difficult to understand.",
    }),
    "coherence": MappingProxyType({
        5: "Excellent organization with logical flow and complete thoughts.",
        4: "Good organization with clear structure and mostly complete thoughts.",
        3: "Fair organization with some logical connections and some incomplete thoughts.",
        2: "Limited organization with unclear structure and many incomplete thoughts.",
        1: "Poor organization with no clear structure and mostly incomplete thoughts.",
    }),
})


def compute_overall(scores: SubScores) -> float:
    """Weighted mean of the five criterion scores (unrounded, within [1, 5])."""
    total_score = 0.0
    total_weight = 0.0
    for criterion, score in scores.items():
        weight = CRITERION_WEIGHTS[criterion]
        total_score += score * weight
        total_weight += weight
    return clamp_score(total_score / total_weight)


def determine_level(score: float) -> ProficiencyLevel:
    """Map a 1-5 score to a proficiency level (boundaries belong to the upper band)."""
    return ProficiencyLevel.from_score(score)


def toefl_equivalent(score: float) -> ToeflEquivalent:
    """Convert a 1-5 score to a TOEFL iBT speaking equivalent (0-30).

    Args:
        score: Overall score on the 1-5 scale.

    Returns:
        Integer band score and its qualitative label.
    """
    toefl = int(round_half_up(score / MAX_SCORE * TOEFL_SPEAKING_MAX))
    for minimum, label in TOEFL_BANDS:
        if toefl >= minimum:
            return ToeflEquivalent(score=toefl, level=label)
    return ToeflEquivalent(score=toefl, level=TOEFL_BANDS[-1][1])


def criterion_feedback(criterion: str, score: float) -> str:
    """Feedback sentence for a criterion at the nearest whole score.

    Scores that do not round onto the table use the "Fair" (3) entry.
    """
    table = CRITERION_FEEDBACK[criterion]
    return table.get(int(round_half_up(score)), table[FALLBACK_FEEDBACK_KEY])


def detailed_feedback(scores: SubScores) -> dict[str, str]:
    return {criterion: criterion_feedback(criterion, score) for criterion, score in scores.items()}
