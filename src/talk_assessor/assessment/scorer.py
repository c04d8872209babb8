"""Proficiency scorer combining criterion scores into an overall assessment."""

import structlog

from talk_assessor.assessment.calibration import (
    compute_overall,
    detailed_feedback,
    determine_level,
    toefl_equivalent,
)
from talk_assessor.assessment.criteria import score_criteria
from talk_assessor.models.assessment import SubScores, ToeflScore
from talk_assessor.models.base import round_half_up
from talk_assessor.models.features import FeatureSet

logger = structlog.get_logger()


class ProficiencyScorer:
    """Scores five criteria from lexical features and aggregates them.

    Level and TOEFL band are taken from the unrounded weighted score; only
    the reported ``overall_score`` is rounded to one decimal.
    """

    def assess(self, features: FeatureSet) -> ToeflScore:
        """Score a feature set.

        Args:
            features: Feature set with the speech rate attached.

        Returns:
            ToeflScore with breakdown, level, feedback and TOEFL equivalent.
        """
        scores = score_criteria(features)
        result = self.aggregate(scores)

        logger.debug(
            "proficiency_assessed",
            words_per_minute=features.words_per_minute,
            filler_percentage=features.filler_percentage,
            vocabulary_diversity=features.vocabulary_diversity,
            **scores.model_dump(),
            overall=result.overall_score,
            level=result.level.value,
        )

        return result

    def aggregate(self, scores: SubScores) -> ToeflScore:
        """Combine criterion scores into overall score, level and TOEFL band."""
        overall = compute_overall(scores)
        return ToeflScore(
            overall_score=round_half_up(overall, 1),
            level=determine_level(overall),
            breakdown=scores,
            detailed_feedback=detailed_feedback(scores),
            toefl_equivalent=toefl_equivalent(overall),
        )
