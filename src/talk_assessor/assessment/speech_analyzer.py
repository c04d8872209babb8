"""Speech report: per-dimension lexical scores and recommendations."""

import structlog

from talk_assessor.assessment.speech_rate import Duration
from talk_assessor.models.assessment import (
    ClarityAnalysis,
    DictionAnalysis,
    FillerAnalysis,
    SpeechAnalysis,
    StructureAnalysis,
)
from talk_assessor.models.base import MIN_SCORE, clamp_score, round_half_up
from talk_assessor.models.features import FeatureSet

logger = structlog.get_logger()

# Comfortable conversational speaking rate
SLOW_WPM = 120
FAST_WPM = 200
RATE_ADJUSTMENT = -0.5


def score_filler_words(percentage: float) -> int:
    if percentage < 2:
        return 5
    if percentage < 5:
        return 4
    if percentage < 10:
        return 3
    if percentage < 15:
        return 2
    return 1


def score_diction(diversity: float, vague_count: int, weak_count: int) -> int:
    score = 5
    if diversity < 0.3:
        score -= 2
    elif diversity < 0.5:
        score -= 1
    if vague_count > 5:
        score -= 1
    if weak_count > 3:
        score -= 1
    return max(int(MIN_SCORE), score)


def score_sentence_structure(avg_length: float, sentence_count: int) -> int:
    score = 5
    if avg_length < 8 or avg_length > 25:
        score -= 1
    if sentence_count < 3:
        score -= 1
    return max(int(MIN_SCORE), score)


def score_clarity(repetitive_count: int, incomplete_count: int) -> int:
    score = 5
    if repetitive_count > 2:
        score -= 1
    if incomplete_count > 1:
        score -= 1
    return max(int(MIN_SCORE), score)


def generate_recommendations(features: FeatureSet) -> list[str]:
    """Actionable tips for each lexical weakness, in a fixed order."""
    recommendations = []

    if features.filler_percentage > 5:
        recommendations.append("Reduce filler words like 'um', 'uh', 'like', and 'you know'")

    if features.vague_words > 3:
        recommendations.append(
            "Use more specific words instead of vague terms like 'thing' or 'stuff'"
        )

    if features.weak_words > 2:
        recommendations.append(
            "Replace weak words like 'maybe' and 'sort of' with more confident language"
        )

    if features.avg_sentence_length < 10:
        recommendations.append("Vary sentence length to create more engaging speech patterns")

    if features.words_per_minute < SLOW_WPM:
        recommendations.append(
            "Try speaking at a slightly faster pace to maintain listener engagement"
        )
    elif features.words_per_minute > FAST_WPM:
        recommendations.append("Slow down your speech rate to improve clarity and comprehension")

    return recommendations


class SpeechAnalyzer:
    """Builds the speech report from an extracted feature set."""

    def analyze(self, features: FeatureSet, duration: Duration) -> SpeechAnalysis:
        """Score each lexical dimension and combine them with a rate adjustment.

        Args:
            features: Feature set with the speech rate already attached.
            duration: Duration the rate was derived from.

        Returns:
            SpeechAnalysis report.
        """
        ratios = features.scoring_ratios()
        filler = FillerAnalysis(
            total_fillers=features.total_fillers,
            filler_percentage=features.filler_percentage,
            filler_breakdown=features.filler_breakdown,
            score=score_filler_words(ratios.filler_percentage),
        )
        diction = DictionAnalysis(
            vocabulary_diversity=features.vocabulary_diversity,
            vague_words=features.vague_words,
            weak_words=features.weak_words,
            score=score_diction(
                ratios.vocabulary_diversity, features.vague_words, features.weak_words
            ),
        )
        structure = StructureAnalysis(
            avg_sentence_length=features.avg_sentence_length,
            sentence_variety=features.sentence_variety,
            score=score_sentence_structure(
                ratios.avg_sentence_length, features.sentence_count
            ),
        )
        clarity = ClarityAnalysis(
            repetitive_words=list(features.repetitive_words),
            incomplete_thoughts=features.incomplete_thoughts,
            score=score_clarity(len(features.repetitive_words), features.incomplete_thoughts),
        )

        scores = [filler.score, diction.score, structure.score, clarity.score]
        average = sum(scores) / len(scores)
        adjustment = 0.0
        if features.words_per_minute < SLOW_WPM or features.words_per_minute > FAST_WPM:
            adjustment = RATE_ADJUSTMENT
        overall = clamp_score(round_half_up(average + adjustment, 1))

        if duration.estimated:
            logger.debug("speech_rate_from_estimated_duration", duration=duration.seconds)

        return SpeechAnalysis(
            words_per_minute=features.words_per_minute,
            duration=duration.seconds,
            duration_estimated=duration.estimated,
            duration_source=duration.source,
            total_words=features.total_words,
            filler_analysis=filler,
            diction_analysis=diction,
            structure_analysis=structure,
            clarity_analysis=clarity,
            overall_score=overall,
            recommendations=generate_recommendations(features),
        )
