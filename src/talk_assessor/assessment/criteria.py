"""Per-criterion scorers on the 1-5 scale.

Each scorer starts from 5, subtracts fixed penalties when a feature crosses a
threshold, and clamps the result to [1, 5]. The inputs are lexical proxies:
pronunciation in particular is inferred from transcript clarity signals, not
from audio, so these scores indicate tendencies rather than measure skill.
"""

from talk_assessor.models.assessment import SubScores
from talk_assessor.models.base import MAX_SCORE, clamp_score
from talk_assessor.models.features import FeatureSet

CONNECTOR_DENSITY_MIN = 0.3


def score_fluency(features: FeatureSet) -> float:
    score = MAX_SCORE

    # Speech rate
    if features.words_per_minute < 100:
        score -= 1
    elif features.words_per_minute > 180:
        score -= 0.5

    # Filler words
    if features.filler_percentage > 8:
        score -= 1
    elif features.filler_percentage > 5:
        score -= 0.5

    # Choppy delivery
    if features.avg_sentence_length < 8:
        score -= 0.5

    return clamp_score(score)


def score_pronunciation(features: FeatureSet) -> float:
    """Clarity proxy: repetition, unfinished thoughts and rushed delivery."""
    score = MAX_SCORE
    if len(features.repetitive_words) > 3:
        score -= 1
    if features.incomplete_thoughts > 2:
        score -= 1
    if features.words_per_minute > 200:
        score -= 0.5
    return clamp_score(score)


def score_vocabulary(features: FeatureSet) -> float:
    score = MAX_SCORE

    if features.vocabulary_diversity < 0.4:
        score -= 1
    elif features.vocabulary_diversity < 0.6:
        score -= 0.5

    if features.vague_words > 4:
        score -= 1
    elif features.vague_words > 2:
        score -= 0.5

    if features.weak_words > 3:
        score -= 0.5

    return clamp_score(score)


def score_grammar(features: FeatureSet) -> float:
    score = MAX_SCORE

    # "he are", "she were", "it have"
    if features.subject_verb_errors > 2:
        score -= 1
    elif features.subject_verb_errors > 1:
        score -= 0.5

    if features.article_errors > 3:
        score -= 0.5

    # Heavy use of both present and past auxiliaries suggests tense mixing
    if features.present_tense_markers > 3 and features.past_tense_markers > 3:
        score -= 0.5

    return clamp_score(score)


def score_coherence(features: FeatureSet) -> float:
    score = MAX_SCORE

    if features.connector_count < features.sentence_count * CONNECTOR_DENSITY_MIN:
        score -= 0.5

    if features.topic_shifts > 2:
        score -= 1

    if features.dangling_connectors > 1:
        score -= 0.5

    return clamp_score(score)


def score_criteria(features: FeatureSet) -> SubScores:
    """Run all five scorers over one feature set."""
    return SubScores(
        fluency=score_fluency(features),
        pronunciation=score_pronunciation(features),
        vocabulary=score_vocabulary(features),
        grammar=score_grammar(features),
        coherence=score_coherence(features),
    )
