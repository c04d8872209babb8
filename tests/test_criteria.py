"""Tests for per-criterion scorers."""

import pytest

from talk_assessor.assessment.criteria import (
    score_coherence,
    score_criteria,
    score_fluency,
    score_grammar,
    score_pronunciation,
    score_vocabulary,
)
from talk_assessor.models.features import FeatureSet, RepetitiveWord


def features(**overrides) -> FeatureSet:
    """Feature set that scores 5 on every criterion unless overridden."""
    base = {
        "total_words": 150,
        "sentence_count": 10,
        "vocabulary_diversity": 0.8,
        "avg_sentence_length": 15.0,
        "connector_count": 10,
        "words_per_minute": 140,
    }
    base.update(overrides)
    return FeatureSet(**base)


def repeated(n: int) -> tuple[RepetitiveWord, ...]:
    return tuple(RepetitiveWord(word=f"word{i}", count=5) for i in range(n))


class TestFluency:
    def test_clean_speech(self):
        assert score_fluency(features()) == 5.0

    @pytest.mark.parametrize(
        ("wpm", "expected"),
        [(99, 4.0), (100, 5.0), (180, 5.0), (181, 4.5)],
    )
    def test_speech_rate_ladder(self, wpm, expected):
        assert score_fluency(features(words_per_minute=wpm)) == expected

    @pytest.mark.parametrize(
        ("pct", "expected"),
        [(5.0, 5.0), (5.01, 4.5), (8.0, 4.5), (8.01, 4.0)],
    )
    def test_filler_ladder(self, pct, expected):
        assert score_fluency(features(filler_percentage=pct)) == expected

    def test_short_sentences(self):
        assert score_fluency(features(avg_sentence_length=7.9)) == 4.5

    def test_worst_case_floor(self):
        worst = features(words_per_minute=10, filler_percentage=80.0, avg_sentence_length=2.0)
        assert score_fluency(worst) == 2.5


class TestPronunciation:
    def test_all_penalties(self):
        f = features(repetitive_words=repeated(4), incomplete_thoughts=3, words_per_minute=201)
        assert score_pronunciation(f) == 2.5

    def test_thresholds_are_exclusive(self):
        f = features(repetitive_words=repeated(3), incomplete_thoughts=2, words_per_minute=200)
        assert score_pronunciation(f) == 5.0


class TestVocabulary:
    @pytest.mark.parametrize(
        ("diversity", "expected"),
        [(0.39, 4.0), (0.4, 4.5), (0.59, 4.5), (0.6, 5.0)],
    )
    def test_diversity_ladder(self, diversity, expected):
        assert score_vocabulary(features(vocabulary_diversity=diversity)) == expected

    @pytest.mark.parametrize(("vague", "expected"), [(2, 5.0), (3, 4.5), (4, 4.5), (5, 4.0)])
    def test_vague_ladder(self, vague, expected):
        assert score_vocabulary(features(vague_words=vague)) == expected

    def test_weak_words(self):
        assert score_vocabulary(features(weak_words=4)) == 4.5

    def test_all_penalties(self):
        f = features(vocabulary_diversity=0.1, vague_words=9, weak_words=9)
        assert score_vocabulary(f) == 2.5


class TestGrammar:
    @pytest.mark.parametrize(("errors", "expected"), [(1, 5.0), (2, 4.5), (3, 4.0)])
    def test_subject_verb_ladder(self, errors, expected):
        assert score_grammar(features(subject_verb_errors=errors)) == expected

    def test_article_errors(self):
        assert score_grammar(features(article_errors=3)) == 5.0
        assert score_grammar(features(article_errors=4)) == 4.5

    def test_tense_mixing_needs_both(self):
        assert score_grammar(features(present_tense_markers=4, past_tense_markers=3)) == 5.0
        assert score_grammar(features(present_tense_markers=4, past_tense_markers=4)) == 4.5


class TestCoherence:
    def test_low_connector_density(self):
        assert score_coherence(features(connector_count=2, sentence_count=10)) == 4.5
        assert score_coherence(features(connector_count=4, sentence_count=10)) == 5.0

    def test_topic_shifts(self):
        assert score_coherence(features(topic_shifts=3)) == 4.0

    def test_dangling_connectors(self):
        assert score_coherence(features(dangling_connectors=2)) == 4.5

    def test_all_penalties(self):
        f = features(connector_count=0, topic_shifts=5, dangling_connectors=5)
        assert score_coherence(f) == 3.0


class TestScoreCriteria:
    def test_empty_feature_set(self):
        scores = score_criteria(FeatureSet())
        assert scores.fluency == 3.5
        assert scores.pronunciation == 5.0
        assert scores.vocabulary == 4.0
        assert scores.grammar == 5.0
        assert scores.coherence == 5.0

    def test_adversarial_features_stay_in_range(self):
        f = features(
            words_per_minute=-50,
            filler_percentage=1e9,
            avg_sentence_length=-1.0,
            vague_words=10**6,
            weak_words=10**6,
            topic_shifts=10**6,
            subject_verb_errors=10**6,
        )
        for _, score in score_criteria(f).items():
            assert 1.0 <= score <= 5.0
