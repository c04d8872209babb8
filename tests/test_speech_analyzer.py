"""Tests for the speech report."""

import pytest

from talk_assessor.assessment.metrics import extract_features
from talk_assessor.assessment.speech_analyzer import (
    SpeechAnalyzer,
    generate_recommendations,
    score_clarity,
    score_diction,
    score_filler_words,
    score_sentence_structure,
)
from talk_assessor.assessment.speech_rate import Duration
from talk_assessor.models.features import FeatureSet


class TestDimensionScores:
    def test_filler_ladder(self):
        assert [score_filler_words(p) for p in (0, 1.99, 2, 4.99, 5, 9.99, 10, 14.99, 15)] == [
            5, 5, 4, 4, 3, 3, 2, 2, 1,
        ]

    def test_diction(self):
        assert score_diction(0.8, 0, 0) == 5
        assert score_diction(0.4, 0, 0) == 4
        assert score_diction(0.2, 6, 4) == 1

    def test_sentence_structure(self):
        assert score_sentence_structure(12, 5) == 5
        assert score_sentence_structure(30, 5) == 4
        assert score_sentence_structure(5, 1) == 3

    def test_clarity(self):
        assert score_clarity(0, 0) == 5
        assert score_clarity(3, 2) == 3


class TestRecommendations:
    def test_strong_speech_has_none(self):
        features = FeatureSet(avg_sentence_length=14.0, words_per_minute=150)
        assert generate_recommendations(features) == []

    def test_order_and_rate_branches(self):
        features = FeatureSet(
            filler_percentage=9.0,
            vague_words=4,
            weak_words=3,
            avg_sentence_length=6.0,
            words_per_minute=240,
        )
        recommendations = generate_recommendations(features)
        assert len(recommendations) == 5
        assert recommendations[0].startswith("Reduce filler words")
        assert recommendations[-1].startswith("Slow down")

    def test_slow_speech(self):
        features = FeatureSet(avg_sentence_length=14.0, words_per_minute=90)
        assert generate_recommendations(features)[0].startswith("Try speaking at a slightly faster")


class TestSpeechAnalyzer:
    def test_empty_transcript(self):
        features = extract_features("")
        report = SpeechAnalyzer().analyze(features, Duration(90.0, "estimate"))
        assert report.total_words == 0
        assert report.words_per_minute == 0
        assert report.duration_estimated is True
        assert report.filler_analysis.score == 5
        assert report.diction_analysis.score == 3
        assert report.structure_analysis.score == 3
        assert report.clarity_analysis.score == 5
        # mean 4.0 minus the slow-rate adjustment
        assert report.overall_score == 3.5

    def test_sections_mirror_features(self):
        features = extract_features("Um, the thing is, um, I like stuff. It is fine.").with_speech_rate(130)
        report = SpeechAnalyzer().analyze(features, Duration(30.0, "hint"))
        assert report.filler_analysis.filler_breakdown == features.filler_breakdown
        assert report.diction_analysis.vague_words == 2
        assert report.structure_analysis.sentence_variety == features.sentence_variety
        assert report.duration_source == "hint"

    def test_dimension_scores_use_unrounded_ratios(self):
        # 9 fillers in 451 words is 1.9956%, reported as 2.0
        transcript = "um " * 9 + " ".join(["study"] * 442) + "."
        features = extract_features(transcript).with_speech_rate(150)
        assert features.filler_percentage == 2.0
        assert features.exact_ratios.filler_percentage == pytest.approx(900 / 451)
        report = SpeechAnalyzer().analyze(features, Duration(60.0, "hint"))
        assert report.filler_analysis.filler_percentage == 2.0
        assert report.filler_analysis.score == 5

    def test_rounded_ratios_used_without_exact_values(self):
        features = FeatureSet(filler_percentage=2.0, words_per_minute=150)
        report = SpeechAnalyzer().analyze(features, Duration(60.0, "hint"))
        assert report.filler_analysis.score == 4

    def test_exact_ratios_stay_out_of_payload(self):
        features = extract_features("Um, I like it.")
        assert "exactRatios" not in features.to_payload()
