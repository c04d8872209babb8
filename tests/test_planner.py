"""Tests for improvement plan generation."""

import pytest

from talk_assessor.assessment.calibration import (
    compute_overall,
    detailed_feedback,
    determine_level,
    toefl_equivalent,
)
from talk_assessor.models.assessment import SubScores, ToeflScore
from talk_assessor.models.base import round_half_up
from talk_assessor.models.features import FeatureSet, RepetitiveWord
from talk_assessor.models.level import ProficiencyLevel
from talk_assessor.models.plan import Priority, PriorityArea
from talk_assessor.planning.catalog import EXERCISES, MOTIVATION_TIPS
from talk_assessor.planning.planner import (
    ImprovementPlanner,
    calculate_confidence,
    calculate_transition_time,
    create_milestones,
    create_weekly_plan,
    estimate_progress,
    generate_exercises,
    get_motivation_tips,
    get_next_level,
    get_target_score,
    identify_priority_areas,
)

L = ProficiencyLevel


def make_assessment(scores: SubScores) -> ToeflScore:
    overall = compute_overall(scores)
    return ToeflScore(
        overall_score=round_half_up(overall, 1),
        level=determine_level(overall),
        breakdown=scores,
        detailed_feedback=detailed_feedback(scores),
        toefl_equivalent=toefl_equivalent(overall),
    )


def uniform(score: float) -> SubScores:
    return SubScores(
        fluency=score, pronunciation=score, vocabulary=score, grammar=score, coherence=score
    )


class TestNextLevel:
    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (L.BEGINNER, L.LOWER_INTERMEDIATE),
            (L.LOWER_INTERMEDIATE, L.INTERMEDIATE),
            (L.INTERMEDIATE, L.UPPER_INTERMEDIATE),
            (L.UPPER_INTERMEDIATE, L.ADVANCED),
            (L.ADVANCED, L.ADVANCED),
        ],
    )
    def test_ordering(self, current, expected):
        assert get_next_level(current) == expected

    def test_advanced_is_terminal(self):
        assert get_next_level("Advanced") == "Advanced"

    def test_unknown_level_treated_as_intermediate(self):
        assert get_next_level("Expert") == L.UPPER_INTERMEDIATE


class TestPriorityAreas:
    def test_feature_reasons_win_and_high_sorts_first(self):
        features = FeatureSet(
            filler_percentage=10.0,
            vocabulary_diversity=0.3,
            vague_words=5,
            repetitive_words=tuple(RepetitiveWord(word=f"w{i}x", count=4) for i in range(3)),
        )
        scores = SubScores(
            fluency=2.0, pronunciation=5.0, vocabulary=3.5, grammar=3.5, coherence=2.5
        )
        areas = identify_priority_areas(features, scores)

        assert [(a.area, a.priority) for a in areas] == [
            ("fluency", Priority.HIGH),
            ("vocabulary", Priority.HIGH),
            ("coherence", Priority.HIGH),
            ("grammar", Priority.MEDIUM),
        ]
        assert areas[0].reason == "High filler word usage"
        assert areas[1].reason == "Limited vocabulary diversity"
        assert areas[2].reason == "Low coherence score (2.5/5)"
        assert areas[3].reason == "Moderate grammar score (3.5/5)"

    def test_no_duplicate_areas(self):
        features = FeatureSet(vocabulary_diversity=0.2, vague_words=9)
        areas = identify_priority_areas(features, uniform(1.0))
        names = [a.area for a in areas]
        assert len(names) == len(set(names))

    def test_strong_speaker_has_no_priorities(self):
        features = FeatureSet(vocabulary_diversity=0.9)
        assert identify_priority_areas(features, uniform(5.0)) == []

    def test_score_of_four_is_not_a_priority(self):
        features = FeatureSet(vocabulary_diversity=0.9)
        scores = SubScores(fluency=4.0, pronunciation=5, vocabulary=5, grammar=5, coherence=5)
        assert identify_priority_areas(features, scores) == []


class TestExercises:
    def test_cadence_partition(self):
        areas = [PriorityArea(area="grammar", priority=Priority.MEDIUM, reason="r")]
        exercises = generate_exercises(areas)["grammar"]
        items = list(EXERCISES["grammar"])
        assert exercises.priority == Priority.MEDIUM
        assert exercises.daily == items[:2]
        assert exercises.weekly == items[2:4]
        assert exercises.monthly == items[4:]


class TestWeeklyPlan:
    def test_high_and_medium_slots(self):
        areas = [
            PriorityArea(area="fluency", priority=Priority.HIGH, reason="r"),
            PriorityArea(area="grammar", priority=Priority.MEDIUM, reason="r"),
        ]
        plan = create_weekly_plan(areas)
        fluency = EXERCISES["fluency"]
        grammar = EXERCISES["grammar"]
        assert plan.monday == [fluency[0]]
        assert plan.wednesday == [fluency[1]]
        assert plan.friday == [fluency[2]]
        assert plan.tuesday == [grammar[0]]
        assert plan.thursday == [grammar[1]]
        assert plan.saturday == []
        assert plan.sunday == []

    def test_short_exercise_list_leaves_slots_empty(self):
        areas = [PriorityArea(area="custom", priority=Priority.HIGH, reason="r")]
        plan = create_weekly_plan(areas, {"custom": ("Only exercise",)})
        assert plan.monday == ["Only exercise"]
        assert plan.wednesday == []
        assert plan.friday == []

    def test_low_priority_gets_no_slots(self):
        areas = [PriorityArea(area="fluency", priority=Priority.LOW, reason="r")]
        plan = create_weekly_plan(areas)
        assert all(day == [] for day in plan.model_dump().values())


class TestTimeline:
    @pytest.mark.parametrize(
        ("current", "nxt", "months"),
        [
            (L.BEGINNER, L.LOWER_INTERMEDIATE, 3),
            (L.INTERMEDIATE, L.UPPER_INTERMEDIATE, 3),
            (L.UPPER_INTERMEDIATE, L.ADVANCED, 6),
            (L.ADVANCED, L.ADVANCED, 0),
        ],
    )
    def test_transition_time(self, current, nxt, months):
        assert calculate_transition_time(current, nxt) == months

    def test_milestones_span_current_to_next(self):
        milestones = create_milestones(L.INTERMEDIATE, L.UPPER_INTERMEDIATE)
        assert [m.level for m in milestones] == [L.INTERMEDIATE, L.UPPER_INTERMEDIATE]
        assert milestones[0].checkpoints[0] == "Uses complex sentences naturally"

    def test_single_milestone_at_top(self):
        milestones = create_milestones(L.ADVANCED, L.ADVANCED)
        assert [m.level for m in milestones] == [L.ADVANCED]


class TestProgress:
    def test_estimate(self):
        progress = estimate_progress(make_assessment(uniform(3.0)))
        assert progress.current_score == 3.0
        assert progress.target_score == 3.5
        assert progress.progress_percentage == 86
        assert progress.time_to_target == 2
        assert progress.confidence == "high"

    def test_target_score_default(self):
        assert get_target_score("Unknown") == 3.5
        assert get_target_score(L.ADVANCED) == 5.0

    @pytest.mark.parametrize(
        ("values", "confidence"),
        [
            ((3, 4, 3, 4, 3), "high"),
            ((2, 4, 2, 4, 3), "medium"),
            ((1, 5, 5, 5, 5), "low"),
        ],
    )
    def test_confidence_from_variance(self, values, confidence):
        scores = SubScores(**dict(zip(
            ("fluency", "pronunciation", "vocabulary", "grammar", "coherence"), values
        )))
        assert calculate_confidence(scores) == confidence


class TestMotivationTips:
    def test_known_level(self):
        assert get_motivation_tips(L.BEGINNER) == list(MOTIVATION_TIPS[L.BEGINNER])

    def test_unknown_level_defaults_to_intermediate(self):
        assert get_motivation_tips("Unknown") == list(MOTIVATION_TIPS[L.INTERMEDIATE])


class TestImprovementPlanner:
    def test_create_plan(self):
        features = FeatureSet(filler_percentage=12.0, vocabulary_diversity=0.7)
        scores = SubScores(
            fluency=2.5, pronunciation=5.0, vocabulary=5.0, grammar=3.5, coherence=5.0
        )
        assessment = make_assessment(scores)
        plan = ImprovementPlanner().create_plan(features, assessment)

        assert plan.current_level == assessment.level
        assert plan.next_level == get_next_level(assessment.level)
        assert [a.area for a in plan.priority_areas] == ["fluency", "grammar"]
        assert set(plan.exercises) == {"fluency", "grammar"}
        assert set(plan.resources) == {"fluency", "grammar"}
        assert plan.timeline.current_level.name == plan.current_level
        assert plan.milestones[0].level == plan.current_level
        assert plan.milestones[-1].level == plan.next_level
        assert plan.weekly_plan.monday == [EXERCISES["fluency"][0]]
        assert plan.weekly_plan.tuesday == [EXERCISES["grammar"][0]]
        assert plan.motivation_tips
