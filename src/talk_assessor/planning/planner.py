"""Improvement plan generation from features and criterion scores."""

from collections.abc import Mapping, Sequence

import structlog

from talk_assessor.models.assessment import SubScores, ToeflScore
from talk_assessor.models.base import round_half_up
from talk_assessor.models.features import FeatureSet
from talk_assessor.models.level import ProficiencyLevel
from talk_assessor.models.plan import (
    AreaExercises,
    ImprovementPlan,
    LevelInfo,
    Milestone,
    Priority,
    PriorityArea,
    ProgressEstimate,
    Timeline,
    WeeklyPlan,
)
from talk_assessor.planning.catalog import (
    CHECKPOINTS,
    EXERCISES,
    LEVEL_GOALS,
    LEVEL_MONTHS,
    LEVEL_TIMELINES,
    MOTIVATION_TIPS,
    RESOURCES,
    TARGET_SCORES,
)

logger = structlog.get_logger()

DAILY_SLOTS = 2
WEEKLY_SLOTS = 2
MONTHS_PER_POINT = 3

# (weekday, exercise index) per priority
CALENDAR_SLOTS: dict[Priority, tuple[tuple[str, int], ...]] = {
    Priority.HIGH: (("monday", 0), ("wednesday", 1), ("friday", 2)),
    Priority.MEDIUM: (("tuesday", 0), ("thursday", 1)),
}


def get_next_level(level: ProficiencyLevel | str) -> ProficiencyLevel:
    """Level immediately above ``level``; Advanced stays Advanced.

    Unknown level names are treated as Intermediate.
    """
    return ProficiencyLevel.coerce(level).next


def _feature_priorities(features: FeatureSet) -> list[PriorityArea]:
    areas = []
    if features.filler_percentage > 5:
        areas.append(PriorityArea(
            area="fluency", priority=Priority.HIGH, reason="High filler word usage"
        ))
    if features.vocabulary_diversity < 0.5:
        areas.append(PriorityArea(
            area="vocabulary", priority=Priority.HIGH, reason="Limited vocabulary diversity"
        ))
    if features.vague_words > 3:
        areas.append(PriorityArea(
            area="vocabulary", priority=Priority.MEDIUM, reason="Overuse of vague words"
        ))
    if len(features.repetitive_words) > 2:
        areas.append(PriorityArea(
            area="vocabulary", priority=Priority.MEDIUM, reason="Word repetition"
        ))
    return areas


def _score_priorities(scores: SubScores) -> list[PriorityArea]:
    areas = []
    for criterion, score in scores.items():
        if score < 3:
            areas.append(PriorityArea(
                area=criterion,
                priority=Priority.HIGH,
                reason=f"Low {criterion} score ({score:g}/5)",
            ))
        elif score < 4:
            areas.append(PriorityArea(
                area=criterion,
                priority=Priority.MEDIUM,
                reason=f"Moderate {criterion} score ({score:g}/5)",
            ))
    return areas


def identify_priority_areas(features: FeatureSet, scores: SubScores) -> list[PriorityArea]:
    """Weak areas, most severe first.

    Feature triggers are evaluated before criterion scores; when an area is
    flagged more than once only its first entry is kept, so a feature reason
    wins over a score reason for the same area. The final sort is stable.
    """
    unique = []
    seen = set()
    for candidate in _feature_priorities(features) + _score_priorities(scores):
        if candidate.area not in seen:
            seen.add(candidate.area)
            unique.append(candidate)
    return sorted(unique, key=lambda a: a.priority.weight, reverse=True)


def generate_exercises(priority_areas: list[PriorityArea]) -> dict[str, AreaExercises]:
    """Split each area's exercise list into daily, weekly and monthly work."""
    exercises = {}
    for entry in priority_areas:
        items = list(EXERCISES[entry.area])
        exercises[entry.area] = AreaExercises(
            priority=entry.priority,
            daily=items[:DAILY_SLOTS],
            weekly=items[DAILY_SLOTS:DAILY_SLOTS + WEEKLY_SLOTS],
            monthly=items[DAILY_SLOTS + WEEKLY_SLOTS:],
        )
    return exercises


def recommend_resources(priority_areas: list[PriorityArea]) -> dict[str, list[str]]:
    return {entry.area: list(RESOURCES[entry.area]) for entry in priority_areas}


def create_weekly_plan(
    priority_areas: list[PriorityArea],
    exercises: Mapping[str, Sequence[str]] = EXERCISES,
) -> WeeklyPlan:
    """Assign exercises to weekdays by priority.

    High-priority areas fill Monday, Wednesday and Friday with exercises 0-2;
    medium-priority areas fill Tuesday and Thursday with exercises 0-1. A slot
    whose exercise index is past the end of the area's list stays empty.
    """
    days: dict[str, list[str]] = {day: [] for day in WeeklyPlan.model_fields}
    for entry in priority_areas:
        items = exercises.get(entry.area, ())
        for day, index in CALENDAR_SLOTS.get(entry.priority, ()):
            if index < len(items):
                days[day].append(items[index])
    return WeeklyPlan(**days)


def _level_info(level: ProficiencyLevel) -> LevelInfo:
    return LevelInfo(
        name=level,
        timeline=LEVEL_TIMELINES[level],
        goals=list(LEVEL_GOALS[level]),
    )


def calculate_transition_time(
    current: ProficiencyLevel | str, next_level: ProficiencyLevel | str
) -> int:
    """Months to move between two levels: half the gap in cumulative study time."""
    current_months = LEVEL_MONTHS[ProficiencyLevel.coerce(current)]
    next_months = LEVEL_MONTHS[ProficiencyLevel.coerce(next_level)]
    return int(round_half_up((next_months - current_months) / 2))


def create_timeline(current: ProficiencyLevel, next_level: ProficiencyLevel) -> Timeline:
    return Timeline(
        current_level=_level_info(current),
        next_level=_level_info(next_level),
        transition_time=calculate_transition_time(current, next_level),
    )


def create_milestones(current: ProficiencyLevel, next_level: ProficiencyLevel) -> list[Milestone]:
    """One milestone per level from ``current`` through ``next_level`` inclusive."""
    levels = list(ProficiencyLevel)[current.rank:next_level.rank + 1]
    return [
        Milestone(
            level=level,
            goals=list(LEVEL_GOALS[level]),
            estimated_time=LEVEL_TIMELINES[level],
            checkpoints=list(CHECKPOINTS[level]),
        )
        for level in levels
    ]


def get_target_score(level: ProficiencyLevel | str) -> float:
    return TARGET_SCORES[ProficiencyLevel.coerce(level)]


def calculate_variance(values: list[float]) -> float:
    """Population variance."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def calculate_confidence(scores: SubScores) -> str:
    """How consistent the criterion scores are: high, medium or low."""
    variance = calculate_variance([score for _, score in scores.items()])
    if variance < 0.5:
        return "high"
    if variance < 1.0:
        return "medium"
    return "low"


def estimate_progress(assessment: ToeflScore) -> ProgressEstimate:
    current = assessment.overall_score
    target = get_target_score(assessment.level)
    return ProgressEstimate(
        current_score=current,
        target_score=target,
        progress_percentage=int(round_half_up(current / target * 100)),
        time_to_target=int(round_half_up((target - current) * MONTHS_PER_POINT)),
        confidence=calculate_confidence(assessment.breakdown),
    )


def get_motivation_tips(level: ProficiencyLevel | str) -> list[str]:
    """Encouragement for a level; unknown levels get the Intermediate tips."""
    return list(MOTIVATION_TIPS[ProficiencyLevel.coerce(level)])


class ImprovementPlanner:
    """Maps weaknesses to a prioritised, leveled practice plan."""

    def create_plan(self, features: FeatureSet, assessment: ToeflScore) -> ImprovementPlan:
        """Build a plan toward the level above ``assessment.level``.

        Args:
            features: Lexical features the assessment was scored from.
            assessment: Aggregated proficiency assessment.

        Returns:
            ImprovementPlan for one learner.
        """
        current = ProficiencyLevel.coerce(assessment.level)
        next_level = current.next
        priority_areas = identify_priority_areas(features, assessment.breakdown)

        plan = ImprovementPlan(
            current_level=current,
            next_level=next_level,
            priority_areas=priority_areas,
            exercises=generate_exercises(priority_areas),
            resources=recommend_resources(priority_areas),
            timeline=create_timeline(current, next_level),
            milestones=create_milestones(current, next_level),
            estimated_progress=estimate_progress(assessment),
            weekly_plan=create_weekly_plan(priority_areas),
            motivation_tips=get_motivation_tips(current),
        )

        logger.debug(
            "improvement_plan_created",
            current_level=current.value,
            next_level=next_level.value,
            priority_areas=[a.area for a in priority_areas],
        )
        return plan
