"""Improvement plan models."""

from enum import StrEnum

from pydantic import Field

from talk_assessor.models.assessment import SpeechAnalysis, ToeflScore
from talk_assessor.models.base import ReportModel
from talk_assessor.models.level import ProficiencyLevel


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return {"high": 3, "medium": 2, "low": 1}[self.value]


class PriorityArea(ReportModel):
    area: str
    priority: Priority
    reason: str


class AreaExercises(ReportModel):
    priority: Priority
    daily: list[str]
    weekly: list[str]
    monthly: list[str]


class LevelInfo(ReportModel):
    name: ProficiencyLevel
    timeline: str
    goals: list[str]


class Timeline(ReportModel):
    current_level: LevelInfo
    next_level: LevelInfo
    transition_time: int  # months


class Milestone(ReportModel):
    level: ProficiencyLevel
    goals: list[str]
    estimated_time: str
    checkpoints: list[str]


class ProgressEstimate(ReportModel):
    current_score: float
    target_score: float
    progress_percentage: int
    time_to_target: int  # months
    confidence: str


class WeeklyPlan(ReportModel):
    monday: list[str] = Field(default_factory=list)
    tuesday: list[str] = Field(default_factory=list)
    wednesday: list[str] = Field(default_factory=list)
    thursday: list[str] = Field(default_factory=list)
    friday: list[str] = Field(default_factory=list)
    saturday: list[str] = Field(default_factory=list)
    sunday: list[str] = Field(default_factory=list)


class ImprovementPlan(ReportModel):
    """Personalised plan from the current level to the next one."""

    current_level: ProficiencyLevel
    next_level: ProficiencyLevel
    priority_areas: list[PriorityArea]
    exercises: dict[str, AreaExercises]
    resources: dict[str, list[str]]
    timeline: Timeline
    milestones: list[Milestone]
    estimated_progress: ProgressEstimate
    weekly_plan: WeeklyPlan
    motivation_tips: list[str]


class AssessmentReport(ReportModel):
    """Complete pipeline output for one transcript."""

    speech_analysis: SpeechAnalysis
    toefl_score: ToeflScore
    improvement_plan: ImprovementPlan
