"""Assessment score models."""

from pydantic import Field, field_validator

from talk_assessor.models.base import ReportModel, clamp_score
from talk_assessor.models.features import RepetitiveWord, SentenceVariety
from talk_assessor.models.level import ProficiencyLevel

CRITERIA: tuple[str, ...] = ("fluency", "pronunciation", "vocabulary", "grammar", "coherence")


class SubScores(ReportModel):
    """Per-criterion scores on the 1-5 scale. Values are clamped on construction."""

    fluency: float = 3.0
    pronunciation: float = 3.0
    vocabulary: float = 3.0
    grammar: float = 3.0
    coherence: float = 3.0

    @field_validator(*CRITERIA, mode="after")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_score(value)

    def items(self) -> list[tuple[str, float]]:
        """(criterion, score) pairs in fixed criterion order."""
        return [(name, getattr(self, name)) for name in CRITERIA]


class ToeflEquivalent(ReportModel):
    """TOEFL iBT speaking-section equivalent (0-30)."""

    score: int
    level: str


class ToeflScore(ReportModel):
    """Aggregated proficiency assessment."""

    overall_score: float
    level: ProficiencyLevel
    breakdown: SubScores
    detailed_feedback: dict[str, str]
    toefl_equivalent: ToeflEquivalent


class FillerAnalysis(ReportModel):
    total_fillers: int
    filler_percentage: float
    filler_breakdown: dict[str, int]
    score: int


class DictionAnalysis(ReportModel):
    vocabulary_diversity: float
    vague_words: int
    weak_words: int
    score: int


class StructureAnalysis(ReportModel):
    avg_sentence_length: float
    sentence_variety: SentenceVariety
    score: int


class ClarityAnalysis(ReportModel):
    repetitive_words: list[RepetitiveWord]
    incomplete_thoughts: int
    score: int


class SpeechAnalysis(ReportModel):
    """Lexical speech report with per-dimension 1-5 scores.

    ``duration`` is estimated rather than measured whenever
    ``duration_estimated`` is true; ``duration_source`` names where it came
    from ("hint", "audio", "pcm_assumed" or "estimate").
    """

    words_per_minute: int
    duration: float
    duration_estimated: bool
    duration_source: str
    total_words: int
    filler_analysis: FillerAnalysis
    diction_analysis: DictionAnalysis
    structure_analysis: StructureAnalysis
    clarity_analysis: ClarityAnalysis
    overall_score: float
    recommendations: list[str] = Field(default_factory=list)
