"""Lexical feature set extracted from a transcript."""

from pydantic import Field

from talk_assessor.models.base import ReportModel


class SentenceVariety(ReportModel):
    """Sentence counts per length bucket (<=10, 11-20, >20 words)."""

    short: int = 0
    medium: int = 0
    long: int = 0


class RepetitiveWord(ReportModel):
    word: str
    count: int


class ExactRatios(ReportModel):
    """Unrounded ratios behind the reported filler, diversity and length values."""

    filler_percentage: float = 0.0
    vocabulary_diversity: float = 0.0
    avg_sentence_length: float = 0.0


class FeatureSet(ReportModel):
    """Numeric features of one transcript.

    Counts are never negative. Ratios are rounded the way they are reported
    (filler percentage to 2 places, diversity to 3, sentence length to 1);
    the criterion scorers and recommendations read these. The speech-report
    dimension scores read ``exact_ratios`` instead, so a value just under a
    threshold is not rounded onto it.
    """

    total_words: int = 0
    unique_words: int = 0
    sentence_count: int = 0

    # Fillers
    total_fillers: int = 0
    filler_percentage: float = Field(default=0.0, ge=0.0)
    filler_breakdown: dict[str, int] = Field(default_factory=dict)

    # Diction
    vocabulary_diversity: float = Field(default=0.0, ge=0.0, le=1.0)
    vague_words: int = 0
    weak_words: int = 0

    # Structure
    avg_sentence_length: float = 0.0
    sentence_variety: SentenceVariety = Field(default_factory=SentenceVariety)

    # Clarity
    repetitive_words: tuple[RepetitiveWord, ...] = ()
    incomplete_thoughts: int = 0

    # Grammar heuristics
    subject_verb_errors: int = 0
    article_errors: int = 0
    present_tense_markers: int = 0
    past_tense_markers: int = 0

    # Coherence heuristics
    connector_count: int = 0
    topic_shifts: int = 0
    dangling_connectors: int = 0

    words_per_minute: int = 0

    exact_ratios: ExactRatios | None = Field(default=None, exclude=True)

    def scoring_ratios(self) -> ExactRatios:
        """Unrounded ratios, or the rounded ones when none were recorded."""
        if self.exact_ratios is not None:
            return self.exact_ratios
        return ExactRatios(
            filler_percentage=self.filler_percentage,
            vocabulary_diversity=self.vocabulary_diversity,
            avg_sentence_length=self.avg_sentence_length,
        )

    def with_speech_rate(self, words_per_minute: int) -> "FeatureSet":
        """Copy of this feature set carrying a speech rate."""
        return self.model_copy(update={"words_per_minute": words_per_minute})
