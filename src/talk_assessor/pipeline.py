"""End-to-end assessment pipeline: transcript -> features -> scores -> plan."""

import structlog

from talk_assessor.assessment.metrics import extract_features
from talk_assessor.assessment.scorer import ProficiencyScorer
from talk_assessor.assessment.speech_analyzer import SpeechAnalyzer
from talk_assessor.assessment.speech_rate import (
    AudioDurationSource,
    DurationSource,
    EstimatedDurationSource,
    FixedDurationSource,
    InvalidDurationError,
    estimate_rate,
    is_valid_duration,
)
from talk_assessor.config import Settings
from talk_assessor.models.plan import AssessmentReport
from talk_assessor.planning.planner import ImprovementPlanner

logger = structlog.get_logger()


class AssessmentPipeline:
    """Runs the full assessment for one transcript.

    The pipeline holds no per-request state, so a single instance can serve
    concurrent requests.

    Args:
        estimated_duration_seconds: Duration assumed when none is known.
        audio_sample_rate: Sample rate assumed for headerless PCM16 audio.
        audio_channels: Channel count assumed for headerless PCM16 audio.
    """

    def __init__(
        self,
        estimated_duration_seconds: float = 90.0,
        audio_sample_rate: int = 24000,
        audio_channels: int = 1,
    ):
        self.estimate = EstimatedDurationSource(estimated_duration_seconds)
        self.audio_sample_rate = audio_sample_rate
        self.audio_channels = audio_channels
        self.speech_analyzer = SpeechAnalyzer()
        self.scorer = ProficiencyScorer()
        self.planner = ImprovementPlanner()

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssessmentPipeline":
        return cls(
            estimated_duration_seconds=settings.estimated_duration_seconds,
            audio_sample_rate=settings.audio_sample_rate,
            audio_channels=settings.audio_channels,
        )

    def duration_source(
        self,
        duration_seconds_hint: float | None = None,
        audio: bytes | None = None,
    ) -> DurationSource:
        """Pick a duration source: valid hint, then audio, then the estimate."""
        if is_valid_duration(duration_seconds_hint):
            return FixedDurationSource(duration_seconds_hint)
        if duration_seconds_hint is not None:
            logger.warning("invalid_duration_hint", hint=duration_seconds_hint)
        if audio:
            return AudioDurationSource(
                audio,
                fallback=self.estimate,
                sample_rate=self.audio_sample_rate,
                channels=self.audio_channels,
            )
        return self.estimate

    def run(
        self,
        transcript: str | None,
        duration_seconds_hint: float | None = None,
        audio: bytes | None = None,
        duration_source: DurationSource | None = None,
    ) -> AssessmentReport:
        """Assess a transcript.

        Args:
            transcript: Spoken-language transcript. None or non-string input is
                assessed as an empty transcript.
            duration_seconds_hint: Speaking duration, if the caller knows it.
            audio: Decoded audio artifact used to read a duration.
            duration_source: Explicit source overriding hint and audio.

        Returns:
            AssessmentReport with speech analysis, scores and plan.
        """
        if not isinstance(transcript, str):
            if transcript is not None:
                logger.warning("non_string_transcript", type=type(transcript).__name__)
            transcript = ""

        source = duration_source or self.duration_source(duration_seconds_hint, audio)
        duration = source.duration()

        features = extract_features(transcript)
        try:
            rate = estimate_rate(features.total_words, duration.seconds)
        except InvalidDurationError:
            logger.warning(
                "duration_out_of_range", seconds=duration.seconds, source=duration.source
            )
            duration = self.estimate.duration()
            rate = estimate_rate(features.total_words, duration.seconds)
        features = features.with_speech_rate(rate)

        speech_analysis = self.speech_analyzer.analyze(features, duration)
        toefl_score = self.scorer.assess(features)
        improvement_plan = self.planner.create_plan(features, toefl_score)

        logger.info(
            "assessment_completed",
            total_words=features.total_words,
            words_per_minute=features.words_per_minute,
            duration_source=duration.source,
            overall_score=toefl_score.overall_score,
            level=toefl_score.level.value,
        )

        return AssessmentReport(
            speech_analysis=speech_analysis,
            toefl_score=toefl_score,
            improvement_plan=improvement_plan,
        )
