"""Speech-rate estimation and duration sources.

Transcripts usually arrive without a trustworthy duration. A duration source
supplies one: a caller-provided value, the length of the uploaded audio, or a
fixed policy estimate. Rates derived from an estimate are approximations and
are reported as such (see ``Duration.estimated``).
"""

import math
from dataclasses import dataclass
from typing import Protocol

import structlog

from talk_assessor.audio.duration import (
    is_compressed_audio,
    pcm16_duration_seconds,
    wav_duration_seconds,
)
from talk_assessor.models.base import round_half_up

logger = structlog.get_logger()

# Sources whose seconds are assumed rather than read from a header or caller
ESTIMATED_SOURCES = frozenset({"estimate", "pcm_assumed"})


class InvalidDurationError(ValueError):
    """Raised when a duration is not a positive finite number of seconds."""


@dataclass(frozen=True)
class Duration:
    """A speaking duration and where it came from."""

    seconds: float
    source: str  # "hint", "audio", "pcm_assumed" or "estimate"

    @property
    def estimated(self) -> bool:
        return self.source in ESTIMATED_SOURCES


class DurationSource(Protocol):
    def duration(self) -> Duration: ...


def is_valid_duration(seconds: float | None) -> bool:
    return seconds is not None and math.isfinite(seconds) and seconds > 0


def estimate_rate(word_count: int, duration_seconds: float) -> int:
    """Words per minute, rounded to the nearest integer.

    Raises:
        InvalidDurationError: If duration_seconds is not positive and finite,
            or so small that the rate overflows.
    """
    if not is_valid_duration(duration_seconds):
        raise InvalidDurationError(f"Duration must be positive, got {duration_seconds!r}")
    rate = word_count / duration_seconds * 60
    if not math.isfinite(rate):
        raise InvalidDurationError(f"Duration too small for a speech rate: {duration_seconds!r}")
    return int(round_half_up(rate))


class FixedDurationSource:
    """Duration supplied explicitly by the caller."""

    def __init__(self, seconds: float):
        if not is_valid_duration(seconds):
            raise InvalidDurationError(f"Duration must be positive, got {seconds!r}")
        self.seconds = seconds

    def duration(self) -> Duration:
        return Duration(self.seconds, "hint")


class EstimatedDurationSource:
    """Policy estimate used when no real duration is known.

    Args:
        seconds: Nominal recording length to assume.
    """

    def __init__(self, seconds: float = 90.0):
        if not is_valid_duration(seconds):
            raise InvalidDurationError(f"Estimated duration must be positive, got {seconds!r}")
        self.seconds = seconds

    def duration(self) -> Duration:
        return Duration(self.seconds, "estimate")


class AudioDurationSource:
    """Duration read from an uploaded audio artifact.

    WAV containers are read from their header and count as measured.
    Compressed formats (WebM, Ogg, MP3 and so on) carry no length this source
    can read, so they use ``fallback``. Anything else is assumed to be
    headerless PCM16 at the configured rate; that length is reported as
    estimated under the source name "pcm_assumed". Empty or zero-length audio
    also falls back to ``fallback``.

    Args:
        audio: Decoded audio bytes.
        fallback: Source used when the audio yields no usable duration.
        sample_rate: Sample rate assumed for headerless PCM16.
        channels: Channel count assumed for headerless PCM16.
    """

    def __init__(
        self,
        audio: bytes,
        fallback: DurationSource,
        sample_rate: int = 24000,
        channels: int = 1,
    ):
        self.audio = audio
        self.fallback = fallback
        self.sample_rate = sample_rate
        self.channels = channels

    def duration(self) -> Duration:
        seconds = wav_duration_seconds(self.audio)
        if seconds is not None:
            if is_valid_duration(seconds):
                return Duration(seconds, "audio")
        elif is_compressed_audio(self.audio):
            logger.warning("compressed_audio_duration_unreadable", audio_bytes=len(self.audio))
            return self.fallback.duration()
        else:
            seconds = pcm16_duration_seconds(self.audio, self.sample_rate, self.channels)
            if is_valid_duration(seconds):
                return Duration(seconds, "pcm_assumed")
        logger.warning("audio_duration_unavailable", audio_bytes=len(self.audio))
        return self.fallback.duration()
