"""Duration lookup for uploaded audio artifacts.

Only container metadata and sample counts are read; no signal analysis.
"""

import base64
import binascii
import io
import wave

import numpy as np


class AudioDecodeError(ValueError):
    """Raised when an audio payload is not valid base64."""


def decode_audio_payload(data: str) -> bytes:
    """Decode a base64 audio payload (an optional data-URL prefix is ignored).

    Raises:
        AudioDecodeError: If the payload is not valid base64.
    """
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AudioDecodeError(f"Invalid base64 audio payload: {e}") from e


def wav_duration_seconds(audio: bytes) -> float | None:
    """Duration of a WAV container in seconds, or None if not a readable WAV."""
    try:
        with wave.open(io.BytesIO(audio), "rb") as wav:
            rate = wav.getframerate()
            if rate <= 0:
                return None
            return wav.getnframes() / rate
    except (wave.Error, EOFError):
        return None


# Leading bytes of compressed formats whose length cannot be read from byte count
COMPRESSED_SIGNATURES: tuple[bytes, ...] = (
    b"\x1a\x45\xdf\xa3",  # WebM / Matroska
    b"OggS",
    b"fLaC",
    b"ID3",
    b"\xff\xfb",  # MPEG audio frame
)


def is_compressed_audio(audio: bytes) -> bool:
    """True for WebM, Ogg, FLAC, MP3 or MP4/M4A containers."""
    if audio.startswith(COMPRESSED_SIGNATURES):
        return True
    return audio[4:8] == b"ftyp"


def pcm16_duration_seconds(audio: bytes, sample_rate: int, channels: int = 1) -> float:
    """Duration of headerless 16-bit PCM audio in seconds.

    Args:
        audio: Raw little-endian PCM16 bytes.
        sample_rate: Sample rate in Hz.
        channels: Interleaved channel count.

    Returns:
        Duration in seconds (a trailing odd byte is ignored).
    """
    usable = len(audio) - len(audio) % 2
    samples = np.frombuffer(audio[:usable], dtype=np.int16)
    return samples.size / (sample_rate * channels)
