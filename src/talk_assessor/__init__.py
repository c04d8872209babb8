"""Spoken English proficiency assessment from transcripts."""

__version__ = "0.1.0"
