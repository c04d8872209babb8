"""Lexical feature extraction for heuristic scoring.

Every matcher works on normalised tokens: the transcript is split on
whitespace, lower-cased and stripped of surrounding punctuation. Word lists
may hold multi-word phrases ("you know"), which match runs of consecutive
tokens. Nothing here is a linguistic parse; the counts are cheap proxies.
"""

import re
import string
from collections import Counter

from talk_assessor.models.base import round_half_up
from talk_assessor.models.features import ExactRatios, FeatureSet, RepetitiveWord, SentenceVariety

_STRIP_CHARS = string.punctuation + "“”‘’…–—"
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_FOLLOWED_BY_SPACE = re.compile(r"\S+(?=\s)")

FILLER_WORDS: tuple[str, ...] = (
    "um", "uh", "er", "ah", "like", "you know", "i mean", "basically",
    "actually", "literally", "sort of", "kind of", "right", "okay",
    "well", "so", "then", "now", "just", "really", "very", "quite",
)

VAGUE_WORDS: tuple[str, ...] = (
    "thing", "stuff", "something", "anything", "everything", "nothing",
    "somewhere", "anywhere", "everywhere", "nowhere", "somehow", "anyhow",
    "whatever", "whenever", "wherever", "whoever", "whichever",
)

WEAK_WORDS: tuple[str, ...] = (
    "maybe", "perhaps", "possibly", "probably", "might", "could", "would",
    "should", "seems", "appears", "looks like", "sort of", "kind of",
)

INCOMPLETE_MARKERS = frozenset({"but", "however", "although", "though"})

SINGULAR_SUBJECTS = frozenset({"he", "she", "it"})
PLURAL_VERBS = frozenset({"are", "were", "have"})
PRESENT_MARKERS = frozenset({"am", "is", "are", "do", "does"})
PAST_MARKERS = frozenset({"was", "were", "did", "had"})
VOWELS = frozenset("aeiou")

CONNECTORS = frozenset({
    "and", "but", "or", "however", "therefore", "because",
    "although", "while", "since", "as",
})
TOPIC_SHIFTERS: tuple[str, ...] = ("anyway", "by the way", "speaking of", "on another note")
DANGLING_CONNECTORS = frozenset({"but", "however", "although"})

# Sentence length buckets
SHORT_SENTENCE_MAX = 10
MEDIUM_SENTENCE_MAX = 20

# Repetition: words longer than this, seen more than this many times
REPETITION_MIN_LENGTH = 3
REPETITION_MIN_COUNT = 3


def normalize_word(raw: str) -> str:
    return raw.lower().strip(_STRIP_CHARS)


def tokenize(text: str) -> list[str]:
    """Split on whitespace into lower-cased, punctuation-stripped words.

    Tokens made only of punctuation (a lone "-") are dropped.
    """
    words = (normalize_word(raw) for raw in text.split())
    return [w for w in words if w]


def split_sentences(text: str) -> list[list[str]]:
    """Tokenised sentences, split on runs of '.', '!' and '?'.

    Segments holding no words are discarded.
    """
    sentences = (tokenize(segment) for segment in _SENTENCE_SPLIT.split(text))
    return [s for s in sentences if s]


def count_phrase(words: list[str], phrase: str) -> int:
    """Count whole-word occurrences of a (possibly multi-word) phrase."""
    parts = phrase.split()
    n = len(parts)
    return sum(1 for i in range(len(words) - n + 1) if words[i:i + n] == parts)


def count_word_list(words: list[str], entries: tuple[str, ...]) -> dict[str, int]:
    """Occurrences of each list entry that appears at least once, in list order."""
    counts = {}
    for entry in entries:
        found = count_phrase(words, entry)
        if found:
            counts[entry] = found
    return counts


def _count_pairs(words: list[str], first: frozenset[str], second: frozenset[str]) -> int:
    return sum(1 for a, b in zip(words, words[1:]) if a in first and b in second)


def compute_filler_metrics(words: list[str]) -> dict:
    """Filler totals, percentage of all words (2 dp) and per-filler breakdown."""
    breakdown = count_word_list(words, FILLER_WORDS)
    total = sum(breakdown.values())
    percentage = total / len(words) * 100 if words else 0.0
    return {
        "total_fillers": total,
        "filler_percentage": round_half_up(percentage, 2),
        "exact_filler_percentage": percentage,
        "filler_breakdown": breakdown,
    }


def compute_diction_metrics(words: list[str]) -> dict:
    """Vocabulary diversity (distinct / total, 3 dp) and vague/weak word counts."""
    unique = set(words)
    diversity = len(unique) / len(words) if words else 0.0
    return {
        "unique_words": len(unique),
        "vocabulary_diversity": round_half_up(diversity, 3),
        "exact_vocabulary_diversity": diversity,
        "vague_words": sum(count_word_list(words, VAGUE_WORDS).values()),
        "weak_words": sum(count_word_list(words, WEAK_WORDS).values()),
    }


def compute_structure_metrics(sentences: list[list[str]]) -> dict:
    """Average sentence length (1 dp) and length-bucket counts."""
    lengths = [len(s) for s in sentences]
    average = sum(lengths) / len(lengths) if lengths else 0.0
    return {
        "sentence_count": len(lengths),
        "avg_sentence_length": round_half_up(average, 1),
        "exact_avg_sentence_length": average,
        "sentence_variety": SentenceVariety(
            short=sum(1 for n in lengths if n <= SHORT_SENTENCE_MAX),
            medium=sum(1 for n in lengths if SHORT_SENTENCE_MAX < n <= MEDIUM_SENTENCE_MAX),
            long=sum(1 for n in lengths if n > MEDIUM_SENTENCE_MAX),
        ),
    }


def count_incomplete_thoughts(text: str) -> int:
    """Count 'but', 'however', 'although' and 'though' directly followed by whitespace.

    A connector with trailing punctuation ("but,") or at the very end of the
    text does not count.
    """
    return sum(
        1
        for raw in _FOLLOWED_BY_SPACE.findall(text.lower())
        if raw.lstrip(_STRIP_CHARS) in INCOMPLETE_MARKERS
    )


def compute_clarity_metrics(text: str, words: list[str]) -> dict:
    """Repeated long words and incomplete-thought markers."""
    frequency = Counter(words)
    repetitive = tuple(
        RepetitiveWord(word=word, count=count)
        for word, count in frequency.items()
        if count > REPETITION_MIN_COUNT and len(word) > REPETITION_MIN_LENGTH
    )
    return {
        "repetitive_words": repetitive,
        "incomplete_thoughts": count_incomplete_thoughts(text),
    }


def count_article_errors(words: list[str]) -> int:
    """'a' before a vowel-initial word plus 'an' before a consonant-initial word."""
    errors = 0
    for article, following in zip(words, words[1:]):
        initial = following[0]
        if article == "a" and initial in VOWELS:
            errors += 1
        elif article == "an" and initial.isalpha() and initial not in VOWELS:
            errors += 1
    return errors


def compute_grammar_metrics(words: list[str]) -> dict:
    """Heuristic grammar signals: agreement, article and tense-mixing counts."""
    return {
        "subject_verb_errors": _count_pairs(words, SINGULAR_SUBJECTS, PLURAL_VERBS),
        "article_errors": count_article_errors(words),
        "present_tense_markers": sum(1 for w in words if w in PRESENT_MARKERS),
        "past_tense_markers": sum(1 for w in words if w in PAST_MARKERS),
    }


def compute_coherence_metrics(words: list[str], sentences: list[list[str]]) -> dict:
    """Connector density, topic-shift phrases and sentences ending on a connector."""
    return {
        "connector_count": sum(1 for w in words if w in CONNECTORS),
        "topic_shifts": sum(count_word_list(words, TOPIC_SHIFTERS).values()),
        "dangling_connectors": sum(1 for s in sentences if s[-1] in DANGLING_CONNECTORS),
    }


def extract_features(transcript: str) -> FeatureSet:
    """Extract the full lexical feature set of a transcript.

    An empty transcript yields an all-zero feature set. Speech rate is left
    at 0; attach it with ``FeatureSet.with_speech_rate``.
    """
    words = tokenize(transcript)
    sentences = split_sentences(transcript)
    filler = compute_filler_metrics(words)
    diction = compute_diction_metrics(words)
    structure = compute_structure_metrics(sentences)
    exact = ExactRatios(
        filler_percentage=filler.pop("exact_filler_percentage"),
        vocabulary_diversity=diction.pop("exact_vocabulary_diversity"),
        avg_sentence_length=structure.pop("exact_avg_sentence_length"),
    )
    return FeatureSet(
        total_words=len(words),
        exact_ratios=exact,
        **filler,
        **diction,
        **structure,
        **compute_clarity_metrics(transcript, words),
        **compute_grammar_metrics(words),
        **compute_coherence_metrics(words, sentences),
    )
