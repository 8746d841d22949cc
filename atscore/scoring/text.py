from __future__ import annotations

import math
import re

from .patterns import PatternLibrary

_NON_VERB_CHARS = re.compile(r"[^a-z-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def word_count(text: str) -> int:
    """Pieces between whitespace runs; leading or trailing whitespace adds an empty piece."""
    return len(_WHITESPACE_RUN.split(text))


def first_word(text: str) -> str:
    words = text.split()
    if not words:
        return ""
    return _NON_VERB_CHARS.sub("", words[0].lower())


def starts_with_action_verb(text: str, patterns: PatternLibrary) -> bool:
    word = first_word(text)
    return bool(word) and word in patterns.action_verbs


def has_metric(text: str, patterns: PatternLibrary) -> bool:
    """Bullet-level quantified-achievement check (includes bare numbers >= 10)."""
    return bool(
        patterns.metric.search(text)
        or patterns.percentage.search(text)
        or patterns.currency.search(text)
        or patterns.number.search(text)
    )


def has_summary_metric(text: str, patterns: PatternLibrary) -> bool:
    return bool(patterns.metric.search(text) or patterns.percentage.search(text))


def round_half_up(value: float) -> int:
    # Half values round up: 2.5 -> 3, unlike round().
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
