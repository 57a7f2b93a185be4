"""
Word-boundary keyword matching shared by the classifier and tag extraction

Patterns are compiled per call and only used through findall, so no match
position is carried between scans.
"""
import re
from typing import Iterable


def build_keyword_pattern(keyword: str) -> re.Pattern:
    """
    Build a case-insensitive, word-boundary matcher for a keyword or phrase

    Args:
        keyword: Word or multi-word phrase (matched as a whole unit)

    Returns:
        Compiled pattern
    """
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    """
    Count non-overlapping word-boundary occurrences of a keyword

    Args:
        text: Text to scan
        keyword: Word or phrase to count

    Returns:
        Number of occurrences (0 for empty text or keyword)
    """
    if not text or not keyword:
        return 0
    return len(build_keyword_pattern(keyword).findall(text))


def is_phrase(keyword: str) -> bool:
    return " " in keyword


def keyword_weight(keyword: str) -> int:
    """Phrases count double relative to single words"""
    return 2 if is_phrase(keyword) else 1


def count_indicator_words(text: str, words: Iterable[str]) -> int:
    """
    Total occurrences of every word in a list

    Args:
        text: Text to scan
        words: Indicator words

    Returns:
        Sum of per-word occurrence counts
    """
    return sum(count_occurrences(text, word) for word in words)
