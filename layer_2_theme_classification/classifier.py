"""
Keyword-based story classifier that assigns each story to one of 7 life book chapters
"""
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from layer_2_theme_classification.chapter_config import (
    CHAPTER_KEYWORDS,
    SENTIMENT_INDICATORS,
    NEUTRAL_SENTIMENT,
    ChapterTag,
    get_all_keywords,
    get_default_chapter,
)
from layer_2_theme_classification.keyword_matcher import (
    count_indicator_words,
    count_occurrences,
    keyword_weight,
)
from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)

# Tags kept by classify(); independent of settings.MAX_TAGS used for stored tags
CLASSIFY_MAX_TAGS = 5


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one text

    Results compare by value but are not hashable (scores is a mapping).
    """
    __hash__ = None

    chapter: ChapterTag
    confidence: float
    scores: Mapping[ChapterTag, int] = field(default_factory=lambda: MappingProxyType({}))
    sentiment: str = NEUTRAL_SENTIMENT
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Plain JSON-friendly representation"""
        return {
            "chapter": self.chapter.value,
            "confidence": self.confidence,
            "scores": {chapter.value: score for chapter, score in self.scores.items()},
            "sentiment": self.sentiment,
            "tags": list(self.tags),
        }


class ThemeClassifier:
    """Classify story text into life book chapters using the fixed keyword tables"""

    def __init__(self, max_tags: int = CLASSIFY_MAX_TAGS):
        """
        Initialize classifier

        Args:
            max_tags: Maximum number of discovery-order tags on a result
        """
        self.chapter_keywords = CHAPTER_KEYWORDS
        self.sentiment_indicators = SENTIMENT_INDICATORS
        self.default_chapter = get_default_chapter()
        self.max_tags = max_tags

    def classify(self, text: str) -> ClassificationResult:
        """
        Classify a story into a chapter

        Every keyword of every chapter is counted with word boundaries;
        phrases weigh 2 per occurrence, single words 1. The first chapter to
        reach the highest score wins; a later chapter with an equal score does
        not take over. With no matches at all the default chapter is used.

        Args:
            text: Story text (any string, may be empty)

        Returns:
            ClassificationResult
        """
        normalized = (text or "").lower()

        scores: Dict[ChapterTag, int] = {}
        found_tags: Dict[str, None] = {}

        for chapter, keywords in self.chapter_keywords.items():
            score = 0
            for keyword in keywords:
                matches = count_occurrences(normalized, keyword)
                if matches:
                    score += matches * keyword_weight(keyword)
                    found_tags.setdefault(keyword, None)
            scores[chapter] = score

        best_chapter = self.default_chapter
        max_score = 0
        for chapter, score in scores.items():
            if score > max_score:
                max_score = score
                best_chapter = chapter

        total_score = sum(scores.values())
        confidence = max_score / total_score if total_score > 0 else 0.0

        sentiment = self.detect_sentiment(normalized)
        tags = tuple(list(found_tags)[:self.max_tags])

        logger.debug(
            f"Classified text ({len(normalized)} chars) as {best_chapter.value} "
            f"(confidence {confidence:.2f}, sentiment {sentiment})"
        )

        return ClassificationResult(
            chapter=best_chapter,
            confidence=confidence,
            scores=MappingProxyType(scores),
            sentiment=sentiment,
            tags=tags,
        )

    def detect_sentiment(self, text: str) -> str:
        """
        Coarse sentiment label from the indicator word lists

        Ties resolve in list order (positive, negative, reflective).

        Args:
            text: Text to scan

        Returns:
            positive / negative / reflective, or neutral when nothing matched
        """
        counts = {
            label: count_indicator_words(text or "", words)
            for label, words in self.sentiment_indicators.items()
        }
        max_count = max(counts.values(), default=0)
        if max_count == 0:
            return NEUTRAL_SENTIMENT
        for label, count in counts.items():
            if count == max_count:
                return label
        return NEUTRAL_SENTIMENT

    def sentiment_score(self, text: str) -> float:
        """
        Calculate a sentiment score from -1 (very negative) to 1 (very positive)

        Args:
            text: Text to score

        Returns:
            (positive - negative) / (positive + negative), 0 when neither occurs
        """
        normalized = (text or "").lower()
        positive = count_indicator_words(normalized, self.sentiment_indicators["positive"])
        negative = count_indicator_words(normalized, self.sentiment_indicators["negative"])
        total = positive + negative
        if total == 0:
            return 0.0
        return (positive - negative) / total

    def extract_tags(self, text: str, max_tags: int = CLASSIFY_MAX_TAGS) -> List[str]:
        """
        Extract the most frequent keywords across all chapters

        Args:
            text: Text to scan
            max_tags: Maximum number of tags to return

        Each keyword is counted once, even when several chapters list it
        (e.g. "grandchildren"), so a shared keyword is not ranked on a
        doubled count.

        Returns:
            Keywords sorted by descending occurrence count; equal counts keep
            keyword table order
        """
        if max_tags <= 0:
            return []
        normalized = (text or "").lower()
        tag_counts: Dict[str, int] = {}
        for keyword in get_all_keywords():
            matches = count_occurrences(normalized, keyword)
            if matches:
                tag_counts[keyword] = matches
        ranked = sorted(tag_counts.items(), key=lambda item: item[1], reverse=True)
        return [tag for tag, _ in ranked[:max_tags]]


_default_classifier = ThemeClassifier()


def classify(text: str) -> ClassificationResult:
    """Classify text with the default classifier"""
    return _default_classifier.classify(text)


def sentiment_score(text: str) -> float:
    """Sentiment score in [-1, 1] with the default classifier"""
    return _default_classifier.sentiment_score(text)


def extract_tags(text: str, max_tags: int = CLASSIFY_MAX_TAGS) -> List[str]:
    """
    Frequency-ranked tags with the default classifier

    Args:
        text: Text to scan
        max_tags: Maximum number of tags

    Returns:
        List of at most max_tags keywords
    """
    return _default_classifier.extract_tags(text, max_tags)


def extract_story_tags(text: str) -> List[str]:
    """Tags stored on a story record, capped by settings.MAX_TAGS"""
    return _default_classifier.extract_tags(text, settings.MAX_TAGS)


def aggregate_chapter_counts(results: Iterable) -> Dict[str, int]:
    """
    Aggregate chapter counts from classifications or stories

    Args:
        results: Objects with a chapter attribute (ClassificationResult or Story)

    Returns:
        Dictionary mapping chapter values to counts
    """
    chapter_counts = Counter()
    for result in results:
        chapter = getattr(result, "chapter", None)
        if chapter:
            chapter_counts[str(chapter)] += 1
    return dict(chapter_counts)


def get_top_chapters_by_count(results: Iterable, max_chapters: int = len(ChapterTag)) -> List[Tuple[str, int]]:
    """
    Get top chapters by count, sorted descending

    Args:
        results: Objects with a chapter attribute
        max_chapters: Maximum number of chapters to return

    Returns:
        List of (chapter, count) tuples, sorted by count descending
    """
    chapter_counts = aggregate_chapter_counts(results)
    sorted_chapters = sorted(chapter_counts.items(), key=lambda x: x[1], reverse=True)
    return sorted_chapters[:max_chapters]
