"""
Date extraction for story text

Finds temporal references (years, decades, eras, month + year, ages and
"N years ago") and reduces them to a best-estimate period for the story.
All functions are pure: the compiled patterns below are only used through
finditer, which starts a fresh scan on every call.
"""
import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

YEAR_PATTERN = re.compile(r"\b(19[0-9]{2}|20[0-2][0-9])\b")
# Apostrophe form ('50s) always means the 1900s
DECADE_PATTERN = re.compile(
    r"(?:\b(19[2-9]0s|20[0-2]0s)|(?<!\w)'([2-9]0s))\b",
    re.IGNORECASE,
)
ERA_PATTERN = re.compile(r"\b(early|mid|late)\s+(19[2-9]0s|20[0-2]0s)\b", re.IGNORECASE)
MONTH_YEAR_PATTERN = re.compile(
    r"\b(January|February|March|April|May|June|July|August|September|October|November|December)"
    r"\s+(19[0-9]{2}|20[0-2][0-9])\b",
    re.IGNORECASE,
)
AGE_PATTERN = re.compile(r"\bwhen\s+I\s+was\s+([0-9]{1,2})\b", re.IGNORECASE)
RELATIVE_PATTERN = re.compile(r"\b([0-9]+)\s+years?\s+ago\b", re.IGNORECASE)

MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}

# Years added to the decade for early / mid / late
ERA_OFFSETS = {"early": 2, "mid": 5, "late": 8}


@dataclass(frozen=True)
class ExtractedDate:
    """A single temporal reference found in text"""
    raw: str
    confidence: str
    context: str
    year: Optional[int] = None
    month: Optional[int] = None
    decade: Optional[int] = None
    era: Optional[str] = None

    @property
    def dedup_key(self) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        return (self.year, self.decade, self.month)

    @property
    def sort_value(self) -> int:
        return self.year or self.decade or 0

    def to_dict(self) -> dict:
        """Plain dictionary; absent optional fields are left out"""
        data = {
            "year": self.year,
            "month": self.month,
            "decade": self.decade,
            "era": self.era,
            "raw": self.raw,
            "confidence": self.confidence,
            "context": self.context,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class StoryPeriod:
    """Representative time span of a story; all fields None when undated"""
    start: Optional[int] = None
    end: Optional[int] = None
    era: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @property
    def decade(self) -> Optional[int]:
        """Decade of the period start"""
        return decade_of(self.start) if self.start is not None else None

    def to_dict(self) -> dict:
        data = {"start": self.start, "end": self.end, "era": self.era}
        return {key: value for key, value in data.items() if value is not None}


def decade_of(year: int) -> int:
    return year // 10 * 10


def get_context(text: str, match_index: int, context_length: Optional[int] = None) -> str:
    """
    Excerpt of text around a match offset

    Args:
        text: Full text
        match_index: Start offset of the match
        context_length: Characters kept on each side of the offset

    Returns:
        Excerpt, with "..." marking a side clipped by the window
    """
    if context_length is None:
        context_length = settings.DATE_CONTEXT_CHARS
    start = max(0, match_index - context_length)
    end = min(len(text), match_index + context_length)
    context = text[start:end]
    if start > 0:
        context = "..." + context
    if end < len(text):
        context = context + "..."
    return context.strip()


def deduplicate_dates(dates: List[ExtractedDate]) -> List[ExtractedDate]:
    """
    Drop dates whose (year, decade, month) key was already seen

    Args:
        dates: Dates in discovery order

    Returns:
        First occurrence of each key, order preserved
    """
    seen = set()
    unique = []
    for date in dates:
        if date.dedup_key in seen:
            continue
        seen.add(date.dedup_key)
        unique.append(date)
    return unique


def _parse_decade(decade_text: str) -> int:
    """'1950s' -> 1950"""
    return int(decade_text[:-1])


def extract_dates(text: str, birth_year: Optional[int] = None, current_year: Optional[int] = None) -> List[ExtractedDate]:
    """
    Extract dates and time periods from story text

    Args:
        text: Story text
        birth_year: Storyteller's birth year; enables "when I was N"
        current_year: Year treated as now (defaults to today's year)

    Returns:
        De-duplicated dates sorted ascending by year, else decade
    """
    if not text:
        return []
    if current_year is None:
        current_year = datetime.now().year

    dates: List[ExtractedDate] = []

    for match in YEAR_PATTERN.finditer(text):
        year = int(match.group(1))
        dates.append(ExtractedDate(
            year=year,
            decade=decade_of(year),
            raw=match.group(0),
            confidence=HIGH,
            context=get_context(text, match.start()),
        ))

    for match in DECADE_PATTERN.finditer(text):
        if match.group(1):
            decade = _parse_decade(match.group(1))
        else:
            decade = 1900 + _parse_decade(match.group(2))
        dates.append(ExtractedDate(
            decade=decade,
            era=match.group(0),
            raw=match.group(0),
            confidence=MEDIUM,
            context=get_context(text, match.start()),
        ))

    for match in ERA_PATTERN.finditer(text):
        decade = _parse_decade(match.group(2))
        dates.append(ExtractedDate(
            year=decade + ERA_OFFSETS[match.group(1).lower()],
            decade=decade,
            era=match.group(0),
            raw=match.group(0),
            confidence=MEDIUM,
            context=get_context(text, match.start()),
        ))

    for match in MONTH_YEAR_PATTERN.finditer(text):
        year = int(match.group(2))
        dates.append(ExtractedDate(
            year=year,
            month=MONTHS[match.group(1).lower()],
            decade=decade_of(year),
            raw=match.group(0),
            confidence=HIGH,
            context=get_context(text, match.start()),
        ))

    if birth_year:
        for match in AGE_PATTERN.finditer(text):
            year = birth_year + int(match.group(1))
            if year > current_year:
                logger.debug(f"Skipping '{match.group(0)}': {year} is in the future")
                continue
            dates.append(ExtractedDate(
                year=year,
                decade=decade_of(year),
                raw=match.group(0),
                confidence=MEDIUM,
                context=get_context(text, match.start()),
            ))

    for match in RELATIVE_PATTERN.finditer(text):
        year = current_year - int(match.group(1))
        dates.append(ExtractedDate(
            year=year,
            decade=decade_of(year),
            raw=match.group(0),
            confidence=LOW,
            context=get_context(text, match.start()),
        ))

    unique = deduplicate_dates(dates)
    logger.debug(f"Extracted {len(dates)} date references ({len(unique)} unique)")
    return sorted(unique, key=lambda date: date.sort_value)


def estimate_story_period(text: str, current_year: Optional[int] = None) -> StoryPeriod:
    """
    Reduce a story's dates to a single time period

    A span of ten years or less is labelled with the decade of its midpoint
    ("1950s"); anything wider is labelled as a range ("1948 - 1975").

    Args:
        text: Story text
        current_year: Year treated as now, for "N years ago"

    Returns:
        StoryPeriod (empty when the text has no dates)
    """
    years = sorted(
        date.year if date.year is not None else date.decade
        for date in extract_dates(text, current_year=current_year)
        if date.year is not None or date.decade is not None
    )
    if not years:
        return StoryPeriod()

    start = years[0]
    end = years[-1]
    if end - start <= 10:
        era = f"{(start + end) // 20 * 10}s"
    else:
        era = f"{start} - {end}"
    return StoryPeriod(start=start, end=end, era=era)
