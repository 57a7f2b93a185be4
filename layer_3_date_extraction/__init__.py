"""
Layer 3: Date Extraction & Timeline
- Date/Era Extractor (years, decades, eras, month + year, ages, "N years ago")
- Story Period estimation (single decade or year range)
- Timeline grouping (chronological entries, undated group, decade gaps)
"""
from .date_extractor import (
    ExtractedDate,
    StoryPeriod,
    extract_dates,
    estimate_story_period,
)
from .timeline import Timeline, TimelineEntry, build_timeline

__all__ = [
    'ExtractedDate',
    'StoryPeriod',
    'extract_dates',
    'estimate_story_period',
    'Timeline',
    'TimelineEntry',
    'build_timeline',
]
