"""
Timeline grouping: places stories chronologically by their estimated period
"""
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from layer_3_date_extraction.date_extractor import StoryPeriod, estimate_story_period
from models.story import Story
from utils.logger import get_logger

logger = get_logger(__name__)

# Undated entries sort after every dated one
UNDATED_SORT_VALUE = 9999


@dataclass(frozen=True)
class TimelineEntry:
    """A story placed on the timeline"""
    story: Story
    period: StoryPeriod

    @property
    def year(self) -> Optional[int]:
        return self.period.start

    @property
    def decade(self) -> Optional[int]:
        return self.period.decade

    @property
    def is_dated(self) -> bool:
        return not self.period.is_empty

    @property
    def label(self) -> str:
        """Era label for display"""
        if self.period.era:
            return self.period.era
        if self.decade is not None:
            return f"{self.decade}s"
        return "Unknown date"


@dataclass
class Timeline:
    """Stories split into dated (chronological) and undated groups"""
    entries: List[TimelineEntry] = field(default_factory=list)
    undated: List[TimelineEntry] = field(default_factory=list)

    @property
    def decades(self) -> List[int]:
        """Sorted unique decades that have at least one story"""
        return sorted({entry.decade for entry in self.entries if entry.decade is not None})

    @property
    def gaps(self) -> List[int]:
        """Decades missing between represented decades"""
        decades = self.decades
        missing = []
        for current, following in zip(decades, decades[1:]):
            missing.extend(range(current + 10, following, 10))
        return missing

    def entries_for_decade(self, decade: int) -> List[TimelineEntry]:
        return [entry for entry in self.entries if entry.decade == decade]

    def group_by_decade(self) -> Dict[int, List[TimelineEntry]]:
        """
        Group dated entries by decade

        Returns:
            Ordered mapping decade -> entries, decades ascending
        """
        groups: Dict[int, List[TimelineEntry]] = OrderedDict()
        for decade in self.decades:
            groups[decade] = self.entries_for_decade(decade)
        return groups


def build_timeline(stories: Iterable[Story], current_year: Optional[int] = None) -> Timeline:
    """
    Estimate each story's period and arrange the stories chronologically

    Args:
        stories: Stories to place
        current_year: Year treated as now, for "N years ago" references

    Returns:
        Timeline with dated entries sorted ascending and an undated group
    """
    dated = []
    undated = []
    for story in stories:
        entry = TimelineEntry(story=story, period=estimate_story_period(story.content, current_year=current_year))
        if entry.is_dated:
            dated.append(entry)
        else:
            undated.append(entry)

    dated.sort(key=lambda entry: entry.year or entry.decade or UNDATED_SORT_VALUE)
    logger.info(f"Timeline built: {len(dated)} dated stories, {len(undated)} undated")
    return Timeline(entries=dated, undated=undated)
