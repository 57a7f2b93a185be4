"""
Unit tests for Layer 3: Date Extraction & Timeline
Tests pattern families, context excerpts, de-duplication, period estimation and timeline grouping
"""
import sys
import os
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from layer_3_date_extraction.date_extractor import (
    ExtractedDate,
    StoryPeriod,
    deduplicate_dates,
    estimate_story_period,
    extract_dates,
    get_context,
)
from layer_3_date_extraction.timeline import build_timeline
from models.story import Story


def _find(dates, **fields):
    """First extracted date whose attributes match all fields"""
    for date in dates:
        if all(getattr(date, key) == value for key, value in fields.items()):
            return date
    return None


class TestPatternFamilies:
    """Test each date pattern family"""

    def test_bare_year(self):
        """Test four-digit years"""
        dates = extract_dates("We moved in 1952.")
        assert len(dates) == 1
        assert dates[0].year == 1952
        assert dates[0].decade == 1950
        assert dates[0].confidence == "high"
        assert dates[0].raw == "1952"

    def test_year_range_limits(self):
        """Test years outside 1900-2099 are ignored"""
        assert extract_dates("in 1899") == []
        assert extract_dates("in 2031") == []
        assert extract_dates("in 2029")[0].year == 2029

    def test_year_inside_number_ignored(self):
        """Test digits inside a longer number are not a year"""
        assert extract_dates("code 119520") == []

    def test_christmas_example(self):
        """Test a sentence with several date forms"""
        # dedup keys: (1952, 1950, None) for the year, (None, 1950, None) for the decade
        dates = extract_dates("It was Christmas 1952, back in the 1950s")
        assert len(dates) == 2
        decade_only = dates[0]
        assert decade_only.year is None
        assert decade_only.decade == 1950
        assert decade_only.confidence == "medium"
        assert decade_only.era == "1950s"
        year = dates[1]
        assert year.year == 1952
        assert year.decade == 1950
        assert year.confidence == "high"

    def test_decade_shorthand(self):
        """Test decades written as 1960s"""
        dates = extract_dates("The 1920s and the 2000s")
        assert [d.decade for d in dates] == [1920, 2000]
        assert all(d.year is None for d in dates)

    def test_apostrophe_decade_means_1900s(self):
        """Test decades written as '50s"""
        dates = extract_dates("We danced all through the '50s.")
        assert len(dates) == 1
        assert dates[0].decade == 1950
        assert dates[0].raw == "'50s"
        assert dates[0].confidence == "medium"
        # '20s is read as the 1920s
        assert extract_dates("back in the '20s")[0].decade == 1920

    def test_era_modifiers(self):
        """Test early, mid and late decade eras"""
        early = _find(extract_dates("in the early 1960s"), year=1962)
        assert early is not None
        assert early.decade == 1960
        assert early.era == "early 1960s"
        assert early.confidence == "medium"
        assert _find(extract_dates("mid 1970s"), year=1975) is not None
        assert _find(extract_dates("Late 1980s"), year=1988) is not None

    def test_era_also_yields_decade_entry(self):
        """Test an era also produces its decade"""
        dates = extract_dates("the early 1960s")
        assert [(d.year, d.decade) for d in dates] == [(None, 1960), (1962, 1960)]

    def test_month_year(self):
        """Test month and year pairs"""
        dates = extract_dates("In June 1944 we moved")
        month = _find(dates, month=6)
        assert month is not None
        assert month.year == 1944
        assert month.decade == 1940
        assert month.confidence == "high"
        assert month.raw == "June 1944"
        assert len(dates) == 2

    def test_age_relative_requires_birth_year(self):
        """Test age references need a birth year"""
        assert extract_dates("when I was 10 we moved") == []
        dates = extract_dates("when I was 10 we moved", birth_year=1940, current_year=2024)
        assert len(dates) == 1
        assert dates[0].year == 1950
        assert dates[0].decade == 1950
        assert dates[0].confidence == "medium"

    def test_age_relative_future_discarded(self):
        """Test ages in the future are dropped"""
        assert extract_dates("When I was 12", birth_year=2020, current_year=2025) == []
        assert extract_dates("When I was 5", birth_year=2020, current_year=2025)[0].year == 2025

    def test_relative_to_now(self):
        """Test years ago references"""
        dates = extract_dates("20 years ago we bought a house", current_year=2024)
        assert len(dates) == 1
        assert dates[0].year == 2004
        assert dates[0].decade == 2000
        assert dates[0].confidence == "low"
        assert extract_dates("1 year ago", current_year=2024)[0].year == 2023

    def test_relative_defaults_to_this_year(self):
        """Test years ago defaults to the current year"""
        dates = extract_dates("10 years ago")
        assert dates[0].year == datetime.now().year - 10


class TestContextAndDedup:
    """Test context excerpts, de-duplication and ordering"""

    def test_short_text_context(self):
        """Test context of a short text"""
        dates = extract_dates("In 1952.")
        assert dates[0].context == "In 1952."

    def test_clipped_context(self):
        """Test context is clipped with ellipses"""
        text = "x" * 100 + " 1952 " + "y" * 100
        context = extract_dates(text)[0].context
        assert context.startswith("...")
        assert context.endswith("...")
        assert "1952" in context
        assert len(context) <= 106

    def test_get_context_window(self):
        """Test context window around a position"""
        text = "abcdefghij"
        assert get_context(text, 5, context_length=2) == "...defg..."
        assert get_context(text, 0, context_length=20) == "abcdefghij"

    def test_duplicate_years_removed(self):
        """Test the same year is reported once"""
        dates = extract_dates("1952 and again 1952")
        assert len(dates) == 1

    def test_first_occurrence_kept(self):
        """Test the first occurrence of a year wins"""
        first = ExtractedDate(raw="a", confidence="high", context="", year=1950, decade=1950)
        second = ExtractedDate(raw="b", confidence="low", context="", year=1950, decade=1950)
        assert deduplicate_dates([first, second]) == [first]

    def test_sorted_ascending(self):
        """Test dates are sorted by year"""
        dates = extract_dates("In 1975, then 1948, and the 1960s")
        assert [d.year or d.decade for d in dates] == [1948, 1960, 1975]

    def test_empty_and_plain_text(self):
        """Test text without dates"""
        assert extract_dates("") == []
        assert extract_dates("No dates in this story at all.") == []

    def test_deterministic(self):
        """Test same text gives the same dates"""
        text = "In June 1944, in the early 1960s, 30 years ago"
        assert extract_dates(text, current_year=2024) == extract_dates(text, current_year=2024)

    def test_to_dict_omits_absent_fields(self):
        """Test dictionary form skips empty fields"""
        data = extract_dates("the 1950s")[0].to_dict()
        assert data == {"decade": 1950, "era": "1950s", "raw": "1950s", "confidence": "medium", "context": "the 1950s"}


class TestStoryPeriod:
    """Test story period estimation"""

    def test_short_span_decade_label(self):
        """Test era label for a short span"""
        period = estimate_story_period("Born in 1948, and by 1952 we had moved")
        assert period == StoryPeriod(start=1948, end=1952, era="1950s")

    def test_wide_span_range_label(self):
        """Test range label for a wide span"""
        period = estimate_story_period("From 1940 until 1975")
        assert period.start == 1940
        assert period.end == 1975
        assert period.era == "1940 - 1975"

    def test_exactly_ten_years(self):
        """Test a span of exactly ten years"""
        assert estimate_story_period("1940 to 1950").era == "1940s"

    def test_decade_only(self):
        """Test period from a decade mention"""
        period = estimate_story_period("back in the 1960s")
        assert period == StoryPeriod(start=1960, end=1960, era="1960s")

    def test_no_dates(self):
        """Test period of text without dates"""
        period = estimate_story_period("A story with no dates")
        assert period.is_empty
        assert period.to_dict() == {}
        assert period.decade is None

    def test_relative_uses_current_year(self):
        """Test period from years ago references"""
        period = estimate_story_period("5 years ago", current_year=2024)
        assert period == StoryPeriod(start=2019, end=2019, era="2010s")

    def test_period_decade(self):
        """Test decade of a period"""
        assert StoryPeriod(start=1948, end=1952, era="1950s").decade == 1940


class TestTimeline:
    """Test timeline grouping"""

    @pytest.fixture
    def stories(self):
        """Stories with and without dates"""
        return [
            Story(story_id="s1", title="Moving Day", content="We moved in 1975.", chapter="where-i-come-from"),
            Story(story_id="s2", title="Wartime", content="In June 1944 my father left.", chapter="whats-been-hard"),
            Story(story_id="s3", title="Advice", content="Always be kind.", chapter="what-ive-learned"),
            Story(story_id="s4", title="Dance Hall", content="We danced all through the '40s.", chapter="what-ive-loved"),
        ]

    def test_dated_entries_sorted(self, stories):
        """Test dated entries are in year order"""
        timeline = build_timeline(stories)
        assert [entry.story.story_id for entry in timeline.entries] == ["s4", "s2", "s1"]

    def test_undated_group(self, stories):
        """Test stories without dates are grouped separately"""
        timeline = build_timeline(stories)
        assert [entry.story.story_id for entry in timeline.undated] == ["s3"]
        assert timeline.undated[0].label == "Unknown date"

    def test_decades_and_gaps(self, stories):
        """Test decades covered and gaps between them"""
        timeline = build_timeline(stories)
        assert timeline.decades == [1940, 1970]
        assert timeline.gaps == [1950, 1960]

    def test_group_by_decade(self, stories):
        """Test entries grouped by decade"""
        groups = build_timeline(stories).group_by_decade()
        assert list(groups.keys()) == [1940, 1970]
        assert [entry.story.story_id for entry in groups[1940]] == ["s4", "s2"]

    def test_entry_fields(self, stories):
        """Test timeline entry fields"""
        entry = build_timeline(stories).entries_for_decade(1970)[0]
        assert entry.year == 1975
        assert entry.decade == 1970
        assert entry.label == "1970s"

    def test_empty(self):
        """Test timeline of no stories"""
        timeline = build_timeline([])
        assert timeline.entries == []
        assert timeline.undated == []
        assert timeline.gaps == []
