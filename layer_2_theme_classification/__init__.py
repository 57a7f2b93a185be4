"""
Layer 2: Theme Classification (keyword-based, 7 fixed life book chapters)
"""
from .chapter_config import (
    ChapterTag,
    CHAPTER_KEYWORDS,
    SENTIMENT_INDICATORS,
    get_chapter_list,
    get_chapter_title,
    get_chapter_description,
    get_chapter_prompts,
    is_valid_chapter,
    get_default_chapter,
    get_all_keywords,
    get_random_prompt,
    get_starter_prompts,
)
from .classifier import (
    ClassificationResult,
    ThemeClassifier,
    classify,
    sentiment_score,
    extract_tags,
    extract_story_tags,
    aggregate_chapter_counts,
    get_top_chapters_by_count,
)
from .classify_stories import classify_all_stories, group_stories_by_chapter

__all__ = [
    'ChapterTag',
    'CHAPTER_KEYWORDS',
    'SENTIMENT_INDICATORS',
    'get_chapter_list',
    'get_chapter_title',
    'get_chapter_description',
    'get_chapter_prompts',
    'is_valid_chapter',
    'get_default_chapter',
    'get_all_keywords',
    'get_random_prompt',
    'get_starter_prompts',
    'ClassificationResult',
    'ThemeClassifier',
    'classify',
    'sentiment_score',
    'extract_tags',
    'extract_story_tags',
    'aggregate_chapter_counts',
    'get_top_chapters_by_count',
    'classify_all_stories',
    'group_stories_by_chapter',
]
