"""
Bulk classification of stored stories and the life book (chapter) view
"""
from collections import OrderedDict
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from layer_1_story_import.storage import StoryStorage
from layer_2_theme_classification.chapter_config import ChapterTag, get_chapter_list, is_valid_chapter
from layer_2_theme_classification.classifier import classify, extract_story_tags, sentiment_score
from models.story import Story
from utils.logger import get_logger

logger = get_logger(__name__)


def classify_all_stories(storage: Optional[StoryStorage] = None, force: bool = False) -> List[dict]:
    """
    Classify every stored story and save the results on the records

    Args:
        storage: Story storage (default storage directory if not provided)
        force: If True, reclassify stories that already have a classification

    Returns:
        One summary dict per processed story
    """
    start_time = datetime.now()
    storage = storage or StoryStorage()
    stories = storage.load_all_stories()

    logger.info("=" * 60)
    logger.info(f"Classifying stories: {len(stories)} stored, force={'YES' if force else 'NO'}")
    logger.info("=" * 60)

    results = []
    skipped = 0
    for story in stories:
        if story.is_classified and not force:
            skipped += 1
            continue

        classification = classify(story.content)
        story.chapter = classification.chapter.value
        story.tags = extract_story_tags(story.content)
        story.sentiment_score = sentiment_score(story.content)
        story.sentiment = classification.sentiment
        story.confidence = classification.confidence
        story.updated_at = datetime.now()
        storage.save_story(story)

        results.append({
            "story_id": story.story_id,
            "chapter": story.chapter,
            "confidence": classification.confidence,
            "sentiment": classification.sentiment,
            "tags": list(story.tags),
        })

    elapsed = (datetime.now() - start_time).total_seconds()
    logger.info(f"Classified {len(results)} stories, skipped {skipped} already classified ({elapsed:.2f}s)")
    return results


def group_stories_by_chapter(stories: Iterable[Story]) -> Dict[ChapterTag, List[Story]]:
    """
    Group stories into life book chapters

    Args:
        stories: Stories to group

    Returns:
        Ordered mapping with every chapter present (possibly empty), in chapter order
    """
    groups: Dict[ChapterTag, List[Story]] = OrderedDict((chapter, []) for chapter in get_chapter_list())
    for story in stories:
        if not is_valid_chapter(story.chapter):
            logger.warning(f"Story {story.story_id} has unknown chapter '{story.chapter}', skipping")
            continue
        groups[ChapterTag(story.chapter)].append(story)
    return groups
