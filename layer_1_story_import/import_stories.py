"""
Story create/update flow

Creating a story classifies its text and stores the chapter, tags and
sentiment score on the record. Updating only reclassifies when the caller
asks for it and the content actually changed.
"""
import uuid
from datetime import datetime
from typing import Callable, Optional, Tuple

from config.settings import settings
from layer_1_story_import.errors import StoryValidationError
from layer_1_story_import.storage import StoryStorage
from layer_1_story_import.validator import StoryValidator, TextCleaner
from layer_2_theme_classification.chapter_config import ChapterTag
from layer_2_theme_classification.classifier import (
    ClassificationResult,
    classify,
    extract_story_tags,
    sentiment_score,
)
from models.story import Story
from utils.logger import get_logger

logger = get_logger(__name__)

UPDATABLE_FIELDS = ('title', 'content', 'chapter')


def _generate_title(content: str, title_generator: Optional[Callable[[str], str]]) -> str:
    """Ask the title generator for a title, falling back to the default title"""
    if title_generator is None:
        return settings.DEFAULT_STORY_TITLE
    try:
        title = title_generator(content)
    except Exception as e:
        logger.error(f"Error generating title: {e}")
        return settings.DEFAULT_STORY_TITLE
    return (title or "").strip() or settings.DEFAULT_STORY_TITLE


def create_story(
    content: str,
    title: Optional[str] = None,
    chapter: Optional[str] = None,
    title_generator: Optional[Callable[[str], str]] = None,
    storage: Optional[StoryStorage] = None,
) -> Tuple[Story, ClassificationResult]:
    """
    Create, classify and save a new story

    Args:
        content: Story text
        title: Title to use; generated (or defaulted) when missing
        chapter: Chapter chosen by the caller; overrides the classified one
        title_generator: Optional callable producing a title from the text
        storage: Story storage (default storage directory if not provided)

    Returns:
        Tuple of (saved story, classification of its text)

    Raises:
        StoryValidationError: If the input is invalid
    """
    cleaned = TextCleaner.clean(content) if isinstance(content, str) else content
    is_valid, error = StoryValidator.validate({'content': cleaned, 'title': title, 'chapter': chapter})
    if not is_valid:
        raise StoryValidationError(error)

    storage = storage or StoryStorage()

    classification = classify(cleaned)
    chosen_chapter = ChapterTag(chapter) if chapter else classification.chapter

    story = Story(
        story_id=uuid.uuid4().hex,
        title=(title or "").strip() or _generate_title(cleaned, title_generator),
        content=cleaned,
        chapter=chosen_chapter.value,
        tags=extract_story_tags(cleaned),
        sentiment_score=sentiment_score(cleaned),
        sentiment=classification.sentiment,
        confidence=classification.confidence,
    )
    storage.save_story(story)

    logger.info(
        f"Created story {story.story_id} in chapter {story.chapter} "
        f"(classified {classification.chapter.value}, confidence {classification.confidence:.2f})"
    )
    return story, classification


def update_story(
    story_id: str,
    storage: Optional[StoryStorage] = None,
    reclassify: bool = False,
    **fields,
) -> Story:
    """
    Update a stored story

    Args:
        story_id: Story to update
        storage: Story storage (default storage directory if not provided)
        reclassify: Recompute chapter, tags and sentiment when content changes
        **fields: New values for title, content and/or chapter; a value of
            None leaves that field unchanged

    Returns:
        Updated story

    Raises:
        StoryNotFoundError: If the story does not exist
        StoryValidationError: If the new values are invalid
    """
    unknown = set(fields) - set(UPDATABLE_FIELDS)
    if unknown:
        raise StoryValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")
    fields = {name: value for name, value in fields.items() if value is not None}

    storage = storage or StoryStorage()
    story = storage.load_story(story_id)

    new_content = fields.get('content', story.content)
    if isinstance(new_content, str):
        new_content = TextCleaner.clean(new_content)
    candidate = {
        'content': new_content,
        'title': fields.get('title', story.title),
        'chapter': fields.get('chapter', story.chapter),
    }
    is_valid, error = StoryValidator.validate(candidate)
    if not is_valid:
        raise StoryValidationError(error)

    content_changed = False
    if 'content' in fields:
        content_changed = new_content != story.content
        story.content = new_content
    if 'title' in fields:
        story.title = fields['title'].strip() or story.title
    if 'chapter' in fields:
        story.chapter = ChapterTag(fields['chapter']).value

    if content_changed and reclassify:
        classification = classify(story.content)
        story.chapter = classification.chapter.value
        story.tags = extract_story_tags(story.content)
        story.sentiment_score = sentiment_score(story.content)
        story.sentiment = classification.sentiment
        story.confidence = classification.confidence
        logger.info(f"Reclassified story {story_id} as {story.chapter}")

    story.updated_at = datetime.now()
    storage.save_story(story)
    return story
