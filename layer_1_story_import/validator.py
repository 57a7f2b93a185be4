"""
Schema validator and text cleaner for story input
"""
import re
from typing import Dict, Optional

from layer_2_theme_classification.chapter_config import is_valid_chapter
from utils.logger import get_logger

logger = get_logger(__name__)


class TextCleaner:
    """Clean story text before classification and storage"""

    HTML_TAG_PATTERN = re.compile(r'<[^>]+>')
    INLINE_WHITESPACE_PATTERN = re.compile(r'[ \t\f\v]+')
    BLANK_LINES_PATTERN = re.compile(r'\n\s*\n\s*(?:\n\s*)*')

    @classmethod
    def clean(cls, text: str) -> str:
        """
        Clean story text:
        - Remove HTML tags
        - Normalize line endings and inline whitespace
        - Collapse runs of blank lines to a single paragraph break
        """
        if not text:
            return ""

        cleaned = cls.HTML_TAG_PATTERN.sub('', text)
        cleaned = cleaned.replace('\r\n', '\n').replace('\r', '\n')
        cleaned = cls.INLINE_WHITESPACE_PATTERN.sub(' ', cleaned)
        cleaned = cls.BLANK_LINES_PATTERN.sub('\n\n', cleaned)
        cleaned = '\n'.join(line.strip() for line in cleaned.split('\n'))

        return cleaned.strip()


class StoryValidator:
    """Validate story input data"""

    REQUIRED_FIELDS = ['content']
    MAX_TITLE_LENGTH = 200

    @classmethod
    def validate(cls, story_data: Dict) -> tuple[bool, Optional[str]]:
        """
        Validate story data structure

        Args:
            story_data: Story dictionary (content, optional title and chapter)

        Returns:
            Tuple of (is_valid, error_message)
        """
        for field in cls.REQUIRED_FIELDS:
            if field not in story_data:
                return False, f"Missing required field: {field}"

        content = story_data['content']
        if not isinstance(content, str):
            return False, "content must be a string"
        if len(content.strip()) == 0:
            return False, "Content is required"

        title = story_data.get('title')
        if title is not None:
            if not isinstance(title, str):
                return False, "title must be a string"
            if len(title) > cls.MAX_TITLE_LENGTH:
                return False, f"title must be at most {cls.MAX_TITLE_LENGTH} characters"

        chapter = story_data.get('chapter')
        if chapter is not None and not is_valid_chapter(chapter):
            return False, f"Unknown chapter: {chapter}"

        return True, None
