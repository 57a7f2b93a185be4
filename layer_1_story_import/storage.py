"""
Storage module for saving story records as one JSON file per story
"""
import json
import os
from typing import List, Optional

from config.settings import settings
from layer_1_story_import.errors import StoryNotFoundError
from models.story import Story
from utils.logger import get_logger

logger = get_logger(__name__)


class StoryStorage:
    """Store story records as JSON files"""

    def __init__(self, storage_dir: str = None):
        """
        Initialize storage

        Args:
            storage_dir: Directory to store story files
        """
        self.storage_dir = storage_dir or settings.STORIES_DIR
        os.makedirs(self.storage_dir, exist_ok=True)

    def _get_filename(self, story_id: str) -> str:
        """Get filename for a story"""
        return os.path.join(self.storage_dir, f"story_{story_id}.json")

    def save_story(self, story: Story):
        """
        Save (create or overwrite) a story record

        Args:
            story: Story to save

        Raises:
            OSError: If the file cannot be written
        """
        filename = self._get_filename(story.story_id)
        try:
            with open(filename, 'w', encoding='utf-8') as f:
                json.dump(story.to_dict(), f, indent=2, ensure_ascii=False)
            logger.info(f"Saved story {story.story_id} to {filename}")
        except OSError as e:
            logger.error(f"Error saving story {story.story_id} to {filename}: {e}")
            raise

    def load_story(self, story_id: str) -> Story:
        """
        Load a single story

        Args:
            story_id: Story identifier

        Returns:
            Story record

        Raises:
            StoryNotFoundError: If no story file exists for the id
        """
        filename = self._get_filename(story_id)
        if not os.path.exists(filename):
            raise StoryNotFoundError(story_id)

        with open(filename, 'r', encoding='utf-8') as f:
            return Story.from_dict(json.load(f))

    def find_story(self, story_id: str) -> Optional[Story]:
        """Load a story, or None if it does not exist"""
        try:
            return self.load_story(story_id)
        except StoryNotFoundError:
            return None

    def get_story_ids(self) -> List[str]:
        """Get sorted list of stored story ids"""
        story_ids = []
        if os.path.exists(self.storage_dir):
            for filename in os.listdir(self.storage_dir):
                if filename.startswith('story_') and filename.endswith('.json'):
                    story_ids.append(filename[len('story_'):-len('.json')])
        return sorted(story_ids)

    def load_all_stories(self) -> List[Story]:
        """
        Load every stored story, oldest first

        Files that cannot be parsed are logged and skipped.

        Returns:
            List of Story objects
        """
        stories = []
        for story_id in self.get_story_ids():
            try:
                stories.append(self.load_story(story_id))
            except (OSError, ValueError, KeyError) as e:
                logger.warning(f"Skipping unreadable story file for {story_id}: {e}")
        return sorted(stories, key=lambda story: story.created_at)

    def delete_story(self, story_id: str):
        """
        Delete a story record

        Raises:
            StoryNotFoundError: If no story file exists for the id
        """
        filename = self._get_filename(story_id)
        if not os.path.exists(filename):
            raise StoryNotFoundError(story_id)
        os.remove(filename)
        logger.info(f"Deleted story {story_id}")
