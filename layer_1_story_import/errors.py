"""
Errors raised by the story create/update flow

The classifier and date extractor never raise for text input; only the
record-level flow around them does.
"""


class StoryError(Exception):
    """Base class for story flow errors"""


class StoryValidationError(StoryError):
    """Story data failed validation"""


class StoryNotFoundError(StoryError):
    """No stored story with the requested id"""

    def __init__(self, story_id: str):
        super().__init__(f"Story not found: {story_id}")
        self.story_id = story_id
