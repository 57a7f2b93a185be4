"""
Layer 1: Story Import & Validation
- Story Storage (one JSON record per story)
- Schema Validator and Text Cleaner
- Create/Update flow (classify on create, optional reclassify on update)
"""
from .errors import StoryError, StoryValidationError, StoryNotFoundError
from .storage import StoryStorage
from .validator import StoryValidator, TextCleaner
from .import_stories import create_story, update_story

__all__ = [
    'StoryError',
    'StoryValidationError',
    'StoryNotFoundError',
    'StoryStorage',
    'StoryValidator',
    'TextCleaner',
    'create_story',
    'update_story',
]
