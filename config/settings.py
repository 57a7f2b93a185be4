"""
Application settings and configuration

This file contains all the settings for the story analyser.
Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.

The chapter keyword tables are NOT settings - they live in
layer_2_theme_classification/chapter_config.py and ship with the code.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()


class Settings:
    """
    Application configuration settings

    You can change these values by setting environment variables in a .env file.
    """

    # ============================================================
    # Storage Settings
    # ============================================================
    # Stories are stored as one JSON file per story
    DATA_DIR = os.getenv("DATA_DIR", "data")  # Main data folder
    STORIES_DIR = os.getenv("STORIES_DIR", os.path.join(DATA_DIR, "stories"))  # Story records

    # ============================================================
    # Classification Settings
    # ============================================================
    # How many tags are stored on a story record
    MAX_TAGS = int(os.getenv("MAX_TAGS", "5"))
    # Title used when none is supplied or generated
    DEFAULT_STORY_TITLE = os.getenv("DEFAULT_STORY_TITLE", "Untitled Story")

    # ============================================================
    # Date Extraction Settings
    # ============================================================
    # Characters of surrounding text kept on each side of a date match
    DATE_CONTEXT_CHARS = int(os.getenv("DATE_CONTEXT_CHARS", "50"))

    # ============================================================
    # Logging Settings
    # ============================================================
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "logs/app.log")  # Empty string disables file logging

    @staticmethod
    def ensure_directories():
        """
        Create necessary directories if they don't exist
        """
        os.makedirs(Settings.DATA_DIR, exist_ok=True)
        os.makedirs(Settings.STORIES_DIR, exist_ok=True)
        if Settings.LOG_FILE:
            os.makedirs(os.path.dirname(Settings.LOG_FILE) or "logs", exist_ok=True)


# Global settings instance
settings = Settings()
