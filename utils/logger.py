"""
Logging configuration
"""
import logging
import os
from config.settings import settings


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with configured settings

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (disabled with LOG_FILE="")
    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE) or '.'
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
