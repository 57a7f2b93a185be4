"""
Main entry point for the story analyser

Commands:
    python main.py classify <file>                      Classify a story text file
    python main.py dates <file> [--birth-year YEAR]     List dates found in a story text file
    python main.py add <file> [--title TITLE]           Store a story (classified on create)
    python main.py reclassify [--force]                 Classify stored stories
    python main.py timeline                             Show stored stories by decade
    python main.py chapters                             Show stored stories by chapter
"""
import json
import sys
from typing import List, Optional

from layer_1_story_import.import_stories import create_story
from layer_1_story_import.storage import StoryStorage
from layer_2_theme_classification.chapter_config import get_chapter_title
from layer_2_theme_classification.classifier import classify, extract_tags, sentiment_score
from layer_2_theme_classification.classify_stories import classify_all_stories, group_stories_by_chapter
from layer_3_date_extraction.date_extractor import extract_dates, estimate_story_period
from layer_3_date_extraction.timeline import build_timeline
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE = __doc__


def _read_text(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _get_option(args: List[str], flag: str) -> Optional[str]:
    """Value following a flag, or None if the flag is absent"""
    if flag in args:
        index = args.index(flag)
        if index + 1 < len(args):
            return args[index + 1]
        raise ValueError(f"{flag} needs a value")
    return None


def run_classify(path: str) -> dict:
    text = _read_text(path)
    result = classify(text).to_dict()
    result["sentiment_score"] = sentiment_score(text)
    result["top_tags"] = extract_tags(text)
    return result


def run_dates(path: str, birth_year: Optional[int] = None) -> dict:
    text = _read_text(path)
    return {
        "dates": [date.to_dict() for date in extract_dates(text, birth_year=birth_year)],
        "period": estimate_story_period(text).to_dict(),
    }


def run_timeline(storage: StoryStorage) -> dict:
    timeline = build_timeline(storage.load_all_stories())
    return {
        "decades": {
            f"{decade}s": [
                {"story_id": entry.story.story_id, "title": entry.story.title, "era": entry.label}
                for entry in entries
            ]
            for decade, entries in timeline.group_by_decade().items()
        },
        "gaps": [f"{decade}s" for decade in timeline.gaps],
        "undated": [
            {"story_id": entry.story.story_id, "title": entry.story.title}
            for entry in timeline.undated
        ],
    }


def run_chapters(storage: StoryStorage) -> dict:
    groups = group_stories_by_chapter(storage.load_all_stories())
    return {
        get_chapter_title(chapter): [story.title for story in stories]
        for chapter, stories in groups.items()
    }


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one command

    Args:
        argv: Command line arguments without the program name

    Returns:
        Exit code (0 = success, 1 = error, 2 = usage error)
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        return 0 if args else 2

    command, rest = args[0], args[1:]
    try:
        if command == "classify" and rest:
            output = run_classify(rest[0])
        elif command == "dates" and rest:
            birth_year = _get_option(rest, "--birth-year")
            output = run_dates(rest[0], int(birth_year) if birth_year else None)
        elif command == "add" and rest:
            story, classification = create_story(_read_text(rest[0]), title=_get_option(rest, "--title"))
            output = {"story": story.to_dict(), "classification": classification.to_dict()}
        elif command == "reclassify":
            output = classify_all_stories(force="--force" in rest)
        elif command == "timeline":
            output = run_timeline(StoryStorage())
        elif command == "chapters":
            output = run_chapters(StoryStorage())
        else:
            print(USAGE)
            return 2

        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    except Exception as e:
        logger.error(f"Error running '{command}': {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
