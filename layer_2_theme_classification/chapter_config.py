"""
Chapter configuration for life book story classification
Defines the 7 fixed chapters, their keyword tables and sentiment indicator words
"""
import random
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple


class ChapterTag(str, Enum):
    """The seven life book chapters, in table iteration order"""
    WHO_I_AM = "who-i-am"
    WHERE_I_COME_FROM = "where-i-come-from"
    WHAT_IVE_LOVED = "what-ive-loved"
    WHATS_BEEN_HARD = "whats-been-hard"
    WHAT_IVE_LEARNED = "what-ive-learned"
    WHAT_IM_STILL_FIGURING_OUT = "what-im-still-figuring-out"
    WHAT_I_WANT_YOU_TO_KNOW = "what-i-want-you-to-know"

    def __str__(self) -> str:
        return self.value


# Chapter used when no keyword matches at all
DEFAULT_CHAPTER = ChapterTag.WHO_I_AM


def _ordered_unique(words: Iterable[str]) -> Tuple[str, ...]:
    """Lowercase and de-duplicate keywords, keeping first position"""
    seen = {}
    for word in words:
        seen.setdefault(word.lower(), None)
    return tuple(seen)


# Keywords and phrases per chapter. Phrases (containing a space) score double.
# A keyword may appear under more than one chapter.
CHAPTER_KEYWORDS: Mapping[ChapterTag, Tuple[str, ...]] = MappingProxyType({
    ChapterTag.WHO_I_AM: _ordered_unique([
        "become", "identity", "who i am", "character", "personality", "values",
        "beliefs", "faith", "religion", "spiritual", "philosophy", "principles",
        "morals", "ethics", "goals", "dreams", "aspirations", "achievements",
        "accomplishments", "proud", "journey", "path", "career", "profession",
    ]),
    ChapterTag.WHERE_I_COME_FROM: _ordered_unique([
        "childhood", "grew up", "parents", "mother", "father", "mom", "dad",
        "siblings", "brother", "sister", "family", "hometown", "born", "raised",
        "heritage", "ancestors", "grandparents", "neighborhood", "school",
        "elementary", "roots", "origin", "where i grew", "early years",
        "first home", "old house", "my town", "village", "country",
    ]),
    ChapterTag.WHAT_IVE_LOVED: _ordered_unique([
        "love", "loved", "passion", "joy", "happy", "happiness", "wonderful",
        "beautiful", "amazing", "favorite", "hobby", "enjoy", "pleasure",
        "delight", "cherish", "treasure", "meaningful", "special", "precious",
        "blessed", "grateful", "thankful", "appreciate", "romance", "wedding",
        "marriage", "spouse", "partner", "children", "grandchildren",
    ]),
    ChapterTag.WHATS_BEEN_HARD: _ordered_unique([
        "hard", "difficult", "challenge", "struggle", "tough", "overcome",
        "adversity", "loss", "grief", "painful", "hurt", "suffering", "trial",
        "obstacle", "setback", "failure", "mistake", "regret", "hardship",
        "crisis", "trouble", "problem", "illness", "death", "divorce",
        "depression", "anxiety", "fear", "worry",
    ]),
    ChapterTag.WHAT_IVE_LEARNED: _ordered_unique([
        "learn", "learned", "lesson", "wisdom", "advice", "taught", "realize",
        "understand", "insight", "growth", "mature", "discover", "knowledge",
        "experience", "perspective", "change", "transform", "evolve",
        "important", "value", "believe", "truth", "meaning", "purpose",
    ]),
    ChapterTag.WHAT_IM_STILL_FIGURING_OUT: _ordered_unique([
        "uncertain", "wondering", "figuring out", "still learning", "not sure",
        "questioning", "seeking", "exploring", "confused", "doubt", "uncertain",
        "work in progress", "growing", "changing", "evolving", "struggle with",
    ]),
    ChapterTag.WHAT_I_WANT_YOU_TO_KNOW: _ordered_unique([
        "legacy", "remember", "remembered", "future", "generations", "pass on",
        "teach", "hope", "wish", "want to leave", "children will", "grandchildren",
        "impact", "difference", "contribution", "give back", "inheritance",
        "tradition", "family values", "my hope", "when i'm gone", "want you to know",
    ]),
})

# Single words counted for the coarse sentiment label, checked in this order
SENTIMENT_INDICATORS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "positive": ("happy", "joy", "love", "wonderful", "amazing", "grateful", "blessed", "beautiful"),
    "negative": ("sad", "difficult", "hard", "painful", "struggle", "loss", "grief", "hurt"),
    "reflective": ("think", "realize", "understand", "learn", "remember", "reflect", "wonder"),
})

NEUTRAL_SENTIMENT = "neutral"

# Display metadata and conversation prompts per chapter
CHAPTERS: Mapping[ChapterTag, Mapping[str, object]] = MappingProxyType({
    ChapterTag.WHO_I_AM: MappingProxyType({
        "title": "Who I Am",
        "description": "Personal identity, values, and what makes you uniquely you",
        "prompts": (
            "What are three words your closest friends would use to describe you?",
            "What values do you hold most dear, and where did they come from?",
            "What makes you laugh until you cry?",
            "If you could be remembered for one thing, what would it be?",
            "What brings you the most peace?",
        ),
    }),
    ChapterTag.WHERE_I_COME_FROM: MappingProxyType({
        "title": "Where I Come From",
        "description": "Your roots, heritage, and family background",
        "prompts": (
            "What did your childhood home smell like?",
            "What family tradition do you cherish most?",
            "Tell me about a meal that takes you back to your childhood.",
            "What stories did your grandparents tell you?",
            "What was your neighborhood like growing up?",
        ),
    }),
    ChapterTag.WHAT_IVE_LOVED: MappingProxyType({
        "title": "What I've Loved",
        "description": "Joyful memories and meaningful experiences",
        "prompts": (
            "What moment made you realize you were in love?",
            "What hobby or passion has brought you the most joy?",
            "Describe a perfect day from your past.",
            "What friendship has meant the most to you?",
            "What place feels most like home to your heart?",
        ),
    }),
    ChapterTag.WHATS_BEEN_HARD: MappingProxyType({
        "title": "What's Been Hard",
        "description": "Challenges faced and lessons in resilience",
        "prompts": (
            "What challenge taught you the most about yourself?",
            "How did you get through the hardest time in your life?",
            "What loss changed you?",
            "When did you have to be brave even when you were scared?",
            "What would you tell someone going through what you went through?",
        ),
    }),
    ChapterTag.WHAT_IVE_LEARNED: MappingProxyType({
        "title": "What I've Learned",
        "description": "Wisdom gathered from life experiences",
        "prompts": (
            "What advice would you give your younger self?",
            "What did you learn from your biggest mistake?",
            "What wisdom from your parents or grandparents still guides you?",
            "What has life taught you about happiness?",
            "What do you know now that you wish you knew at 20?",
        ),
    }),
    ChapterTag.WHAT_IM_STILL_FIGURING_OUT: MappingProxyType({
        "title": "What I'm Still Figuring Out",
        "description": "Ongoing questions and current explorations",
        "prompts": (
            "What questions do you still wrestle with?",
            "What dreams haven't you pursued yet?",
            "What are you still learning about yourself?",
            "What do you want to do before it's too late?",
            "What part of life still surprises you?",
        ),
    }),
    ChapterTag.WHAT_I_WANT_YOU_TO_KNOW: MappingProxyType({
        "title": "What I Want You to Know",
        "description": "Messages to pass on to loved ones",
        "prompts": (
            "What do you most want your grandchildren to know about you?",
            "What family stories must be passed down?",
            "What do you want to say to someone you love?",
            "What matters most in life?",
            "What legacy do you hope to leave?",
        ),
    }),
})

STARTER_PROMPTS: Tuple[str, ...] = (
    "What's one of your earliest memories that still feels vivid to you?",
    "What's a holiday tradition that makes you smile when you remember it?",
    "Who had the biggest influence on who you became?",
    "What moment in your life are you most proud of?",
    "What did your grandmother's kitchen smell like?",
)


def _to_chapter(chapter) -> Optional[ChapterTag]:
    """Coerce a string or ChapterTag to ChapterTag, None if unknown"""
    try:
        return ChapterTag(chapter)
    except ValueError:
        return None


def get_chapter_list() -> List[ChapterTag]:
    """
    Get list of all chapters in table iteration order

    Returns:
        List of ChapterTag values
    """
    return list(ChapterTag)


def get_chapter_title(chapter) -> str:
    """
    Get display title for a chapter

    Args:
        chapter: ChapterTag or its string value

    Returns:
        Chapter title, or empty string if chapter not found
    """
    tag = _to_chapter(chapter)
    return CHAPTERS[tag]["title"] if tag else ""


def get_chapter_description(chapter) -> str:
    """
    Get description for a chapter

    Args:
        chapter: ChapterTag or its string value

    Returns:
        Chapter description, or empty string if chapter not found
    """
    tag = _to_chapter(chapter)
    return CHAPTERS[tag]["description"] if tag else ""


def get_chapter_prompts(chapter) -> List[str]:
    """Conversation prompts for a chapter (empty list if unknown)"""
    tag = _to_chapter(chapter)
    return list(CHAPTERS[tag]["prompts"]) if tag else []


def is_valid_chapter(chapter) -> bool:
    """
    Check if a chapter value is valid

    Args:
        chapter: Value to validate

    Returns:
        True if chapter is one of the seven chapters, False otherwise
    """
    return _to_chapter(chapter) is not None


def get_default_chapter() -> ChapterTag:
    """
    Get the default chapter used when nothing matches

    Returns:
        Default ChapterTag
    """
    return DEFAULT_CHAPTER


def get_all_keywords() -> List[str]:
    """
    Get the full keyword universe across all chapters

    Returns:
        Keywords in table order, each listed once
    """
    return list(_ordered_unique(
        keyword
        for keywords in CHAPTER_KEYWORDS.values()
        for keyword in keywords
    ))


def get_random_prompt(chapter=None, rng: Optional[random.Random] = None) -> str:
    """
    Pick a conversation prompt, from one chapter or from all of them

    Args:
        chapter: Optional chapter to draw from; unknown chapters fall back to all
        rng: Optional random generator (for reproducible picks)

    Returns:
        Prompt text
    """
    rng = rng or random
    tag = _to_chapter(chapter) if chapter is not None else None
    if tag:
        return rng.choice(CHAPTERS[tag]["prompts"])
    all_prompts = [prompt for info in CHAPTERS.values() for prompt in info["prompts"]]
    return rng.choice(all_prompts)


def get_starter_prompts() -> List[str]:
    """Prompts used to open a first conversation"""
    return list(STARTER_PROMPTS)
