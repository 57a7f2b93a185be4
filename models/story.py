"""
Story data model
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
import json


@dataclass
class Story:
    """Story record as persisted alongside its classification"""
    story_id: str
    title: str
    content: str
    chapter: str  # ChapterTag value
    tags: List[str] = field(default_factory=list)
    sentiment_score: float = 0.0  # -1 (negative) .. 1 (positive)
    sentiment: Optional[str] = None  # positive / negative / reflective / neutral
    confidence: Optional[float] = None  # None until classified
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Stamp updated_at on fresh records"""
        if self.updated_at is None:
            self.updated_at = self.created_at

    @property
    def is_classified(self) -> bool:
        return self.confidence is not None

    def to_dict(self) -> dict:
        """Convert story to dictionary for storage"""
        return {
            "story_id": self.story_id,
            "title": self.title,
            "content": self.content,
            "chapter": self.chapter,
            "tags": list(self.tags),
            "sentiment_score": self.sentiment_score,
            "sentiment": self.sentiment,
            "confidence": self.confidence,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Story":
        """Create story from dictionary"""
        created_at = datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.now()
        return cls(
            story_id=data["story_id"],
            title=data.get("title", ""),
            content=data["content"],
            chapter=data["chapter"],
            tags=list(data.get("tags", [])),
            sentiment_score=float(data.get("sentiment_score", 0.0)),
            sentiment=data.get("sentiment"),
            confidence=data.get("confidence"),
            created_at=created_at,
            updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else None,
        )

    def to_json(self) -> str:
        """Convert story to JSON string"""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
