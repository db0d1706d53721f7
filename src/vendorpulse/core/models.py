"""Data models for VendorPulse."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any, Dict


class Sentiment(Enum):
    """Ordered sentiment categories, best first."""
    VERY_POSITIVE = "very_positive"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    VERY_NEGATIVE = "very_negative"

    @classmethod
    def parse(cls, value: Any) -> "Sentiment":
        """Resolve a member or its string value; anything else is NEUTRAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NEUTRAL


@dataclass(frozen=True)
class Review:
    """A single user review of a vendor."""
    rating: Any
    comment: Optional[str] = None
    id: Optional[Any] = None
    vendor_id: Optional[Any] = None
    user_name: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class PolarityCounts:
    """Lexicon hits across a review set."""
    positive_count: int = 0
    negative_count: int = 0
    total_comments: int = 0


@dataclass(frozen=True)
class CategoryStyle:
    """Label and color shown for a sentiment category."""
    label: str
    color: str


@dataclass(frozen=True)
class SentimentResult:
    """Composite sentiment judgment for one vendor."""
    sentiment: Sentiment
    score: int
    confidence: int
    label: str
    color: str
    average_rating: float = 0.0
    review_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape consumed by the UI."""
        return {
            "sentiment": self.sentiment.value,
            "score": self.score,
            "confidence": self.confidence,
            "label": self.label,
            "color": self.color,
            "averageRating": self.average_rating,
            "reviewCount": self.review_count,
        }


def review_field(review: Any, name: str, default: Any = None) -> Any:
    """Read a field from a Review or a raw API record."""
    if isinstance(review, dict):
        return review.get(name, default)
    return getattr(review, name, default)
