"""VendorPulse - review sentiment scoring for marketplace vendors."""

__version__ = "1.0.0"
__author__ = "VendorPulse Team"

from .core.models import *
from .core.config import settings
from .core.scoring import analyze_sentiment
from .core.presentation import get_sentiment_icon, get_sentiment_description
from .services.review_client import ReviewService

__all__ = [
    "settings",
    "analyze_sentiment",
    "get_sentiment_icon",
    "get_sentiment_description",
    "ReviewService",
]
