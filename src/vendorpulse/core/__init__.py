"""Core modules for VendorPulse."""

from .models import *
from .config import settings
from .errors import *
from .lexicon import DEFAULT_LEXICON, PolarityLexicon, configured_lexicon, load_lexicon, scan_polarity
from .scoring import analyze_sentiment, classify, composite_score, estimate_confidence
from .presentation import get_sentiment_icon, get_sentiment_description, render_badge_html

__all__ = [
    "settings",
    "Sentiment",
    "Review",
    "PolarityCounts",
    "SentimentResult",
    "PolarityLexicon",
    "DEFAULT_LEXICON",
    "VendorPulseError",
    "ReviewServiceError",
    "LexiconError",
    "analyze_sentiment",
    "classify",
    "composite_score",
    "estimate_confidence",
    "configured_lexicon",
    "load_lexicon",
    "scan_polarity",
    "get_sentiment_icon",
    "get_sentiment_description",
    "render_badge_html",
]
