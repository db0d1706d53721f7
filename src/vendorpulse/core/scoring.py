"""Composite sentiment scoring for vendor reviews."""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import (
    ScoringConstants,
    ConfidenceConstants,
    CategoryConstants,
    ColorConstants,
    EmptyResultConstants,
)
from .lexicon import DEFAULT_LEXICON, PolarityLexicon, scan_polarity
from .models import CategoryStyle, PolarityCounts, Review, Sentiment, SentimentResult, review_field

logger = logging.getLogger(__name__)

# Highest band first; bounds are inclusive.
CATEGORY_THRESHOLDS: Tuple[Tuple[int, Sentiment], ...] = (
    (CategoryConstants.VERY_POSITIVE_MIN, Sentiment.VERY_POSITIVE),
    (CategoryConstants.POSITIVE_MIN, Sentiment.POSITIVE),
    (CategoryConstants.NEUTRAL_MIN, Sentiment.NEUTRAL),
    (CategoryConstants.NEGATIVE_MIN, Sentiment.NEGATIVE),
)

CATEGORY_STYLES: Dict[Sentiment, CategoryStyle] = {
    Sentiment.VERY_POSITIVE: CategoryStyle("Excellent", ColorConstants.GREEN),
    Sentiment.POSITIVE: CategoryStyle("Good", ColorConstants.DARK_GREEN),
    Sentiment.NEUTRAL: CategoryStyle("Average", ColorConstants.AMBER),
    Sentiment.NEGATIVE: CategoryStyle("Poor", ColorConstants.RED),
    Sentiment.VERY_NEGATIVE: CategoryStyle("Very Poor", ColorConstants.DARK_RED),
}


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(x + 0.5))


def _round_one_decimal(x: float) -> float:
    return float(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def numeric_rating(value) -> Optional[float]:
    """Return the rating as a float, or None if it is missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return None
    return rating if math.isfinite(rating) else None


def aggregate_rating(reviews: Iterable[Review]) -> Optional[float]:
    """Mean rating over reviews with a numeric rating; None if there are none."""
    ratings = [r for r in (numeric_rating(review_field(rev, "rating")) for rev in reviews) if r is not None]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


def rating_score(average_rating: float) -> float:
    """Points from the average rating, 0-70."""
    score = (average_rating / ScoringConstants.MAX_RATING) * ScoringConstants.RATING_WEIGHT
    return _clamp(score, 0.0, float(ScoringConstants.RATING_WEIGHT))


def comment_score(counts: PolarityCounts) -> float:
    """
    Points from comment polarity, 0-30.

    A lexicon tie and a set of comments with no lexicon hits both land on
    the 15 point midpoint. No comments at all scores 0.
    """
    if counts.total_comments <= 0:
        return 0.0
    polarity = (counts.positive_count - counts.negative_count) / counts.total_comments
    score = (polarity + 1) * ScoringConstants.COMMENT_MIDPOINT
    return _clamp(score, 0.0, float(ScoringConstants.COMMENT_WEIGHT))


def composite_score(average_rating: float, counts: PolarityCounts) -> int:
    """Blend rating (70%) and comment polarity (30%) into an integer 0-100."""
    raw = rating_score(average_rating) + comment_score(counts)
    return int(_clamp(_round_half_up(raw), ScoringConstants.MIN_SCORE, ScoringConstants.MAX_SCORE))


def estimate_confidence(review_count: int) -> int:
    """Confidence from review volume: 0 when empty, else 10 per review within [20, 100]."""
    if review_count <= 0:
        return 0
    confidence = _clamp(
        review_count * ConfidenceConstants.PER_REVIEW,
        ConfidenceConstants.MIN_CONFIDENCE,
        ConfidenceConstants.MAX_CONFIDENCE,
    )
    return _round_half_up(confidence)


def classify(score: int) -> Sentiment:
    """Map a composite score onto its sentiment band."""
    for lower_bound, sentiment in CATEGORY_THRESHOLDS:
        if score >= lower_bound:
            return sentiment
    return Sentiment.VERY_NEGATIVE


def empty_result() -> SentimentResult:
    """Result for a vendor without usable reviews."""
    return SentimentResult(
        sentiment=Sentiment.NEUTRAL,
        score=0,
        confidence=0,
        label=EmptyResultConstants.LABEL,
        color=ColorConstants.NEUTRAL_GRAY,
        average_rating=0.0,
        review_count=0,
    )


def analyze_sentiment(reviews, lexicon: PolarityLexicon = None) -> SentimentResult:
    """
    Score a vendor's reviews into a single sentiment judgment.

    Args:
        reviews: Review objects or raw API records with ``rating`` and
            optional ``comment``. Records without a numeric rating are left
            out of the average but their comments are still scanned, and
            they still count toward ``review_count`` and confidence. When no
            record has a numeric rating the empty result is returned, with
            ``review_count`` 0.
        lexicon: Polarity lexicon; the built-in lists when omitted.

    Returns:
        A SentimentResult. Never raises for malformed input; an empty or
        unrated review set yields the "No reviews yet" result.
    """
    review_list: List = list(reviews or [])
    average = aggregate_rating(review_list)
    if average is None:
        logger.debug(f"No rated reviews among {len(review_list)} records")
        return empty_result()

    counts = scan_polarity(review_list, lexicon or DEFAULT_LEXICON)
    score = composite_score(average, counts)
    sentiment = classify(score)
    style = CATEGORY_STYLES[sentiment]

    logger.debug(
        f"Scored {len(review_list)} reviews: avg={average:.2f} "
        f"pos={counts.positive_count} neg={counts.negative_count} "
        f"comments={counts.total_comments} score={score} -> {sentiment.value}"
    )

    return SentimentResult(
        sentiment=sentiment,
        score=score,
        confidence=estimate_confidence(len(review_list)),
        label=style.label,
        color=style.color,
        average_rating=_round_one_decimal(average),
        review_count=len(review_list),
    )
