"""Icons, descriptions and badge markup for sentiment results."""

import html
from dataclasses import dataclass
from typing import Dict

from .constants import ColorConstants, EmptyResultConstants
from .models import Sentiment, SentimentResult


@dataclass(frozen=True)
class SentimentDisplay:
    icon: str
    description: str


SENTIMENT_DISPLAY: Dict[Sentiment, SentimentDisplay] = {
    Sentiment.VERY_POSITIVE: SentimentDisplay("😍", "Customers love this vendor!"),
    Sentiment.POSITIVE: SentimentDisplay("😊", "Customers are satisfied"),
    Sentiment.NEUTRAL: SentimentDisplay("😐", "Mixed customer feedback"),
    Sentiment.NEGATIVE: SentimentDisplay("😞", "Some customer concerns"),
    Sentiment.VERY_NEGATIVE: SentimentDisplay("😡", "Customer satisfaction issues"),
}


def get_sentiment_icon(sentiment) -> str:
    """Icon for a sentiment; unknown values get the neutral icon."""
    return SENTIMENT_DISPLAY[Sentiment.parse(sentiment)].icon


def get_sentiment_description(sentiment) -> str:
    """One-line description for a sentiment; unknown values get the neutral one."""
    return SENTIMENT_DISPLAY[Sentiment.parse(sentiment)].description


def describe_result(result: SentimentResult) -> str:
    """Description for a result, with a dedicated line for vendors without reviews."""
    if result.review_count == 0:
        return EmptyResultConstants.DESCRIPTION
    return get_sentiment_description(result.sentiment)


# --- Badge layout per size variant ---
@dataclass(frozen=True)
class BadgeSize:
    padding_v: int
    padding_h: int
    radius: int
    icon_px: int
    label_px: int
    score_px: int


BADGE_SIZES: Dict[str, BadgeSize] = {
    "small": BadgeSize(padding_v=3, padding_h=6, radius=8, icon_px=12, label_px=10, score_px=8),
    "medium": BadgeSize(padding_v=4, padding_h=8, radius=12, icon_px=14, label_px=12, score_px=10),
    "large": BadgeSize(padding_v=6, padding_h=12, radius=16, icon_px=18, label_px=14, score_px=12),
}


def badge_size(size: str) -> BadgeSize:
    return BADGE_SIZES.get((size or "").lower(), BADGE_SIZES["medium"])


def render_badge_html(result: SentimentResult, size: str = "medium") -> str:
    """Inline HTML badge: icon, label in the category color, and score% when above zero."""
    dims = badge_size(size)
    color = html.escape(result.color or ColorConstants.NEUTRAL_GRAY)
    icon = get_sentiment_icon(result.sentiment)
    label = html.escape(result.label)

    score_html = ""
    if result.score > 0:
        score_html = (
            f'<span style="font-size:{dims.score_px}px;font-weight:700;color:{color};'
            f'margin-top:1px;">{result.score}%</span>'
        )

    return (
        f'<div class="vp-badge" style="display:inline-flex;flex-direction:row;align-items:center;'
        f'padding:{dims.padding_v}px {dims.padding_h}px;border-radius:{dims.radius}px;'
        f'border:1px solid rgba(0,0,0,0.1);background-color:{color}{ColorConstants.BACKGROUND_ALPHA};">'
        f'<span style="font-size:{dims.icon_px}px;margin-right:{max(4, dims.padding_h - 2)}px;">{icon}</span>'
        f'<span style="display:flex;flex-direction:column;align-items:flex-start;">'
        f'<span style="font-size:{dims.label_px}px;font-weight:600;color:{color};">{label}</span>'
        f'{score_html}'
        f'</span>'
        f'</div>'
    )
