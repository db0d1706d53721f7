"""Review record preparation and result export."""

import datetime
import json
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.models import Review, SentimentResult
from ..core.presentation import get_sentiment_icon, describe_result


def coerce_review(record: Dict[str, Any]) -> Review:
    """Build a Review from a raw API record. The rating is kept as given; scoring decides if it is usable."""
    comment = record.get("comment")
    if comment is not None and not isinstance(comment, str):
        comment = str(comment)
    created_at = record.get("created_at")
    return Review(
        rating=record.get("rating"),
        comment=comment,
        id=record.get("id"),
        vendor_id=record.get("vendor_id"),
        user_name=record.get("user_name"),
        created_at=str(created_at) if created_at is not None else None,
    )


def load_reviews(filename: str) -> List[Review]:
    """
    Load reviews from a JSON file.

    Accepts a bare list of records or the API envelope ``{"reviews": [...]}``.
    Non-object entries are skipped.
    """
    with open(filename, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("reviews") or []
    if not isinstance(data, list):
        raise ValueError(f"{filename} must hold a list of reviews or a 'reviews' envelope")

    return [coerce_review(record) for record in data if isinstance(record, dict)]


def prepare_export(vendor_id, result: SentimentResult) -> Dict[str, Any]:
    """Prepare a sentiment result for JSON export."""
    return {
        "vendor_id": vendor_id,
        "result": result.to_dict(),
        "display": {
            "icon": get_sentiment_icon(result.sentiment),
            "description": describe_result(result),
        },
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": FileConstants.EXPORT_VERSION,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
