"""Marketplace review retrieval service for VendorPulse."""

import logging
from typing import List, Dict, Any, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..core.config import settings
from ..core.constants import ApiConstants, MockDataConstants
from ..core.errors import ReviewServiceError
from ..core.lexicon import PolarityLexicon, configured_lexicon
from ..core.models import Review, SentimentResult
from ..core.scoring import analyze_sentiment
from ..utils.data_prep import coerce_review

logger = logging.getLogger(__name__)


class TransientReviewServiceError(ReviewServiceError):
    """Network failure or 5xx response; worth retrying."""


class ReviewService:
    """Fetches vendor-scoped reviews from the marketplace REST API."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        self.base_url = (settings.api_url if api_url is None else api_url).rstrip("/")
        token = settings.api_token if api_token is None else api_token
        self.headers = {"Authorization": f"Bearer {token}"} if token else {}
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.max_retries = max(1, settings.max_retries if max_retries is None else max_retries)
        self.retry_delay = settings.retry_delay if retry_delay is None else retry_delay

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(
                multiplier=self.retry_delay,
                max=settings.retry_backoff * ApiConstants.MAX_RETRY_WAIT,
            ),
            retry=retry_if_exception_type(TransientReviewServiceError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def _request(self, url: str) -> Dict[str, Any]:
        """Single GET; classifies failures as transient or final."""
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Review request to {url} failed: {e}")
            raise TransientReviewServiceError(f"Review request failed: {e}") from e

        if response.status_code >= 500:
            logger.warning(f"Review API returned {response.status_code} for {url}")
            raise TransientReviewServiceError(
                f"Review API error: {response.status_code}", status_code=response.status_code
            )
        if response.status_code != 200:
            logger.error(f"Review fetch failed: {response.status_code} - {response.text}")
            raise ReviewServiceError(
                f"Review fetch failed: {response.status_code}", status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ReviewServiceError(f"Review API returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ReviewServiceError("Review API returned an unexpected payload")
        return data

    def get_vendor_reviews(self, vendor_id) -> List[Review]:
        """Get all reviews for a vendor."""
        if not self.base_url:
            logger.info(f"No API URL configured; using mock reviews for vendor {vendor_id}")
            return self._get_mock_reviews(vendor_id)

        url = self.base_url + ApiConstants.VENDOR_REVIEWS_PATH.format(vendor_id=vendor_id)
        data = self._retrying()(self._request, url)

        if not data.get("success", False):
            message = data.get("message") or "unknown error"
            raise ReviewServiceError(f"Review API reported failure: {message}")

        records = data.get("reviews") or []
        if not isinstance(records, list):
            raise ReviewServiceError("Review API returned a non-list 'reviews' field")

        reviews = []
        for record in records:
            if not isinstance(record, dict):
                logger.warning(f"Skipping non-object review record for vendor {vendor_id}")
                continue
            reviews.append(coerce_review(record))

        logger.info(f"Retrieved {len(reviews)} reviews for vendor {vendor_id}")
        return reviews

    def get_vendor_sentiment(self, vendor_id, lexicon: PolarityLexicon = None) -> SentimentResult:
        """Fetch a vendor's reviews and score them."""
        reviews = self.get_vendor_reviews(vendor_id)
        return analyze_sentiment(reviews, lexicon or configured_lexicon())

    def _get_mock_reviews(self, vendor_id) -> List[Review]:
        """Generate mock review data for testing."""
        comments = [
            "Excellent service, very professional team!",
            "Good food but arrived late.",
            "",
            "Great decorations, would recommend.",
            "A bit expensive for what we got.",
            "Happy with the photos overall.",
        ]
        return [
            Review(
                id=f"mock_review_{i}",
                vendor_id=vendor_id,
                rating=5 - (i % 3),
                comment=comments[i % len(comments)] or None,
                user_name=f"Customer{i + 1}",
            )
            for i in range(MockDataConstants.MOCK_REVIEW_COUNT)
        ]
