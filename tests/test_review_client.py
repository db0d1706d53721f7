"""Test marketplace review retrieval."""

import pytest
import requests
from unittest.mock import Mock, patch

from vendorpulse.core.errors import ReviewServiceError
from vendorpulse.core.models import Review, SentimentResult
from vendorpulse.services import review_client
from vendorpulse.services.review_client import ReviewService


def _response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    response.text = str(payload)
    return response


REVIEWS_PAYLOAD = {
    "success": True,
    "reviews": [
        {"id": 1, "vendor_id": 7, "rating": 5, "comment": "excellent and professional",
         "user_name": "Ayesha", "created_at": "2024-05-01T10:00:00.000Z"},
        {"id": 2, "vendor_id": 7, "rating": 4, "comment": None, "user_name": "Bilal"},
    ],
}


class TestReviewService:
    """Test the REST review client."""

    def setup_method(self):
        self.service = ReviewService(
            api_url="http://api.test/api/",
            api_token="secret",
            timeout=5,
            max_retries=3,
            retry_delay=0,
        )

    @patch("vendorpulse.services.review_client.requests.get")
    def test_fetch_vendor_reviews(self, mock_get):
        mock_get.return_value = _response(200, REVIEWS_PAYLOAD)

        reviews = self.service.get_vendor_reviews(7)

        mock_get.assert_called_once_with(
            "http://api.test/api/reviews/vendor/7",
            headers={"Authorization": "Bearer secret"},
            timeout=5,
        )
        assert len(reviews) == 2
        assert all(isinstance(r, Review) for r in reviews)
        assert reviews[0].rating == 5
        assert reviews[0].user_name == "Ayesha"
        assert reviews[1].comment is None

    @patch("vendorpulse.services.review_client.requests.get")
    def test_retries_server_errors(self, mock_get):
        mock_get.side_effect = [_response(503), _response(200, REVIEWS_PAYLOAD)]

        reviews = self.service.get_vendor_reviews(7)

        assert mock_get.call_count == 2
        assert len(reviews) == 2

    @patch("vendorpulse.services.review_client.requests.get")
    def test_gives_up_after_max_retries(self, mock_get):
        mock_get.return_value = _response(500)

        with pytest.raises(ReviewServiceError) as exc_info:
            self.service.get_vendor_reviews(7)

        assert mock_get.call_count == 3
        assert exc_info.value.status_code == 500

    @patch("vendorpulse.services.review_client.requests.get")
    def test_retries_connection_errors(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(ReviewServiceError):
            self.service.get_vendor_reviews(7)

        assert mock_get.call_count == 3

    @patch("vendorpulse.services.review_client.requests.get")
    def test_client_errors_not_retried(self, mock_get):
        mock_get.return_value = _response(404, {"success": False, "message": "Not found"})

        with pytest.raises(ReviewServiceError) as exc_info:
            self.service.get_vendor_reviews(7)

        assert mock_get.call_count == 1
        assert exc_info.value.status_code == 404

    @patch("vendorpulse.services.review_client.requests.get")
    def test_unsuccessful_payload(self, mock_get):
        mock_get.return_value = _response(200, {"success": False, "message": "Error fetching vendor reviews"})

        with pytest.raises(ReviewServiceError, match="Error fetching vendor reviews"):
            self.service.get_vendor_reviews(7)

    @patch("vendorpulse.services.review_client.requests.get")
    def test_invalid_json(self, mock_get):
        response = _response(200)
        response.json.side_effect = ValueError("no json")
        mock_get.return_value = response

        with pytest.raises(ReviewServiceError):
            self.service.get_vendor_reviews(7)

    @patch("vendorpulse.services.review_client.requests.get")
    def test_skips_non_object_records(self, mock_get):
        mock_get.return_value = _response(200, {"success": True, "reviews": [{"rating": 3}, "junk", None]})

        reviews = self.service.get_vendor_reviews(7)
        assert len(reviews) == 1

    @patch("vendorpulse.services.review_client.requests.get")
    def test_get_vendor_sentiment(self, mock_get):
        mock_get.return_value = _response(200, REVIEWS_PAYLOAD)

        result = self.service.get_vendor_sentiment(7)

        assert isinstance(result, SentimentResult)
        assert result.review_count == 2
        assert result.average_rating == 4.5
        # 63 rating points + 30 comment points
        assert result.score == 93

    @patch("vendorpulse.services.review_client.requests.get")
    def test_vendor_without_reviews(self, mock_get):
        mock_get.return_value = _response(200, {"success": True, "reviews": []})

        result = self.service.get_vendor_sentiment(7)
        assert result.label == "No reviews yet"

    @patch("vendorpulse.services.review_client.requests.get")
    def test_timeout_defaults_to_settings(self, mock_get):
        mock_get.return_value = _response(200, REVIEWS_PAYLOAD)
        service = ReviewService(api_url="http://api.test/api", api_token="")

        service.get_vendor_reviews(7)

        assert mock_get.call_args.kwargs["timeout"] == review_client.settings.request_timeout
        assert mock_get.call_args.kwargs["headers"] == {}


class TestMockReviews:
    """Test mock data used when no API is configured."""

    @patch("vendorpulse.services.review_client.requests.get")
    def test_mock_reviews_without_api_url(self, mock_get):
        service = ReviewService(api_url="")

        reviews = service.get_vendor_reviews(42)

        mock_get.assert_not_called()
        assert len(reviews) == 6
        assert all(r.vendor_id == 42 for r in reviews)
        assert all(1 <= r.rating <= 5 for r in reviews)

    def test_mock_reviews_score(self):
        result = ReviewService(api_url="").get_vendor_sentiment(42)

        assert result.review_count == 6
        assert 0 <= result.score <= 100
        assert result.confidence == 60
