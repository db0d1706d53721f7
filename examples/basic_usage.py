"""Basic usage examples for VendorPulse."""

from vendorpulse import ReviewService, analyze_sentiment, get_sentiment_icon, get_sentiment_description
from vendorpulse.core.models import Review


def example_local_reviews():
    """Example: score an in-memory review list."""
    print("🔍 Scoring local reviews")

    reviews = [
        Review(rating=5, comment="Excellent catering, very professional staff"),
        Review(rating=4, comment="Good value, would recommend"),
        Review(rating=3, comment="Arrived late but the food was great"),
        Review(rating=4),
    ]
    result = analyze_sentiment(reviews)

    print(f"{get_sentiment_icon(result.sentiment)} {result.label}: {result.score}/100 "
          f"(confidence {result.confidence}%)")
    print(f"📋 {get_sentiment_description(result.sentiment)}")


def example_vendor_reviews():
    """Example: fetch a vendor's reviews from the marketplace API and score them."""
    print("\n🔍 Scoring vendor 42")

    # Uses mock reviews when VENDORPULSE_API_URL is not set
    service = ReviewService()
    result = service.get_vendor_sentiment(42)
    print(f"📊 {result.review_count} reviews, average {result.average_rating:.1f}/5")
    print(f"{get_sentiment_icon(result.sentiment)} {result.label}: {result.score}/100")


if __name__ == "__main__":
    example_local_reviews()
    example_vendor_reviews()
