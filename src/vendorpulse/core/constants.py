"""Constants and configuration values for VendorPulse."""

# Scoring Constants
class ScoringConstants:
    """Constants for the composite sentiment score."""

    MAX_RATING = 5.0  # top of the star scale
    RATING_WEIGHT = 70  # points contributed by the average rating
    COMMENT_WEIGHT = 30  # points contributed by comment polarity
    COMMENT_MIDPOINT = 15  # comment points for a tie or no lexicon hits

    MIN_SCORE = 0
    MAX_SCORE = 100

# Confidence Constants
class ConfidenceConstants:
    """Constants for review-volume confidence."""

    PER_REVIEW = 10  # confidence points per review
    MIN_CONFIDENCE = 20  # floor for any non-empty review set
    MAX_CONFIDENCE = 100  # reached at 10 reviews

# Category Constants
class CategoryConstants:
    """Inclusive lower bounds of each sentiment band."""

    VERY_POSITIVE_MIN = 80
    POSITIVE_MIN = 65
    NEUTRAL_MIN = 50
    NEGATIVE_MIN = 35

# Color Constants
class ColorConstants:
    """Badge colors per sentiment band."""

    GREEN = "#10B981"
    DARK_GREEN = "#059669"
    AMBER = "#F59E0B"
    RED = "#DC2626"
    DARK_RED = "#991B1B"
    NEUTRAL_GRAY = "#94A3B8"  # empty review set

    BACKGROUND_ALPHA = "15"  # hex alpha appended to the badge background

# Empty Review Set Constants
class EmptyResultConstants:
    """Values reported when a vendor has no usable reviews."""

    LABEL = "No reviews yet"
    DESCRIPTION = "No reviews available"

# Lexicon Constants
class LexiconConstants:
    """Built-in polarity lexicons, tuned for event vendors."""

    POSITIVE_WORDS = (
        "excellent", "amazing", "great", "good", "wonderful", "fantastic", "perfect",
        "outstanding", "superb", "brilliant", "awesome", "love", "best", "recommend",
        "satisfied", "happy", "pleased", "delighted", "impressed", "professional",
    )

    NEGATIVE_WORDS = (
        "terrible", "awful", "bad", "poor", "horrible", "disappointing", "worst",
        "unprofessional", "rude", "late", "expensive", "overpriced", "disappointed",
        "unhappy", "dissatisfied", "angry", "frustrated", "annoyed", "waste",
    )

# API Constants
class ApiConstants:
    """Constants for the marketplace REST API."""

    VENDOR_REVIEWS_PATH = "/reviews/vendor/{vendor_id}"
    MAX_RETRY_WAIT = 10  # seconds between retries at most

# Mock Data Constants
class MockDataConstants:
    """Constants for mock data generation."""

    MOCK_REVIEW_COUNT = 6  # reviews returned when no API is configured

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
