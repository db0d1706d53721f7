"""Services for VendorPulse."""

from .review_client import ReviewService

__all__ = [
    "ReviewService",
]
