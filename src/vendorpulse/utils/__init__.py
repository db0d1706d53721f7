"""Utility modules for VendorPulse."""

from .data_prep import coerce_review, load_reviews, prepare_export, export_to_json

__all__ = [
    "coerce_review",
    "load_reviews",
    "prepare_export",
    "export_to_json",
]
