"""Exceptions raised by VendorPulse's outer layers."""


class VendorPulseError(Exception):
    """Base class for VendorPulse errors."""


class ReviewServiceError(VendorPulseError):
    """Raised when vendor reviews cannot be retrieved."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class LexiconError(VendorPulseError):
    """Raised when a lexicon file is missing or malformed."""
