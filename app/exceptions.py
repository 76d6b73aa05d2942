"""Custom exceptions for the portfolio site.

These exceptions make it clear what type of error occurred, rather than
catching generic Exception everywhere.
"""


class SiteError(Exception):
    """Base exception for all site operations."""
    pass


class AcquisitionError(SiteError):
    """Failed to obtain the raw portfolio CSV text."""
    pass


class StorageError(AcquisitionError):
    """Portfolio CSV file is missing or unreadable on the local filesystem."""
    pass


class NetworkError(AcquisitionError):
    """Portfolio CSV fetch over HTTP failed or returned a non-success status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(SiteError):
    """Data validation failed (invalid input, missing required fields, etc.)."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or {}


class LeadDeliveryError(SiteError):
    """The e-mail integration could not deliver a lead."""
    pass
