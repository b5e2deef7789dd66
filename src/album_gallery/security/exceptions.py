"""
Request validation exceptions.
"""


class SecurityError(Exception):
    """Base exception for request validation failures."""

    pass


class ValidationError(SecurityError):
    """Raised when a required field is missing or malformed."""

    pass


class PayloadTooLargeError(ValidationError):
    """Raised when a field exceeds its maximum length."""

    pass
