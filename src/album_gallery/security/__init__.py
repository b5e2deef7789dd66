"""
Security module for request validation.
"""

from .exceptions import SecurityError, ValidationError, PayloadTooLargeError
from .input_validator import InputValidator

__all__ = [
    "SecurityError",
    "ValidationError",
    "PayloadTooLargeError",
    "InputValidator",
]
