"""
Custom exception hierarchy for the package.

Validation itself never raises; errors only surface while building validators.
"""

from typing import Any, Optional


class SlotValidatorError(Exception):
    """Base exception for all slot validator errors."""
    pass


class InvalidConfigurationError(SlotValidatorError, ValueError):
    """Raised when a validator is constructed with an invalid configuration."""

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value
