"""
Exception types shared across the ET0 proxy.
"""

from typing import Optional


class NumericDomainError(ValueError):
    """Raised when an input produces an undefined mathematical result."""


class FieldClimateAPIError(RuntimeError):
    """Raised when the FieldClimate API answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ActionError(ValueError):
    """Raised for malformed client requests (unknown action, missing station)."""
