"""
Exceptions raised by the verification engine.
"""
from typing import Optional


class VerificationError(Exception):
    """Base class for verification failures."""


class BusinessNameValidationError(VerificationError):
    """The caller supplied no usable business name."""


class RegistryNetworkError(VerificationError):
    """Transport failure or unexpected status from the registry."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
