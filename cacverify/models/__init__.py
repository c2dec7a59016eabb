"""Data models for the application."""
from .verification import (
    RegistryRecord,
    VerificationResult,
    VerificationStatus,
    VerifyAgencyRequest
)

__all__ = [
    "RegistryRecord",
    "VerificationResult",
    "VerificationStatus",
    "VerifyAgencyRequest"
]
