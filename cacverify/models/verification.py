"""
Data models for CAC business-name verification.
"""
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, model_validator


class VerificationStatus(str, Enum):
    """Outcome of a single verification attempt."""
    VERIFIED = "verified"
    NOT_FOUND = "not_found"
    ERROR = "error"


class RegistryRecord(BaseModel):
    """Entity located on a registry search results page."""
    official_name: str
    rc_number: Optional[str] = None
    strategy: str  # name of the extraction strategy that found it


class VerificationResult(BaseModel):
    """Result returned to callers of the verification engine."""
    status: VerificationStatus
    rc_number: Optional[str] = None
    official_name: Optional[str] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def _verified_requires_name(self):
        if self.status == VerificationStatus.VERIFIED and not self.official_name:
            raise ValueError("verified results must carry an official_name")
        return self

    @classmethod
    def verified(cls, official_name: str, rc_number: Optional[str] = None) -> "VerificationResult":
        return cls(status=VerificationStatus.VERIFIED, official_name=official_name, rc_number=rc_number)

    @classmethod
    def not_found(cls) -> "VerificationResult":
        return cls(status=VerificationStatus.NOT_FOUND)

    @classmethod
    def error(cls, message: str) -> "VerificationResult":
        return cls(status=VerificationStatus.ERROR, message=message)

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body expected by the HTTP layer.

        ``rc_number`` and ``official_name`` are always present (possibly null);
        ``message`` only appears when set.
        """
        payload: Dict[str, Any] = {
            "status": self.status.value,
            "rc_number": self.rc_number,
            "official_name": self.official_name,
        }
        if self.message is not None:
            payload["message"] = self.message
        return payload


class VerifyAgencyRequest(BaseModel):
    """Request payload for agency verification."""
    agency_name: Optional[str] = None
