"""
Service status endpoints.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from cacverify.config.settings import settings
from cacverify.core.verification import BusinessVerifier
from cacverify.api.dependencies import get_verifier

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/")
async def root():
    """Service name and version."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "operational"
    }


@router.get("/health")
async def health_check(verifier: BusinessVerifier = Depends(get_verifier)):
    """
    Report how verification is wired without contacting the registry.
    
    Returns:
        Status, registry search URL, number of override names and timestamp
    """
    return {
        "status": "healthy",
        "registry_url": verifier.search_client.search_url,
        "overrides": len(verifier.overrides),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
