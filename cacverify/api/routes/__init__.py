"""API routes package."""
from .health import router as health_router
from .verification import router as verification_router

__all__ = [
    "health_router",
    "verification_router"
]
