"""
CAC Business Verification - FastAPI application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from cacverify.config.settings import settings
from cacverify.api.routes import health_router, verification_router
from cacverify.utils.logging import configure_logging


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Verify business names against the CAC public registry",
    version=settings.app_version,
    debug=settings.debug
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(verification_router)


@app.on_event("startup")
async def startup_event():
    """Application startup tasks."""
    configure_logging(settings.log_level, settings.log_file)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Registry search URL: {settings.registry_search_url}")
    if settings.enable_verification_overrides:
        logger.info(f"Verification overrides: {len(settings.verification_overrides)} name(s)")
