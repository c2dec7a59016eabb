"""
Dependency injection for API endpoints.
Provides singleton instances of the registry client and verifier.
"""
from functools import lru_cache
from cacverify.core.registry_client import RegistrySearchClient
from cacverify.core.verification import BusinessVerifier, build_override_table
from cacverify.config.settings import settings


@lru_cache()
def get_registry_client() -> RegistrySearchClient:
    """
    Get or create registry search client instance.
    
    Returns:
        Singleton RegistrySearchClient instance
    """
    return RegistrySearchClient(
        base_url=settings.registry_base_url,
        search_path=settings.registry_search_path,
        search_field=settings.registry_search_field,
        user_agent=settings.registry_user_agent,
        timeout=settings.registry_timeout
    )


@lru_cache()
def get_verifier() -> BusinessVerifier:
    """
    Get or create business verifier instance.
    
    Returns:
        Singleton BusinessVerifier instance
    """
    overrides = {}
    if settings.enable_verification_overrides:
        overrides = build_override_table(settings.verification_overrides)
    return BusinessVerifier(
        get_registry_client(),
        overrides=overrides,
        suffixes=settings.legal_suffixes
    )
