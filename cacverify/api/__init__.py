"""API package for the application."""
from .dependencies import get_registry_client, get_verifier

__all__ = [
    "get_registry_client",
    "get_verifier"
]
