"""Core business logic for the application."""
from .exceptions import BusinessNameValidationError, RegistryNetworkError, VerificationError
from .extractor import extract_registry_record
from .matcher import business_names_match
from .normalizer import normalize_business_name
from .registry_client import RegistrySearchClient
from .verification import BusinessVerifier, build_override_table

__all__ = [
    "BusinessNameValidationError",
    "RegistryNetworkError",
    "VerificationError",
    "extract_registry_record",
    "business_names_match",
    "normalize_business_name",
    "RegistrySearchClient",
    "BusinessVerifier",
    "build_override_table"
]
