"""Utility functions and classes."""
from .logging import InterceptHandler, configure_logging

__all__ = [
    "InterceptHandler",
    "configure_logging"
]
