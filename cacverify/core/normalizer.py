"""
Business-name normalization.

Names are compared in a canonical form: lowercase, with at most one trailing
legal-entity suffix removed, punctuation dropped and whitespace collapsed.
"""
import re
from typing import Sequence, Tuple


# Order matters: the first suffix that matches is the only one removed.
LEGAL_SUFFIXES: Tuple[str, ...] = (
    " limited", " ltd", " limited.", " ltd.",
    " plc", " plc.", " inc", " inc.",
    " incorporated", " corporation", " corp",
    " llc", " l.l.c", " l.l.c.",
    " company", " co", " co.",
    " enterprises", " enterprise",
    " global", " international", " intl",
    " nigeria", " nig", " nig.",
)

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def strip_legal_suffix(name: str, suffixes: Sequence[str] = LEGAL_SUFFIXES) -> str:
    """Remove the first matching suffix from an already-lowercased name."""
    for suffix in suffixes:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def normalize_business_name(name: str, suffixes: Sequence[str] = LEGAL_SUFFIXES) -> str:
    """Normalize a business name for comparison.

    Args:
        name: Raw business name as typed by a user or scraped from a page
        suffixes: Ordered legal-entity suffixes; only one is ever stripped

    Returns:
        Normalized name, possibly empty
    """
    normalized = strip_legal_suffix(name.lower(), suffixes)
    normalized = _NON_WORD.sub("", normalized)
    normalized = _WHITESPACE.sub(" ", normalized)
    return normalized.strip()
