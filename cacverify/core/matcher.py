"""
Layered business-name matching.
"""
from typing import List, Sequence

from cacverify.core.normalizer import LEGAL_SUFFIXES, normalize_business_name

# Words this short are treated as connectors/noise by the word-subset check.
MIN_SIGNIFICANT_WORD_LENGTH = 4


def _words_contained(words: List[str], other: str) -> bool:
    if len(words) < 2:
        return False
    for word in words:
        if len(word) >= MIN_SIGNIFICANT_WORD_LENGTH and word not in other:
            return False
    return True


def business_names_match(name1: str, name2: str, suffixes: Sequence[str] = LEGAL_SUFFIXES) -> bool:
    """Check whether two raw business names denote the same entity.

    Cascade (first hit wins):
    - exact match of the normalized forms
    - one normalized form contains the other
    - every significant word of a multi-word name appears in the other name,
      checked in both directions

    Args:
        name1: First business name
        name2: Second business name
        suffixes: Legal suffixes stripped before comparing

    Returns:
        True if the names are considered a match
    """
    normalized1 = normalize_business_name(name1, suffixes)
    normalized2 = normalize_business_name(name2, suffixes)
    
    if normalized1 == normalized2:
        return True
    
    if normalized1 in normalized2 or normalized2 in normalized1:
        return True
    
    if _words_contained(normalized1.split(" "), normalized2):
        return True
    
    return _words_contained(normalized2.split(" "), normalized1)
