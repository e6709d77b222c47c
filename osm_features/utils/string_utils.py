"""String canonicalization - the search key contract.

Canonical forms are compared for equality and prefix matching by search
indexes built on top of features, so the rule set below is versioned.
Any change to it must bump CANONICAL_FORM_VERSION.

Rules (version 1):
    1. NFD decomposition
    2. drop Combining Diacritical Marks (U+0300..U+036F)
    3. NFC recomposition
    4. str.lower() (locale independent)
    5. collapse whitespace runs to a single space, trim both ends
    Punctuation is left untouched.
"""
import re
import unicodedata

CANONICAL_FORM_VERSION = 1

# Combining Diacritical Marks block only
_DIACRITICS = re.compile('[\u0300-\u036f]+')
_WHITESPACE = re.compile(r'\s+')


def strip_diacritics(text: str) -> str:
    """Remove accents from text.

    Args:
        text: Input text

    Returns:
        Text with combining diacritical marks removed, NFC-composed

    Examples:
        >>> strip_diacritics("Bäckerei")
        'Backerei'
        >>> strip_diacritics("Crème brûlée")
        'Creme brulee'
    """
    decomposed = unicodedata.normalize('NFD', str(text))
    return unicodedata.normalize('NFC', _DIACRITICS.sub('', decomposed))


def canonicalize(text: str) -> str:
    """Reduce a display string to its canonical search form.

    Total over all inputs: non-string values are converted with str() and
    the empty string maps to the empty string.

    Args:
        text: Display name or search term

    Returns:
        Lower-case, accent-free, whitespace-normalized string

    Examples:
        >>> canonicalize("Café")
        'cafe'
        >>> canonicalize("  Fast   Food\\tRestaurant ")
        'fast food restaurant'
    """
    folded = strip_diacritics(text).lower()
    return _WHITESPACE.sub(' ', folded).strip()
