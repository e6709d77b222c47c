"""Utility functions for feature processing."""

from osm_features.utils.string_utils import (
    CANONICAL_FORM_VERSION, canonicalize, strip_diacritics
)
from osm_features.utils.collection_utils import synchronized_get_or_create

__all__ = [
    'CANONICAL_FORM_VERSION', 'canonicalize', 'strip_diacritics',
    'synchronized_get_or_create',
]
