"""
OSM Features - tagging preset model for OpenStreetMap editors.

A feature is a named category such as "Bakery" (shop=bakery) with its
defining tags, presentation metadata and search names. This package
provides the feature model, its per-locale translations and the
canonical form used to search names.
"""

__version__ = "1.0.0"

# Text
from osm_features.utils.string_utils import (
    CANONICAL_FORM_VERSION, canonicalize, strip_diacritics
)

# Models
from osm_features.models.geometry import GeometryType
from osm_features.models.locale import Locale, NoLocale, NO_LOCALE
from osm_features.models.feature import Feature
from osm_features.models.base_feature import BaseFeature
from osm_features.models.localized_feature import LocalizedFeature

# Collections
from osm_features.catalog.localized_collection import LocalizedFeatureCollection
from osm_features.catalog.per_country_collection import (
    PerCountryFeatureCollection, dissect_country_code
)

__all__ = [
    # Version
    '__version__',
    # Text
    'CANONICAL_FORM_VERSION', 'canonicalize', 'strip_diacritics',
    # Models
    'GeometryType', 'Locale', 'NoLocale', 'NO_LOCALE',
    'Feature', 'BaseFeature', 'LocalizedFeature',
    # Collections
    'LocalizedFeatureCollection', 'PerCountryFeatureCollection', 'dissect_country_code',
]
