"""Feature collections."""

from osm_features.catalog.localized_collection import LocalizedFeatureCollection
from osm_features.catalog.per_country_collection import (
    PerCountryFeatureCollection, dissect_country_code
)

__all__ = ['LocalizedFeatureCollection', 'PerCountryFeatureCollection', 'dissect_country_code']
