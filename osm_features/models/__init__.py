"""Data models for tagging presets (features) and their locales."""

from osm_features.models.geometry import GeometryType
from osm_features.models.locale import Locale, NoLocale, NO_LOCALE
from osm_features.models.feature import Feature
from osm_features.models.base_feature import BaseFeature
from osm_features.models.localized_feature import LocalizedFeature

__all__ = [
    'GeometryType', 'Locale', 'NoLocale', 'NO_LOCALE',
    'Feature', 'BaseFeature', 'LocalizedFeature',
]
