"""In-memory feature collection with locale fallback.

Holds already constructed base features and their translations and
answers "which feature do I show for this id in these locales?".
Reading definitions from files is left to the caller.
"""
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from osm_features.models.base_feature import BaseFeature
from osm_features.models.feature import Feature
from osm_features.models.localized_feature import LocalizedFeature
from osm_features.models.locale import FeatureLocale, Locale, NoLocale, to_locale
from osm_features.utils.collection_utils import synchronized_get_or_create


class LocalizedFeatureCollection:
    """Base features plus per-locale translations, resolved by fallback chain.

    A fallback chain is a sequence of locales, most preferred first. None
    (or NO_LOCALE) in the chain stands for the untranslated base features.
    For example ``['de-AT', 'en', None]`` shows Austrian German where
    available, then German, then English, then the untranslated name.

    Resolved chains are cached; the collection is safe for concurrent use.
    """

    def __init__(self, base_features: Iterable[BaseFeature],
                 localized_features: Iterable[LocalizedFeature] = ()):
        """Index features by id and translations by locale.

        Args:
            base_features: Features with unique ids
            localized_features: Translations of features in base_features

        Raises:
            ValueError: On duplicate ids, duplicate translations for the same
                id and locale, or translations of unknown base features
        """
        self._features_by_id: Dict[str, BaseFeature] = {}
        for feature in base_features:
            if not isinstance(feature, BaseFeature):
                raise ValueError(f"Expected BaseFeature, got {type(feature).__name__}")
            if feature.id in self._features_by_id:
                raise ValueError(f"Duplicate feature id: {feature.id!r}")
            self._features_by_id[feature.id] = feature

        self._localized: Dict[Locale, Dict[str, LocalizedFeature]] = {}
        for feature in localized_features:
            if not isinstance(feature, LocalizedFeature):
                raise ValueError(f"Expected LocalizedFeature, got {type(feature).__name__}")
            if self._features_by_id.get(feature.id) is not feature.base:
                raise ValueError(f"Translation of unknown feature: {feature.id!r} ({feature.locale})")
            by_id = self._localized.setdefault(feature.locale, {})
            if feature.id in by_id:
                raise ValueError(f"Duplicate translation: {feature.id!r} ({feature.locale})")
            by_id[feature.id] = feature

        self._resolved: Dict[Tuple[FeatureLocale, ...], Dict[str, Feature]] = {}
        self._lock = threading.Lock()

    @property
    def locales(self) -> List[Locale]:
        """Locales that have at least one translation."""
        return sorted(self._localized, key=str)

    def get_all(self, locales) -> List[Feature]:
        """All features visible in the given fallback chain.

        Args:
            locales: Fallback chain (or a single locale), see class docs

        Returns:
            Resolved features in base feature order. Ids with no feature in
            any locale of the chain are left out.
        """
        return list(self._resolve(locales).values())

    def get(self, id: str, locales) -> Optional[Feature]:
        """Feature with the given id as seen in the fallback chain, or None."""
        return self._resolve(locales).get(id)

    def _resolve(self, locales) -> Dict[str, Feature]:
        if locales is None or isinstance(locales, (str, Locale, NoLocale)):
            locales = [locales]
        chain = tuple(to_locale(locale) for locale in locales)
        return synchronized_get_or_create(self._resolved, chain, self._merge, self._lock)

    def _merge(self, chain: Tuple[FeatureLocale, ...]) -> Dict[str, Feature]:
        merged: Dict[str, Feature] = {}
        # least preferred first so preferred locales overwrite
        for locale in reversed(chain):
            if not locale:
                merged.update(self._features_by_id)
                continue
            for component in locale.components():
                merged.update(self._localized.get(component, {}))

        return {fid: merged[fid] for fid in self._features_by_id if fid in merged}

    def __len__(self) -> int:
        return len(self._features_by_id)

    def __contains__(self, id: str) -> bool:
        return id in self._features_by_id

    def __iter__(self) -> Iterator[BaseFeature]:
        return iter(self._features_by_id.values())
