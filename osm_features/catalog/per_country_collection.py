"""In-memory feature collection keyed by country.

Brand presets (name suggestions such as a supermarket chain) are defined
per country or subdivision. None stands for features available worldwide.
"""
import re
import threading
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from osm_features.models.feature import Feature
from osm_features.utils.collection_utils import synchronized_get_or_create

# ISO 3166-1 alpha-2, optionally followed by an ISO 3166-2 subdivision
VALID_COUNTRY_CODE = re.compile(r'^([A-Z]{2})(?:-([A-Z0-9]{1,3}))?$')


def normalize_country_code(country_code: Optional[str]) -> Optional[str]:
    """Upper-case and validate a country code, None stays None.

    Raises:
        ValueError: If the code is not like 'US' or 'US-NY'
    """
    if country_code is None:
        return None
    if not isinstance(country_code, str) or not VALID_COUNTRY_CODE.match(country_code.strip().upper()):
        raise ValueError(f"Invalid country code: {country_code!r}")
    return country_code.strip().upper()


def dissect_country_code(country_code: Optional[str]) -> List[Optional[str]]:
    """Country codes to look in for an element in the given country or state.

    Args:
        country_code: ISO 3166-1 alpha-2 code ('US') or ISO 3166-2 code
            ('US-NY'), None if unknown

    Returns:
        Worldwide (None) first, then the country, then the subdivision,
        e.g. [None, 'US', 'US-NY']

    Raises:
        ValueError: If the code is malformed
    """
    code = normalize_country_code(country_code)
    if code is None:
        return [None]
    country = VALID_COUNTRY_CODE.match(code).group(1)
    result: List[Optional[str]] = [None, country]
    if code != country:
        result.append(code)
    return result


class PerCountryFeatureCollection:
    """Features grouped by the country they are defined for.

    Example:
        >>> collection = PerCountryFeatureCollection({None: [aldi], 'DE': [rewe]})
        >>> [f.id for f in collection.get_all(dissect_country_code('DE-BY'))]
        ['brand/aldi', 'brand/rewe']

    Merged lookups are cached per country chain; the collection is safe for
    concurrent use.
    """

    def __init__(self, features_by_country: Mapping[Optional[str], Iterable[Feature]]):
        """Index features by country code and id.

        Args:
            features_by_country: Country code (None for worldwide) to features

        Raises:
            ValueError: On malformed country codes, two keys naming the same
                country, non-features, or duplicate ids within one country
        """
        self._features: Dict[Optional[str], Dict[str, Feature]] = {}
        for country_code, features in features_by_country.items():
            code = normalize_country_code(country_code)
            if code in self._features:
                raise ValueError(f"Duplicate country code: {country_code!r}")

            by_id: Dict[str, Feature] = {}
            for feature in features:
                if not isinstance(feature, Feature):
                    raise ValueError(f"Expected Feature, got {type(feature).__name__}")
                if feature.id in by_id:
                    raise ValueError(f"Duplicate feature id: {feature.id!r} ({code or 'worldwide'})")
                by_id[feature.id] = feature
            self._features[code] = by_id

        self._merged: Dict[Tuple[Optional[str], ...], Dict[str, Feature]] = {}
        self._lock = threading.Lock()

    @property
    def country_codes(self) -> List[str]:
        """Countries and subdivisions that have their own features."""
        return sorted(code for code in self._features if code is not None)

    def get_all(self, country_codes) -> List[Feature]:
        """All features of the given countries.

        Args:
            country_codes: Country codes, None for worldwide. A single code is
                accepted too. Later countries override earlier ones for the
                same id.

        Returns:
            Features in order of first appearance
        """
        return list(self._resolve(country_codes).values())

    def get(self, id: str, country_codes) -> Optional[Feature]:
        """Feature with the given id from the first listed country that has it."""
        for code in self._normalize(country_codes):
            feature = self._features.get(code, {}).get(id)
            if feature is not None:
                return feature
        return None

    def _normalize(self, country_codes) -> Tuple[Optional[str], ...]:
        if country_codes is None or isinstance(country_codes, str):
            country_codes = [country_codes]
        return tuple(normalize_country_code(code) for code in country_codes)

    def _resolve(self, country_codes) -> Dict[str, Feature]:
        chain = self._normalize(country_codes)
        return synchronized_get_or_create(self._merged, chain, self._merge, self._lock)

    def _merge(self, chain: Tuple[Optional[str], ...]) -> Dict[str, Feature]:
        merged: Dict[str, Feature] = {}
        for code in chain:
            merged.update(self._features.get(code, {}))
        return merged

    def __len__(self) -> int:
        return sum(len(by_id) for by_id in self._features.values())
