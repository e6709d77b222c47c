"""Non-localized feature: the full definition of a preset."""
import math
from types import MappingProxyType
from typing import Iterable, Optional, Tuple

from osm_features.models.feature import (
    Feature, canonicalize_all, freeze_names, freeze_strings, freeze_tags
)
from osm_features.models.geometry import GeometryType
from osm_features.models.locale import NO_LOCALE, NoLocale


class BaseFeature(Feature):
    """Feature as defined by the preset itself, with language-neutral names.

    Holds every attribute. Localized variants wrap a BaseFeature and only
    replace names and terms.

    Example:
        >>> bakery = BaseFeature(
        ...     id="shop/bakery",
        ...     tags={"shop": "bakery"},
        ...     geometry=["point", "area"],
        ...     names=["Bakery"],
        ...     terms=["bread", "pastry"],
        ... )
        >>> bakery.name
        'Bakery'
        >>> bakery.canonical_terms
        ('bread', 'pastry')
    """
    __slots__ = (
        '_id', '_tags', '_geometry', '_icon', '_image_url', '_names', '_terms',
        '_canonical_names', '_canonical_terms',
        '_include_country_codes', '_exclude_country_codes',
        '_is_searchable', '_match_score', '_add_tags', '_remove_tags',
    )

    def __init__(self, id: str, tags, geometry: Iterable, names: Iterable[str],
                 terms: Iterable[str] = (), icon: Optional[str] = None,
                 image_url: Optional[str] = None,
                 include_country_codes: Iterable[str] = (),
                 exclude_country_codes: Iterable[str] = (),
                 is_searchable: bool = True, match_score: float = 1.0,
                 add_tags=None, remove_tags=None):
        """Validate and freeze a feature definition.

        Args:
            id: Unique identifier, e.g. 'shop/bakery'
            tags: Defining tags, mapping or (key, value) pairs
            geometry: GeometryType members or their names, at least one
            names: Display names, at least one, primary first
            terms: Search synonyms
            icon: Icon reference
            image_url: Image reference
            include_country_codes: Countries the feature is limited to
            exclude_country_codes: Countries the feature does not apply to
            is_searchable: Whether search should offer this feature
            match_score: Ranking weight, >= 0
            add_tags: Tags to set on apply, defaults to tags
            remove_tags: Tags to delete on removal, defaults to add_tags

        Raises:
            ValueError: If any argument is malformed
        """
        if not isinstance(id, str) or not id:
            raise ValueError(f"id must be a non-empty string, got {id!r}")

        frozen_tags = freeze_tags(tags)
        frozen_add_tags = frozen_tags if add_tags is None else freeze_tags(add_tags, 'add_tags')
        frozen_remove_tags = (frozen_add_tags if remove_tags is None
                              else freeze_tags(remove_tags, 'remove_tags'))

        names = freeze_names(names)
        terms = freeze_strings(terms, 'terms')

        self._init_attr('_id', id)
        self._init_attr('_tags', frozen_tags)
        self._init_attr('_geometry', _freeze_geometry(geometry))
        self._init_attr('_icon', icon or None)
        self._init_attr('_image_url', image_url or None)
        self._init_attr('_names', names)
        self._init_attr('_terms', terms)
        self._init_attr('_canonical_names', canonicalize_all(names))
        self._init_attr('_canonical_terms', canonicalize_all(terms))
        self._init_attr('_include_country_codes',
                        freeze_strings(include_country_codes, 'include_country_codes'))
        self._init_attr('_exclude_country_codes',
                        freeze_strings(exclude_country_codes, 'exclude_country_codes'))
        self._init_attr('_is_searchable', bool(is_searchable))
        self._init_attr('_match_score', _check_match_score(match_score))
        self._init_attr('_add_tags', frozen_add_tags)
        self._init_attr('_remove_tags', frozen_remove_tags)

    @property
    def id(self) -> str:
        return self._id

    @property
    def tags(self) -> MappingProxyType:
        return self._tags

    @property
    def geometry(self) -> Tuple[GeometryType, ...]:
        return self._geometry

    @property
    def icon(self) -> Optional[str]:
        return self._icon

    @property
    def image_url(self) -> Optional[str]:
        return self._image_url

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    @property
    def canonical_names(self) -> Tuple[str, ...]:
        return self._canonical_names

    @property
    def canonical_terms(self) -> Tuple[str, ...]:
        return self._canonical_terms

    @property
    def include_country_codes(self) -> Tuple[str, ...]:
        return self._include_country_codes

    @property
    def exclude_country_codes(self) -> Tuple[str, ...]:
        return self._exclude_country_codes

    @property
    def is_searchable(self) -> bool:
        return self._is_searchable

    @property
    def match_score(self) -> float:
        return self._match_score

    @property
    def add_tags(self) -> MappingProxyType:
        return self._add_tags

    @property
    def remove_tags(self) -> MappingProxyType:
        return self._remove_tags

    @property
    def locale(self) -> NoLocale:
        return NO_LOCALE

    def __reduce__(self):
        return (BaseFeature, (
            self._id, dict(self._tags), list(self._geometry), list(self._names),
            list(self._terms), self._icon, self._image_url,
            list(self._include_country_codes), list(self._exclude_country_codes),
            self._is_searchable, self._match_score,
            dict(self._add_tags), dict(self._remove_tags),
        ))


def _freeze_geometry(geometry) -> Tuple[GeometryType, ...]:
    if geometry is None or isinstance(geometry, (str, GeometryType)):
        raise ValueError(f"geometry must be a sequence of geometry types, got {geometry!r}")

    try:
        items = list(geometry)
    except TypeError:
        raise ValueError(f"geometry must be a sequence of geometry types, got {geometry!r}") from None

    result = []
    for g in items:
        geometry_type = g if isinstance(g, GeometryType) else GeometryType.from_name(g)
        if geometry_type in result:
            raise ValueError(f"Duplicate geometry type: {geometry_type.value!r}")
        result.append(geometry_type)

    if not result:
        raise ValueError("geometry must not be empty")
    return tuple(result)


def _check_match_score(match_score) -> float:
    try:
        score = float(match_score)
    except (TypeError, ValueError):
        raise ValueError(f"match_score must be a number, got {match_score!r}") from None
    if math.isnan(score) or math.isinf(score) or score < 0:
        raise ValueError(f"match_score must be a finite number >= 0, got {match_score!r}")
    return score
