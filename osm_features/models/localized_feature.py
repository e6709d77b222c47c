"""Localized feature: translated names and terms over a base feature."""
from types import MappingProxyType
from typing import Iterable, Optional, Tuple, Union

from osm_features.models.base_feature import BaseFeature
from osm_features.models.feature import (
    Feature, canonicalize_all, freeze_names, freeze_strings
)
from osm_features.models.geometry import GeometryType
from osm_features.models.locale import Locale, to_locale


class LocalizedFeature(Feature):
    """Feature whose names and terms are given in a specific locale.

    Only names, terms, their canonical forms and the locale belong to this
    object. Everything else is read from the wrapped base feature, so a
    translation never restates tags or metadata. Many localized features
    may share one base feature.
    """
    __slots__ = ('_base', '_locale', '_names', '_terms',
                 '_canonical_names', '_canonical_terms')

    def __init__(self, base: BaseFeature, locale: Union[Locale, str],
                 names: Iterable[str], terms: Iterable[str] = ()):
        """Wrap a base feature with translations.

        Args:
            base: Feature providing all non-language attributes
            locale: Locale of names and terms, or a tag such as 'de-AT'
            names: Translated display names, at least one, primary first
            terms: Translated search synonyms

        Raises:
            ValueError: If base is not a BaseFeature, locale is missing or
                malformed, or names/terms are malformed
        """
        if not isinstance(base, BaseFeature):
            raise ValueError(f"base must be a BaseFeature, got {type(base).__name__}")
        if locale is None or not isinstance(locale, (Locale, str)):
            raise ValueError(f"locale must be a Locale or language tag, got {locale!r}")

        names = freeze_names(names)
        terms = freeze_strings(terms, 'terms')

        self._init_attr('_base', base)
        self._init_attr('_locale', to_locale(locale))
        self._init_attr('_names', names)
        self._init_attr('_terms', terms)
        self._init_attr('_canonical_names', canonicalize_all(names))
        self._init_attr('_canonical_terms', canonicalize_all(terms))

    @property
    def base(self) -> BaseFeature:
        """The feature this translation belongs to."""
        return self._base

    @property
    def locale(self) -> Locale:
        return self._locale

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

    # Delegated to the base feature

    @property
    def id(self) -> str:
        return self._base.id

    @property
    def tags(self) -> MappingProxyType:
        return self._base.tags

    @property
    def geometry(self) -> Tuple[GeometryType, ...]:
        return self._base.geometry

    @property
    def icon(self) -> Optional[str]:
        return self._base.icon

    @property
    def image_url(self) -> Optional[str]:
        return self._base.image_url

    @property
    def include_country_codes(self) -> Tuple[str, ...]:
        return self._base.include_country_codes

    @property
    def exclude_country_codes(self) -> Tuple[str, ...]:
        return self._base.exclude_country_codes

    @property
    def is_searchable(self) -> bool:
        return self._base.is_searchable

    @property
    def match_score(self) -> float:
        return self._base.match_score

    @property
    def add_tags(self) -> MappingProxyType:
        return self._base.add_tags

    @property
    def remove_tags(self) -> MappingProxyType:
        return self._base.remove_tags

    def __reduce__(self):
        return (LocalizedFeature, (self._base, self._locale, list(self._names), list(self._terms)))
