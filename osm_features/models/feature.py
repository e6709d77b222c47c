"""Feature abstraction shared by base and localized features.

Consumers such as tag matchers and search indexes work against Feature
only and never need to know which concrete variant they hold.
"""
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Optional, Tuple

from osm_features.models.geometry import GeometryType
from osm_features.models.locale import FeatureLocale
from osm_features.utils.string_utils import canonicalize


class Feature(ABC):
    """A named category of a tagging vocabulary, e.g. "Bakery" for shop=bakery.

    Instances are immutable: every attribute is a read-only property and
    sequences and mappings are exposed as tuples and mapping proxies.
    Equality and hashing are by identity.
    """
    __slots__ = ()

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable identifier, unique in a feature catalog (e.g. 'shop/bakery')."""

    @property
    @abstractmethod
    def tags(self) -> Mapping:
        """Tags that define this feature."""

    @property
    @abstractmethod
    def geometry(self) -> Tuple[GeometryType, ...]:
        """Geometry types this feature applies to."""

    @property
    @abstractmethod
    def icon(self) -> Optional[str]:
        """Icon reference, None if absent."""

    @property
    @abstractmethod
    def image_url(self) -> Optional[str]:
        """Image reference, None if absent."""

    @property
    @abstractmethod
    def names(self) -> Tuple[str, ...]:
        """Display names, primary name first."""

    @property
    @abstractmethod
    def terms(self) -> Tuple[str, ...]:
        """Additional search synonyms."""

    @property
    @abstractmethod
    def canonical_names(self) -> Tuple[str, ...]:
        """canonicalize() applied to each of names, same order."""

    @property
    @abstractmethod
    def canonical_terms(self) -> Tuple[str, ...]:
        """canonicalize() applied to each of terms, same order."""

    @property
    @abstractmethod
    def include_country_codes(self) -> Tuple[str, ...]:
        """Countries this feature is limited to, empty if unrestricted."""

    @property
    @abstractmethod
    def exclude_country_codes(self) -> Tuple[str, ...]:
        """Countries this feature does not apply to."""

    @property
    @abstractmethod
    def is_searchable(self) -> bool:
        """Whether the feature should be offered in search results."""

    @property
    @abstractmethod
    def match_score(self) -> float:
        """Relative weight used by rankers, >= 0."""

    @property
    @abstractmethod
    def add_tags(self) -> Mapping:
        """Tags to set when the feature is applied to an element."""

    @property
    @abstractmethod
    def remove_tags(self) -> Mapping:
        """Tags to delete when the feature is removed from an element."""

    @property
    @abstractmethod
    def locale(self) -> FeatureLocale:
        """Language of names and terms, NO_LOCALE if language-neutral."""

    @property
    def name(self) -> str:
        """Primary display name."""
        return self.names[0]

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set {key!r}")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete {key!r}")

    def _init_attr(self, key: str, value: Any) -> None:
        object.__setattr__(self, key, value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, locale={self.locale!r})"


def freeze_tags(tags, what: str = 'tags') -> MappingProxyType:
    """Copy tags into a read-only mapping.

    Args:
        tags: Mapping or iterable of (key, value) pairs, None for no tags
        what: Argument name used in error messages

    Returns:
        Read-only view of a private copy

    Raises:
        ValueError: If a key repeats or a key/value is not a string
    """
    if tags is None:
        return MappingProxyType({})
    pairs = tags.items() if isinstance(tags, Mapping) else tags

    result = {}
    try:
        for key, value in pairs:
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(f"{what} must map strings to strings, got {key!r}: {value!r}")
            if key in result:
                raise ValueError(f"Duplicate key in {what}: {key!r}")
            result[key] = value
    except TypeError:
        raise ValueError(f"{what} must be a mapping or (key, value) pairs, got {tags!r}") from None
    return MappingProxyType(result)


def freeze_strings(values: Optional[Iterable[str]], what: str) -> Tuple[str, ...]:
    """Copy a sequence of strings into a tuple.

    A bare string is rejected, it is almost always a missing list.

    Raises:
        ValueError: If values is a string, not iterable, or holds non-strings
    """
    if values is None:
        return ()
    if isinstance(values, str):
        raise ValueError(f"{what} must be a sequence of strings, not a string: {values!r}")
    try:
        result = tuple(values)
    except TypeError:
        raise ValueError(f"{what} must be a sequence of strings, got {values!r}") from None
    for value in result:
        if not isinstance(value, str):
            raise ValueError(f"{what} must contain only strings, got {value!r}")
    return result


def freeze_names(names: Iterable[str]) -> Tuple[str, ...]:
    """Like freeze_strings but requires at least one name."""
    result = freeze_strings(names, 'names')
    if not result:
        raise ValueError("names must not be empty")
    return result


def canonicalize_all(values: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(canonicalize(v) for v in values)
