"""Locale value type and the explicit "no locale" marker.

Features carry either a Locale (the language their names are written in)
or NO_LOCALE (language-neutral fallback content).
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Union

_LANGUAGE = re.compile(r'^[a-z]{2,3}$')
_SCRIPT = re.compile(r'^[A-Z][a-z]{3}$')
_REGION = re.compile(r'^(?:[A-Z]{2}|[0-9]{3})$')


class NoLocale:
    """Marker for content that is not in any particular language.

    There is exactly one instance, NO_LOCALE. It is falsy so that
    ``if feature.locale:`` reads naturally.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ''

    def __repr__(self) -> str:
        return 'NO_LOCALE'

    def __reduce__(self):
        return (NoLocale, ())


NO_LOCALE = NoLocale()


@dataclass(frozen=True)
class Locale:
    """Language, optional region and optional script.

    Components are normalized on construction: language lower-case,
    script title-case, region upper-case.
    """
    language: str
    region: Optional[str] = None
    script: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.language, str):
            raise ValueError(f"Invalid language: {self.language!r}")
        if self.region is not None and not isinstance(self.region, str):
            raise ValueError(f"Invalid region: {self.region!r}")
        if self.script is not None and not isinstance(self.script, str):
            raise ValueError(f"Invalid script: {self.script!r}")

        language = self.language.lower()
        region = self.region.upper() if self.region else None
        script = self.script.title() if self.script else None

        if not _LANGUAGE.match(language):
            raise ValueError(f"Invalid language: {self.language!r}")
        if region is not None and not _REGION.match(region):
            raise ValueError(f"Invalid region: {self.region!r}")
        if script is not None and not _SCRIPT.match(script):
            raise ValueError(f"Invalid script: {self.script!r}")

        object.__setattr__(self, 'language', language)
        object.__setattr__(self, 'region', region)
        object.__setattr__(self, 'script', script)

    @classmethod
    def from_tag(cls, tag: str) -> 'Locale':
        """Parse a language tag such as 'de', 'pt-BR', 'de-Cyrl-AT' or 'pt_BR'.

        Args:
            tag: Language tag, '-' or '_' separated

        Returns:
            Parsed Locale

        Raises:
            ValueError: If the tag is empty or has unrecognized subtags
        """
        parts = [p for p in re.split(r'[-_]', str(tag).strip()) if p]
        if not parts or len(parts) > 3:
            raise ValueError(f"Invalid language tag: {tag!r}")

        language, region, script = parts[0], None, None
        for part in parts[1:]:
            if len(part) == 4 and script is None and region is None:
                script = part
            elif len(part) in (2, 3) and region is None:
                region = part
            else:
                raise ValueError(f"Invalid language tag: {tag!r}")
        return cls(language, region, script)

    @property
    def language_tag(self) -> str:
        """Tag in canonical form, e.g. 'de-Cyrl-AT'."""
        return '-'.join(p for p in (self.language, self.script, self.region) if p)

    def components(self) -> List['Locale']:
        """Locales whose translations make up this locale, least specific first.

        For de-Cyrl-AT this is de, de-AT, de-Cyrl, de-Cyrl-AT.

        Returns:
            List of Locales ending with this locale's own components
        """
        result = [Locale(self.language)]
        if self.region:
            result.append(Locale(self.language, region=self.region))
        if self.script:
            result.append(Locale(self.language, script=self.script))
        if self.region and self.script:
            result.append(Locale(self.language, self.region, self.script))
        return result

    def __str__(self) -> str:
        return self.language_tag


FeatureLocale = Union[Locale, NoLocale]


def to_locale(value) -> FeatureLocale:
    """Coerce a Locale, tag string, None or NO_LOCALE to a FeatureLocale.

    None and NO_LOCALE both mean "unlocalized".

    Raises:
        ValueError: If value is a malformed tag or of an unsupported type
    """
    if value is None or value is NO_LOCALE:
        return NO_LOCALE
    if isinstance(value, Locale):
        return value
    if isinstance(value, str):
        return Locale.from_tag(value)
    raise ValueError(f"Not a locale: {value!r}")
