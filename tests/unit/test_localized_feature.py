"""Tests for LocalizedFeature."""
import copy
import pickle

import pytest
from osm_features.models.feature import Feature
from osm_features.models.locale import Locale, NO_LOCALE
from osm_features.models.localized_feature import LocalizedFeature

DELEGATED_ATTRIBUTES = [
    "id", "tags", "geometry", "icon", "image_url",
    "include_country_codes", "exclude_country_codes",
    "is_searchable", "match_score", "add_tags", "remove_tags",
]


class TestLocalizedFeature:
    """Tests for LocalizedFeature class."""

    def test_german_bakery_scenario(self, bakery, german_bakery):
        """Test the documented German bakery example."""
        assert german_bakery.name == "Bäckerei"
        assert german_bakery.canonical_names == ("backerei",)
        assert german_bakery.terms == ()
        assert german_bakery.canonical_terms == ()
        assert german_bakery.tags is bakery.tags
        assert german_bakery.locale == Locale("de")
        assert str(german_bakery.locale) == "de"

    def test_is_feature(self, german_bakery):
        """Test LocalizedFeature satisfies Feature."""
        assert isinstance(german_bakery, Feature)

    @pytest.mark.parametrize("attribute", DELEGATED_ATTRIBUTES)
    def test_delegates_to_base(self, bakery, german_bakery, attribute):
        """Test non-language attributes come from the base feature."""
        assert getattr(german_bakery, attribute) == getattr(bakery, attribute)
        assert getattr(german_bakery, attribute) is getattr(bakery, attribute)

    def test_base(self, bakery, german_bakery):
        """Test the wrapped feature is exposed."""
        assert german_bakery.base is bakery

    def test_base_names_untouched(self, bakery, german_bakery):
        """Test translations do not leak into the base feature."""
        assert bakery.name == "Bakery"
        assert bakery.canonical_names == ("bakery",)
        assert bakery.locale is NO_LOCALE

    def test_own_canonical_forms(self, bakery):
        """Test names and terms are canonicalized independently."""
        feature = LocalizedFeature(bakery, "fr", ["Boulangerie", "Pâtisserie"], ["Pain  Frais"])
        assert feature.canonical_names == ("boulangerie", "patisserie")
        assert feature.canonical_terms == ("pain frais",)
        assert len(feature.canonical_names) == len(feature.names)
        assert len(feature.canonical_terms) == len(feature.terms)

    def test_locale_object_kept(self, bakery):
        """Test a Locale argument is stored as given."""
        locale = Locale("de", "AT")
        feature = LocalizedFeature(bakery, locale, ["Backhusl"])
        assert feature.locale is locale

    def test_locale_tag_parsed(self, bakery):
        """Test a tag argument is parsed."""
        feature = LocalizedFeature(bakery, "de_cyrl", ["бацкхаус"])
        assert feature.locale == Locale("de", script="Cyrl")

    def test_many_translations_share_base(self, bakery):
        """Test several translations wrap one base feature."""
        german = LocalizedFeature(bakery, "de", ["Bäckerei"])
        french = LocalizedFeature(bakery, "fr", ["Boulangerie"])
        assert german.base is french.base is bakery
        assert german.id == french.id == "shop/bakery"

    def test_str_is_id(self, german_bakery):
        """Test string form."""
        assert str(german_bakery) == "shop/bakery"

    def test_repr(self, german_bakery):
        """Test repr names class, id and locale."""
        text = repr(german_bakery)
        assert text.startswith("LocalizedFeature(id='shop/bakery'")
        assert "Locale(language='de'" in text

    def test_immutable(self, german_bakery):
        """Test attributes cannot be reassigned or deleted."""
        with pytest.raises(AttributeError):
            german_bakery.names = ("Konditorei",)
        with pytest.raises(AttributeError):
            german_bakery._base = None
        with pytest.raises(AttributeError):
            del german_bakery._locale

    def test_inputs_are_copied(self, bakery):
        """Test mutating the name list does not affect the feature."""
        names = ["Bäckerei"]
        feature = LocalizedFeature(bakery, "de", names)
        names[0] = "Metzgerei"
        assert feature.name == "Bäckerei"


class TestLocalizedFeatureValidation:
    """Tests for construction-time argument checks."""

    def test_empty_names(self, bakery):
        """Test a translation needs at least one name."""
        with pytest.raises(ValueError, match="names"):
            LocalizedFeature(bakery, "de", [])

    def test_names_as_string(self, bakery):
        """Test a bare string is rejected."""
        with pytest.raises(ValueError, match="names"):
            LocalizedFeature(bakery, "de", "Bäckerei")

    @pytest.mark.parametrize("locale", [None, NO_LOCALE, 42])
    def test_missing_locale(self, bakery, locale):
        """Test a translation must have a real locale."""
        with pytest.raises(ValueError, match="locale"):
            LocalizedFeature(bakery, locale, ["Bäckerei"])

    def test_malformed_locale_tag(self, bakery):
        """Test malformed tags are rejected."""
        with pytest.raises(ValueError):
            LocalizedFeature(bakery, "", ["Bäckerei"])

    def test_base_must_be_base_feature(self, german_bakery):
        """Test translations cannot be stacked."""
        with pytest.raises(ValueError, match="BaseFeature"):
            LocalizedFeature(german_bakery, "de-AT", ["Backhusl"])

    def test_base_missing(self):
        """Test base is required."""
        with pytest.raises(ValueError, match="BaseFeature"):
            LocalizedFeature(None, "de", ["Bäckerei"])


class TestLocalizedFeatureCopying:
    """Tests for copy and pickle support."""

    def test_copy_returns_same_instance(self, german_bakery):
        """Test shallow and deep copies of an immutable feature are the feature."""
        assert copy.copy(german_bakery) is german_bakery
        assert copy.deepcopy(german_bakery) is german_bakery

    def test_pickle_round_trip(self, german_bakery):
        """Test a pickled translation keeps names, locale and base attributes."""
        restored = pickle.loads(pickle.dumps(german_bakery))
        assert restored.name == "Bäckerei"
        assert restored.canonical_names == ("backerei",)
        assert restored.locale == Locale("de")
        assert restored.id == "shop/bakery"
        assert dict(restored.tags) == {"shop": "bakery"}
        assert restored.match_score == german_bakery.match_score

    def test_pickle_shares_base(self, bakery):
        """Test translations pickled together still share one base feature."""
        german = LocalizedFeature(bakery, "de", ["Bäckerei"])
        french = LocalizedFeature(bakery, "fr", ["Boulangerie"])
        restored_german, restored_french = pickle.loads(pickle.dumps([german, french]))
        assert restored_german.base is restored_french.base
        assert restored_german.tags is restored_french.tags
