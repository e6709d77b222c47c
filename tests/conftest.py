"""Pytest fixtures for osm_features tests."""
import pytest


@pytest.fixture
def bakery():
    """Create BaseFeature for shop=bakery."""
    from osm_features.models.base_feature import BaseFeature
    return BaseFeature(
        id="shop/bakery",
        tags={"shop": "bakery"},
        geometry=["point", "area"],
        names=["Bakery"],
        terms=["bread", "pastry"],
        icon="maki-bakery",
        image_url="https://example.org/bakery.png",
        include_country_codes=["DE", "AT"],
        exclude_country_codes=["AT-9"],
        match_score=0.9,
    )


@pytest.fixture
def manhole():
    """Create BaseFeature for manhole=drain, a vertex-only feature."""
    from osm_features.models.base_feature import BaseFeature
    return BaseFeature(
        id="manhole/drain",
        tags={"manhole": "drain"},
        geometry=["point", "vertex"],
        names=["Storm Drain"],
        terms=["gully"],
    )


@pytest.fixture
def supermarket():
    """Create BaseFeature for shop=supermarket with no translations."""
    from osm_features.models.base_feature import BaseFeature
    return BaseFeature(
        id="shop/supermarket",
        tags={"shop": "supermarket"},
        geometry=["point", "area"],
        names=["Supermarket", "Grocery Store"],
        terms=["grocery", "store"],
    )


@pytest.fixture
def german_bakery(bakery):
    """Create German LocalizedFeature over the bakery."""
    from osm_features.models.localized_feature import LocalizedFeature
    return LocalizedFeature(bakery, "de", names=["Bäckerei"], terms=[])


@pytest.fixture
def collection(bakery, manhole, supermarket):
    """Create LocalizedFeatureCollection with en, de, de-AT and de-Cyrl translations."""
    from osm_features.catalog.localized_collection import LocalizedFeatureCollection
    from osm_features.models.localized_feature import LocalizedFeature
    return LocalizedFeatureCollection(
        [bakery, manhole, supermarket],
        [
            LocalizedFeature(bakery, "en", ["Bakery"], ["bread"]),
            LocalizedFeature(bakery, "de", ["Bäckerei"], ["Brot"]),
            LocalizedFeature(manhole, "de", ["Gullideckel"]),
            LocalizedFeature(bakery, "de-AT", ["Backhusl"]),
            LocalizedFeature(supermarket, "de-AT", ["Greißler"]),
            LocalizedFeature(bakery, "de-Cyrl", ["бацкхаус"]),
        ],
    )


@pytest.fixture
def brand_collection():
    """Create PerCountryFeatureCollection with worldwide, DE, DE-BY and US brands."""
    from osm_features.catalog.per_country_collection import PerCountryFeatureCollection
    from osm_features.models.base_feature import BaseFeature

    def brand(id, name, shop="supermarket", **kwargs):
        return BaseFeature(id, {"shop": shop, "brand": name}, ["point", "area"], [name],
                           is_searchable=False, **kwargs)

    return PerCountryFeatureCollection({
        None: [brand("brand/aldi", "Aldi"), brand("brand/lidl", "Lidl")],
        "DE": [brand("brand/rewe", "REWE", include_country_codes=["DE"]),
               brand("brand/aldi", "Aldi Süd", include_country_codes=["DE"])],
        "de-by": [brand("brand/edeka-suedbayern", "EDEKA Südbayern", include_country_codes=["DE-BY"])],
        "US": [brand("brand/walmart", "Walmart", include_country_codes=["US"])],
    })
