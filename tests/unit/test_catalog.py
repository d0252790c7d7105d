"""
Tests for catalog loading and validation.
"""

import json
import pytest

from suggestbox.catalog import (
    Catalog, CatalogError, Country, _parse_country, catalog_from_dict, default_catalog, load_catalog
)


def write_catalog(tmp_path, data, name="catalog.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestCountry:
    """Test the Country value type."""

    def test_label_with_flag(self):
        assert Country("France", "🇫🇷").label == "🇫🇷 France"

    def test_label_without_flag(self):
        assert Country("France").label == "France"

    def test_equality_by_value(self):
        assert Country("France", "🇫🇷") == Country("France", "🇫🇷")


class TestDefaultCatalog:
    """Test the built-in catalog."""

    def test_has_entries(self):
        catalog = default_catalog()

        assert len(catalog.topics) > 0
        assert len(catalog.countries) > 0
        assert len(catalog.popular_searches) > 0

    def test_names_are_unique(self):
        catalog = default_catalog()

        assert len(set(catalog.topics)) == len(catalog.topics)
        names = [country.name for country in catalog.countries]
        assert len(set(names)) == len(names)

    def test_find_country(self):
        catalog = default_catalog()
        first = catalog.countries[0]

        assert catalog.find_country(first.name) == first
        assert catalog.find_country("Atlantis") is None

    def test_load_without_path_uses_builtin(self):
        assert load_catalog() == default_catalog()


class TestCatalogFromDict:
    """Test validation of decoded catalog data."""

    def test_valid_data(self):
        catalog = catalog_from_dict({
            "topics": ["Health", "Trade"],
            "countries": [{"name": "France", "flag": "🇫🇷"}, "Kenya"],
            "popular_searches": ["Trade deals"],
        })

        assert catalog == Catalog(
            ("Health", "Trade"),
            (Country("France", "🇫🇷"), Country("Kenya")),
            ("Trade deals",),
        )

    def test_popular_searches_optional(self):
        catalog = catalog_from_dict({"topics": ["Health"], "countries": []})
        assert catalog.popular_searches == ()

    @pytest.mark.parametrize("data, message", [
        ([], "must be a JSON object"),
        ({"countries": []}, "missing required key 'topics'"),
        ({"topics": []}, "missing required key 'countries'"),
        ({"topics": "Health", "countries": []}, "must be a list"),
        ({"topics": [""], "countries": []}, "Invalid topic"),
        ({"topics": [3], "countries": []}, "Invalid topic"),
        ({"topics": [], "countries": [42]}, "malformed"),
        ({"topics": [], "countries": [], "popular_searches": ["  "]}, "Invalid popular search"),
        ({"topics": ["Health", "Health"], "countries": []}, "Duplicate topic"),
        ({"topics": [], "countries": ["France", {"name": "France"}]}, "Duplicate country"),
    ])
    def test_invalid_data(self, data, message):
        with pytest.raises(CatalogError, match=message):
            catalog_from_dict(data)

    @pytest.mark.parametrize("entry", [42, None, {"flag": "🇫🇷"}, {"name": 7}])
    def test_malformed_country_entry(self, entry):
        with pytest.raises(CatalogError, match="Country entry 0 is malformed"):
            _parse_country(entry, 0)

    def test_country_entry_forms(self):
        assert _parse_country("Peru", 0) == Country("Peru")
        assert _parse_country({"name": "Peru"}, 1) == Country("Peru", "")
        assert _parse_country({"name": "Peru", "flag": "🇵🇪"}, 2) == Country("Peru", "🇵🇪")


class TestLoadCatalog:
    """Test loading catalogs from JSON files."""

    def test_load_from_file(self, tmp_path):
        path = write_catalog(tmp_path, {
            "topics": ["Energy"],
            "countries": [{"name": "Spain", "flag": "🇪🇸"}],
        })

        catalog = load_catalog(path)

        assert catalog.topics == ("Energy",)
        assert catalog.countries == (Country("Spain", "🇪🇸"),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot read catalog file") as exc_info:
            load_catalog(str(tmp_path / "missing.json"))

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(str(path))

    def test_catalog_error_is_value_error(self, tmp_path):
        path = write_catalog(tmp_path, {"topics": []})

        with pytest.raises(ValueError):
            load_catalog(path)
