"""
Static catalog of filterable topics and countries, plus canned popular searches.

The catalog is loaded once at startup and never mutated afterwards.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .data import default_catalog as builtin_data
from .error_handler_util import ErrorHandlerUtil

logger = logging.getLogger('SuggestBox.Catalog')
error_context = ErrorHandlerUtil.create_error_context('Catalog')


class CatalogError(ValueError):
    """Raised when catalog data cannot be loaded or is malformed."""


@dataclass(frozen=True)
class Country:
    """A country filter: unique name plus a display glyph (usually a flag)."""
    name: str
    flag: str = ""

    @property
    def label(self) -> str:
        return f"{self.flag} {self.name}" if self.flag else self.name


@dataclass(frozen=True)
class Catalog:
    """Immutable catalog of topics, countries and popular searches."""
    topics: Tuple[str, ...]
    countries: Tuple[Country, ...]
    popular_searches: Tuple[str, ...] = ()

    def find_country(self, name: str) -> Optional[Country]:
        """Look up a country by exact name."""
        for country in self.countries:
            if country.name == name:
                return country
        return None


def default_catalog() -> Catalog:
    """Return the built-in catalog."""
    return Catalog(
        topics=tuple(builtin_data.TOPICS),
        countries=tuple(Country(name, flag) for name, flag in builtin_data.COUNTRIES),
        popular_searches=tuple(builtin_data.POPULAR_SEARCHES),
    )


def _require_list(data: dict, key: str, required: bool) -> list:
    if key not in data:
        if required:
            error_context.log_and_raise(f"Catalog is missing required key '{key}'", CatalogError)
        return []
    value = data[key]
    if not isinstance(value, list):
        error_context.log_and_raise(
            f"Catalog key '{key}' must be a list, got {type(value).__name__}", CatalogError
        )
    return value


def _parse_country(entry, index: int) -> Country:
    if isinstance(entry, str):
        return Country(entry)
    if not (isinstance(entry, dict) and isinstance(entry.get('name'), str)):
        error_context.log_and_raise(f"Country entry {index} is malformed: {entry!r}", CatalogError)
    return Country(entry['name'], str(entry.get('flag', '')))


def catalog_from_dict(data) -> Catalog:
    """
    Build and validate a Catalog from decoded JSON.

    Args:
        data: Mapping with 'topics', 'countries' and optional 'popular_searches'

    Returns:
        Catalog: Validated catalog

    Raises:
        CatalogError: If the data has the wrong shape, empty labels or duplicate names
    """
    if not isinstance(data, dict):
        error_context.log_and_raise(
            f"Catalog must be a JSON object, got {type(data).__name__}", CatalogError
        )

    topics = _require_list(data, 'topics', required=True)
    countries = [
        _parse_country(entry, i)
        for i, entry in enumerate(_require_list(data, 'countries', required=True))
    ]
    popular = _require_list(data, 'popular_searches', required=False)

    for topic in topics:
        if not isinstance(topic, str) or not topic.strip():
            error_context.log_and_raise(f"Invalid topic label: {topic!r}", CatalogError)
    for phrase in popular:
        if not isinstance(phrase, str) or not phrase.strip():
            error_context.log_and_raise(f"Invalid popular search: {phrase!r}", CatalogError)

    _check_unique(topics, "topic")
    _check_unique([country.name for country in countries], "country")

    return Catalog(tuple(topics), tuple(countries), tuple(popular))


def _check_unique(names, kind: str):
    seen = set()
    for name in names:
        if name in seen:
            error_context.log_and_raise(f"Duplicate {kind} in catalog: {name!r}", CatalogError)
        seen.add(name)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load the catalog from a JSON file, or the built-in data when path is None.

    Raises:
        CatalogError: If the file cannot be read or fails validation
    """
    if path is None:
        logger.debug("Using built-in catalog")
        return default_catalog()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        error_context.log_and_raise(f"Cannot read catalog file {path}", CatalogError, cause=e)
    except json.JSONDecodeError as e:
        error_context.log_and_raise(f"Catalog file {path} is not valid JSON", CatalogError, cause=e)

    catalog = catalog_from_dict(data)
    logger.info(
        f"Loaded catalog from {path}: {len(catalog.topics)} topics, "
        f"{len(catalog.countries)} countries, {len(catalog.popular_searches)} popular searches"
    )
    return catalog
