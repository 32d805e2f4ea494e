"""Map free-text country names, codes and aliases to canonical country records."""

from country_normalizer.errors import CountryNormalizerError, DataIOError, DataParseError
from country_normalizer.index.country_index import CountryIndex
from country_normalizer.loaders.dataset_loader import (
    get_country_index,
    load_country_index,
    load_country_records,
)
from country_normalizer.models import Country, CountryRecord
from country_normalizer.normalizers import NormalizationRules, normalize_name

__all__ = [
    "Country",
    "CountryIndex",
    "CountryNormalizerError",
    "CountryRecord",
    "DataIOError",
    "DataParseError",
    "NormalizationRules",
    "get_country_index",
    "load_country_index",
    "load_country_records",
    "normalize_name",
]
