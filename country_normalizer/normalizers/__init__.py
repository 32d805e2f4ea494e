"""Text normalization used to build and query the country index."""

from country_normalizer.normalizers.name_normalizer import normalize_name, tokenize
from country_normalizer.normalizers.rules import (
    DEFAULT_RULES,
    NormalizationRules,
    get_normalization_rules,
)

__all__ = [
    "DEFAULT_RULES",
    "NormalizationRules",
    "get_normalization_rules",
    "normalize_name",
    "tokenize",
]
