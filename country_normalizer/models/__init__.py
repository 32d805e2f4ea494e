"""Country record models."""

from country_normalizer.models.country import Country
from country_normalizer.models.schemas import CountryRecord

__all__ = ["Country", "CountryRecord"]
