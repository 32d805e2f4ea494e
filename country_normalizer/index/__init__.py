from country_normalizer.index.country_index import CountryIndex

__all__ = ["CountryIndex"]
