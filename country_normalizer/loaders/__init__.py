from country_normalizer.loaders.dataset_loader import (
    get_country_index,
    load_country_index,
    load_country_records,
)

__all__ = ["get_country_index", "load_country_index", "load_country_records"]
