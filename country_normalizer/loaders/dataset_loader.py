from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from country_normalizer.errors import DataIOError, DataParseError
from country_normalizer.index.country_index import CountryIndex
from country_normalizer.models.schemas import CountryRecord
from country_normalizer.normalizers.rules import get_normalization_rules
from country_normalizer.settings import bundled_dataset_path, get_settings

logger = logging.getLogger(__name__)


def load_country_records(path: Path) -> List[CountryRecord]:
    """Read a YAML dataset of ``key -> record`` mappings, keeping file order."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DataIOError(f"Unable to read country dataset {path}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataParseError(f"Invalid YAML in country dataset {path}") from exc
    if not isinstance(data, dict):
        raise DataParseError(f"Country dataset {path} must be a mapping of country records")

    records: List[CountryRecord] = []
    for key, value in data.items():
        if not isinstance(value, dict):
            raise DataParseError(f"Country '{key}' in {path} must be a mapping")
        try:
            records.append(CountryRecord.model_validate(value))
        except ValidationError as exc:
            raise DataParseError(f"Invalid country '{key}' in {path}: {exc}") from exc
    logger.debug("Loaded country dataset path=%s records=%d", path, len(records))
    return records


def load_country_index(
    path: Optional[Path] = None, locale: Optional[str] = None
) -> CountryIndex:
    locale = locale or get_settings().locale
    dataset_path = Path(path) if path else bundled_dataset_path(locale)
    rules = get_normalization_rules(locale)
    return CountryIndex.build(load_country_records(dataset_path), rules=rules)


@lru_cache
def get_country_index() -> CountryIndex:
    settings = get_settings()
    return load_country_index(settings.dataset_path, settings.locale)
