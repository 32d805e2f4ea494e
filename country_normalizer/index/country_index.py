from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from country_normalizer.errors import DataParseError
from country_normalizer.models.country import Country
from country_normalizer.models.schemas import CountryRecord
from country_normalizer.normalizers.name_normalizer import normalize_name
from country_normalizer.normalizers.rules import DEFAULT_RULES, NormalizationRules

logger = logging.getLogger(__name__)

RecordInput = Union[CountryRecord, Mapping[str, Any]]


def _as_record(position: int, value: RecordInput) -> CountryRecord:
    if isinstance(value, CountryRecord):
        return value
    try:
        return CountryRecord.model_validate(value)
    except ValidationError as exc:
        raise DataParseError(f"Invalid country record at position {position}: {exc}") from exc


def _indexed_names(record: CountryRecord) -> List[str]:
    names = [
        record.alpha2,
        record.alpha3,
        record.fifa,
        record.ioc,
        record.iso_name,
        record.official,
        record.short,
    ]
    names.extend(record.aliases or [])
    return names


class CountryIndex:
    """Immutable mapping from normalized names and codes to countries.

    Build it once with :meth:`build` and share it freely; nothing mutates it
    afterwards.
    """

    def __init__(
        self,
        countries: Tuple[Country, ...],
        keys: Mapping[str, int],
        rules: NormalizationRules = DEFAULT_RULES,
    ) -> None:
        self._countries = countries
        self._keys = MappingProxyType(dict(keys))
        self._rules = rules

    @classmethod
    def build(
        cls,
        records: Iterable[RecordInput],
        rules: Optional[NormalizationRules] = None,
    ) -> "CountryIndex":
        rules = rules or DEFAULT_RULES
        countries: List[Country] = []
        keys: Dict[str, int] = {}
        overwritten = 0
        for position, value in enumerate(records):
            record = _as_record(position, value)
            idx = len(countries)
            countries.append(Country.from_record(record))
            for name in _indexed_names(record):
                key = normalize_name(name, rules)
                if not key:
                    continue
                previous = keys.get(key)
                if previous is not None and previous != idx:
                    overwritten += 1
                    logger.debug(
                        "Country key overwritten key=%r previous=%s current=%s",
                        key,
                        countries[previous].alpha2,
                        countries[idx].alpha2,
                    )
                keys[key] = idx
        logger.info(
            "Built country index locale=%s countries=%d keys=%d overwritten=%d",
            rules.locale,
            len(countries),
            len(keys),
            overwritten,
        )
        return cls(tuple(countries), keys, rules)

    @property
    def countries(self) -> Tuple[Country, ...]:
        return self._countries

    @property
    def rules(self) -> NormalizationRules:
        return self._rules

    @property
    def key_count(self) -> int:
        return len(self._keys)

    def normalize_country(self, name: str) -> Optional[Country]:
        key = normalize_name(name, self._rules)
        if not key:
            return None
        idx = self._keys.get(key)
        if idx is None:
            return None
        return self._countries[idx]

    lookup = normalize_country

    def keys_for(self, country: Country) -> List[str]:
        return sorted(
            key for key, idx in self._keys.items() if self._countries[idx] is country
        )

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)
