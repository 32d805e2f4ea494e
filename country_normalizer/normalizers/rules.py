from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Tuple

import yaml

from country_normalizer.errors import DataIOError, DataParseError

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "normalization.yml"


def _token_pattern(punctuation: FrozenSet[str]) -> re.Pattern[str]:
    if not punctuation:
        return re.compile(r"\S+")
    chars = "".join(re.escape(ch) for ch in sorted(punctuation))
    return re.compile(rf"[^{chars}\s]+|[{chars}]")


@dataclass(frozen=True)
class NormalizationRules:
    """Locale specific tables driving ``normalize_name``.

    ``punctuation`` characters always form single-character tokens. Single
    character tokens found in ``symbol_words`` are spelled out, other ASCII
    punctuation is dropped. Multi-character tokens in ``stop_words`` are
    dropped and those in ``rewrites`` are replaced by one or more words.
    """

    locale: str
    punctuation: FrozenSet[str]
    symbol_words: Mapping[str, Tuple[str, ...]]
    stop_words: FrozenSet[str]
    rewrites: Mapping[str, Tuple[str, ...]]
    token_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_pattern", _token_pattern(self.punctuation))


def _words(value) -> Tuple[str, ...]:
    return tuple(str(value).lower().split())


def rules_from_mapping(locale: str, data: Mapping) -> NormalizationRules:
    if not isinstance(data, Mapping):
        raise DataParseError(f"Normalization rules for locale '{locale}' must be a mapping")
    symbol_words: Dict[str, Tuple[str, ...]] = {}
    for symbol, replacement in (data.get("symbol_words") or {}).items():
        if len(str(symbol)) != 1:
            raise DataParseError(
                f"Symbol word key '{symbol}' for locale '{locale}' must be one character"
            )
        symbol_words[str(symbol)] = _words(replacement)
    return NormalizationRules(
        locale=locale,
        punctuation=frozenset(str(data.get("punctuation") or "")),
        symbol_words=symbol_words,
        stop_words=frozenset(str(word).lower() for word in data.get("stop_words") or []),
        rewrites={
            str(token).lower(): _words(replacement)
            for token, replacement in (data.get("rewrites") or {}).items()
        },
    )


@lru_cache
def get_normalization_rules(locale: str = "en", path: Path = CONFIG_PATH) -> NormalizationRules:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataIOError(f"Unable to read normalization rules from {path}") from exc
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise DataParseError(f"Invalid normalization rules file {path}") from exc
    if not isinstance(data, dict) or locale not in data:
        raise DataParseError(f"No normalization rules for locale '{locale}' in {path}")
    return rules_from_mapping(locale, data[locale])


DEFAULT_RULES = NormalizationRules(
    locale="en",
    punctuation=frozenset("~!?,&(){}[]"),
    symbol_words={"&": ("and",)},
    stop_words=frozenset({"islas", "minor", "the"}),
    rewrites={
        "st.": ("saint",),
        "u.s.": ("united", "states"),
        "u.s.a.": ("united", "states", "of", "america"),
    },
)
