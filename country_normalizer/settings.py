from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent / "data" / "countries"
DEFAULT_LOCALE = "en"


def bundled_dataset_path(locale: str) -> Path:
    return DATA_DIR / f"{locale}.yml"


@dataclass(frozen=True)
class Settings:
    locale: str
    dataset_path: Path


def settings_from_env(
    locale_env: str = "COUNTRY_NORMALIZER_LOCALE",
    dataset_env: str = "COUNTRY_NORMALIZER_DATASET",
) -> Settings:
    locale = os.getenv(locale_env) or DEFAULT_LOCALE
    dataset: Optional[str] = os.getenv(dataset_env)
    return Settings(
        locale=locale,
        dataset_path=Path(dataset) if dataset else bundled_dataset_path(locale),
    )


@lru_cache
def get_settings() -> Settings:
    return settings_from_env()
