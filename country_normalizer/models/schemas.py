from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class CountryRecord(BaseModel):
    aliases: Optional[List[str]] = None
    alpha2: str
    alpha3: str
    fifa: str
    ioc: str
    iso_name: str
    numeric: int
    official: str
    short: str
    emoji: str
    shortcode: str

    @field_validator("alpha2", "alpha3", "fifa", "ioc")
    @classmethod
    def _codes_are_ascii(cls, value: str) -> str:
        if not value.isascii():
            raise ValueError("country codes must be ASCII")
        return value


class CountryOut(BaseModel):
    alpha2: str
    alpha3: str
    fifa: str
    ioc: str
    iso_name: str
    numeric: int
    official: str
    short: str
    emoji: str
    shortcode: str
    aliases: List[str] = Field(default_factory=list)


class NormalizeRequest(BaseModel):
    names: List[str]


class NormalizeResult(BaseModel):
    query: str
    key: str
    country: Optional[CountryOut] = None
