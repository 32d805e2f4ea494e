from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple

from country_normalizer.models.schemas import CountryRecord

PAD = b" "


def fixed_width(value: str, width: int) -> bytes:
    """Encode ``value`` into exactly ``width`` bytes, space padded on the right.

    Longer values are truncated. Callers only pass ASCII text, so every byte
    decodes back to one character.
    """
    return value.encode("ascii")[:width].ljust(width, PAD)


@total_ordering
@dataclass(frozen=True, eq=False)
class Country:
    """A resolved country.

    Identity is the ISO numeric code; ordering follows the alpha-3 bytes.
    """

    aliases: Optional[Tuple[str, ...]]
    alpha2_bytes: bytes
    alpha3_bytes: bytes
    fifa_bytes: bytes
    ioc_bytes: bytes
    iso_name: str
    numeric: int
    official: str
    short: str
    emoji: str
    shortcode: str

    @classmethod
    def from_record(cls, record: CountryRecord) -> "Country":
        return cls(
            aliases=tuple(record.aliases) if record.aliases is not None else None,
            alpha2_bytes=fixed_width(record.alpha2, 2),
            alpha3_bytes=fixed_width(record.alpha3, 3),
            fifa_bytes=fixed_width(record.fifa, 3),
            ioc_bytes=fixed_width(record.ioc, 3),
            iso_name=record.iso_name,
            numeric=record.numeric,
            official=record.official,
            short=record.short,
            emoji=record.emoji[:1] or " ",
            shortcode=record.shortcode,
        )

    @property
    def alpha2(self) -> str:
        return self.alpha2_bytes.decode("ascii")

    @property
    def alpha3(self) -> str:
        return self.alpha3_bytes.decode("ascii")

    @property
    def fifa(self) -> str:
        return self.fifa_bytes.decode("ascii")

    @property
    def ioc(self) -> str:
        return self.ioc_bytes.decode("ascii")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return self.numeric == other.numeric

    def __lt__(self, other: "Country") -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return self.alpha3_bytes < other.alpha3_bytes

    def __hash__(self) -> int:
        return hash(self.numeric)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alpha2": self.alpha2,
            "alpha3": self.alpha3,
            "fifa": self.fifa,
            "ioc": self.ioc,
            "iso_name": self.iso_name,
            "numeric": self.numeric,
            "official": self.official,
            "short": self.short,
            "emoji": self.emoji,
            "shortcode": self.shortcode,
            "aliases": list(self.aliases or ()),
        }
