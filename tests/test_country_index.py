import logging

import pytest

from country_normalizer.errors import DataParseError
from country_normalizer.index.country_index import CountryIndex
from country_normalizer.models.schemas import CountryRecord


def _record(alpha2: str, alpha3: str, numeric: int, name: str, **overrides) -> dict:
    data = {
        "alpha2": alpha2,
        "alpha3": alpha3,
        "fifa": alpha3,
        "ioc": alpha3,
        "iso_name": name,
        "numeric": numeric,
        "official": name,
        "short": name,
        "emoji": "",
        "shortcode": f":flag_{alpha2.lower()}:",
    }
    data.update(overrides)
    return data


def _sample_records():
    return [
        _record(
            "US",
            "USA",
            840,
            "United States of America",
            short="United States",
            aliases=["USA", "America"],
        ),
        _record("LC", "LCA", 662, "Saint Lucia"),
        _record(
            "TT",
            "TTO",
            780,
            "Trinidad and Tobago",
            fifa="TRI",
            aliases=["Trinidad"],
        ),
        _record("AQ", "ATA", 10, "Antarctica", fifa="", ioc=""),
    ]


def test_spelling_variants_resolve_to_one_record():
    index = CountryIndex.build(_sample_records())
    usa = index.lookup("usa")
    assert usa is not None
    assert usa.alpha2 == "US"
    assert index.lookup("U.S.A.") is usa
    assert index.lookup("U.S.") is usa
    assert index.lookup("united states of america") is usa
    assert index.lookup("The United States of America") is usa
    assert index.lookup("  america ") is usa


def test_codes_resolve_case_insensitively():
    index = CountryIndex.build(_sample_records())
    assert index.lookup("tt").alpha3 == "TTO"
    assert index.lookup("tri").alpha3 == "TTO"
    assert index.lookup("Tto").alpha3 == "TTO"


def test_saint_abbreviation_and_ampersand():
    index = CountryIndex.build(_sample_records())
    assert index.lookup("St. Lucia").numeric == 662
    assert index.lookup("Trinidad & Tobago").numeric == 780


def test_empty_and_unknown_queries_return_none():
    index = CountryIndex.build(_sample_records())
    assert index.lookup("") is None
    assert index.lookup("   ") is None
    assert index.lookup("&") is None
    assert index.lookup("!?") is None
    assert index.lookup("Narnia") is None


def test_no_partial_matching():
    index = CountryIndex.build(_sample_records())
    assert index.lookup("united") is None
    assert index.lookup("saint") is None
    assert index.lookup("trinidad and") is None


def test_lookup_is_idempotent_and_returns_stored_object():
    index = CountryIndex.build(_sample_records())
    first = index.normalize_country("Saint Lucia")
    assert index.normalize_country("Saint Lucia") is first
    assert first is index.countries[1]


def test_blank_codes_are_never_indexed():
    index = CountryIndex.build(_sample_records())
    antarctica = index.lookup("Antarctica")
    assert antarctica.fifa == "   "
    assert index.keys_for(antarctica) == ["antarctica", "aq", "ata"]


def test_shortcode_and_emoji_are_not_indexed():
    records = [_record("US", "USA", 840, "United States", emoji="X")]
    index = CountryIndex.build(records)
    assert index.lookup(":flag_us:") is None
    assert index.lookup("X") is None


def test_round_trip_for_every_field():
    records = _sample_records()
    index = CountryIndex.build(records)
    for position, record in enumerate(records):
        country = index.countries[position]
        names = [
            record["alpha2"],
            record["alpha3"],
            record["fifa"],
            record["ioc"],
            record["iso_name"],
            record["official"],
            record["short"],
        ] + record.get("aliases", [])
        for name in names:
            if not name:
                continue
            assert index.lookup(f"  {name.upper()}\t") is country
            assert index.lookup(name.lower()) is country


def test_last_writer_wins_on_collision():
    records = [
        _record("BH", "BHR", 48, "Bahrain", ioc="BRN"),
        _record("BN", "BRN", 96, "Brunei"),
    ]
    index = CountryIndex.build(records)
    assert index.lookup("BRN").alpha2 == "BN"
    assert index.lookup("BHR").alpha2 == "BH"

    reversed_index = CountryIndex.build(list(reversed(records)))
    assert reversed_index.lookup("BRN").alpha2 == "BH"


def test_later_alias_overwrites_earlier_record_key():
    records = [
        _record("CG", "COG", 178, "Congo"),
        _record("CD", "COD", 180, "DR Congo", aliases=["Congo"]),
    ]
    index = CountryIndex.build(records)
    assert index.lookup("congo").alpha2 == "CD"
    assert index.lookup("cog").alpha2 == "CG"
    assert "congo" not in index.keys_for(index.countries[0])


def test_collision_is_logged_at_debug(caplog):
    records = [
        _record("BH", "BHR", 48, "Bahrain", ioc="BRN"),
        _record("BN", "BRN", 96, "Brunei"),
    ]
    with caplog.at_level(logging.DEBUG, logger="country_normalizer.index.country_index"):
        CountryIndex.build(records)
    assert any("overwritten" in message for message in caplog.messages)
    assert any("countries=2" in message for message in caplog.messages)


def test_build_accepts_validated_records():
    records = [CountryRecord(**record) for record in _sample_records()]
    index = CountryIndex.build(records)
    assert len(index) == 4
    assert [country.alpha2 for country in index] == ["US", "LC", "TT", "AQ"]


def test_invalid_record_aborts_build():
    records = _sample_records()
    records.append({"alpha2": "ZZ"})
    with pytest.raises(DataParseError) as excinfo:
        CountryIndex.build(records)
    assert "position 4" in str(excinfo.value)


def test_index_is_read_only():
    index = CountryIndex.build(_sample_records())
    with pytest.raises(TypeError):
        index._keys["narnia"] = 0
    assert isinstance(index.countries, tuple)


def test_empty_dataset_builds_empty_index():
    index = CountryIndex.build([])
    assert len(index) == 0
    assert index.key_count == 0
    assert index.lookup("usa") is None
