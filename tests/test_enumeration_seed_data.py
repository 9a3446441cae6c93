"""Tests for the enumeration seed rows and their JSON export."""

from __future__ import annotations

import json

import pytest

from enumeration_seed_data import (
    ENUMERATION_SEED_DATA,
    MONTHS,
    get_enumeration_seed_data,
    write_enumeration_seed_data,
)

pytestmark = pytest.mark.unit


def test_seed_covers_every_enumeration_table() -> None:
    """The aggregate seed exposes all seventeen tables in dependency order."""

    names = [name for name, _ in ENUMERATION_SEED_DATA.tables()]
    assert len(names) == 17
    assert names.index("countries") < names.index("state_provinces")
    assert all(rows for _, rows in ENUMERATION_SEED_DATA.tables())


def test_seed_table_sizes() -> None:
    """Spot-check row counts of the fixed vocabularies."""

    assert len(ENUMERATION_SEED_DATA.countries) == 9
    assert len(ENUMERATION_SEED_DATA.difficulty_ratings) == 4
    assert len(ENUMERATION_SEED_DATA.skill_levels) == 4
    assert len(ENUMERATION_SEED_DATA.fitness_levels) == 4
    assert len(ENUMERATION_SEED_DATA.severities) == 3
    assert len(MONTHS) == 12


def test_months_carry_seasons() -> None:
    """Months are numbered 1..12 with meteorological seasons."""

    by_id = {m.id: m for m in MONTHS}
    assert [m.numeric_value for m in MONTHS] == list(range(1, 13))
    assert by_id["december"].season == "winter"
    assert by_id["march"].season == "spring"
    assert by_id["july"].season == "summer"
    assert by_id["october"].season == "fall"


def test_difficulty_ratings_are_ordered() -> None:
    """Difficulty ratings run green, blue, black, double-black."""

    ordered = sorted(ENUMERATION_SEED_DATA.difficulty_ratings, key=lambda r: r.numeric_value)
    assert [r.id for r in ordered] == ["green", "blue", "black", "double-black"]


def test_missing_export_falls_back_to_built_in_rows(tmp_path) -> None:
    """Without a JSON export the built-in seed is returned unchanged."""

    assert get_enumeration_seed_data(tmp_path / "absent.json") is ENUMERATION_SEED_DATA


def test_export_round_trips(tmp_path) -> None:
    """Writing then loading the export reproduces the seed."""

    path = write_enumeration_seed_data(tmp_path / "seed.json")
    loaded = get_enumeration_seed_data(path)
    assert loaded.model_dump() == ENUMERATION_SEED_DATA.model_dump()

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["character_tags"][0]["icon"] == ENUMERATION_SEED_DATA.character_tags[0].icon


def test_invalid_export_raises_runtime_error(tmp_path) -> None:
    """A malformed export is a configuration error, not silently ignored."""

    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"countries": "nope"}), encoding="utf-8")
    with pytest.raises(RuntimeError, match="Invalid enumeration seed export"):
        get_enumeration_seed_data(path)
