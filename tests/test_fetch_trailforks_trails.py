"""Tests for turning Trailforks API records into normalized trail drafts."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from fetch_trailforks_trails import build_drafts, fetch_trails, write_drafts
from integrity import check_catalog
from normalized_examples import SQUAMISH_SYSTEM
from normalized_models import NormalizedCatalog

pytestmark = pytest.mark.unit

FETCHED_AT = datetime(2024, 6, 1, tzinfo=timezone.utc)

RAW_TRAILS = [
    {
        "trailid": 101,
        "title": "Rock Garden",
        "difficulty": 4,
        "direction": 1,
        "distance": 2500,
        "climb": 20,
        "desc": "Rooty and steep descent. Lots of rocks.",
    },
    {
        "trailid": 102,
        "title": "Switchback Climb",
        "difficulty": 3,
        "direction": 4,
        "distance": 5000,
        "climb": 450,
        "desc": "Forest climb with switchbacks.",
    },
]


def _transport(payload, seen=None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(200, json=payload)

    return httpx.MockTransport(handler)


def test_fetch_trails_sends_key_and_region() -> None:
    """The API key and region scope go out as query parameters."""

    seen = []
    trails = fetch_trails("secret", 12345, 10, transport=_transport({"data": {"trails": RAW_TRAILS}}, seen))
    assert [t["trailid"] for t in trails] == [101, 102]
    params = seen[0].url.params
    assert params["api_key"] == "secret"
    assert params["id"] == "12345"
    assert params["rows"] == "10"


def test_empty_response_raises() -> None:
    """An empty trail list is an error, not an empty draft file."""

    with pytest.raises(RuntimeError):
        fetch_trails("secret", 1, 10, transport=_transport({"data": {"trails": []}}))


def test_downhill_trail_is_normalized(index) -> None:
    """Trailforks codes map onto enumeration ids and sub-scores."""

    drafts = build_drafts(RAW_TRAILS, "sys_squamish", index, FETCHED_AT)
    trail, profile = drafts.trails[0], drafts.difficulty_profiles[0]
    assert trail.id == "trail_tf_101"
    assert trail.difficulty_profile_id == profile.id == "dp_tf_101"
    assert trail.direction_id == "down-only"
    assert trail.length_km == 2.5
    assert trail.personality == "Rooty and steep descent"
    assert trail.created_at == FETCHED_AT
    assert profile.overall_rating_id == "black"
    assert profile.technical_climbing == 0
    assert profile.technical_descending == 2
    assert profile.fitness_demand == 0
    assert profile.character_tag_ids == ["rooty", "steep"]


def test_climbing_trail_is_normalized(index) -> None:
    """Climb in meters sets the fitness demand."""

    drafts = build_drafts(RAW_TRAILS, "sys_squamish", index, FETCHED_AT)
    trail, profile = drafts.trails[1], drafts.difficulty_profiles[1]
    assert trail.direction_id == "up-preferred"
    assert profile.overall_rating_id == "blue"
    assert profile.technical_climbing == 1
    assert profile.fitness_demand == 2
    assert profile.character_tag_ids == ["forest", "switchbacks"]


def test_unknown_difficulty_defaults_to_blue(index, caplog) -> None:
    drafts = build_drafts([{"trailid": 7, "title": "Mystery", "difficulty": 9}], "sys_squamish", index, FETCHED_AT)
    assert drafts.difficulty_profiles[0].overall_rating_id == "blue"
    assert drafts.trails[0].direction_id == "both"
    assert "unknown difficulty" in caplog.text


def test_drafts_pass_integrity_checks(seed, index) -> None:
    """Drafts attached to an existing system are a valid catalog."""

    drafts = build_drafts(RAW_TRAILS, SQUAMISH_SYSTEM.id, index, FETCHED_AT)
    catalog = NormalizedCatalog(
        systems=[SQUAMISH_SYSTEM],
        trails=drafts.trails,
        difficulty_profiles=drafts.difficulty_profiles,
    ).with_junctions()
    result = check_catalog(catalog, seed)
    assert result.is_valid, result.errors


def test_write_drafts_round_trips(tmp_path, index) -> None:
    drafts = build_drafts(RAW_TRAILS, "sys_squamish", index, FETCHED_AT)
    path = write_drafts(drafts, tmp_path / "out" / "drafts.json")
    loaded = NormalizedCatalog.model_validate(json.loads(path.read_text(encoding="utf-8")))
    assert loaded.model_dump() == drafts.model_dump()


def test_unknown_direction_defaults_to_both(index, caplog) -> None:
    """An unmapped direction code is kept as both and logged."""

    raw = [{"trailid": 8, "title": "Sideways", "difficulty": 3, "direction": 42}]
    drafts = build_drafts(raw, "sys_squamish", index, FETCHED_AT)
    assert drafts.trails[0].direction_id == "both"
    assert "unknown direction" in caplog.text
    assert "unknown difficulty" not in caplog.text
