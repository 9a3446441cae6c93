"""Tests for carrying free-text records into the normalized schema."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

import models_refined as refined
from integrity import check_catalog
from migrate import (
    conditions_in,
    migrate_refined,
    parse_count,
    parse_range,
    refined_route_to_normalized,
    v1_route_difficulty,
    v1_trail_to_normalized,
)
from sample_data import BLUE_VELVET_TRAIL, CLASSIC_FLOW_ROUTE
from vocabulary import UnknownVocabularyError

pytestmark = pytest.mark.unit

WHEN = datetime(2024, 5, 1, tzinfo=timezone.utc)


def _profile(**overrides) -> refined.DifficultyProfile:
    values = dict(
        overall_rating="black",
        regional_context="harder_than_typical",
        technical_climbing=1,
        technical_descending=2,
        flow_features=1,
        fitness_demand=2,
        character_tags=["rooty", "steep"],
    )
    values.update(overrides)
    return refined.DifficultyProfile(**values)


def _system() -> refined.System:
    return refined.System(
        id="sys_ridge",
        name="Ridge Trails",
        region="Pacific Northwest",
        location=refined.Location(
            country="USA",
            state_province="Washington",
            city="Leavenworth",
            coordinates=refined.Coordinates(lat=47.6, lng=-120.7),
        ),
        tagline="Granite and pine",
        description="A compact trail network above town.",
        known_for=["rocky", "scenic"],
        size="weekend_trip",
        trail_count="40+",
        vertical_range_m=refined.VerticalRange(min=350, max=1100),
        best_months=["July", "Aug"],
        avoid_months=["January"],
        difficulty_style=refined.DifficultyStyle(
            calibration="hard", typical_features=["rocky", "switchbacks"], climbing_style="sustained"
        ),
        good_for=["intermediate", "enduro", "tourists"],
        created_at=WHEN,
        updated_at=WHEN,
    )


def _trails() -> list:
    return [
        refined.Trail(
            id="trail_upper_ridge",
            system_id="sys_ridge",
            name="Upper Ridge",
            difficulty=_profile(overall_rating="blue", technical_descending=1),
            length_km=4.2,
            direction="up_preferred",
            personality="Steady climb through the pines.",
            pairs_well_with=["Lower Ridge", "Nowhere Trail"],
            created_at=WHEN,
            updated_at=WHEN,
        ),
        refined.Trail(
            id="trail_lower_ridge",
            system_id="sys_ridge",
            name="Lower Ridge",
            difficulty=_profile(),
            length_km=3.1,
            direction="down_only",
            personality="Rocky chutes back to the lot.",
            created_at=WHEN,
            updated_at=WHEN,
        ),
    ]


def _route(*step_names: str) -> refined.Route:
    return refined.Route(
        id="route_ridge_loop",
        system_id="sys_ridge",
        name="Ridge Loop",
        tagline="Up the fire road, down the rocks",
        purpose="The classic local loop",
        difficulty=_profile(),
        distance_km="15-18",
        time_estimate="2-3 hours",
        type="loop",
        trail_sequence=[refined.RouteTrailStep(trail_name=name, purpose="ride") for name in step_names],
        best_conditions="Tacky or dry dirt",
        avoid_when=["muddy", "snowy"],
        ideal_for=["advanced", "enduro"],
        not_recommended_for=["beginner"],
        created_at=WHEN,
        updated_at=WHEN,
    )


def test_parse_range_and_count() -> None:
    """Free-text ranges split into numbers."""

    assert parse_range("15-18") == (15.0, 18.0)
    assert parse_range("2-3 hours") == (2.0, 3.0)
    assert parse_range("12") == (12.0, 12.0)
    assert parse_count("200+") == 200
    with pytest.raises(ValueError):
        parse_range("a few")
    with pytest.raises(ValueError):
        parse_range("18-15")


def test_conditions_are_found_in_sentences(index) -> None:
    """Only exact condition words are picked out of prose."""

    assert conditions_in("Tacky or dry dirt", index) == ["tacky", "dry"]
    assert conditions_in("Anything goes", index) == []


def test_refined_catalog_migrates_cleanly(seed, index) -> None:
    """A refined system, its trails and a route migrate into a valid catalog."""

    catalog = migrate_refined([_system()], _trails(), [_route("Upper Ridge", "lower ridge")], index)
    result = check_catalog(catalog, seed)
    assert result.is_valid, result.errors

    system = catalog.systems[0]
    assert system.region_id == "pacific-northwest"
    assert system.country_id == "usa"
    assert system.state_province_id == "washington"
    assert system.size_id == "weekend-trip"
    assert system.trail_count_estimate == 40
    assert system.best_month_ids == ["july", "august"]
    assert system.difficulty_calibration_id == "harder"
    assert system.good_for_skill_ids == ["comfortable"]
    assert system.good_for_style_ids == ["enduro"]

    upper, lower = catalog.trails
    assert upper.direction_id == "up-preferred"
    assert upper.pairs_well_with_trail_ids == ["trail_lower_ridge"]
    assert lower.direction_id == "down-only"
    assert lower.difficulty_profile_id == "dp_trail_lower_ridge"

    route = catalog.routes[0]
    assert (route.distance_km_min, route.distance_km_max) == (15.0, 18.0)
    assert (route.time_estimate_hours_min, route.time_estimate_hours_max) == (2.0, 3.0)
    assert [s.trail_id for s in route.trail_sequence] == ["trail_upper_ridge", "trail_lower_ridge"]
    assert [s.id for s in route.trail_sequence] == ["rt_route_ridge_loop_1", "rt_route_ridge_loop_2"]
    assert route.best_condition_ids == ["tacky", "dry"]
    assert route.avoid_condition_ids == ["muddy", "snowy"]
    assert route.not_recommended_skill_ids == ["learning"]

    profiles = {p.id: p for p in catalog.difficulty_profiles}
    assert profiles["dp_route_ridge_loop"].regional_calibration_id == "harder"
    assert profiles["dp_route_ridge_loop"].character_tag_ids == ["rooty", "steep"]

    months = {(m.month_id, m.relationship_type) for m in catalog.system_months}
    assert ("january", "avoid") in months
    assert ("august", "best") in months


def test_unknown_step_trail_raises(index) -> None:
    """A route step naming a trail that does not exist cannot migrate."""

    with pytest.raises(UnknownVocabularyError):
        refined_route_to_normalized(_route("Ghost Trail"), {"Upper Ridge": "trail_upper_ridge"}, index)


def test_v1_trail_scores_are_derived(index) -> None:
    """Blue Velvet's tags and direction drive its sub-scores."""

    trail, profile = v1_trail_to_normalized(BLUE_VELVET_TRAIL, index)
    assert trail.direction_id == "down-only"
    assert trail.difficulty_profile_id == profile.id
    assert profile.overall_rating_id == "blue"
    assert profile.technical_climbing == 0
    assert profile.technical_descending == 1
    assert profile.flow_features == 3
    assert profile.fitness_demand == 0
    assert {"flowy", "berms", "jumps"} <= set(profile.character_tag_ids)


def test_v1_route_scores_are_derived(index) -> None:
    """A lift-assisted flow route has no climbing and a flow bias."""

    profile = v1_route_difficulty(CLASSIC_FLOW_ROUTE, "dp_classic_flow", index)
    assert profile.overall_rating_id == "blue"
    assert profile.regional_calibration_id == "typical"
    assert profile.technical_climbing == 0
    assert profile.technical_descending == 1
    assert profile.flow_features == 2
    assert profile.fitness_demand == 0


def test_negated_character_tags_are_dropped(index) -> None:
    """Profile tags only carry over on an exact match."""

    system, trails = _system(), _trails()
    trails[0] = trails[0].model_copy(update={"difficulty": _profile(character_tags=["no jumps", "rooty"])})
    catalog = migrate_refined([system], trails, [], index)
    profiles = {p.id: p for p in catalog.difficulty_profiles}
    assert profiles["dp_trail_upper_ridge"].character_tag_ids == ["rooty"]
