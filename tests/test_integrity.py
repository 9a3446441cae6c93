"""Tests for the integrity checks over seed, catalog and content records."""

from __future__ import annotations

import pytest

from content_examples import SQUAMISH_FALL_UPDATE, SQUAMISH_GUIDE_REVIEW, SQUAMISH_VISITOR_GUIDE
from integrity import (
    CatalogIntegrityError,
    ValidationResult,
    assert_valid,
    check_catalog,
    check_content,
    check_numeric_ordering,
    check_seed_references,
    check_unique_ids,
    combine,
    validate_all,
)
from normalized_examples import (
    HALF_NELSON_CLASSIC_ROUTE,
    HALF_NELSON_TRAIL,
    NORMALIZED_EXAMPLES,
    ZEN_EXPERIENCE_ROUTE,
)
from normalized_models import SystemMonth

pytestmark = pytest.mark.unit


def _with_route(route):
    routes = [route if r.id == route.id else r for r in NORMALIZED_EXAMPLES.routes]
    return NORMALIZED_EXAMPLES.model_copy(update={"routes": routes})


def test_built_in_data_is_valid() -> None:
    """Every check passes on the shipped seed and fixtures."""

    results = validate_all()
    assert set(results) == {"unique_ids", "numeric_ordering", "seed_references", "catalog", "content"}
    for name, result in results.items():
        assert result.is_valid, (name, result.errors)


def test_seed_checks_pass(seed) -> None:
    """Ids are unique, numeric values contiguous and provinces point at countries."""

    assert check_unique_ids(seed).is_valid
    assert check_numeric_ordering(seed).is_valid
    assert check_seed_references(seed).is_valid


def test_duplicate_enumeration_id_is_reported(seed) -> None:
    """A repeated id within one table is an error."""

    broken = seed.model_copy(update={"severities": seed.severities + [seed.severities[0]]})
    result = check_unique_ids(broken)
    assert not result.is_valid
    assert "severities: duplicate id 'info'" in result.errors


def test_numeric_gap_is_reported(seed) -> None:
    """numeric_value must be exactly 1..n."""

    ratings = [
        r.model_copy(update={"numeric_value": 5}) if r.id == "double-black" else r
        for r in seed.difficulty_ratings
    ]
    result = check_numeric_ordering(seed.model_copy(update={"difficulty_ratings": ratings}))
    assert not result.is_valid
    assert result.errors[0].startswith("difficulty_ratings")


def test_unknown_country_is_reported(seed) -> None:
    """A state/province must reference an existing country."""

    provinces = [seed.state_provinces[0].model_copy(update={"country_id": "atlantis"})]
    result = check_seed_references(seed.model_copy(update={"state_provinces": provinces}))
    assert not result.is_valid
    assert "atlantis" in result.errors[0]


def test_unknown_foreign_key_is_reported(seed) -> None:
    """An id that is not in the target enumeration is an error."""

    trails = [
        HALF_NELSON_TRAIL.model_copy(update={"direction_id": "sideways"}) if t.id == HALF_NELSON_TRAIL.id else t
        for t in NORMALIZED_EXAMPLES.trails
    ]
    result = check_catalog(NORMALIZED_EXAMPLES.model_copy(update={"trails": trails}), seed)
    assert not result.is_valid
    assert any("sideways" in e and "trail_directions" in e for e in result.errors)


def test_gap_in_trail_sequence_is_reported(seed) -> None:
    """Route trail sequences must run 1..n."""

    steps = [HALF_NELSON_CLASSIC_ROUTE.trail_sequence[0],
             HALF_NELSON_CLASSIC_ROUTE.trail_sequence[1].model_copy(update={"sequence_order": 3})]
    route = HALF_NELSON_CLASSIC_ROUTE.model_copy(update={"trail_sequence": steps})
    result = check_catalog(_with_route(route), seed)
    assert any("trail_sequence order is [1, 3]" in e for e in result.errors)


def test_trail_from_another_system_is_reported(seed) -> None:
    """A route may only use trails of its own system."""

    step = ZEN_EXPERIENCE_ROUTE.trail_sequence[1].model_copy(update={"trail_id": "trail_half_nelson"})
    route = ZEN_EXPERIENCE_ROUTE.model_copy(update={"trail_sequence": [ZEN_EXPERIENCE_ROUTE.trail_sequence[0], step]})
    result = check_catalog(_with_route(route), seed)
    assert any("belongs to 'sys_squamish'" in e for e in result.errors)


def test_reversed_distance_range_is_reported(seed) -> None:
    """distance_km_min may not exceed distance_km_max."""

    route = HALF_NELSON_CLASSIC_ROUTE.model_copy(update={"distance_km_min": 20})
    result = check_catalog(_with_route(route), seed)
    assert any("distance_km_min" in e for e in result.errors)


def test_bad_relationship_type_is_reported(seed) -> None:
    """Junction relationship types are a closed set."""

    bogus = SystemMonth.model_construct(system_id="sys_squamish", month_id="june", relationship_type="sometimes")
    catalog = NORMALIZED_EXAMPLES.model_copy(update={"system_months": NORMALIZED_EXAMPLES.system_months + [bogus]})
    result = check_catalog(catalog, seed)
    assert any("relationship_type 'sometimes'" in e for e in result.errors)


def test_verification_count_mismatch_is_reported() -> None:
    """verification_count must equal the number of verifiers."""

    update = SQUAMISH_FALL_UPDATE.model_copy(update={"verification_count": 5})
    result = check_content(updates=[update])
    assert not result.is_valid
    assert "verification_count 5 != 3 verifiers" in result.errors[0]


def test_reversed_relevance_window_is_reported() -> None:
    """An update cannot stop being relevant before it starts."""

    update = SQUAMISH_FALL_UPDATE.model_copy(
        update={"relevant_until": SQUAMISH_FALL_UPDATE.relevant_from.replace(year=2023)}
    )
    result = check_content(updates=[update])
    assert any("relevant_from" in e for e in result.errors)


def test_dangling_review_is_reported() -> None:
    """Reviews must target content that exists."""

    review = SQUAMISH_GUIDE_REVIEW.model_copy(update={"content_id": "guide_missing"})
    result = check_content(guides=[SQUAMISH_VISITOR_GUIDE], reviews=[review])
    assert any("guide_missing" in e for e in result.errors)

    assert check_content(reviews=[review], known_content_ids=["guide_missing"]).is_valid


def test_assert_valid_raises_with_every_error() -> None:
    """assert_valid lists all errors in the raised exception."""

    result = combine([
        ValidationResult.from_lists(["first problem"]),
        ValidationResult.from_lists(["second problem"], ["just a warning"]),
    ])
    assert result.warnings == ("just a warning",)
    with pytest.raises(CatalogIntegrityError) as excinfo:
        assert_valid(result)
    assert excinfo.value.errors == ("first problem", "second problem")
    assert isinstance(excinfo.value, ValueError)


def test_assert_valid_passes_through_valid_result() -> None:
    """A valid result is returned unchanged."""

    ok = ValidationResult.from_lists([], ["minor"])
    assert assert_valid(ok) is ok


def test_step_ids_shared_across_routes_are_reported(seed) -> None:
    """Route trail ids are unique across the whole catalog, not just per route."""

    routes = [
        route.model_copy(update={
            "trail_sequence": [
                step.model_copy(update={"id": f"rt_{step.sequence_order}"}) for step in route.trail_sequence
            ]
        })
        for route in NORMALIZED_EXAMPLES.routes
    ]
    result = check_catalog(NORMALIZED_EXAMPLES.model_copy(update={"routes": routes}), seed)
    assert not result.is_valid
    assert "route_trails: duplicate id 'rt_1'" in result.errors
    assert "route_trails: duplicate id 'rt_2'" in result.errors


def test_reversed_guide_dates_are_reported() -> None:
    """A guide cannot be updated before it was created."""

    guide = SQUAMISH_VISITOR_GUIDE.model_copy(
        update={"created_at": SQUAMISH_VISITOR_GUIDE.updated_at.replace(year=2030)}
    )
    result = check_content(guides=[guide])
    assert not result.is_valid
    assert any("created_at" in e and "updated_at" in e for e in result.errors)
