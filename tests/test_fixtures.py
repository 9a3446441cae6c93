"""Tests for the example records across every model generation."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

import content_examples
import content_models
import models_v1
import models_v2
import normalized_examples
import normalized_models
import regional_examples
import sample_data
from content_examples import (
    HALF_NELSON_REALITY_CHECK,
    SQUAMISH_FALL_UPDATE,
    SQUAMISH_GUIDE_REVIEW,
    SQUAMISH_LOCAL_SARAH,
    SQUAMISH_VISITOR_GUIDE,
)
from normalized_examples import NORMALIZED_EXAMPLES, SQUAMISH_SYSTEM
from regional_examples import HALF_NELSON_ROUTE, PNW_VS_SOUTHWEST_COMPARISON
from sample_data import BLUE_VELVET_TRAIL, CATALOG_EPOCH, CLASSIC_FLOW_ROUTE, WHISTLER_SYSTEM

pytestmark = pytest.mark.unit


def test_guide_author_is_the_verified_local() -> None:
    """Sarah's credibility record backs the guide she wrote."""

    assert SQUAMISH_VISITOR_GUIDE.author.user_id == "user_123"
    assert SQUAMISH_LOCAL_SARAH.user_id == "user_123"
    assert SQUAMISH_VISITOR_GUIDE.author.local_credibility == SQUAMISH_LOCAL_SARAH
    assert SQUAMISH_LOCAL_SARAH.indicators.verified_local is True
    assert len(SQUAMISH_LOCAL_SARAH.verified_by) == 2


def test_review_points_at_the_guide() -> None:
    """The peer review targets the visitor guide by id."""

    assert SQUAMISH_GUIDE_REVIEW.content_id == "guide_squamish_first_timer"
    assert SQUAMISH_GUIDE_REVIEW.content_id == SQUAMISH_VISITOR_GUIDE.id
    assert SQUAMISH_VISITOR_GUIDE.peer_reviews == [SQUAMISH_GUIDE_REVIEW]


def test_guide_sections_reference_media() -> None:
    """The first guide section links the reality-check video."""

    assert HALF_NELSON_REALITY_CHECK.id in SQUAMISH_VISITOR_GUIDE.sections[0].media_refs


def test_fall_update_verification_count_matches_verifiers() -> None:
    """The seasonal update's count agrees with its verifier list."""

    assert SQUAMISH_FALL_UPDATE.verification_count == len(SQUAMISH_FALL_UPDATE.verified_by)


def test_whistler_json_round_trip() -> None:
    """Serializing and re-validating a system yields the same record."""

    restored = models_v1.System.model_validate(WHISTLER_SYSTEM.model_dump(mode="json"))
    assert restored.model_dump() == WHISTLER_SYSTEM.model_dump()
    assert restored.created_at == CATALOG_EPOCH


def test_sample_records_link_up() -> None:
    """The flow route and Blue Velvet both belong to the Whistler system."""

    assert CLASSIC_FLOW_ROUTE.system_id == WHISTLER_SYSTEM.id
    assert BLUE_VELVET_TRAIL.system_id == WHISTLER_SYSTEM.id
    assert BLUE_VELVET_TRAIL.id in [step.trail_id for step in CLASSIC_FLOW_ROUTE.trail_sequence]


def test_regional_examples_shape() -> None:
    """The narrative route rates Squamish descending harder than climbing."""

    ratings = HALF_NELSON_ROUTE.difficulty
    assert ratings.descent_technical.rating > ratings.xc_technical.rating
    assert PNW_VS_SOUTHWEST_COMPARISON.regions_compared == ["Pacific Northwest", "Southwest Desert"]


def test_normalized_examples_expand_junction_rows() -> None:
    """Best/avoid months of every system appear as junction rows."""

    squamish_months = [m for m in NORMALIZED_EXAMPLES.system_months if m.system_id == SQUAMISH_SYSTEM.id]
    best = [m.month_id for m in squamish_months if m.relationship_type == "best"]
    avoid = [m.month_id for m in squamish_months if m.relationship_type == "avoid"]
    assert best == SQUAMISH_SYSTEM.best_month_ids
    assert avoid == SQUAMISH_SYSTEM.avoid_month_ids
    assert len(NORMALIZED_EXAMPLES.route_conditions) == 9
    assert len(NORMALIZED_EXAMPLES.user_preference_styles) == 2


def test_sub_scores_are_bounded() -> None:
    """Difficulty sub-scores outside 0..3 are rejected."""

    with pytest.raises(ValidationError):
        normalized_models.DifficultyProfile(
            id="dp_bad",
            overall_rating_id="blue",
            regional_calibration_id="typical",
            technical_climbing=4,
            technical_descending=0,
            flow_features=0,
            fitness_demand=0,
        )


def test_int_range_must_be_ordered() -> None:
    """A range whose min exceeds its max is rejected."""

    with pytest.raises(ValidationError):
        normalized_models.IntRange(min=10, max=5)


def test_references_are_discoverable_from_the_schema() -> None:
    """Foreign-key fields declare the collection they point at."""

    refs = normalized_models.references_of(normalized_models.Route)
    assert refs["system_id"] == "systems"
    assert refs["best_condition_ids"] == "conditions"
    assert "name" not in refs


def _fixture_constants():
    for module in (sample_data, regional_examples, content_examples, normalized_examples):
        for name, value in vars(module).items():
            if name.isupper() and isinstance(value, BaseModel):
                yield pytest.param(value, id=f"{module.__name__}.{name}")


@pytest.mark.parametrize("record", list(_fixture_constants()))
def test_every_fixture_json_round_trips(record) -> None:
    """Each example record survives JSON serialization unchanged."""

    restored = type(record).model_validate(record.model_dump(mode="json"))
    assert restored.model_dump() == record.model_dump()


def test_narrative_axis_rating_is_bounded() -> None:
    """Narrative-model axis ratings run 0..5."""

    assert models_v2.RatedAxis(rating=5, notes="Steepest lines in town").rating == 5
    with pytest.raises(ValidationError):
        models_v2.RatedAxis(rating=6, notes="Off the scale")


def test_review_ratings_are_bounded() -> None:
    """Peer review ratings run 1..5."""

    data = SQUAMISH_GUIDE_REVIEW.model_dump()
    with pytest.raises(ValidationError):
        content_models.Review.model_validate({**data, "accuracy_rating": 0})
    with pytest.raises(ValidationError):
        content_models.Review.model_validate({**data, "clarity_rating": 6})
