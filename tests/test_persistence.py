"""Tests for table creation, enumeration seeding and loading the example catalog."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

import models
from init_db import seed_enumerations, seed_examples
from normalized_examples import NORMALIZED_EXAMPLES

pytestmark = pytest.mark.integration


def _count(session, target) -> int:
    table = target.__table__ if hasattr(target, "__table__") else target
    return session.execute(select(func.count()).select_from(table)).scalar_one()


def test_seeding_inserts_every_row(session, seed) -> None:
    """A fresh database receives every enumeration row."""

    counts = seed_enumerations(session, seed)
    assert counts["months"] == {"inserted": 12, "updated": 0, "unchanged": 0}
    for table, rows in seed.tables():
        assert _count(session, models.ENUMERATION_TABLES[table]) == len(rows)


def test_seeding_twice_changes_nothing(seeded_session, seed) -> None:
    """Re-running the seed is a no-op."""

    counts = seed_enumerations(seeded_session, seed)
    assert counts["months"] == {"inserted": 0, "updated": 0, "unchanged": 12}
    assert all(tally["inserted"] == 0 and tally["updated"] == 0 for tally in counts.values())


def test_changed_rows_are_updated_in_place(seeded_session, seed) -> None:
    """An edited description updates the existing row."""

    severities = [
        s.model_copy(update={"description": "Read before you ride"}) if s.id == "critical" else s
        for s in seed.severities
    ]
    counts = seed_enumerations(seeded_session, seed.model_copy(update={"severities": severities}))
    assert counts["severities"] == {"inserted": 0, "updated": 1, "unchanged": 2}
    assert seeded_session.get(models.Severity, "critical").description == "Read before you ride"


def test_ranges_are_stored_flat_and_read_back_nested(seeded_session) -> None:
    """IntRange fields round-trip through *_min/*_max columns."""

    size = seeded_session.get(models.SystemSize, "world-class")
    assert size.typical_trail_count_min <= size.typical_trail_count_max
    row = models.unflatten_row(size)
    assert set(row["typical_trail_count"]) == {"min", "max"}
    assert "typical_trail_count_min" not in row


def test_example_catalog_loads(seeded_session) -> None:
    """Entities and junction rows of the examples land in their tables."""

    counts = seed_examples(seeded_session)
    assert counts["systems"] == 2
    assert counts["route_trails"] == 4
    assert counts["system_months"] == 19
    assert counts["route_conditions"] == 9
    assert _count(seeded_session, models.SystemMonth) == 19

    route = seeded_session.get(models.Route, "route_half_nelson_classic")
    assert [step.sequence_order for step in route.trail_sequence] == [1, 2]
    assert route.system.id == "sys_squamish"


def test_example_catalog_loads_idempotently(seeded_session) -> None:
    """Loading twice replaces junction rows instead of duplicating them."""

    first = seed_examples(seeded_session, NORMALIZED_EXAMPLES)
    second = seed_examples(seeded_session, NORMALIZED_EXAMPLES)
    assert first == second
    assert _count(seeded_session, models.RouteTrail) == 4
    assert _count(seeded_session, models.user_favorite_systems) == len(
        NORMALIZED_EXAMPLES.user_preferences[0].favorite_system_ids
    )


def test_foreign_keys_are_enforced(seeded_session) -> None:
    """A province pointing at a missing country is rejected by the database."""

    seeded_session.add(models.StateProvince(id="atlantis-north", country_id="atlantis", name="North", code="AN"))
    with pytest.raises(IntegrityError):
        seeded_session.flush()
    seeded_session.rollback()


def test_relationship_type_is_constrained(seeded_session) -> None:
    """Junction relationship types outside the closed set are rejected."""

    seed_examples(seeded_session)
    seeded_session.add(
        models.RouteCondition(route_id="route_half_nelson_classic", condition_id="wet", relationship_type="maybe")
    )
    with pytest.raises(IntegrityError):
        seeded_session.flush()
    seeded_session.rollback()
