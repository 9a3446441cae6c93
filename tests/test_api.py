"""Tests for the catalog HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    """Start the app (tables and enumerations seeded on startup) and load the examples."""

    from app import app
    from db import SessionLocal
    from init_db import seed_examples

    with TestClient(app) as test_client:
        db = SessionLocal()
        try:
            seed_examples(db)
        finally:
            db.close()
        yield test_client


def test_health(client) -> None:
    """The health probe reaches the database."""

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


def test_list_enumerations(client) -> None:
    """Every enumeration table is listed with its row count."""

    response = client.get("/catalog/enumerations")
    assert response.status_code == 200
    tables = {t["table"]: t["count"] for t in response.json()["tables"]}
    assert len(tables) == 17
    assert tables["months"] == 12
    assert tables["difficulty_ratings"] == 4


def test_enumeration_rows_are_ordered(client) -> None:
    """Ordered vocabularies come back by numeric_value."""

    response = client.get("/catalog/enumerations/months")
    assert response.status_code == 200
    rows = response.json()["rows"]
    assert [r["numeric_value"] for r in rows] == list(range(1, 13))
    assert rows[0]["id"] == "january"


def test_enumeration_ranges_are_nested(client) -> None:
    """Flattened range columns are returned as {min, max}."""

    rows = client.get("/catalog/enumerations/system_sizes").json()["rows"]
    assert all(set(r["typical_trail_count"]) == {"min", "max"} for r in rows)


def test_unknown_enumeration_table(client) -> None:
    response = client.get("/catalog/enumerations/colours")
    assert response.status_code == 404
    assert "colours" in response.json()["detail"]


def test_list_systems(client) -> None:
    """Systems are listed by name."""

    response = client.get("/catalog/systems")
    assert response.status_code == 200
    names = [s["name"] for s in response.json()]
    assert names == sorted(names)
    assert {s["id"] for s in response.json()} == {"sys_squamish", "sys_stgeorge"}


def test_system_detail_rebuilds_junctions(client) -> None:
    """The detail view folds junction rows back into id lists."""

    response = client.get("/catalog/systems/sys_squamish")
    assert response.status_code == 200
    body = response.json()
    assert body["route_ids"] == ["route_half_nelson_classic"]
    assert body["trail_ids"] == ["trail_half_nelson", "trail_word_of_mouth"]

    system = body["system"]
    assert system["best_month_ids"] == ["june", "july", "august", "september"]
    assert system["avoid_month_ids"] == ["january", "february", "march", "november", "december"]
    assert system["known_for_tag_ids"] == sorted(system["known_for_tag_ids"])
    assert system["vertical_range_m"]["min"] <= system["vertical_range_m"]["max"]


def test_missing_system(client) -> None:
    response = client.get("/catalog/systems/sys_nowhere")
    assert response.status_code == 404


def test_integrity_report(client) -> None:
    """The shipped data passes every check."""

    response = client.get("/catalog/integrity")
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is True
    assert {c["name"] for c in body["checks"]} == {
        "unique_ids", "numeric_ordering", "seed_references", "catalog", "content"
    }
