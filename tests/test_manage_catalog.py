"""Tests for the catalog housekeeping CLI."""

from __future__ import annotations

import json

import pytest

from enumeration_seed_data import ENUMERATION_SEED_DATA, get_enumeration_seed_data
from manage_catalog import build_parser, collect_fixtures, main

pytestmark = pytest.mark.integration


def test_check_passes_on_built_in_data(capsys) -> None:
    """The check command exits 0 and reports every check."""

    assert main(["check"]) == 0
    out = capsys.readouterr().out
    assert "catalog: ok" in out
    assert "FAILED" not in out


def test_export_writes_loadable_seed(tmp_path) -> None:
    path = tmp_path / "seed.json"
    assert main(["export", "--out", str(path)]) == 0
    assert get_enumeration_seed_data(path).model_dump() == ENUMERATION_SEED_DATA.model_dump()


def test_fixtures_groups_every_example_module(tmp_path) -> None:
    """The fixtures dump is valid JSON keyed by example module."""

    path = tmp_path / "nested" / "fixtures.json"
    assert main(["fixtures", "--out", str(path)]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"sample_data", "regional_examples", "content_examples", "normalized_examples"}
    assert data == json.loads(json.dumps(collect_fixtures()))


def test_init_db_with_examples() -> None:
    """Tables are created and the examples load into the configured database."""

    assert main(["init-db", "--with-examples"]) == 0

    from db import SessionLocal
    import models

    db = SessionLocal()
    try:
        assert db.get(models.System, "sys_squamish") is not None
        assert db.query(models.Month).count() == 12
    finally:
        db.close()


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
