"""Pytest fixtures shared across catalog tests."""

from __future__ import annotations

import os
from collections.abc import Sequence

# db.py builds its engine at import time; point it at in-memory SQLite first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("CATALOG_SEED_ON_STARTUP", "1")

import pytest
from sqlalchemy.orm import sessionmaker


@pytest.fixture
def seed():
    """Return the built-in enumeration seed (never the on-disk export)."""

    from enumeration_seed_data import ENUMERATION_SEED_DATA

    return ENUMERATION_SEED_DATA


@pytest.fixture
def index(seed):
    """Return a vocabulary index over the built-in seed with the default cutoff."""

    from vocabulary import EnumerationIndex

    return EnumerationIndex(seed, fuzzy_cutoff=85)


@pytest.fixture
def engine():
    """Return a fresh in-memory database with every table created."""

    from db import make_engine
    from init_db import init_tables

    eng = make_engine("sqlite://")
    init_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    """Return a session bound to the per-test database."""

    factory = sessionmaker(bind=engine, autoflush=False)
    db = factory()
    yield db
    db.close()


@pytest.fixture
def seeded_session(session, seed):
    """Return a session whose database already holds every enumeration row."""

    from init_db import seed_enumerations

    seed_enumerations(session, seed)
    return session


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching the database, the HTTP app or CLIs.
    """

    for item in items:
        markers = {m.name for m in item.iter_markers()} & {"unit", "integration"}
        if len(markers) != 1:
            raise pytest.UsageError(f"{item.nodeid} must be marked with exactly one of unit/integration")
