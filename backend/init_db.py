# backend/init_db.py
import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

import models
import normalized_models as schema
from db import Base, engine as default_engine
from enumeration_seed_data import get_enumeration_seed_data

logger = logging.getLogger("uvicorn")


def init_tables(engine=None):
    logger.info("Checking database tables...")
    Base.metadata.create_all(bind=engine or default_engine)
    logger.info("Database tables initialized successfully.")


def seed_enumerations(
    session: Session,
    seed: Optional[schema.EnumerationSeedData] = None,
) -> Dict[str, Dict[str, int]]:
    """
    Upsert every enumeration row: insert new ids, update changed ones.
    Safe to run on every startup. Returns inserted/updated/unchanged per table.
    """
    seed = seed or get_enumeration_seed_data()
    counts: Dict[str, Dict[str, int]] = {}

    for table, rows in seed.tables():
        orm_cls = models.ENUMERATION_TABLES[table]
        tally = {"inserted": 0, "updated": 0, "unchanged": 0}
        for record in rows:
            values = models.flatten_record(record.model_dump())
            existing = session.get(orm_cls, values["id"])
            if existing is None:
                session.add(orm_cls(**values))
                tally["inserted"] += 1
                continue
            changed = {k: v for k, v in values.items() if getattr(existing, k) != v}
            if changed:
                for k, v in changed.items():
                    setattr(existing, k, v)
                tally["updated"] += 1
            else:
                tally["unchanged"] += 1
        # children reference parents flushed in earlier iterations
        session.flush()
        counts[table] = tally
        logger.info(
            "Seeded %s: %d inserted, %d updated, %d unchanged",
            table, tally["inserted"], tally["updated"], tally["unchanged"],
        )

    session.commit()
    return counts


def _row_values(orm_cls, record, **extra):
    columns = {c.name for c in orm_cls.__table__.columns}
    values = {k: v for k, v in record.model_dump().items() if k in columns}
    values.update(extra)
    return values


def _replace(session: Session, target, key: str, owner_ids: Iterable[str], rows: List[dict]) -> int:
    """Delete the junction rows owned by ``owner_ids`` and insert ``rows`` instead."""
    table = target.__table__ if hasattr(target, "__table__") else target
    owner_ids = list(owner_ids)
    if owner_ids:
        session.execute(delete(table).where(table.c[key].in_(owner_ids)))
    if rows:
        session.execute(insert(table), rows)
    return len(rows)


def seed_examples(session: Session, catalog: Optional[schema.NormalizedCatalog] = None) -> Dict[str, int]:
    """Load normalized records (the bundled examples by default). Enumerations must be seeded first."""
    if catalog is None:
        from normalized_examples import NORMALIZED_EXAMPLES
        catalog = NORMALIZED_EXAMPLES
    catalog = catalog.with_junctions()
    counts: Dict[str, int] = {}

    for profile in catalog.difficulty_profiles:
        session.merge(models.DifficultyProfile(**_row_values(models.DifficultyProfile, profile)))
    session.flush()
    counts["difficulty_profiles"] = len(catalog.difficulty_profiles)
    counts["difficulty_profile_character_tags"] = _replace(
        session, models.difficulty_profile_character_tags, "profile_id",
        (p.id for p in catalog.difficulty_profiles),
        [{"profile_id": p.id, "character_tag_id": t} for p in catalog.difficulty_profiles for t in p.character_tag_ids],
    )

    for system in catalog.systems:
        values = _row_values(
            models.System, system,
            latitude=system.coordinates.lat,
            longitude=system.coordinates.lng,
            vertical_min_m=system.vertical_range_m.min,
            vertical_max_m=system.vertical_range_m.max,
        )
        session.merge(models.System(**values))
    session.flush()
    counts["systems"] = len(catalog.systems)

    system_ids = [s.id for s in catalog.systems]
    counts["system_character_tags"] = _replace(
        session, models.SystemCharacterTag, "system_id", system_ids,
        [row.model_dump() for row in catalog.system_character_tags],
    )
    counts["system_months"] = _replace(
        session, models.SystemMonth, "system_id", system_ids,
        [row.model_dump() for row in catalog.system_months],
    )
    counts["system_feature_tags"] = _replace(
        session, models.system_feature_tags, "system_id", system_ids,
        [{"system_id": s.id, "character_tag_id": t} for s in catalog.systems for t in s.typical_feature_tag_ids],
    )
    counts["system_skill_levels"] = _replace(
        session, models.system_skill_levels, "system_id", system_ids,
        [{"system_id": s.id, "skill_level_id": k} for s in catalog.systems for k in s.good_for_skill_ids],
    )
    counts["system_riding_styles"] = _replace(
        session, models.system_riding_styles, "system_id", system_ids,
        [{"system_id": s.id, "riding_style_id": r} for s in catalog.systems for r in s.good_for_style_ids],
    )

    for trail in catalog.trails:
        session.merge(models.Trail(**_row_values(models.Trail, trail)))
    session.flush()
    counts["trails"] = len(catalog.trails)
    counts["trail_pairings"] = _replace(
        session, models.trail_pairings, "trail_id", (t.id for t in catalog.trails),
        [{"trail_id": t.id, "paired_trail_id": p} for t in catalog.trails for p in t.pairs_well_with_trail_ids],
    )

    for route in catalog.routes:
        session.merge(models.Route(**_row_values(models.Route, route)))
    session.flush()
    counts["routes"] = len(catalog.routes)

    route_ids = [r.id for r in catalog.routes]
    counts["route_trails"] = _replace(
        session, models.RouteTrail, "route_id", route_ids,
        [step.model_dump() for r in catalog.routes for step in r.trail_sequence],
    )
    counts["route_conditions"] = _replace(
        session, models.RouteCondition, "route_id", route_ids,
        [row.model_dump() for row in catalog.route_conditions],
    )
    counts["route_skill_levels"] = _replace(
        session, models.RouteSkillLevel, "route_id", route_ids,
        [row.model_dump() for row in catalog.route_skill_levels],
    )
    counts["route_riding_styles"] = _replace(
        session, models.route_riding_styles, "route_id", route_ids,
        [{"route_id": r.id, "riding_style_id": s} for r in catalog.routes for s in r.ideal_for_style_ids],
    )

    for guide in catalog.guides:
        session.merge(models.Guide(**_row_values(models.Guide, guide)))
    for update in catalog.updates:
        session.merge(models.Update(**_row_values(models.Update, update)))
    session.flush()
    counts["guides"] = len(catalog.guides)
    counts["updates"] = len(catalog.updates)
    counts["update_routes"] = _replace(
        session, models.update_routes, "update_id", (u.id for u in catalog.updates),
        [{"update_id": u.id, "route_id": r} for u in catalog.updates for r in u.affected_route_ids],
    )

    for prefs in catalog.user_preferences:
        session.merge(models.UserPreference(**_row_values(models.UserPreference, prefs)))
    session.flush()
    counts["user_preferences"] = len(catalog.user_preferences)

    user_ids = [u.user_id for u in catalog.user_preferences]
    counts["user_preference_styles"] = _replace(
        session, models.UserPreferenceStyle, "user_id", user_ids,
        [row.model_dump() for row in catalog.user_preference_styles],
    )
    counts["user_favorite_systems"] = _replace(
        session, models.user_favorite_systems, "user_id", user_ids,
        [{"user_id": u.user_id, "system_id": s} for u in catalog.user_preferences for s in u.favorite_system_ids],
    )
    counts["user_avoid_tags"] = _replace(
        session, models.user_avoid_tags, "user_id", user_ids,
        [{"user_id": u.user_id, "character_tag_id": t} for u in catalog.user_preferences for t in u.avoid_feature_tag_ids],
    )
    counts["user_avoid_conditions"] = _replace(
        session, models.user_avoid_conditions, "user_id", user_ids,
        [{"user_id": u.user_id, "condition_id": c} for u in catalog.user_preferences for c in u.avoid_condition_ids],
    )

    session.commit()
    logger.info("Loaded example catalog: %s", counts)
    return counts
