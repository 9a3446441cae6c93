# backend/catalog_router.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

import normalized_models as schema
from db import get_db
from integrity import validate_all
from models import (
    ENUMERATION_TABLES,
    EnumerationListResponse,
    EnumerationRowsResponse,
    EnumerationSummary,
    IntegrityCheck,
    IntegrityReport,
    Month,
    System,
    SystemCharacterTag,
    SystemDetail,
    SystemMonth,
    SystemSummary,
    system_feature_tags,
    system_riding_styles,
    system_skill_levels,
    unflatten_row,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


# --- Enumerations ---

@router.get("/enumerations", response_model=EnumerationListResponse)
def list_enumerations(db: Session = Depends(get_db)):
    tables = [
        EnumerationSummary(table=name, count=db.query(orm_cls).count())
        for name, orm_cls in ENUMERATION_TABLES.items()
    ]
    return {"tables": tables}


@router.get("/enumerations/{table}", response_model=EnumerationRowsResponse)
def get_enumeration(table: str, db: Session = Depends(get_db)):
    orm_cls = ENUMERATION_TABLES.get(table)
    if orm_cls is None:
        raise HTTPException(404, f"Unknown enumeration table: {table}")
    query = db.query(orm_cls)
    if hasattr(orm_cls, "numeric_value"):
        query = query.order_by(orm_cls.numeric_value)
    else:
        query = query.order_by(orm_cls.id)
    return {"table": table, "rows": [unflatten_row(row) for row in query.all()]}


# --- Systems ---

def _ids(db: Session, column, owner_column, owner_id: str) -> List[str]:
    return list(db.execute(select(column).where(owner_column == owner_id).order_by(column)).scalars())


def _system_record(db: Session, row: System) -> schema.System:
    """Rebuild the normalized record from the systems row and its junction tables."""
    months = db.execute(
        select(SystemMonth.month_id, SystemMonth.relationship_type)
        .join(Month, Month.id == SystemMonth.month_id)
        .where(SystemMonth.system_id == row.id)
        .order_by(Month.numeric_value)
    ).all()
    return schema.System(
        id=row.id,
        name=row.name,
        region_id=row.region_id,
        country_id=row.country_id,
        state_province_id=row.state_province_id,
        city=row.city,
        coordinates=schema.Coordinates(lat=row.latitude, lng=row.longitude),
        tagline=row.tagline,
        description=row.description,
        size_id=row.size_id,
        trail_count_estimate=row.trail_count_estimate,
        vertical_range_m=schema.IntRange(min=row.vertical_min_m, max=row.vertical_max_m),
        best_month_ids=[m for m, kind in months if kind == "best"],
        avoid_month_ids=[m for m, kind in months if kind == "avoid"],
        known_for_tag_ids=_ids(db, SystemCharacterTag.character_tag_id, SystemCharacterTag.system_id, row.id),
        good_for_skill_ids=_ids(db, system_skill_levels.c.skill_level_id, system_skill_levels.c.system_id, row.id),
        good_for_style_ids=_ids(db, system_riding_styles.c.riding_style_id, system_riding_styles.c.system_id, row.id),
        difficulty_calibration_id=row.difficulty_calibration_id,
        typical_feature_tag_ids=_ids(
            db, system_feature_tags.c.character_tag_id, system_feature_tags.c.system_id, row.id
        ),
        climbing_style=row.climbing_style,
        insider_tips=row.insider_tips or [],
        common_mistakes=row.common_mistakes or [],
        hidden_gems=row.hidden_gems or [],
        external_links=schema.ExternalLinks(**(row.external_links or {})),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


@router.get("/systems", response_model=List[SystemSummary])
def list_systems(db: Session = Depends(get_db)):
    rows = db.query(System).order_by(System.name).all()
    return [
        SystemSummary(
            id=r.id,
            name=r.name,
            region_id=r.region_id,
            country_id=r.country_id,
            size_id=r.size_id,
            tagline=r.tagline,
        )
        for r in rows
    ]


@router.get("/systems/{system_id}", response_model=SystemDetail)
def get_system(system_id: str, db: Session = Depends(get_db)):
    row = db.get(System, system_id)
    if row is None:
        raise HTTPException(404, f"System not found: {system_id}")
    return SystemDetail(
        system=_system_record(db, row),
        route_ids=[r.id for r in row.routes],
        trail_ids=[t.id for t in row.trails],
    )


# --- Integrity ---

@router.get("/integrity", response_model=IntegrityReport)
def integrity_report():
    results = validate_all()
    checks = [
        IntegrityCheck(name=name, is_valid=r.is_valid, errors=list(r.errors), warnings=list(r.warnings))
        for name, r in results.items()
    ]
    return IntegrityReport(is_valid=all(c.is_valid for c in checks), checks=checks)
