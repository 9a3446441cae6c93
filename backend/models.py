# backend/models.py

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from typing import Optional, List, Dict, Any, Tuple
from pydantic import BaseModel

import normalized_models as schema

# 引入我们在 db.py 里定义的 Base
from db import Base

# ==========================================
# 1. SQLAlchemy Models (数据库表定义)
# ==========================================

# --- Enumeration tables ---

class Country(Base):
    __tablename__ = "countries"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    code = Column(String(2), nullable=False)

class StateProvince(Base):
    __tablename__ = "state_provinces"
    id = Column(String, primary_key=True)
    country_id = Column(String, ForeignKey("countries.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    code = Column(String, nullable=False)

class Region(Base):
    __tablename__ = "regions"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    typical_features = Column(JSON, default=list)
    climate_type = Column(String)

class DifficultyRating(Base):
    __tablename__ = "difficulty_ratings"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    numeric_value = Column(Integer, nullable=False, unique=True)
    description = Column(Text)

class RegionalCalibration(Base):
    __tablename__ = "regional_calibrations"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    adjustment_factor = Column(Float, nullable=False)
    description = Column(Text)

class CharacterTag(Base):
    __tablename__ = "character_tags"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    description = Column(Text)
    icon = Column(String, nullable=True)

class SystemSize(Base):
    __tablename__ = "system_sizes"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    typical_trail_count_min = Column(Integer, nullable=False)
    typical_trail_count_max = Column(Integer, nullable=False)
    typical_days_needed_min = Column(Integer, nullable=False)
    typical_days_needed_max = Column(Integer, nullable=False)
    description = Column(Text)

class TrailDirection(Base):
    __tablename__ = "trail_directions"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    description = Column(Text)

class RouteType(Base):
    __tablename__ = "route_types"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    description = Column(Text)
    typical_logistics = Column(JSON, default=list)

class RidingStyle(Base):
    __tablename__ = "riding_styles"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    description = Column(Text)
    typical_features = Column(JSON, default=list)

class SkillLevel(Base):
    __tablename__ = "skill_levels"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    numeric_value = Column(Integer, nullable=False, unique=True)
    description = Column(Text)
    typical_experience = Column(String)

class FitnessLevel(Base):
    __tablename__ = "fitness_levels"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    numeric_value = Column(Integer, nullable=False, unique=True)
    description = Column(Text)
    typical_distance_km_min = Column(Integer, nullable=False)
    typical_distance_km_max = Column(Integer, nullable=False)

class Month(Base):
    __tablename__ = "months"
    __table_args__ = (
        CheckConstraint("numeric_value BETWEEN 1 AND 12", name="ck_months_numeric_value"),
        CheckConstraint("season IN ('winter', 'spring', 'summer', 'fall')", name="ck_months_season"),
    )
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    numeric_value = Column(Integer, nullable=False, unique=True)
    season = Column(String, nullable=False)

class Condition(Base):
    __tablename__ = "conditions"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    is_positive = Column(Boolean, nullable=False)
    description = Column(Text)

class ContentType(Base):
    __tablename__ = "content_types"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    description = Column(Text)
    typical_length = Column(String)

class Severity(Base):
    __tablename__ = "severities"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    numeric_value = Column(Integer, nullable=False, unique=True)
    color_code = Column(String(7), nullable=False)
    description = Column(Text)

class UpdateType(Base):
    __tablename__ = "update_types"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    description = Column(Text)


# Same order as EnumerationSeedData: parents before children
ENUMERATION_TABLES = {
    "countries": Country,
    "state_provinces": StateProvince,
    "regions": Region,
    "difficulty_ratings": DifficultyRating,
    "regional_calibrations": RegionalCalibration,
    "character_tags": CharacterTag,
    "system_sizes": SystemSize,
    "trail_directions": TrailDirection,
    "route_types": RouteType,
    "riding_styles": RidingStyle,
    "skill_levels": SkillLevel,
    "fitness_levels": FitnessLevel,
    "months": Month,
    "conditions": Condition,
    "content_types": ContentType,
    "severities": Severity,
    "update_types": UpdateType,
}


# --- Main entities ---

def _score_check(table: str, column: str) -> CheckConstraint:
    return CheckConstraint(f"{column} BETWEEN 0 AND 3", name=f"ck_{table}_{column}")


class DifficultyProfile(Base):
    __tablename__ = "difficulty_profiles"
    __table_args__ = tuple(
        _score_check("difficulty_profiles", c)
        for c in ("technical_climbing", "technical_descending", "flow_features", "fitness_demand")
    )
    id = Column(String, primary_key=True)
    overall_rating_id = Column(String, ForeignKey("difficulty_ratings.id"), nullable=False)
    regional_calibration_id = Column(String, ForeignKey("regional_calibrations.id"), nullable=False)
    technical_climbing = Column(Integer, nullable=False)
    technical_descending = Column(Integer, nullable=False)
    flow_features = Column(Integer, nullable=False)
    fitness_demand = Column(Integer, nullable=False)
    comparable_to = Column(String, nullable=True)

class System(Base):
    __tablename__ = "systems"
    __table_args__ = (
        CheckConstraint("vertical_min_m <= vertical_max_m", name="ck_systems_vertical_range"),
        CheckConstraint("trail_count_estimate >= 0", name="ck_systems_trail_count"),
    )
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False, index=True)
    region_id = Column(String, ForeignKey("regions.id"), nullable=False, index=True)
    country_id = Column(String, ForeignKey("countries.id"), nullable=False)
    state_province_id = Column(String, ForeignKey("state_provinces.id"), nullable=False)
    city = Column(String)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    tagline = Column(String)
    description = Column(Text)
    size_id = Column(String, ForeignKey("system_sizes.id"), nullable=False)
    trail_count_estimate = Column(Integer, nullable=False)
    vertical_min_m = Column(Integer, nullable=False)
    vertical_max_m = Column(Integer, nullable=False)
    difficulty_calibration_id = Column(String, ForeignKey("regional_calibrations.id"), nullable=False)
    climbing_style = Column(String)
    insider_tips = Column(JSON, default=list)
    common_mistakes = Column(JSON, default=list)
    hidden_gems = Column(JSON, default=list)
    external_links = Column(JSON, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    trails = relationship("Trail", back_populates="system", order_by="Trail.id")
    routes = relationship("Route", back_populates="system", order_by="Route.id")

class Trail(Base):
    __tablename__ = "trails"
    __table_args__ = (CheckConstraint("length_km IS NULL OR length_km >= 0", name="ck_trails_length"),)
    id = Column(String, primary_key=True)
    system_id = Column(String, ForeignKey("systems.id"), nullable=False, index=True)
    name = Column(String, nullable=False, index=True)
    difficulty_profile_id = Column(String, ForeignKey("difficulty_profiles.id"), nullable=False)
    direction_id = Column(String, ForeignKey("trail_directions.id"), nullable=False)
    length_km = Column(Float, nullable=True)
    personality = Column(String)
    signature_features = Column(JSON, default=list)
    local_name = Column(String, nullable=True)
    condition_notes = Column(Text, nullable=True)
    trailforks_id = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    system = relationship("System", back_populates="trails")

class Route(Base):
    __tablename__ = "routes"
    __table_args__ = (
        CheckConstraint("distance_km_min <= distance_km_max", name="ck_routes_distance"),
        CheckConstraint("time_estimate_hours_min <= time_estimate_hours_max", name="ck_routes_time"),
    )
    id = Column(String, primary_key=True)
    system_id = Column(String, ForeignKey("systems.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    tagline = Column(String)
    purpose = Column(Text)
    difficulty_profile_id = Column(String, ForeignKey("difficulty_profiles.id"), nullable=False)
    route_type_id = Column(String, ForeignKey("route_types.id"), nullable=False)
    distance_km_min = Column(Float, nullable=False)
    distance_km_max = Column(Float, nullable=False)
    time_estimate_hours_min = Column(Float, nullable=False)
    time_estimate_hours_max = Column(Float, nullable=False)
    highlights = Column(JSON, default=list)
    pro_tips = Column(JSON, default=list)
    watch_out_for = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    system = relationship("System", back_populates="routes")
    trail_sequence = relationship("RouteTrail", order_by="RouteTrail.sequence_order")

class RouteTrail(Base):
    __tablename__ = "route_trails"
    __table_args__ = (
        UniqueConstraint("route_id", "sequence_order", name="uq_route_trails_order"),
        CheckConstraint("sequence_order >= 1", name="ck_route_trails_order"),
    )
    id = Column(String, primary_key=True)
    route_id = Column(String, ForeignKey("routes.id", ondelete="CASCADE"), nullable=False, index=True)
    trail_id = Column(String, ForeignKey("trails.id"), nullable=False)
    sequence_order = Column(Integer, nullable=False)
    purpose = Column(String)
    notes = Column(Text, nullable=True)

class Guide(Base):
    __tablename__ = "guides"
    __table_args__ = (
        CheckConstraint("author_credibility BETWEEN 0 AND 100", name="ck_guides_credibility"),
        CheckConstraint("avg_rating BETWEEN 0 AND 5", name="ck_guides_rating"),
    )
    id = Column(String, primary_key=True)
    content_type_id = Column(String, ForeignKey("content_types.id"), nullable=False)
    system_id = Column(String, ForeignKey("systems.id"), nullable=False, index=True)
    route_id = Column(String, ForeignKey("routes.id"), nullable=True)
    title = Column(String, nullable=False)
    summary = Column(Text)
    content = Column(Text)
    key_takeaways = Column(JSON, default=list)
    target_skill_level_id = Column(String, ForeignKey("skill_levels.id"), nullable=False)
    author_id = Column(String, nullable=False)
    author_credibility = Column(Float, nullable=False)
    peer_reviews = Column(Integer, default=0)
    avg_rating = Column(Float, default=0)
    helpful_votes = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    last_verified = Column(DateTime(timezone=True), nullable=False)

class Update(Base):
    __tablename__ = "updates"
    id = Column(String, primary_key=True)
    system_id = Column(String, ForeignKey("systems.id"), nullable=False, index=True)
    update_type_id = Column(String, ForeignKey("update_types.id"), nullable=False)
    severity_id = Column(String, ForeignKey("severities.id"), nullable=False)
    title = Column(String, nullable=False)
    summary = Column(Text)
    details = Column(Text, nullable=True)
    valid_until = Column(DateTime(timezone=True), nullable=True)
    reported_by = Column(String, nullable=False)
    verified = Column(Boolean, default=False)
    verification_count = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)

class UserPreference(Base):
    __tablename__ = "user_preferences"
    user_id = Column(String, primary_key=True)
    years_riding = Column(Integer, nullable=False)
    home_region_id = Column(String, ForeignKey("regions.id"), nullable=True)
    preferred_difficulty_profile_id = Column(String, ForeignKey("difficulty_profiles.id"), nullable=False)
    preferred_skill_level_id = Column(String, ForeignKey("skill_levels.id"), nullable=False)
    preferred_fitness_level_id = Column(String, ForeignKey("fitness_levels.id"), nullable=False)
    style_preferences = Column(JSON, nullable=False)
    trip_style = Column(String)
    group_dynamic = Column(String)
    updated_at = Column(DateTime(timezone=True), nullable=False)


# --- Junction tables ---

class SystemCharacterTag(Base):
    __tablename__ = "system_character_tags"
    system_id = Column(String, ForeignKey("systems.id", ondelete="CASCADE"), primary_key=True)
    character_tag_id = Column(String, ForeignKey("character_tags.id"), primary_key=True)

class SystemMonth(Base):
    __tablename__ = "system_months"
    __table_args__ = (
        CheckConstraint("relationship_type IN ('best', 'avoid')", name="ck_system_months_type"),
    )
    system_id = Column(String, ForeignKey("systems.id", ondelete="CASCADE"), primary_key=True)
    month_id = Column(String, ForeignKey("months.id"), primary_key=True)
    relationship_type = Column(String, primary_key=True)

class RouteCondition(Base):
    __tablename__ = "route_conditions"
    __table_args__ = (
        CheckConstraint("relationship_type IN ('best', 'avoid')", name="ck_route_conditions_type"),
    )
    route_id = Column(String, ForeignKey("routes.id", ondelete="CASCADE"), primary_key=True)
    condition_id = Column(String, ForeignKey("conditions.id"), primary_key=True)
    relationship_type = Column(String, primary_key=True)

class RouteSkillLevel(Base):
    __tablename__ = "route_skill_levels"
    __table_args__ = (
        CheckConstraint(
            "relationship_type IN ('ideal', 'not_recommended')", name="ck_route_skill_levels_type"
        ),
    )
    route_id = Column(String, ForeignKey("routes.id", ondelete="CASCADE"), primary_key=True)
    skill_level_id = Column(String, ForeignKey("skill_levels.id"), primary_key=True)
    relationship_type = Column(String, primary_key=True)

class UserPreferenceStyle(Base):
    __tablename__ = "user_preference_styles"
    __table_args__ = (
        CheckConstraint("preference_strength BETWEEN 0 AND 1", name="ck_user_preference_styles_strength"),
    )
    user_id = Column(String, ForeignKey("user_preferences.user_id", ondelete="CASCADE"), primary_key=True)
    riding_style_id = Column(String, ForeignKey("riding_styles.id"), primary_key=True)
    preference_strength = Column(Float, nullable=False)


def _link_table(name: str, left: Tuple[str, str], right: Tuple[str, str]) -> Table:
    """Two-column junction for a plain list of foreign keys: (column, "table.id") pairs."""
    left_col, left_target = left
    right_col, right_target = right
    return Table(
        name,
        Base.metadata,
        Column(left_col, String, ForeignKey(left_target, ondelete="CASCADE"), primary_key=True),
        Column(right_col, String, ForeignKey(right_target), primary_key=True),
    )


difficulty_profile_character_tags = _link_table(
    "difficulty_profile_character_tags", ("profile_id", "difficulty_profiles.id"), ("character_tag_id", "character_tags.id")
)
system_feature_tags = _link_table(
    "system_feature_tags", ("system_id", "systems.id"), ("character_tag_id", "character_tags.id")
)
system_skill_levels = _link_table(
    "system_skill_levels", ("system_id", "systems.id"), ("skill_level_id", "skill_levels.id")
)
system_riding_styles = _link_table(
    "system_riding_styles", ("system_id", "systems.id"), ("riding_style_id", "riding_styles.id")
)
trail_pairings = _link_table("trail_pairings", ("trail_id", "trails.id"), ("paired_trail_id", "trails.id"))
route_riding_styles = _link_table(
    "route_riding_styles", ("route_id", "routes.id"), ("riding_style_id", "riding_styles.id")
)
update_routes = _link_table("update_routes", ("update_id", "updates.id"), ("route_id", "routes.id"))
user_favorite_systems = _link_table(
    "user_favorite_systems", ("user_id", "user_preferences.user_id"), ("system_id", "systems.id")
)
user_avoid_tags = _link_table(
    "user_avoid_tags", ("user_id", "user_preferences.user_id"), ("character_tag_id", "character_tags.id")
)
user_avoid_conditions = _link_table(
    "user_avoid_conditions", ("user_id", "user_preferences.user_id"), ("condition_id", "conditions.id")
)


# --- Row <-> record helpers ---

def flatten_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """Spread nested {min, max} ranges into ``<field>_min`` / ``<field>_max`` columns."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict) and set(value) == {"min", "max"}:
            flat[f"{key}_min"] = value["min"]
            flat[f"{key}_max"] = value["max"]
        else:
            flat[key] = value
    return flat


def unflatten_row(row: Base) -> Dict[str, Any]:
    data = {c.name: getattr(row, c.name) for c in row.__table__.columns}
    for name in [k for k in data if k.endswith("_min")]:
        base = name[: -len("_min")]
        if f"{base}_max" in data:
            data[base] = {"min": data.pop(name), "max": data.pop(f"{base}_max")}
    return data


# ==========================================
# 2. Pydantic Models (API 请求/响应 Schema)
# ==========================================

class EnumerationSummary(BaseModel):
    table: str
    count: int

class EnumerationListResponse(BaseModel):
    tables: List[EnumerationSummary]

class EnumerationRowsResponse(BaseModel):
    table: str
    rows: List[Dict[str, Any]]

class SystemSummary(BaseModel):
    id: str
    name: str
    region_id: str
    country_id: str
    size_id: str
    tagline: Optional[str] = None

class SystemDetail(BaseModel):
    system: schema.System
    route_ids: List[str] = []
    trail_ids: List[str] = []

class IntegrityCheck(BaseModel):
    name: str
    is_valid: bool
    errors: List[str] = []
    warnings: List[str] = []

class IntegrityReport(BaseModel):
    is_valid: bool
    checks: List[IntegrityCheck]

class HealthResponse(BaseModel):
    status: str
    database: str
