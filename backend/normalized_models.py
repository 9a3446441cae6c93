# backend/normalized_models.py
"""
Normalized data models for the MTB wiki.

Every categorical field is a foreign key into an enumeration table instead of
free text. Foreign-key fields are declared with ``ref()`` so the integrity
checks can discover the target collection from the schema itself.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


def ref(target: str, **kwargs: Any) -> Any:
    """Field pointing at the ``id`` column of another collection."""
    return Field(json_schema_extra={"references": target}, **kwargs)


def references_of(model: type[BaseModel]) -> Dict[str, str]:
    """Map of field name -> referenced collection for a model class."""
    found: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if isinstance(extra, dict) and "references" in extra:
            found[name] = str(extra["references"])
    return found


class IntRange(BaseModel):
    min: int
    max: int

    @model_validator(mode="after")
    def _ordered(self) -> "IntRange":
        if self.min > self.max:
            raise ValueError(f"range min {self.min} is greater than max {self.max}")
        return self


class Coordinates(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


# ==========================================
# 1. Enumeration tables
# ==========================================

class Country(BaseModel):
    id: str
    name: str
    code: str  # ISO 3166-1 alpha-2


class StateProvince(BaseModel):
    id: str
    country_id: str = ref("countries")
    name: str
    code: str


class Region(BaseModel):
    id: str
    name: str
    description: str
    typical_features: List[str] = []
    climate_type: str


class DifficultyRating(BaseModel):
    id: str
    name: str
    display_name: str
    numeric_value: int
    description: str


class RegionalCalibration(BaseModel):
    id: str
    name: str
    display_name: str
    adjustment_factor: float
    description: str


class CharacterTag(BaseModel):
    id: str
    name: str
    category: str  # surface, terrain, features, exposure, scenery
    description: str
    icon: Optional[str] = None


class SystemSize(BaseModel):
    id: str
    name: str
    display_name: str
    typical_trail_count: IntRange
    typical_days_needed: IntRange
    description: str


class TrailDirection(BaseModel):
    id: str
    name: str
    display_name: str
    description: str


class RouteType(BaseModel):
    id: str
    name: str
    display_name: str
    description: str
    typical_logistics: List[str] = []


class RidingStyle(BaseModel):
    id: str
    name: str
    display_name: str
    description: str
    typical_features: List[str] = []


class SkillLevel(BaseModel):
    id: str
    name: str
    display_name: str
    numeric_value: int
    description: str
    typical_experience: str


class FitnessLevel(BaseModel):
    id: str
    name: str
    display_name: str
    numeric_value: int
    description: str
    typical_distance_km: IntRange


class Month(BaseModel):
    id: str
    name: str
    display_name: str
    numeric_value: int = Field(ge=1, le=12)
    season: Literal["winter", "spring", "summer", "fall"]


class Condition(BaseModel):
    id: str
    name: str
    category: str  # weather, trail_surface, seasonal
    is_positive: bool
    description: str


class ContentType(BaseModel):
    id: str
    name: str
    display_name: str
    description: str
    typical_length: str


class Severity(BaseModel):
    id: str
    name: str
    display_name: str
    numeric_value: int
    color_code: str
    description: str


class UpdateType(BaseModel):
    id: str
    name: str
    display_name: str
    category: str
    description: str


class EnumerationSeedData(BaseModel):
    """All enumeration tables, in foreign-key dependency order."""

    countries: List[Country]
    state_provinces: List[StateProvince]
    regions: List[Region]
    difficulty_ratings: List[DifficultyRating]
    regional_calibrations: List[RegionalCalibration]
    character_tags: List[CharacterTag]
    system_sizes: List[SystemSize]
    trail_directions: List[TrailDirection]
    route_types: List[RouteType]
    riding_styles: List[RidingStyle]
    skill_levels: List[SkillLevel]
    fitness_levels: List[FitnessLevel]
    months: List[Month]
    conditions: List[Condition]
    content_types: List[ContentType]
    severities: List[Severity]
    update_types: List[UpdateType]

    def tables(self) -> Iterator[Tuple[str, List[BaseModel]]]:
        for name in type(self).model_fields:
            yield name, getattr(self, name)

    def ids(self, table: str) -> set[str]:
        return {row.id for row in getattr(self, table)}


# ==========================================
# 2. Main entities
# ==========================================

class DifficultyProfile(BaseModel):
    id: str
    overall_rating_id: str = ref("difficulty_ratings")
    regional_calibration_id: str = ref("regional_calibrations")

    technical_climbing: int = Field(ge=0, le=3)
    technical_descending: int = Field(ge=0, le=3)
    flow_features: int = Field(ge=0, le=3)
    fitness_demand: int = Field(ge=0, le=3)

    comparable_to: Optional[str] = None
    character_tag_ids: List[str] = ref("character_tags", default_factory=list)


class ExternalLinks(BaseModel):
    trailforks: Optional[str] = None
    official_site: Optional[str] = None
    local_org: Optional[str] = None


class System(BaseModel):
    id: str
    name: str

    region_id: str = ref("regions")
    country_id: str = ref("countries")
    state_province_id: str = ref("state_provinces")
    city: str
    coordinates: Coordinates

    tagline: str
    description: str

    size_id: str = ref("system_sizes")

    trail_count_estimate: int = Field(ge=0)
    vertical_range_m: IntRange

    best_month_ids: List[str] = ref("months", default_factory=list)
    avoid_month_ids: List[str] = ref("months", default_factory=list)
    known_for_tag_ids: List[str] = ref("character_tags", default_factory=list)
    good_for_skill_ids: List[str] = ref("skill_levels", default_factory=list)
    good_for_style_ids: List[str] = ref("riding_styles", default_factory=list)

    difficulty_calibration_id: str = ref("regional_calibrations")
    typical_feature_tag_ids: List[str] = ref("character_tags", default_factory=list)
    climbing_style: str

    insider_tips: List[str] = []
    common_mistakes: List[str] = []
    hidden_gems: List[str] = []

    external_links: ExternalLinks = Field(default_factory=ExternalLinks)

    created_at: datetime
    updated_at: datetime


class RouteTrail(BaseModel):
    """Junction row placing a trail at a position in a route."""

    id: str
    route_id: str = ref("routes")
    trail_id: str = ref("trails")
    sequence_order: int = Field(ge=1)
    purpose: str
    notes: Optional[str] = None


class Route(BaseModel):
    id: str
    system_id: str = ref("systems")

    name: str
    tagline: str
    purpose: str

    difficulty_profile_id: str = ref("difficulty_profiles")
    route_type_id: str = ref("route_types")

    distance_km_min: float = Field(ge=0)
    distance_km_max: float = Field(ge=0)
    time_estimate_hours_min: float = Field(ge=0)
    time_estimate_hours_max: float = Field(ge=0)

    trail_sequence: List[RouteTrail] = []

    best_condition_ids: List[str] = ref("conditions", default_factory=list)
    avoid_condition_ids: List[str] = ref("conditions", default_factory=list)
    ideal_for_skill_ids: List[str] = ref("skill_levels", default_factory=list)
    ideal_for_style_ids: List[str] = ref("riding_styles", default_factory=list)
    not_recommended_skill_ids: List[str] = ref("skill_levels", default_factory=list)

    highlights: List[str] = []
    pro_tips: List[str] = []
    watch_out_for: List[str] = []

    created_at: datetime
    updated_at: datetime


class Trail(BaseModel):
    id: str
    system_id: str = ref("systems")
    name: str

    difficulty_profile_id: str = ref("difficulty_profiles")
    direction_id: str = ref("trail_directions")

    length_km: Optional[float] = Field(default=None, ge=0)

    personality: str
    signature_features: List[str] = []
    local_name: Optional[str] = None
    condition_notes: Optional[str] = None

    pairs_well_with_trail_ids: List[str] = ref("trails", default_factory=list)

    trailforks_id: Optional[str] = None

    created_at: datetime
    updated_at: datetime


class NearPoint(BaseModel):
    lat: float
    lng: float
    radius_km: float = Field(gt=0)


class DiscoveryLocation(BaseModel):
    near: Optional[NearPoint] = None
    region_ids: List[str] = ref("regions", default_factory=list)
    system_ids: List[str] = ref("systems", default_factory=list)


class DiscoveryPreferences(BaseModel):
    skill_level_id: Optional[str] = ref("skill_levels", default=None)
    fitness_level_id: Optional[str] = ref("fitness_levels", default=None)
    riding_style_ids: List[str] = ref("riding_styles", default_factory=list)
    must_have_tag_ids: List[str] = ref("character_tags", default_factory=list)
    avoid_tag_ids: List[str] = ref("character_tags", default_factory=list)


class DiscoveryRequest(BaseModel):
    location: Optional[DiscoveryLocation] = None
    travel_month_id: Optional[str] = ref("months", default=None)
    flexible_timing: Optional[bool] = None
    preferences: Optional[DiscoveryPreferences] = None
    trip_length_days: Optional[int] = Field(default=None, ge=1)
    group_type: str


class SuggestedRoute(BaseModel):
    route: Route
    why_suggested: str
    day_recommendation: Optional[int] = None


class TripPlanning(BaseModel):
    recommended_days: int
    best_base_location: Optional[str] = None
    key_logistics: List[str] = []


class DiscoveryResult(BaseModel):
    system: System
    match_score: float = Field(ge=0, le=100)
    match_reasons: List[str] = []
    potential_concerns: List[str] = []
    suggested_routes: List[SuggestedRoute] = []
    trip_planning: TripPlanning
    local_advice: str
    timing_notes: Optional[str] = None


class StylePreferences(BaseModel):
    technical_climbing: float = Field(ge=0, le=1)
    technical_descending: float = Field(ge=0, le=1)
    flow_features: float = Field(ge=0, le=1)
    fitness_challenges: float = Field(ge=0, le=1)


class UserPreferences(BaseModel):
    user_id: str

    years_riding: int = Field(ge=0)
    home_region_id: Optional[str] = ref("regions", default=None)
    favorite_system_ids: List[str] = ref("systems", default_factory=list)

    preferred_difficulty_profile_id: str = ref("difficulty_profiles")
    preferred_skill_level_id: str = ref("skill_levels")
    preferred_fitness_level_id: str = ref("fitness_levels")
    preferred_style_ids: List[str] = ref("riding_styles", default_factory=list)

    style_preferences: StylePreferences

    trip_style: str
    group_dynamic: str

    avoid_feature_tag_ids: List[str] = ref("character_tags", default_factory=list)
    avoid_condition_ids: List[str] = ref("conditions", default_factory=list)

    updated_at: datetime


class Guide(BaseModel):
    id: str
    content_type_id: str = ref("content_types")
    system_id: str = ref("systems")
    route_id: Optional[str] = ref("routes", default=None)

    title: str
    summary: str
    content: str  # markdown

    key_takeaways: List[str] = []
    target_skill_level_id: str = ref("skill_levels")

    author_id: str
    author_credibility: float = Field(ge=0, le=100)

    peer_reviews: int = Field(ge=0)
    avg_rating: float = Field(ge=0, le=5)
    helpful_votes: int = Field(ge=0)

    created_at: datetime
    updated_at: datetime
    last_verified: datetime


class Update(BaseModel):
    id: str
    system_id: str = ref("systems")

    update_type_id: str = ref("update_types")
    severity_id: str = ref("severities")

    title: str
    summary: str
    details: Optional[str] = None

    affected_route_ids: List[str] = ref("routes", default_factory=list)
    valid_until: Optional[datetime] = None

    reported_by: str
    verified: bool
    verification_count: int = Field(ge=0)

    created_at: datetime


# ==========================================
# 3. Junction tables
# ==========================================

class SystemCharacterTag(BaseModel):
    system_id: str = ref("systems")
    character_tag_id: str = ref("character_tags")


class SystemMonth(BaseModel):
    system_id: str = ref("systems")
    month_id: str = ref("months")
    relationship_type: Literal["best", "avoid"]


class RouteCondition(BaseModel):
    route_id: str = ref("routes")
    condition_id: str = ref("conditions")
    relationship_type: Literal["best", "avoid"]


class RouteSkillLevel(BaseModel):
    route_id: str = ref("routes")
    skill_level_id: str = ref("skill_levels")
    relationship_type: Literal["ideal", "not_recommended"]


class UserPreferenceStyle(BaseModel):
    user_id: str
    riding_style_id: str = ref("riding_styles")
    preference_strength: float = Field(ge=0, le=1)


def system_junction_rows(system: System) -> Tuple[List[SystemCharacterTag], List[SystemMonth]]:
    """Expand a system's list-valued keys into junction rows."""
    tags = [
        SystemCharacterTag(system_id=system.id, character_tag_id=tag_id)
        for tag_id in system.known_for_tag_ids
    ]
    months = [
        SystemMonth(system_id=system.id, month_id=m, relationship_type="best")
        for m in system.best_month_ids
    ] + [
        SystemMonth(system_id=system.id, month_id=m, relationship_type="avoid")
        for m in system.avoid_month_ids
    ]
    return tags, months


def route_junction_rows(route: Route) -> Tuple[List[RouteCondition], List[RouteSkillLevel]]:
    conditions = [
        RouteCondition(route_id=route.id, condition_id=c, relationship_type="best")
        for c in route.best_condition_ids
    ] + [
        RouteCondition(route_id=route.id, condition_id=c, relationship_type="avoid")
        for c in route.avoid_condition_ids
    ]
    skills = [
        RouteSkillLevel(route_id=route.id, skill_level_id=s, relationship_type="ideal")
        for s in route.ideal_for_skill_ids
    ] + [
        RouteSkillLevel(route_id=route.id, skill_level_id=s, relationship_type="not_recommended")
        for s in route.not_recommended_skill_ids
    ]
    return conditions, skills


class NormalizedCatalog(BaseModel):
    """A bundle of normalized records, keyed by collection name."""

    difficulty_profiles: List[DifficultyProfile] = []
    systems: List[System] = []
    trails: List[Trail] = []
    routes: List[Route] = []
    guides: List[Guide] = []
    updates: List[Update] = []
    user_preferences: List[UserPreferences] = []

    system_character_tags: List[SystemCharacterTag] = []
    system_months: List[SystemMonth] = []
    route_conditions: List[RouteCondition] = []
    route_skill_levels: List[RouteSkillLevel] = []
    user_preference_styles: List[UserPreferenceStyle] = []

    def ids(self, collection: str) -> set[str]:
        rows = getattr(self, collection, None)
        if rows is None:
            return set()
        return {row.id for row in rows}

    def with_junctions(self) -> "NormalizedCatalog":
        """Return a copy whose junction tables are derived from list fields."""
        tags: List[SystemCharacterTag] = []
        months: List[SystemMonth] = []
        for system in self.systems:
            t, m = system_junction_rows(system)
            tags.extend(t)
            months.extend(m)
        conditions: List[RouteCondition] = []
        skills: List[RouteSkillLevel] = []
        for route in self.routes:
            c, s = route_junction_rows(route)
            conditions.extend(c)
            skills.extend(s)
        return self.model_copy(
            update={
                "system_character_tags": tags,
                "system_months": months,
                "route_conditions": conditions,
                "route_skill_levels": skills,
            }
        )
