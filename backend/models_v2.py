# backend/models_v2.py
"""
Narrative models: systems, routes and trails organised around character and
regional commentary rather than raw stats.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class RegionalContext(BaseModel):
    """How this region rates its trails."""

    difficulty_calibration: Literal["very_soft", "soft", "standard", "hard", "very_hard"]
    typical_trail_character: str
    common_features: List[str] = []
    elevation_profile: Literal["punchy_rollers", "sustained_climbs", "lift_assisted", "mixed"]
    weather_impact: str


class RatedAxis(BaseModel):
    rating: int = Field(ge=0, le=5)
    notes: str


class FitnessDemands(BaseModel):
    rating: Literal["low", "moderate", "high", "extreme"]
    vertical_gain_m: int
    sustained_climbing_km: Optional[float] = None


class DifficultyRatings(BaseModel):
    xc_technical: RatedAxis
    descent_technical: RatedAxis
    flow_jump: RatedAxis
    fitness_demands: FitnessDemands

    regional_rating: Literal["green", "blue", "black", "double_black"]
    comparable_to: Optional[str] = None


class Coordinates(BaseModel):
    lat: float
    lng: float


class Location(BaseModel):
    country: str
    state_province: str
    nearest_city: str
    coordinates: Coordinates


class ElevationRange(BaseModel):
    low: int
    high: int


class KeyResource(BaseModel):
    name: str
    url: str


class System(BaseModel):
    id: str
    name: str
    region: str
    location: Location

    character_summary: str
    what_its_known_for: List[str] = []

    regional_context: RegionalContext

    size_scope: Literal["local_spot", "weekend_destination", "vacation_worthy", "world_class"]
    trail_count_approx: str
    elevation_range_m: ElevationRange

    prime_season: List[str] = []
    avoid_season: List[str] = []

    hidden_gems: List[str] = []
    local_beta: List[str] = []
    common_mistakes: List[str] = []

    trailforks_region: Optional[str] = None
    key_resources: List[KeyResource] = []

    created_at: datetime
    updated_at: datetime


class KeyTrail(BaseModel):
    name: str
    why_included: str
    local_tips: Optional[str] = None


class Route(BaseModel):
    id: str
    system_id: str
    name: str
    tagline: str

    description: str
    experience_notes: List[str] = []

    difficulty: DifficultyRatings
    best_for: List[str] = []
    not_great_for: List[str] = []

    distance_approx_km: str
    time_estimate: str
    route_type: Literal["loop", "out_back", "point_to_point", "lift_laps"]

    key_trails: List[KeyTrail] = []

    condition_sensitivity: Literal["bombproof", "weather_dependent", "very_sensitive"]
    sweet_spot_conditions: str

    created_at: datetime
    updated_at: datetime


class Trail(BaseModel):
    id: str
    system_id: str
    name: str

    local_take: str
    personality: str

    difficulty: DifficultyRatings
    signature_challenges: List[str] = []

    beta: List[str] = []
    conditions_notes: str
    traffic_notes: str

    direction_preference: Optional[
        Literal["both_ways", "definitely_down", "definitely_up", "locals_go_up"]
    ] = None
    pairs_well_with: List[str] = []

    trailforks_uri: Optional[str] = None


class KeyDifference(BaseModel):
    category: str
    comparison: str


class Translation(BaseModel):
    feature: str
    equivalent: str
    explanation: str


class RegionalComparison(BaseModel):
    id: str
    title: str
    regions_compared: List[str] = []
    key_differences: List[KeyDifference] = []
    translation_guide: List[Translation] = []


class SeasonalIntel(BaseModel):
    id: str
    system_id: str
    date_relevant: datetime

    intel_type: Literal["conditions", "closures", "events", "construction", "wildlife"]
    headline: str
    details: str

    affects_routes: List[str] = []
    severity: Literal["fyi", "plan_around", "avoid"]

    source: str
    verified: bool


class NearPoint(BaseModel):
    lat: float
    lng: float
    max_distance_km: float


class QueryLocation(BaseModel):
    near: Optional[NearPoint] = None
    regions: List[str] = []


class QueryDates(BaseModel):
    month: str
    flexible: bool


class RidingPreferences(BaseModel):
    xc_technical: Optional[bool] = None
    descent_technical: Optional[bool] = None
    flow_jump: Optional[bool] = None
    big_mountain: Optional[bool] = None
    all_day_epics: Optional[bool] = None


class DiscoveryQuery(BaseModel):
    location: Optional[QueryLocation] = None
    dates: Optional[QueryDates] = None
    riding_preferences: Optional[RidingPreferences] = None

    fitness_level: Optional[Literal["weekend_warrior", "fit", "very_fit", "race_fit"]] = None
    technical_comfort: Optional[Literal["learning", "comfortable", "confident", "expert"]] = None

    trip_style: Optional[Literal["sampling", "progression_focused", "adventure", "social"]] = None
    group_dynamic: Optional[Literal["solo", "similar_abilities", "mixed_abilities"]] = None


class RecommendedRoute(BaseModel):
    route: Route
    why_this_route: str


class Recommendation(BaseModel):
    system: System
    why_recommended: List[str] = []
    suggested_routes: List[RecommendedRoute] = []
    insider_tip: str
    comparable_to: Optional[str] = None
