# backend/models_refined.py
"""
Refined free-text models. Same entities as models_v1 but trimmed to what the
MVP needs, with a compact 0-3 difficulty profile. Still free text: these are
the records migrate.py carries into the normalized schema.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

OverallRating = Literal["green", "blue", "black", "double_black"]
RegionalContext = Literal["softer_than_typical", "typical", "harder_than_typical"]


class DifficultyProfile(BaseModel):
    overall_rating: OverallRating
    regional_context: RegionalContext

    technical_climbing: int = Field(ge=0, le=3)
    technical_descending: int = Field(ge=0, le=3)
    flow_features: int = Field(ge=0, le=3)
    fitness_demand: int = Field(ge=0, le=3)

    character_tags: List[str] = []
    comparable_to: Optional[str] = None


class Coordinates(BaseModel):
    lat: float
    lng: float


class Location(BaseModel):
    country: str
    state_province: str
    city: str
    coordinates: Coordinates


class VerticalRange(BaseModel):
    min: int
    max: int


class DifficultyStyle(BaseModel):
    calibration: Literal["easy", "standard", "hard", "very_hard"]
    typical_features: List[str] = []
    climbing_style: Literal["sustained", "punchy", "mixed", "lift_assisted"]


class ExternalLinks(BaseModel):
    trailforks: Optional[str] = None
    official_site: Optional[str] = None
    local_org: Optional[str] = None


class System(BaseModel):
    id: str
    name: str
    region: str
    location: Location

    tagline: str
    description: str
    known_for: List[str] = []

    size: Literal["local_gem", "weekend_trip", "destination", "world_class"]
    trail_count: str  # approximate, e.g. "50+"
    vertical_range_m: VerticalRange

    best_months: List[str] = []
    avoid_months: List[str] = []

    difficulty_style: DifficultyStyle

    good_for: List[str] = []
    not_ideal_for: List[str] = []

    insider_tips: List[str] = []
    common_mistakes: List[str] = []
    hidden_gems: List[str] = []

    external_links: ExternalLinks = Field(default_factory=ExternalLinks)

    created_at: datetime
    updated_at: datetime


class RouteTrailStep(BaseModel):
    trail_name: str
    purpose: str
    notes: Optional[str] = None


class Route(BaseModel):
    id: str
    system_id: str

    name: str
    tagline: str
    purpose: str

    difficulty: DifficultyProfile
    distance_km: str  # "15-18"
    time_estimate: str  # "2-3 hours"
    type: Literal["loop", "out_back", "point_to_point", "shuttle", "lift_laps"]

    highlights: List[str] = []
    trail_sequence: List[RouteTrailStep] = []

    best_conditions: str
    avoid_when: List[str] = []

    ideal_for: List[str] = []
    not_recommended_for: List[str] = []

    pro_tips: List[str] = []
    watch_out_for: List[str] = []

    created_at: datetime
    updated_at: datetime


class Trail(BaseModel):
    id: str
    system_id: str
    name: str

    difficulty: DifficultyProfile
    length_km: Optional[float] = None
    direction: Literal["both", "up_preferred", "down_only", "one_way"]

    personality: str
    signature_features: List[str] = []

    local_name: Optional[str] = None
    pairs_well_with: List[str] = []  # other trail names
    condition_notes: Optional[str] = None

    trailforks_id: Optional[str] = None

    created_at: datetime
    updated_at: datetime


class NearPoint(BaseModel):
    lat: float
    lng: float
    radius_km: float


class RequestLocation(BaseModel):
    near: Optional[NearPoint] = None
    regions: List[str] = []
    specific_systems: List[str] = []


class RequestPreferences(BaseModel):
    technical_level: Optional[Literal["learning", "comfortable", "challenging", "expert"]] = None
    fitness_level: Optional[Literal["casual", "fit", "very_fit", "athlete"]] = None
    riding_style: List[Literal["xc", "trail", "enduro", "dh", "flow"]] = []
    must_have: List[str] = []
    avoid: List[str] = []


class DiscoveryRequest(BaseModel):
    location: Optional[RequestLocation] = None
    travel_month: Optional[str] = None
    flexible_timing: Optional[bool] = None
    preferences: Optional[RequestPreferences] = None
    trip_length: Optional[int] = None
    group_type: Optional[Literal["solo", "couple", "friends", "family", "mixed_skills"]] = None


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
    years_riding: int
    home_region: Optional[str] = None
    favorite_systems: List[str] = []

    preferred_difficulty: DifficultyProfile
    style_preferences: StylePreferences

    trip_style: Literal["sampling", "deep_dive", "progression", "social"]
    group_dynamic: Literal["solo", "partner", "group", "varies"]

    avoid_features: List[str] = []
    avoid_conditions: List[str] = []

    updated_at: datetime


class Guide(BaseModel):
    id: str
    type: Literal["system_overview", "route_guide", "skills_progression", "seasonal_tips"]
    system_id: str
    route_id: Optional[str] = None

    title: str
    summary: str
    content: str

    key_takeaways: List[str] = []
    target_audience: Literal["beginners", "intermediates", "advanced", "all"]

    author_id: str
    author_credibility: float = Field(ge=0, le=100)

    peer_reviews: int
    avg_rating: float
    helpful_votes: int

    created_at: datetime
    updated_at: datetime
    last_verified: datetime
