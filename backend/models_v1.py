# backend/models_v1.py
"""First-generation MTB wiki models: categorical fields are free-text unions."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Difficulty = Literal["green", "blue", "black", "double_black"]
SkillTier = Literal["beginner", "intermediate", "advanced", "expert"]
FitnessTier = Literal["low", "moderate", "high", "very_high"]


class Coordinates(BaseModel):
    lat: float
    lng: float


class SystemLocation(BaseModel):
    country: str
    state_province: str
    city: str
    coordinates: Coordinates


class SystemSeason(BaseModel):
    typical_open: str
    typical_close: str
    best_months: List[str] = []


class SystemCharacteristics(BaseModel):
    size: Literal["small", "medium", "large", "massive"]
    elevation_gain: int  # total vert in meters
    trail_count: int
    season: SystemSeason
    facilities: List[str] = []
    access_fee: bool
    parking: str


class RidingStyleScores(BaseModel):
    """How good the system is for each style, 0-5."""

    cross_country: int = Field(ge=0, le=5)
    trail: int = Field(ge=0, le=5)
    enduro: int = Field(ge=0, le=5)
    downhill: int = Field(ge=0, le=5)
    jump_flow: int = Field(ge=0, le=5)


class SystemLinks(BaseModel):
    official_website: Optional[str] = None
    trailforks: Optional[str] = None
    mtb_project: Optional[str] = None
    instagram: Optional[str] = None


class System(BaseModel):
    id: str
    name: str
    location: SystemLocation
    description: str
    overview: str

    characteristics: SystemCharacteristics
    riding_styles: RidingStyleScores

    beginner_friendly: int = Field(ge=0, le=5)
    intermediate_options: int = Field(ge=0, le=5)
    advanced_terrain: int = Field(ge=0, le=5)

    hidden_gems: List[str] = []
    local_tips: List[str] = []
    avoid: List[str] = []

    links: SystemLinks = Field(default_factory=SystemLinks)

    created_at: datetime
    updated_at: datetime


class RouteTrailStep(BaseModel):
    trail_id: str
    direction: Optional[Literal["normal", "reverse"]] = None
    notes: Optional[str] = None


class RouteConditions(BaseModel):
    best_season: List[str] = []
    avoid_when: List[str] = []
    time_of_day: str


class Route(BaseModel):
    id: str
    system_id: str
    name: str
    tagline: str
    description: str

    distance_km: float = Field(ge=0)
    elevation_gain_m: int
    estimated_time_hours: float = Field(ge=0)
    difficulty: Difficulty
    type: Literal["loop", "point_to_point", "out_and_back", "lift_assisted"]

    highlights: List[str] = []
    best_for: List[str] = []

    trail_sequence: List[RouteTrailStep] = []
    conditions: RouteConditions

    rider_type: List[str] = []
    fitness_required: FitnessTier
    technical_skills: SkillTier

    local_rating: float = Field(ge=1, le=5)
    visitor_rating: float = Field(ge=1, le=5)
    must_do: bool

    created_at: datetime
    updated_at: datetime


class Trail(BaseModel):
    id: str
    system_id: str
    name: str
    description: str

    length_km: float = Field(ge=0)
    elevation_change_m: int  # negative for descents
    avg_grade_percent: float
    max_grade_percent: float

    difficulty: Difficulty
    direction: Literal["both", "downhill_only", "uphill_preferred", "one_way"]
    trail_type: Literal["singletrack", "doubletrack", "fire_road", "paved"]

    character_tags: List[str] = []
    feature_tags: List[str] = []

    signature_features: List[str] = []
    local_name: Optional[str] = None

    maintenance_status: Literal["well_maintained", "moderate", "primitive", "unmaintained"]
    last_maintenance: Optional[datetime] = None

    trailforks_id: Optional[str] = None
    strava_segment_id: Optional[str] = None

    created_at: datetime
    updated_at: datetime


class RiderStylePreferences(BaseModel):
    cross_country: int = Field(ge=0, le=5)
    trail_allmountain: int = Field(ge=0, le=5)
    enduro: int = Field(ge=0, le=5)
    downhill: int = Field(ge=0, le=5)
    jump_flow: int = Field(ge=0, le=5)


class RiderProfile(BaseModel):
    style_preferences: RiderStylePreferences
    skill_level: SkillTier
    fitness_level: FitnessTier
    prefers: List[str] = []
    avoids: List[str] = []


class NearCoordinates(BaseModel):
    lat: float
    lng: float
    radius_km: float


class QueryLocation(BaseModel):
    near_coordinates: Optional[NearCoordinates] = None
    country: Optional[str] = None
    state_province: Optional[str] = None


class TripParameters(BaseModel):
    days_available: int = Field(ge=1)
    fitness_level: FitnessTier
    skill_level: SkillTier
    group_type: Literal["solo", "couple", "friends", "family", "mixed_abilities"]


class LookingFor(BaseModel):
    riding_styles: List[str] = []
    must_have: List[str] = []
    nice_to_have: List[str] = []


class QuerySeason(BaseModel):
    month: str
    flexible: bool


class DiscoveryQuery(BaseModel):
    location: Optional[QueryLocation] = None
    trip_parameters: Optional[TripParameters] = None
    looking_for: Optional[LookingFor] = None
    season: Optional[QuerySeason] = None


class SystemRecommendation(BaseModel):
    system: System
    match_score: float = Field(ge=0, le=100)
    match_reasons: List[str] = []
    suggested_routes: List[Route] = []
    insider_tips: List[str] = []
    estimated_days_needed: int


class GuideArticle(BaseModel):
    id: str
    title: str
    type: Literal["system_guide", "route_beta", "seasonal_update", "gear_tips", "local_scene"]
    system_id: Optional[str] = None
    route_ids: List[str] = []

    content: str  # markdown
    key_takeaways: List[str] = []

    author: str
    local_contributor: bool

    created_at: datetime
    updated_at: datetime


class ConditionUpdate(BaseModel):
    id: str
    system_id: str
    trail_ids: List[str] = []

    condition_type: Literal["trail_status", "weather_impact", "seasonal_closure", "maintenance", "event"]
    severity: Literal["info", "caution", "warning", "closure"]

    title: str
    description: str

    effective_date: datetime
    expiry_date: Optional[datetime] = None

    created_at: datetime
    created_by: str
    verified: bool
