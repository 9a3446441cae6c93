"""
Seed data for the enumeration tables.

These rows are inserted once during initial setup (see init_db.py) and act as
the foreign-key targets for every normalized record. A JSON export of the same
data can be dropped into ``data/`` to override the built-in rows.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from normalized_models import (
    CharacterTag,
    Condition,
    ContentType,
    Country,
    DifficultyRating,
    EnumerationSeedData,
    FitnessLevel,
    IntRange,
    Month,
    Region,
    RegionalCalibration,
    RidingStyle,
    RouteType,
    Severity,
    SkillLevel,
    StateProvince,
    SystemSize,
    TrailDirection,
    UpdateType,
)

DATA_DIR = Path(__file__).resolve().parent / "data"
SEED_EXPORT = Path(os.getenv("CATALOG_SEED_EXPORT", str(DATA_DIR / "enumeration_seed.json")))


COUNTRIES: List[Country] = [
    Country(id="usa", name="United States", code="US"),
    Country(id="canada", name="Canada", code="CA"),
    Country(id="uk", name="United Kingdom", code="GB"),
    Country(id="france", name="France", code="FR"),
    Country(id="switzerland", name="Switzerland", code="CH"),
    Country(id="austria", name="Austria", code="AT"),
    Country(id="australia", name="Australia", code="AU"),
    Country(id="new-zealand", name="New Zealand", code="NZ"),
    Country(id="chile", name="Chile", code="CL"),
]

STATE_PROVINCES: List[StateProvince] = [
    # USA
    StateProvince(id="california", country_id="usa", name="California", code="CA"),
    StateProvince(id="washington", country_id="usa", name="Washington", code="WA"),
    StateProvince(id="oregon", country_id="usa", name="Oregon", code="OR"),
    StateProvince(id="colorado", country_id="usa", name="Colorado", code="CO"),
    StateProvince(id="utah", country_id="usa", name="Utah", code="UT"),
    StateProvince(id="arizona", country_id="usa", name="Arizona", code="AZ"),
    StateProvince(id="north-carolina", country_id="usa", name="North Carolina", code="NC"),
    StateProvince(id="vermont", country_id="usa", name="Vermont", code="VT"),
    StateProvince(id="montana", country_id="usa", name="Montana", code="MT"),
    StateProvince(id="idaho", country_id="usa", name="Idaho", code="ID"),
    # Canada
    StateProvince(id="british-columbia", country_id="canada", name="British Columbia", code="BC"),
    StateProvince(id="alberta", country_id="canada", name="Alberta", code="AB"),
    StateProvince(id="quebec", country_id="canada", name="Quebec", code="QC"),
    StateProvince(id="ontario", country_id="canada", name="Ontario", code="ON"),
]

REGIONS: List[Region] = [
    Region(
        id="pacific-northwest",
        name="Pacific Northwest",
        description="Wet climate, technical terrain, old growth forests",
        typical_features=["roots", "rocks", "steep", "wet", "technical"],
        climate_type="temperate_rainforest",
    ),
    Region(
        id="southwest-desert",
        name="Southwest Desert",
        description="Dry climate, slickrock, exposure, big views",
        typical_features=["slickrock", "exposure", "dry", "scenic", "technical"],
        climate_type="desert",
    ),
    Region(
        id="rocky-mountains",
        name="Rocky Mountains",
        description="High altitude, alpine terrain, seasonal access",
        typical_features=["alpine", "rocks", "exposure", "seasonal", "scenic"],
        climate_type="alpine",
    ),
    Region(
        id="appalachian",
        name="Appalachian",
        description="Eastern mountains, hardwood forests, technical climbing",
        typical_features=["roots", "rocks", "steep", "humid", "technical"],
        climate_type="temperate_deciduous",
    ),
    Region(
        id="california-coastal",
        name="California Coastal",
        description="Mediterranean climate, diverse terrain, year-round riding",
        typical_features=["diverse", "dry_summers", "fire_roads", "singletrack"],
        climate_type="mediterranean",
    ),
]

DIFFICULTY_RATINGS: List[DifficultyRating] = [
    DifficultyRating(
        id="green",
        name="green",
        display_name="Green Circle",
        numeric_value=1,
        description="Beginner friendly, wide trails, gentle grades",
    ),
    DifficultyRating(
        id="blue",
        name="blue",
        display_name="Blue Square",
        numeric_value=2,
        description="Intermediate, some technical features, moderate grades",
    ),
    DifficultyRating(
        id="black",
        name="black",
        display_name="Black Diamond",
        numeric_value=3,
        description="Advanced, technical features, steep grades",
    ),
    DifficultyRating(
        id="double-black",
        name="double_black",
        display_name="Double Black Diamond",
        numeric_value=4,
        description="Expert only, very technical, severe consequences",
    ),
]

REGIONAL_CALIBRATIONS: List[RegionalCalibration] = [
    RegionalCalibration(
        id="softer",
        name="softer_than_typical",
        display_name="Softer than Typical",
        adjustment_factor=-0.5,
        description="Easier than the rating suggests for this region",
    ),
    RegionalCalibration(
        id="typical",
        name="typical",
        display_name="Typical",
        adjustment_factor=0,
        description="Standard difficulty for the rating",
    ),
    RegionalCalibration(
        id="harder",
        name="harder_than_typical",
        display_name="Harder than Typical",
        adjustment_factor=0.5,
        description="More difficult than the rating suggests for this region",
    ),
]

CHARACTER_TAGS: List[CharacterTag] = [
    # Surface
    CharacterTag(id="rooty", name="rooty", category="surface", description="Lots of tree roots", icon="🌳"),
    CharacterTag(id="rocky", name="rocky", category="surface", description="Rock gardens and stone features", icon="🪨"),
    CharacterTag(id="loamy", name="loamy", category="surface", description="Soft, grippy dirt", icon="🏔️"),
    CharacterTag(id="sandy", name="sandy", category="surface", description="Sand and loose dirt", icon="🏖️"),
    CharacterTag(id="slickrock", name="slickrock", category="surface", description="Smooth sandstone", icon="🏜️"),
    # Terrain
    CharacterTag(id="steep", name="steep", category="terrain", description="Significant grades", icon="⛰️"),
    CharacterTag(id="rolling", name="rolling", category="terrain", description="Gentle ups and downs", icon="🌊"),
    CharacterTag(id="flat", name="flat", category="terrain", description="Minimal elevation change", icon="➡️"),
    CharacterTag(id="switchbacks", name="switchbacks", category="terrain", description="Tight turns on climbs/descents", icon="🔄"),
    # Features
    CharacterTag(id="flowy", name="flowy", category="features", description="Smooth, continuous riding", icon="🌊"),
    CharacterTag(id="technical", name="technical", category="features", description="Requires advanced bike handling", icon="⚙️"),
    CharacterTag(id="jumps", name="jumps", category="features", description="Built jump features", icon="🚀"),
    CharacterTag(id="drops", name="drops", category="features", description="Vertical drop features", icon="⬇️"),
    CharacterTag(id="berms", name="berms", category="features", description="Banked turns", icon="🏁"),
    CharacterTag(id="wooden-features", name="wooden_features", category="features", description="Bridges, skinnies, etc.", icon="🌉"),
    # Exposure
    CharacterTag(id="exposed", name="exposed", category="exposure", description="Significant fall consequences", icon="⚠️"),
    CharacterTag(id="sheltered", name="sheltered", category="exposure", description="Protected from weather/falls", icon="🏠"),
    # Scenery
    CharacterTag(id="scenic", name="scenic", category="scenery", description="Outstanding views", icon="🏞️"),
    CharacterTag(id="forest", name="forest", category="scenery", description="Dense tree cover", icon="🌲"),
    CharacterTag(id="desert", name="desert", category="scenery", description="Arid landscape", icon="🌵"),
    CharacterTag(id="alpine", name="alpine", category="scenery", description="High mountain environment", icon="🏔️"),
]

SYSTEM_SIZES: List[SystemSize] = [
    SystemSize(
        id="local-gem",
        name="local_gem",
        display_name="Local Gem",
        typical_trail_count=IntRange(min=5, max=20),
        typical_days_needed=IntRange(min=1, max=1),
        description="Small local network, half-day to full-day riding",
    ),
    SystemSize(
        id="weekend-trip",
        name="weekend_trip",
        display_name="Weekend Trip",
        typical_trail_count=IntRange(min=15, max=50),
        typical_days_needed=IntRange(min=2, max=3),
        description="Worth a weekend trip, multiple days of riding",
    ),
    SystemSize(
        id="destination",
        name="destination",
        display_name="Destination",
        typical_trail_count=IntRange(min=40, max=150),
        typical_days_needed=IntRange(min=4, max=7),
        description="Major destination, week-long trips possible",
    ),
    SystemSize(
        id="world-class",
        name="world_class",
        display_name="World Class",
        typical_trail_count=IntRange(min=100, max=500),
        typical_days_needed=IntRange(min=7, max=14),
        description="World-renowned, multiple weeks of riding",
    ),
]

TRAIL_DIRECTIONS: List[TrailDirection] = [
    TrailDirection(id="both", name="both", display_name="Both Directions",
                   description="Can be ridden up or down comfortably"),
    TrailDirection(id="up-preferred", name="up_preferred", display_name="Up Preferred",
                   description="Better as a climb, but can be descended"),
    TrailDirection(id="down-only", name="down_only", display_name="Down Only",
                   description="Designed for descending only"),
    TrailDirection(id="one-way", name="one_way", display_name="One Way",
                   description="Traffic flows in one direction only"),
]

ROUTE_TYPES: List[RouteType] = [
    RouteType(
        id="loop",
        name="loop",
        display_name="Loop",
        description="Returns to starting point",
        typical_logistics=["Single parking area", "No shuttle needed"],
    ),
    RouteType(
        id="out-back",
        name="out_back",
        display_name="Out and Back",
        description="Ride out, turn around, ride back",
        typical_logistics=["Single parking area", "Retrace route"],
    ),
    RouteType(
        id="point-to-point",
        name="point_to_point",
        display_name="Point to Point",
        description="Start and end at different locations",
        typical_logistics=["Two vehicles or shuttle", "Different start/end"],
    ),
    RouteType(
        id="shuttle",
        name="shuttle",
        display_name="Shuttle",
        description="Vehicle shuttle to top, ride down",
        typical_logistics=["Shuttle service or second vehicle", "Mostly descending"],
    ),
    RouteType(
        id="lift-laps",
        name="lift_laps",
        display_name="Lift Laps",
        description="Use chairlift for uphill",
        typical_logistics=["Bike park with lift", "Day pass required"],
    ),
]

RIDING_STYLES: List[RidingStyle] = [
    RidingStyle(id="xc", name="xc", display_name="Cross Country",
                description="Emphasis on climbing and endurance",
                typical_features=["climbing", "endurance", "efficiency"]),
    RidingStyle(id="trail", name="trail", display_name="Trail",
                description="Balanced climbing and descending",
                typical_features=["balanced", "versatile", "moderate_technical"]),
    RidingStyle(id="enduro", name="enduro", display_name="Enduro",
                description="Emphasis on technical descending",
                typical_features=["descending", "technical", "aggressive"]),
    RidingStyle(id="dh", name="dh", display_name="Downhill",
                description="Pure descending, lift or shuttle access",
                typical_features=["descending_only", "very_technical", "speed"]),
    RidingStyle(id="flow", name="flow", display_name="Flow",
                description="Smooth, continuous riding with rhythm",
                typical_features=["smooth", "berms", "jumps", "rhythm"]),
]

SKILL_LEVELS: List[SkillLevel] = [
    SkillLevel(id="learning", name="learning", display_name="Learning", numeric_value=1,
               description="New to mountain biking or building basic skills",
               typical_experience="Less than 1 year, green trails comfortable"),
    SkillLevel(id="comfortable", name="comfortable", display_name="Comfortable", numeric_value=2,
               description="Solid fundamentals, ready for new challenges",
               typical_experience="1-3 years, blue trails comfortable"),
    SkillLevel(id="challenging", name="challenging", display_name="Challenging", numeric_value=3,
               description="Advanced skills, seeking technical challenges",
               typical_experience="3+ years, black trails comfortable"),
    SkillLevel(id="expert", name="expert", display_name="Expert", numeric_value=4,
               description="Exceptional skills, riding the most difficult terrain",
               typical_experience="5+ years, double black comfortable"),
]

FITNESS_LEVELS: List[FitnessLevel] = [
    FitnessLevel(id="casual", name="casual", display_name="Casual", numeric_value=1,
                 description="Recreational fitness, prefer shorter rides",
                 typical_distance_km=IntRange(min=5, max=15)),
    FitnessLevel(id="fit", name="fit", display_name="Fit", numeric_value=2,
                 description="Good cardiovascular fitness, moderate distances",
                 typical_distance_km=IntRange(min=15, max=30)),
    FitnessLevel(id="very-fit", name="very_fit", display_name="Very Fit", numeric_value=3,
                 description="High fitness level, long rides comfortable",
                 typical_distance_km=IntRange(min=25, max=50)),
    FitnessLevel(id="athlete", name="athlete", display_name="Athlete", numeric_value=4,
                 description="Exceptional fitness, ultra-distance capable",
                 typical_distance_km=IntRange(min=40, max=100)),
]

_SEASONS = {
    12: "winter", 1: "winter", 2: "winter",
    3: "spring", 4: "spring", 5: "spring",
    6: "summer", 7: "summer", 8: "summer",
    9: "fall", 10: "fall", 11: "fall",
}
_MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTHS: List[Month] = [
    Month(
        id=display.lower(),
        name=display.lower(),
        display_name=display,
        numeric_value=number,
        season=_SEASONS[number],
    )
    for number, display in enumerate(_MONTH_NAMES, start=1)
]

CONDITIONS: List[Condition] = [
    # Weather
    Condition(id="dry", name="dry", category="weather", is_positive=True, description="Dry conditions, good traction"),
    Condition(id="wet", name="wet", category="weather", is_positive=False, description="Wet conditions, slippery"),
    Condition(id="muddy", name="muddy", category="weather", is_positive=False, description="Muddy trails, poor traction"),
    Condition(id="icy", name="icy", category="weather", is_positive=False, description="Ice on trails, dangerous"),
    Condition(id="snowy", name="snowy", category="weather", is_positive=False, description="Snow covered trails"),
    # Trail surface
    Condition(id="tacky", name="tacky", category="trail_surface", is_positive=True, description="Perfect grip, slightly moist"),
    Condition(id="dusty", name="dusty", category="trail_surface", is_positive=False, description="Dusty, loose surface"),
    Condition(id="hardpack", name="hardpack", category="trail_surface", is_positive=True, description="Firm, fast surface"),
    Condition(id="loose", name="loose", category="trail_surface", is_positive=False, description="Loose surface, poor traction"),
    # Seasonal
    Condition(id="spring-conditions", name="spring_conditions", category="seasonal", is_positive=True, description="Fresh spring conditions"),
    Condition(id="summer-heat", name="summer_heat", category="seasonal", is_positive=False, description="Hot summer conditions"),
    Condition(id="fall-colors", name="fall_colors", category="seasonal", is_positive=True, description="Beautiful fall foliage"),
    Condition(id="winter-closure", name="winter_closure", category="seasonal", is_positive=False, description="Closed for winter"),
]

CONTENT_TYPES: List[ContentType] = [
    ContentType(id="system-overview", name="system_overview", display_name="System Overview",
                description="General information about a trail system", typical_length="500-1000 words"),
    ContentType(id="route-guide", name="route_guide", display_name="Route Guide",
                description="Detailed guide for a specific route", typical_length="300-800 words"),
    ContentType(id="skills-progression", name="skills_progression", display_name="Skills Progression",
                description="How to progress skills at this location", typical_length="400-600 words"),
    ContentType(id="seasonal-tips", name="seasonal_tips", display_name="Seasonal Tips",
                description="Best practices for different seasons", typical_length="200-400 words"),
]

SEVERITIES: List[Severity] = [
    Severity(id="info", name="info", display_name="Info", numeric_value=1, color_code="#3B82F6",
             description="General information, nice to know"),
    Severity(id="important", name="important", display_name="Important", numeric_value=2, color_code="#F59E0B",
             description="Important information, affects trip planning"),
    Severity(id="critical", name="critical", display_name="Critical", numeric_value=3, color_code="#EF4444",
             description="Critical information, safety or access concerns"),
]

UPDATE_TYPES: List[UpdateType] = [
    UpdateType(id="conditions", name="conditions", display_name="Trail Conditions", category="trail_status",
               description="Current trail conditions and surface quality"),
    UpdateType(id="closures", name="closures", display_name="Closures", category="access",
               description="Trail or area closures"),
    UpdateType(id="new-trails", name="new_trails", display_name="New Trails", category="infrastructure",
               description="New trail openings or construction"),
    UpdateType(id="events", name="events", display_name="Events", category="community",
               description="Races, group rides, or other events"),
    UpdateType(id="access-changes", name="access_changes", display_name="Access Changes", category="access",
               description="Changes to parking, permits, or access rules"),
]


ENUMERATION_SEED_DATA = EnumerationSeedData(
    countries=COUNTRIES,
    state_provinces=STATE_PROVINCES,
    regions=REGIONS,
    difficulty_ratings=DIFFICULTY_RATINGS,
    regional_calibrations=REGIONAL_CALIBRATIONS,
    character_tags=CHARACTER_TAGS,
    system_sizes=SYSTEM_SIZES,
    trail_directions=TRAIL_DIRECTIONS,
    route_types=ROUTE_TYPES,
    riding_styles=RIDING_STYLES,
    skill_levels=SKILL_LEVELS,
    fitness_levels=FITNESS_LEVELS,
    months=MONTHS,
    conditions=CONDITIONS,
    content_types=CONTENT_TYPES,
    severities=SEVERITIES,
    update_types=UPDATE_TYPES,
)


def get_enumeration_seed_data(path: Optional[Path] = None) -> EnumerationSeedData:
    """Prefer a JSON export if present, otherwise ship with the built-in rows."""
    export = Path(path) if path is not None else SEED_EXPORT
    if export.exists():
        try:
            return EnumerationSeedData.model_validate_json(export.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise RuntimeError(f"Invalid enumeration seed export: {export}") from exc
    return ENUMERATION_SEED_DATA


def write_enumeration_seed_data(
    path: Optional[Path] = None,
    seed: Optional[EnumerationSeedData] = None,
) -> Path:
    export = Path(path) if path is not None else SEED_EXPORT
    export.parent.mkdir(parents=True, exist_ok=True)
    payload = (seed or ENUMERATION_SEED_DATA).model_dump(mode="json")
    export.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return export
