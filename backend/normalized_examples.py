"""
Normalized-model fixtures for Squamish and St. George.

Every categorical value is an id from enumeration_seed_data; integrity.py
checks that they resolve.
"""

from __future__ import annotations

from datetime import datetime, timezone

from normalized_models import (
    Coordinates,
    DifficultyProfile,
    ExternalLinks,
    Guide,
    IntRange,
    NormalizedCatalog,
    Route,
    RouteTrail,
    StylePreferences,
    System,
    Trail,
    Update,
    UserPreferences,
    UserPreferenceStyle,
)
from sample_data import CATALOG_EPOCH

# ==========================================
# Difficulty profiles
# ==========================================

WORD_OF_MOUTH_PROFILE = DifficultyProfile(
    id="dp_word_of_mouth",
    overall_rating_id="blue",
    regional_calibration_id="typical",
    technical_climbing=1,
    technical_descending=1,
    flow_features=0,
    fitness_demand=2,
    character_tag_ids=["forest", "switchbacks"],
)

HALF_NELSON_PROFILE = DifficultyProfile(
    id="dp_half_nelson",
    overall_rating_id="blue",
    regional_calibration_id="harder",
    technical_climbing=0,
    technical_descending=3,
    flow_features=1,
    fitness_demand=1,
    comparable_to="Like a black diamond at most bike parks",
    character_tag_ids=["rooty", "rocky", "steep", "technical"],
)

HALF_NELSON_CLASSIC_PROFILE = DifficultyProfile(
    id="dp_half_nelson_classic",
    overall_rating_id="blue",
    regional_calibration_id="harder",
    technical_climbing=1,
    technical_descending=3,
    flow_features=1,
    fitness_demand=2,
    comparable_to="Like a black diamond at most bike parks",
    character_tag_ids=["rooty", "rocky", "steep", "forest"],
)

ZEN_TRAIL_PROFILE = DifficultyProfile(
    id="dp_zen_trail",
    overall_rating_id="black",
    regional_calibration_id="typical",
    technical_climbing=3,
    technical_descending=3,
    flow_features=0,
    fitness_demand=2,
    comparable_to="Trials riding meets cross-country",
    character_tag_ids=["rocky", "slickrock", "exposed", "technical"],
)

BEARCLAW_POPPY_PROFILE = DifficultyProfile(
    id="dp_bearclaw_poppy",
    overall_rating_id="blue",
    regional_calibration_id="typical",
    technical_climbing=1,
    technical_descending=2,
    flow_features=2,
    fitness_demand=1,
    character_tag_ids=["rocky", "rolling", "desert"],
)

ZEN_EXPERIENCE_PROFILE = DifficultyProfile(
    id="dp_zen_experience",
    overall_rating_id="black",
    regional_calibration_id="typical",
    technical_climbing=3,
    technical_descending=2,
    flow_features=0,
    fitness_demand=2,
    comparable_to="Trials riding meets cross-country",
    character_tag_ids=["rocky", "slickrock", "exposed", "scenic"],
)

# ==========================================
# Systems
# ==========================================

SQUAMISH_SYSTEM = System(
    id="sys_squamish",
    name="Squamish Trail Network",
    region_id="pacific-northwest",
    country_id="canada",
    state_province_id="british-columbia",
    city="Squamish",
    coordinates=Coordinates(lat=49.7016, lng=-123.1558),
    tagline="Technical PNW playground",
    description=(
        "Ancient rainforest meets granite slabs. Squamish delivers world-class technical descents through "
        'mossy forests where a "blue" trail would be double-black anywhere else.'
    ),
    size_id="world-class",
    trail_count_estimate=200,
    vertical_range_m=IntRange(min=50, max=1500),
    best_month_ids=["june", "july", "august", "september"],
    avoid_month_ids=["november", "december", "january", "february", "march"],
    known_for_tag_ids=["rooty", "rocky", "forest", "wooden-features"],
    good_for_skill_ids=["challenging", "expert"],
    good_for_style_ids=["enduro", "trail"],
    difficulty_calibration_id="harder",
    typical_feature_tag_ids=["rooty", "rocky", "steep", "technical"],
    climbing_style="sustained",
    insider_tips=[
        "Early morning rides often have perfect tacky conditions",
        "Brakes heat up fast - consider larger rotors",
        "Knee pads are basically mandatory here",
    ],
    common_mistakes=[
        "Jumping straight onto Half Nelson thinking it's a normal blue",
        "Not bringing enough brake pads",
    ],
    hidden_gems=[
        "The Diamond Head area has easier trails perfect for building skills",
        "Quest University trails are less crowded but equally good",
    ],
    external_links=ExternalLinks(
        trailforks="https://www.trailforks.com/region/squamish/",
        local_org="https://sorca.ca/",
    ),
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

ST_GEORGE_SYSTEM = System(
    id="sys_stgeorge",
    name="St. George Trail System",
    region_id="southwest-desert",
    country_id="usa",
    state_province_id="utah",
    city="St. George",
    coordinates=Coordinates(lat=37.0965, lng=-113.5684),
    tagline="Desert slickrock puzzle box",
    description=(
        "Red rock desert riding where every climb is a technical puzzle. Short, punchy climbs over ledges "
        "and through boulder fields define the experience."
    ),
    size_id="destination",
    trail_count_estimate=100,
    vertical_range_m=IntRange(min=800, max=1400),
    best_month_ids=["october", "november", "february", "march", "april"],
    avoid_month_ids=["june", "july", "august", "december", "january"],
    known_for_tag_ids=["slickrock", "rocky", "desert", "scenic"],
    good_for_skill_ids=["comfortable", "challenging", "expert"],
    good_for_style_ids=["xc", "trail"],
    difficulty_calibration_id="typical",
    typical_feature_tag_ids=["rocky", "slickrock", "exposed"],
    climbing_style="punchy",
    insider_tips=[
        "Start rides by 7am in shoulder season to beat heat",
        "Lower tire pressure helps with traction on slickrock",
    ],
    common_mistakes=[
        "Not bringing enough water - desert dehydration is real",
        "Riding Zen Trail as your first ride (it's harder than it looks)",
    ],
    hidden_gems=[
        "Bearclaw Poppy trails are the best introduction to the area",
        "Hurricane Cliffs area stays cooler in shoulder season",
    ],
    external_links=ExternalLinks(
        trailforks="https://www.trailforks.com/region/st-george/",
        local_org="https://www.dmbta.org/",
    ),
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

# ==========================================
# Trails
# ==========================================

WORD_OF_MOUTH_TRAIL = Trail(
    id="trail_word_of_mouth",
    system_id="sys_squamish",
    name="Word of Mouth",
    difficulty_profile_id="dp_word_of_mouth",
    direction_id="up-preferred",
    length_km=5.0,
    personality="Steady forest grind that sets up the descent",
    signature_features=["Long sustained switchbacks"],
    condition_notes="Climbs fine in the wet",
    pairs_well_with_trail_ids=["trail_half_nelson"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

HALF_NELSON_TRAIL = Trail(
    id="trail_half_nelson",
    system_id="sys_squamish",
    name="Half Nelson",
    difficulty_profile_id="dp_half_nelson",
    direction_id="down-only",
    length_km=3.0,
    personality="Relentless tech fest",
    signature_features=["The root lattice section at approximately 1km", "Steep granite rolls"],
    condition_notes="Roots are ice-slick when wet",
    pairs_well_with_trail_ids=["trail_word_of_mouth"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

ZEN_TRAIL = Trail(
    id="trail_zen",
    system_id="sys_stgeorge",
    name="Zen Trail",
    difficulty_profile_id="dp_zen_trail",
    direction_id="both",
    length_km=6.0,
    personality="Technical climbing meditation",
    signature_features=["Ledge staircases", "Mesa-top views"],
    condition_notes="Bone dry only - any moisture makes rock treacherous",
    pairs_well_with_trail_ids=["trail_bearclaw_poppy"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

BEARCLAW_POPPY_TRAIL = Trail(
    id="trail_bearclaw_poppy",
    system_id="sys_stgeorge",
    name="Bearclaw Poppy",
    difficulty_profile_id="dp_bearclaw_poppy",
    direction_id="both",
    length_km=4.5,
    personality="Rolling desert rollercoaster",
    signature_features=["Wash crossings", "Playful rollers"],
    condition_notes="Avoid after rain",
    pairs_well_with_trail_ids=["trail_zen"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

# ==========================================
# Routes
# ==========================================

HALF_NELSON_CLASSIC_ROUTE = Route(
    id="route_half_nelson_classic",
    system_id="sys_squamish",
    name="Half Nelson Classic",
    tagline="The PNW technical descent that defines Squamish",
    purpose="Rite-of-passage loop: a steady climb into Squamish's signature technical descent",
    difficulty_profile_id="dp_half_nelson_classic",
    route_type_id="loop",
    distance_km_min=12,
    distance_km_max=14,
    time_estimate_hours_min=2,
    time_estimate_hours_max=3,
    trail_sequence=[
        RouteTrail(
            id="rt_half_nelson_classic_1",
            route_id="route_half_nelson_classic",
            trail_id="trail_word_of_mouth",
            sequence_order=1,
            purpose="Warm-up climb",
            notes="Pace yourself, it's longer than it seems",
        ),
        RouteTrail(
            id="rt_half_nelson_classic_2",
            route_id="route_half_nelson_classic",
            trail_id="trail_half_nelson",
            sequence_order=2,
            purpose="Main technical descent",
            notes="Commit to the lines - hesitation makes it harder",
        ),
    ],
    best_condition_ids=["tacky", "dry"],
    avoid_condition_ids=["wet", "icy"],
    ideal_for_skill_ids=["challenging", "expert"],
    ideal_for_style_ids=["enduro", "trail"],
    not_recommended_skill_ids=["learning"],
    highlights=["Old-growth forest", "Continuous roots and rock rolls"],
    pro_tips=["Tacky dirt after 1-2 dry days is the sweet spot"],
    watch_out_for=["First-timers often walk multiple sections - that's normal"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

ZEN_EXPERIENCE_ROUTE = Route(
    id="route_zen_experience",
    system_id="sys_stgeorge",
    name="Zen Trail Experience",
    tagline="Technical climbing meditation in the desert",
    purpose="Line-choice practice on the area's hardest technical climb",
    difficulty_profile_id="dp_zen_experience",
    route_type_id="loop",
    distance_km_min=8,
    distance_km_max=10,
    time_estimate_hours_min=2,
    time_estimate_hours_max=3,
    trail_sequence=[
        RouteTrail(
            id="rt_zen_experience_1",
            route_id="route_zen_experience",
            trail_id="trail_zen",
            sequence_order=1,
            purpose="Technical climb",
            notes="Lower tire pressure to 18-20 PSI for better grip",
        ),
        RouteTrail(
            id="rt_zen_experience_2",
            route_id="route_zen_experience",
            trail_id="trail_bearclaw_poppy",
            sequence_order=2,
            purpose="Descent",
            notes="Still technical but more forgiving than descending Zen",
        ),
    ],
    best_condition_ids=["dry", "hardpack"],
    avoid_condition_ids=["wet", "muddy", "summer-heat"],
    ideal_for_skill_ids=["challenging", "expert"],
    ideal_for_style_ids=["xc", "trail"],
    not_recommended_skill_ids=["learning"],
    highlights=["Mesa-top views", "Trials-style ledge moves"],
    pro_tips=["Watch locals for line choice through technical sections"],
    watch_out_for=["Exposure on the descent", "Early hike-a-bikes"],
    created_at=CATALOG_EPOCH,
    updated_at=CATALOG_EPOCH,
)

# ==========================================
# Content and preferences
# ==========================================

SQUAMISH_OVERVIEW_GUIDE = Guide(
    id="guide_squamish_first_timer",
    content_type_id="system-overview",
    system_id="sys_squamish",
    route_id=None,
    title="First Timer's Guide to Squamish: How to Survive and Thrive",
    summary="How to calibrate to Squamish ratings before your first descent.",
    content=(
        "## Understanding Squamish Ratings\n\n"
        "Squamish blues are blacks elsewhere. Start with green trails like Meadow of the Grizzly.\n"
    ),
    key_takeaways=[
        "Squamish blues = blacks elsewhere",
        "Knee pads and good brakes essential",
        "Start easier than you think",
        "Respect wet conditions",
    ],
    target_skill_level_id="comfortable",
    author_id="user_123",
    author_credibility=95,
    peer_reviews=1,
    avg_rating=5.0,
    helpful_votes=234,
    created_at=datetime(2024, 3, 15, tzinfo=timezone.utc),
    updated_at=datetime(2024, 4, 2, tzinfo=timezone.utc),
    last_verified=datetime(2024, 10, 1, tzinfo=timezone.utc),
)

SQUAMISH_FALL_UPDATE = Update(
    id="update_squamish_fall_2024",
    system_id="sys_squamish",
    update_type_id="conditions",
    severity_id="important",
    title="Fall 2024 Conditions Update: Wet Season Has Arrived",
    summary="Annual fall rains have started. Many trails are rideable but use caution.",
    details="Half Nelson roots are ice-slick when wet. Credit Line closed for erosion.",
    affected_route_ids=["route_half_nelson_classic"],
    valid_until=datetime(2025, 4, 1, tzinfo=timezone.utc),
    reported_by="user_123",
    verified=True,
    verification_count=3,
    created_at=datetime(2024, 10, 15, tzinfo=timezone.utc),
)

SARAH_PREFERENCES = UserPreferences(
    user_id="user_123",
    years_riding=12,
    home_region_id="pacific-northwest",
    favorite_system_ids=["sys_squamish"],
    preferred_difficulty_profile_id="dp_half_nelson",
    preferred_skill_level_id="expert",
    preferred_fitness_level_id="very-fit",
    preferred_style_ids=["enduro", "trail"],
    style_preferences=StylePreferences(
        technical_climbing=0.4,
        technical_descending=0.9,
        flow_features=0.5,
        fitness_challenges=0.6,
    ),
    trip_style="deep_dive",
    group_dynamic="group",
    avoid_feature_tag_ids=["sandy"],
    avoid_condition_ids=["dusty"],
    updated_at=CATALOG_EPOCH,
)

NORMALIZED_EXAMPLES = NormalizedCatalog(
    difficulty_profiles=[
        WORD_OF_MOUTH_PROFILE,
        HALF_NELSON_PROFILE,
        HALF_NELSON_CLASSIC_PROFILE,
        ZEN_TRAIL_PROFILE,
        BEARCLAW_POPPY_PROFILE,
        ZEN_EXPERIENCE_PROFILE,
    ],
    systems=[SQUAMISH_SYSTEM, ST_GEORGE_SYSTEM],
    trails=[WORD_OF_MOUTH_TRAIL, HALF_NELSON_TRAIL, ZEN_TRAIL, BEARCLAW_POPPY_TRAIL],
    routes=[HALF_NELSON_CLASSIC_ROUTE, ZEN_EXPERIENCE_ROUTE],
    guides=[SQUAMISH_OVERVIEW_GUIDE],
    updates=[SQUAMISH_FALL_UPDATE],
    user_preferences=[SARAH_PREFERENCES],
    user_preference_styles=[
        UserPreferenceStyle(user_id="user_123", riding_style_id="enduro", preference_strength=0.9),
        UserPreferenceStyle(user_id="user_123", riding_style_id="trail", preference_strength=0.7),
    ],
).with_junctions()
