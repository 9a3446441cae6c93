"""
Carry free-text records forward into the normalized schema.

Labels go through vocabulary.EnumerationIndex; free-text ranges such as
"15-18" or "2-3 hours" are split into min/max numbers. Output records are
expected to pass integrity.check_catalog.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import models_refined as refined
import models_v1 as v1
from normalized_models import (
    Coordinates,
    DifficultyProfile,
    ExternalLinks,
    IntRange,
    NormalizedCatalog,
    Route,
    RouteTrail,
    System,
    Trail,
)
from vocabulary import EnumerationIndex, UnknownVocabularyError, vocabulary_key

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_WORD = re.compile(r"[a-z][a-z_\-]*")

# v1 tier -> 0..3 sub-score
_SKILL_SCORE = {"beginner": 0, "intermediate": 1, "advanced": 2, "expert": 3}
_FITNESS_SCORE = {"low": 0, "moderate": 1, "high": 2, "very_high": 3}
_RATING_SCORE = {"green": 0, "blue": 1, "black": 2, "double_black": 3}
_FLOW_FEATURES = {"berms", "bermy", "jumps", "jumpy", "tables", "rollers", "flowy", "pump_track"}


def parse_range(text: str) -> Tuple[float, float]:
    """'15-18' -> (15.0, 18.0); '12' -> (12.0, 12.0)."""
    numbers = _NUMBER.findall(text)
    if not numbers:
        raise ValueError(f"No number in range {text!r}")
    low, high = float(numbers[0]), float(numbers[-1])
    if low > high:
        raise ValueError(f"Range {text!r} is reversed")
    return low, high


def parse_count(text: str) -> int:
    """'200+' -> 200."""
    numbers = _NUMBER.findall(text)
    if not numbers:
        raise ValueError(f"No number in count {text!r}")
    return int(float(numbers[0]))


def conditions_in(text: str, index: EnumerationIndex) -> List[str]:
    """Condition ids named anywhere in a free-text sentence."""
    found: List[str] = []
    for word in _WORD.findall(text.lower()):
        condition_id = index.lookup("conditions", word)
        if condition_id and condition_id not in found:
            found.append(condition_id)
    return found


def _split_audience(labels: Iterable[str], index: EnumerationIndex) -> Tuple[List[str], List[str]]:
    """Split mixed audience labels into (skill level ids, riding style ids)."""
    skills: List[str] = []
    styles: List[str] = []
    for label in labels:
        skill = index.lookup("skill_levels", label)
        style = index.lookup("riding_styles", label)
        if skill:
            if skill not in skills:
                skills.append(skill)
        elif style:
            if style not in styles:
                styles.append(style)
        else:
            logger.info("Dropping audience label with no enumeration: %r", label)
    return skills, styles


# ==========================================
# Refined free-text model
# ==========================================

def refined_difficulty_to_normalized(
    profile: refined.DifficultyProfile,
    profile_id: str,
    index: EnumerationIndex,
) -> DifficultyProfile:
    return DifficultyProfile(
        id=profile_id,
        overall_rating_id=index.resolve("difficulty_ratings", profile.overall_rating),
        regional_calibration_id=index.resolve("regional_calibrations", profile.regional_context),
        technical_climbing=profile.technical_climbing,
        technical_descending=profile.technical_descending,
        flow_features=profile.flow_features,
        fitness_demand=profile.fitness_demand,
        comparable_to=profile.comparable_to,
        character_tag_ids=index.resolve_known("character_tags", profile.character_tags),
    )


def refined_system_to_normalized(system: refined.System, index: EnumerationIndex) -> System:
    location = system.location
    skills, styles = _split_audience(system.good_for, index)
    return System(
        id=system.id,
        name=system.name,
        region_id=index.resolve("regions", system.region),
        country_id=index.resolve("countries", location.country),
        state_province_id=index.resolve("state_provinces", location.state_province),
        city=location.city,
        coordinates=Coordinates(lat=location.coordinates.lat, lng=location.coordinates.lng),
        tagline=system.tagline,
        description=system.description,
        size_id=index.resolve("system_sizes", system.size),
        trail_count_estimate=parse_count(system.trail_count),
        vertical_range_m=IntRange(min=system.vertical_range_m.min, max=system.vertical_range_m.max),
        best_month_ids=index.resolve_many("months", system.best_months),
        avoid_month_ids=index.resolve_many("months", system.avoid_months),
        known_for_tag_ids=index.resolve_known("character_tags", system.known_for),
        good_for_skill_ids=skills,
        good_for_style_ids=styles,
        difficulty_calibration_id=index.resolve("regional_calibrations", system.difficulty_style.calibration),
        typical_feature_tag_ids=index.resolve_known("character_tags", system.difficulty_style.typical_features),
        climbing_style=system.difficulty_style.climbing_style,
        insider_tips=list(system.insider_tips),
        common_mistakes=list(system.common_mistakes),
        hidden_gems=list(system.hidden_gems),
        external_links=ExternalLinks(**system.external_links.model_dump()),
        created_at=system.created_at,
        updated_at=system.updated_at,
    )


def _trail_id_for(name: str, trails_by_name: Mapping[str, str]) -> Optional[str]:
    if name in trails_by_name:
        return trails_by_name[name]
    key = vocabulary_key(name)
    for candidate, trail_id in trails_by_name.items():
        if vocabulary_key(candidate) == key:
            return trail_id
    return None


def refined_trail_to_normalized(
    trail: refined.Trail,
    index: EnumerationIndex,
    trails_by_name: Optional[Mapping[str, str]] = None,
) -> Tuple[Trail, DifficultyProfile]:
    """Returns the trail and the difficulty profile split out of it.

    ``pairs_well_with`` holds trail names; they resolve through trails_by_name
    and are dropped when no mapping is given.
    """
    profile = refined_difficulty_to_normalized(trail.difficulty, f"dp_{trail.id}", index)

    pairs: List[str] = []
    for name in trail.pairs_well_with:
        paired = _trail_id_for(name, trails_by_name or {})
        if paired is None:
            logger.info("Trail %s pairs with unknown trail %r", trail.id, name)
        elif paired != trail.id and paired not in pairs:
            pairs.append(paired)

    normalized = Trail(
        id=trail.id,
        system_id=trail.system_id,
        name=trail.name,
        difficulty_profile_id=profile.id,
        direction_id=index.resolve("trail_directions", trail.direction),
        length_km=trail.length_km,
        personality=trail.personality,
        signature_features=list(trail.signature_features),
        local_name=trail.local_name,
        condition_notes=trail.condition_notes,
        pairs_well_with_trail_ids=pairs,
        trailforks_id=trail.trailforks_id,
        created_at=trail.created_at,
        updated_at=trail.updated_at,
    )
    return normalized, profile


def refined_route_to_normalized(
    route: refined.Route,
    trails_by_name: Mapping[str, str],
    index: EnumerationIndex,
) -> Tuple[Route, DifficultyProfile]:
    """Trail sequence steps name their trail; unknown names raise UnknownVocabularyError."""
    profile = refined_difficulty_to_normalized(route.difficulty, f"dp_{route.id}", index)
    distance_min, distance_max = parse_range(route.distance_km)
    hours_min, hours_max = parse_range(route.time_estimate)

    sequence: List[RouteTrail] = []
    for order, step in enumerate(route.trail_sequence, start=1):
        trail_id = _trail_id_for(step.trail_name, trails_by_name)
        if trail_id is None:
            raise UnknownVocabularyError("trails", step.trail_name)
        sequence.append(
            RouteTrail(
                id=f"rt_{route.id}_{order}",
                route_id=route.id,
                trail_id=trail_id,
                sequence_order=order,
                purpose=step.purpose,
                notes=step.notes,
            )
        )

    ideal_skills, ideal_styles = _split_audience(route.ideal_for, index)
    not_recommended, _ = _split_audience(route.not_recommended_for, index)

    normalized = Route(
        id=route.id,
        system_id=route.system_id,
        name=route.name,
        tagline=route.tagline,
        purpose=route.purpose,
        difficulty_profile_id=profile.id,
        route_type_id=index.resolve("route_types", route.type),
        distance_km_min=distance_min,
        distance_km_max=distance_max,
        time_estimate_hours_min=hours_min,
        time_estimate_hours_max=hours_max,
        trail_sequence=sequence,
        best_condition_ids=conditions_in(route.best_conditions, index),
        avoid_condition_ids=index.resolve_known("conditions", route.avoid_when),
        ideal_for_skill_ids=ideal_skills,
        ideal_for_style_ids=ideal_styles,
        not_recommended_skill_ids=not_recommended,
        highlights=list(route.highlights),
        pro_tips=list(route.pro_tips),
        watch_out_for=list(route.watch_out_for),
        created_at=route.created_at,
        updated_at=route.updated_at,
    )
    return normalized, profile


def migrate_refined(
    systems: Iterable[refined.System],
    trails: Iterable[refined.Trail],
    routes: Iterable[refined.Route],
    index: Optional[EnumerationIndex] = None,
) -> NormalizedCatalog:
    """Migrate a whole refined data set, junction rows included."""
    index = index or EnumerationIndex()
    trails = list(trails)

    names_by_system: Dict[str, Dict[str, str]] = {}
    for trail in trails:
        names_by_system.setdefault(trail.system_id, {})[trail.name] = trail.id

    profiles: List[DifficultyProfile] = []
    normalized_trails: List[Trail] = []
    for trail in trails:
        t, p = refined_trail_to_normalized(trail, index, names_by_system[trail.system_id])
        normalized_trails.append(t)
        profiles.append(p)

    normalized_routes: List[Route] = []
    for route in routes:
        r, p = refined_route_to_normalized(route, names_by_system.get(route.system_id, {}), index)
        normalized_routes.append(r)
        profiles.append(p)

    return NormalizedCatalog(
        difficulty_profiles=profiles,
        systems=[refined_system_to_normalized(s, index) for s in systems],
        trails=normalized_trails,
        routes=normalized_routes,
    ).with_junctions()


# ==========================================
# First-generation model
# ==========================================

def v1_route_difficulty(route: v1.Route, profile_id: str, index: EnumerationIndex) -> DifficultyProfile:
    """Derive a 0-3 profile from a v1 route's single rating and skill/fitness tiers."""
    technical = _SKILL_SCORE[route.technical_skills]
    flow_minded = any("flow" in label for label in list(route.best_for) + list(route.rider_type))
    return DifficultyProfile(
        id=profile_id,
        overall_rating_id=index.resolve("difficulty_ratings", route.difficulty),
        regional_calibration_id=index.resolve("regional_calibrations", "typical"),
        technical_climbing=0 if route.type == "lift_assisted" else technical,
        technical_descending=technical,
        flow_features=2 if flow_minded else 0,
        fitness_demand=_FITNESS_SCORE[route.fitness_required],
    )


def v1_trail_to_normalized(trail: v1.Trail, index: EnumerationIndex) -> Tuple[Trail, DifficultyProfile]:
    rating = _RATING_SCORE[trail.difficulty]
    downhill = trail.direction == "downhill_only"
    tags = list(trail.character_tags) + list(trail.feature_tags)
    flow = sum(1 for tag in tags if tag in _FLOW_FEATURES)

    # a steady 10% average grade is a solid climb
    fitness = 0 if downhill else min(3, int(abs(trail.avg_grade_percent) // 5))

    profile = DifficultyProfile(
        id=f"dp_{trail.id}",
        overall_rating_id=index.resolve("difficulty_ratings", trail.difficulty),
        regional_calibration_id=index.resolve("regional_calibrations", "typical"),
        technical_climbing=0 if downhill else rating,
        technical_descending=rating,
        flow_features=min(3, flow),
        fitness_demand=fitness,
        character_tag_ids=index.resolve_known("character_tags", tags),
    )
    normalized = Trail(
        id=trail.id,
        system_id=trail.system_id,
        name=trail.name,
        difficulty_profile_id=profile.id,
        direction_id=index.resolve("trail_directions", trail.direction),
        length_km=trail.length_km,
        personality=trail.description,
        signature_features=list(trail.signature_features),
        local_name=trail.local_name,
        trailforks_id=trail.trailforks_id,
        created_at=trail.created_at,
        updated_at=trail.updated_at,
    )
    return normalized, profile
