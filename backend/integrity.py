"""Integrity checks for the enumeration seed, normalized records and user content.

Each check collects every problem it finds instead of stopping at the first,
and returns a ValidationResult. Callers that need a hard failure pass the
result to assert_valid().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Set

from pydantic import BaseModel

from normalized_models import (
    EnumerationSeedData,
    NormalizedCatalog,
    references_of,
)

logger = logging.getLogger(__name__)

RELATIONSHIP_TYPES: Dict[str, Set[str]] = {
    "system_months": {"best", "avoid"},
    "route_conditions": {"best", "avoid"},
    "route_skill_levels": {"ideal", "not_recommended"},
}


@dataclass(frozen=True)
class ValidationResult:
    """Result of one integrity check."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def from_lists(cls, errors: List[str], warnings: Optional[List[str]] = None) -> "ValidationResult":
        return cls(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings or ()))


class CatalogIntegrityError(ValueError):
    def __init__(self, errors: Sequence[str]):
        self.errors = tuple(errors)
        listing = "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} integrity error(s):\n{listing}")


def combine(results: Iterable[ValidationResult]) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []
    for result in results:
        errors.extend(result.errors)
        warnings.extend(result.warnings)
    return ValidationResult.from_lists(errors, warnings)


def assert_valid(result: ValidationResult) -> ValidationResult:
    if not result.is_valid:
        raise CatalogIntegrityError(result.errors)
    for warning in result.warnings:
        logger.warning(warning)
    return result


def _duplicates(values: Iterable[str]) -> List[str]:
    seen: Set[str] = set()
    dupes: List[str] = []
    for value in values:
        if value in seen and value not in dupes:
            dupes.append(value)
        seen.add(value)
    return dupes


# ==========================================
# Enumeration seed
# ==========================================

def check_unique_ids(seed: EnumerationSeedData) -> ValidationResult:
    errors: List[str] = []
    for table, rows in seed.tables():
        for dupe in _duplicates(row.id for row in rows):
            errors.append(f"{table}: duplicate id {dupe!r}")
    return ValidationResult.from_lists(errors)


def check_numeric_ordering(seed: EnumerationSeedData) -> ValidationResult:
    """Every numeric_value column must be exactly 1..n."""
    errors: List[str] = []
    for table, rows in seed.tables():
        if not rows or not hasattr(rows[0], "numeric_value"):
            continue
        values = sorted(row.numeric_value for row in rows)
        expected = list(range(1, len(rows) + 1))
        if values != expected:
            errors.append(f"{table}: numeric_value is {values}, expected {expected}")
    return ValidationResult.from_lists(errors)


def check_seed_references(seed: EnumerationSeedData) -> ValidationResult:
    errors: List[str] = []
    for table, rows in seed.tables():
        if not rows:
            continue
        refs = references_of(type(rows[0]))
        for row in rows:
            for field, target in refs.items():
                value = getattr(row, field)
                if value not in seed.ids(target):
                    errors.append(f"{table}[{row.id}].{field} -> {target}: unknown id {value!r}")
    return ValidationResult.from_lists(errors)


def check_seed(seed: EnumerationSeedData) -> ValidationResult:
    return combine([check_unique_ids(seed), check_numeric_ordering(seed), check_seed_references(seed)])


# ==========================================
# Normalized catalog
# ==========================================

_CATALOG_COLLECTIONS = (
    "difficulty_profiles",
    "systems",
    "trails",
    "routes",
    "guides",
    "updates",
    "user_preferences",
    "system_character_tags",
    "system_months",
    "route_conditions",
    "route_skill_levels",
    "user_preference_styles",
)


def _label(collection: str, index: int, record: BaseModel) -> str:
    key = getattr(record, "id", None) or getattr(record, "user_id", None) or index
    return f"{collection}[{key}]"


def _check_references(
    label: str,
    record: BaseModel,
    seed: EnumerationSeedData,
    catalog: NormalizedCatalog,
    errors: List[str],
) -> None:
    seed_tables = set(type(seed).model_fields)
    for field, target in references_of(type(record)).items():
        value = getattr(record, field)
        if value is None:
            continue
        known = seed.ids(target) if target in seed_tables else catalog.ids(target)
        for item in value if isinstance(value, list) else [value]:
            if item not in known:
                errors.append(f"{label}.{field} -> {target}: unknown id {item!r}")


def _check_dates(label: str, names: Sequence[str], record: BaseModel, errors: List[str]) -> None:
    """Dates named in order must not go backwards; missing ones are skipped."""
    present = [(n, getattr(record, n)) for n in names if getattr(record, n, None) is not None]
    for (first, a), (second, b) in zip(present, present[1:]):
        if isinstance(a, datetime) and isinstance(b, datetime) and a > b:
            errors.append(f"{label}: {first} ({a.isoformat()}) is after {second} ({b.isoformat()})")


def check_catalog(catalog: NormalizedCatalog, seed: EnumerationSeedData) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    for collection in ("difficulty_profiles", "systems", "trails", "routes", "guides", "updates"):
        for dupe in _duplicates(row.id for row in getattr(catalog, collection)):
            errors.append(f"{collection}: duplicate id {dupe!r}")
    # route_trails ids share one table across routes
    for dupe in _duplicates(step.id for route in catalog.routes for step in route.trail_sequence):
        errors.append(f"route_trails: duplicate id {dupe!r}")

    for collection in _CATALOG_COLLECTIONS:
        for i, record in enumerate(getattr(catalog, collection)):
            _check_references(_label(collection, i, record), record, seed, catalog, errors)

    for collection, allowed in RELATIONSHIP_TYPES.items():
        for i, row in enumerate(getattr(catalog, collection)):
            if row.relationship_type not in allowed:
                errors.append(
                    f"{_label(collection, i, row)}: relationship_type {row.relationship_type!r} "
                    f"not in {sorted(allowed)}"
                )

    sizes = {s.id: s for s in seed.system_sizes}
    for system in catalog.systems:
        label = f"systems[{system.id}]"
        clash = set(system.best_month_ids) & set(system.avoid_month_ids)
        if clash:
            errors.append(f"{label}: months both best and avoid: {sorted(clash)}")
        size = sizes.get(system.size_id)
        if size and not size.typical_trail_count.min <= system.trail_count_estimate <= size.typical_trail_count.max:
            warnings.append(
                f"{label}: trail_count_estimate {system.trail_count_estimate} is outside the typical "
                f"{size.id} range {size.typical_trail_count.min}-{size.typical_trail_count.max}"
            )
        _check_dates(label, ("created_at", "updated_at"), system, errors)

    trails = {t.id: t for t in catalog.trails}
    for route in catalog.routes:
        label = f"routes[{route.id}]"
        if route.distance_km_min > route.distance_km_max:
            errors.append(f"{label}: distance_km_min {route.distance_km_min} > distance_km_max {route.distance_km_max}")
        if route.time_estimate_hours_min > route.time_estimate_hours_max:
            errors.append(
                f"{label}: time_estimate_hours_min {route.time_estimate_hours_min} > "
                f"time_estimate_hours_max {route.time_estimate_hours_max}"
            )
        clash = set(route.best_condition_ids) & set(route.avoid_condition_ids)
        if clash:
            errors.append(f"{label}: conditions both best and avoid: {sorted(clash)}")

        orders = sorted(step.sequence_order for step in route.trail_sequence)
        if orders != list(range(1, len(orders) + 1)):
            errors.append(f"{label}: trail_sequence order is {orders}, expected 1..{len(orders)}")

        for step in route.trail_sequence:
            step_label = f"{label}.trail_sequence[{step.sequence_order}]"
            if step.route_id != route.id:
                errors.append(f"{step_label}: route_id {step.route_id!r} does not match route")
            _check_references(step_label, step, seed, catalog, errors)
            trail = trails.get(step.trail_id)
            if trail is not None and trail.system_id != route.system_id:
                errors.append(
                    f"{step_label}: trail {trail.id!r} belongs to {trail.system_id!r}, "
                    f"not {route.system_id!r}"
                )
        _check_dates(label, ("created_at", "updated_at"), route, errors)

    for trail in catalog.trails:
        if trail.id in trail.pairs_well_with_trail_ids:
            warnings.append(f"trails[{trail.id}]: pairs_well_with_trail_ids lists itself")
        _check_dates(f"trails[{trail.id}]", ("created_at", "updated_at"), trail, errors)

    for guide in catalog.guides:
        _check_dates(f"guides[{guide.id}]", ("created_at", "updated_at", "last_verified"), guide, errors)

    for update in catalog.updates:
        _check_dates(f"updates[{update.id}]", ("created_at", "valid_until"), update, errors)

    return ValidationResult.from_lists(errors, warnings)


# ==========================================
# User-generated content
# ==========================================

def check_content(
    guides: Sequence[BaseModel] = (),
    media: Sequence[BaseModel] = (),
    reviews: Sequence[BaseModel] = (),
    updates: Sequence[BaseModel] = (),
    known_content_ids: Iterable[str] = (),
) -> ValidationResult:
    """Check content_models records for ordering and cross-reference problems."""
    errors: List[str] = []
    warnings: List[str] = []

    content_ids: Set[str] = set(known_content_ids)
    content_ids.update(g.id for g in guides)
    content_ids.update(m.id for m in media)

    for guide in guides:
        label = f"guides[{guide.id}]"
        _check_dates(label, ("created_at", "updated_at", "last_verified"), guide, errors)
        versions = [v.version for v in guide.version_history]
        if versions and versions != list(range(1, len(versions) + 1)):
            errors.append(f"{label}: version_history is {versions}, expected 1..{len(versions)}")
        for review in guide.peer_reviews:
            if review.content_id != guide.id:
                errors.append(f"{label}: embedded review {review.id!r} points at {review.content_id!r}")
        if guide.author.local_credibility.user_id != guide.author.user_id:
            errors.append(f"{label}: author credibility belongs to {guide.author.local_credibility.user_id!r}")

    embedded = [r for g in guides for r in g.peer_reviews]
    for review in list(reviews) + embedded:
        if review.content_id not in content_ids:
            errors.append(f"reviews[{review.id}]: content_id {review.content_id!r} does not resolve")

    for item in media:
        if item.subject.trail_id is None and item.subject.route_id is None and item.subject.type == "trail_feature":
            warnings.append(f"media[{item.id}]: trail_feature media without a trail_id")

    for update in updates:
        label = f"updates[{update.id}]"
        _check_dates(label, ("relevant_from", "relevant_until"), update, errors)
        _check_dates(label, ("created_at", "last_confirmed"), update, errors)
        if update.verification_count != len(update.verified_by):
            errors.append(
                f"{label}: verification_count {update.verification_count} != "
                f"{len(update.verified_by)} verifiers"
            )

    return ValidationResult.from_lists(errors, warnings)


def validate_all(
    seed: Optional[EnumerationSeedData] = None,
    catalog: Optional[NormalizedCatalog] = None,
) -> Dict[str, ValidationResult]:
    """Run every check against the built-in seed and example fixtures."""
    from content_examples import CONTENT_GUIDES, CONTENT_MEDIA, CONTENT_REVIEWS, CONTENT_UPDATES
    from enumeration_seed_data import get_enumeration_seed_data
    from normalized_examples import NORMALIZED_EXAMPLES

    seed = seed if seed is not None else get_enumeration_seed_data()
    catalog = catalog if catalog is not None else NORMALIZED_EXAMPLES
    return {
        "unique_ids": check_unique_ids(seed),
        "numeric_ordering": check_numeric_ordering(seed),
        "seed_references": check_seed_references(seed),
        "catalog": check_catalog(catalog, seed),
        "content": check_content(
            guides=CONTENT_GUIDES,
            media=CONTENT_MEDIA,
            reviews=CONTENT_REVIEWS,
            updates=CONTENT_UPDATES,
        ),
    }
