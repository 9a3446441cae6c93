"""
Resolve free-text labels from the older models to enumeration ids.

Exact matches (id, name, display name or ISO code) win. Known drift between
model versions is covered by ALIASES. Anything else falls back to a fuzzy
match with thefuzz, which is accepted only above VOCABULARY_FUZZY_CUTOFF.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Dict, Iterable, List, Optional

from thefuzz import process

from enumeration_seed_data import get_enumeration_seed_data
from normalized_models import EnumerationSeedData

logger = logging.getLogger(__name__)

FUZZY_CUTOFF = int(os.getenv("VOCABULARY_FUZZY_CUTOFF", "85"))

_MONTH_ABBREVIATIONS = {
    m[:3]: m
    for m in (
        "january", "february", "march", "april", "may", "june",
        "july", "august", "september", "october", "november", "december",
    )
}
_MONTH_ABBREVIATIONS["sept"] = "september"

ALIASES: Dict[str, Dict[str, str]] = {
    "countries": {
        "united states of america": "usa",
        "us": "usa",
        "great britain": "uk",
    },
    "regional_calibrations": {
        "easy": "softer",
        "softer_than_typical": "softer",
        "standard": "typical",
        "hard": "harder",
        "very_hard": "harder",
        "harder_than_typical": "harder",
    },
    "system_sizes": {
        "small": "local-gem",
        "local_only": "local-gem",
        "medium": "weekend-trip",
        "weekend_worthy": "weekend-trip",
        "large": "destination",
        "vacation_worthy": "destination",
        "massive": "world-class",
        "bucket_list": "world-class",
    },
    "trail_directions": {
        "downhill_only": "down-only",
        "uphill_preferred": "up-preferred",
        "bidirectional": "both",
    },
    "route_types": {
        "lift_assisted": "lift-laps",
        "out_and_back": "out-back",
    },
    "riding_styles": {
        "cross_country": "xc",
        "trail_allmountain": "trail",
        "all_mountain": "trail",
        "downhill": "dh",
        "jump_flow": "flow",
    },
    "skill_levels": {
        "beginner": "learning",
        "beginners": "learning",
        "intermediate": "comfortable",
        "intermediates": "comfortable",
        "advanced": "challenging",
    },
    "fitness_levels": {
        "low": "casual",
        "moderate": "fit",
        "high": "very-fit",
        "very_high": "athlete",
    },
    "content_types": {
        "system_guide": "system-overview",
        "route_beta": "route-guide",
        "seasonal_guide": "seasonal-tips",
        "seasonal_update": "seasonal-tips",
        "skill_progression": "skills-progression",
    },
    "severities": {
        "caution": "important",
        "warning": "important",
        "closure": "critical",
    },
    "update_types": {
        "trail_status": "conditions",
        "weather_impact": "conditions",
        "seasonal_closure": "closures",
        "trail_changes": "new-trails",
        "new_features": "new-trails",
        "event": "events",
    },
    "months": _MONTH_ABBREVIATIONS,
}

_SEPARATORS = re.compile(r"[\s_\-]+")


def vocabulary_key(label: str) -> str:
    """Case, space and underscore insensitive key: 'Double_Black ' -> 'double-black'."""
    return _SEPARATORS.sub("-", label.strip().lower()).strip("-")


class UnknownVocabularyError(LookupError):
    def __init__(self, table: str, label: str):
        super().__init__(f"No {table} entry matches {label!r}")
        self.table = table
        self.label = label


class EnumerationIndex:
    """Label lookup over every enumeration table of a seed."""

    def __init__(
        self,
        seed: Optional[EnumerationSeedData] = None,
        aliases: Optional[Dict[str, Dict[str, str]]] = None,
        fuzzy_cutoff: Optional[int] = None,
    ):
        self.seed = seed if seed is not None else get_enumeration_seed_data()
        self.fuzzy_cutoff = FUZZY_CUTOFF if fuzzy_cutoff is None else fuzzy_cutoff
        aliases = ALIASES if aliases is None else aliases

        self._keys: Dict[str, Dict[str, str]] = {}
        for table, rows in self.seed.tables():
            keys: Dict[str, str] = {}
            for row in rows:
                for attr in ("id", "name", "display_name", "code"):
                    value = getattr(row, attr, None)
                    if value:
                        keys.setdefault(vocabulary_key(value), row.id)
            known = {row.id for row in rows}
            for alias, target in aliases.get(table, {}).items():
                # aliases may only point at ids that exist in this seed
                if target in known:
                    keys.setdefault(vocabulary_key(alias), target)
            self._keys[table] = keys

    def tables(self) -> List[str]:
        return list(self._keys)

    def _table(self, table: str) -> Dict[str, str]:
        if table not in self._keys:
            raise KeyError(f"Unknown enumeration table: {table}")
        return self._keys[table]

    def lookup(self, table: str, label: str) -> Optional[str]:
        """Exact and alias matches only."""
        return self._table(table).get(vocabulary_key(label))

    def resolve(self, table: str, label: str) -> str:
        keys = self._table(table)
        key = vocabulary_key(label)
        if key in keys:
            return keys[key]

        if keys and key:
            best_match, score = process.extractOne(key, list(keys.keys()))
            if score >= self.fuzzy_cutoff:
                logger.warning(
                    "Fuzzy %s match: %r -> %r (score %s)", table, label, keys[best_match], score
                )
                return keys[best_match]

        raise UnknownVocabularyError(table, label)

    def try_resolve(self, table: str, label: str) -> Optional[str]:
        try:
            return self.resolve(table, label)
        except UnknownVocabularyError:
            return None

    def resolve_many(self, table: str, labels: Iterable[str]) -> List[str]:
        """Resolve every label, dropping duplicates but keeping first-seen order."""
        resolved: List[str] = []
        for label in labels:
            target = self.resolve(table, label)
            if target not in resolved:
                resolved.append(target)
        return resolved

    def resolve_known(self, table: str, labels: Iterable[str]) -> List[str]:
        """Exact and alias matches of a label list; anything else is logged and skipped.

        No fuzzy matching here: a list label such as "no jumps" must not turn
        into the tag it negates.
        """
        resolved: List[str] = []
        for label in labels:
            target = self.lookup(table, label)
            if target is None:
                logger.info("Dropping %s label with no enumeration: %r", table, label)
            elif target not in resolved:
                resolved.append(target)
        return resolved
