"""
Utility script to pull trail metadata from the Trailforks v1 API and
convert it into normalized Trail + DifficultyProfile drafts.

Usage:
    python fetch_trailforks_trails.py --region-id 12345 --system-id sys_squamish --limit 25
Requires the environment variable TRAILFORKS_API_KEY to be set.

Drafts reference enumeration ids only; review them before loading with
manage_catalog.py.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx

from normalized_models import DifficultyProfile, NormalizedCatalog, Trail
from vocabulary import EnumerationIndex

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
OUTPUT_FILE = DATA_DIR / "trailforks_trails.json"
TRAILFORKS_API = os.getenv("TRAILFORKS_API", "https://www.trailforks.com/api/1/trails")

# Trailforks: 1 easiest, 2 easy, 3 intermediate, 4 very difficult, 5 extremely difficult, 6 pro line
DIFFICULTY_MAP = {
    "1": "green",
    "2": "green",
    "3": "blue",
    "4": "black",
    "5": "double-black",
    "6": "double-black",
}

# Trailforks: 1 downhill only, 2 downhill primary, 3 both, 4 uphill primary, 5 uphill only, 6 one direction
DIRECTION_MAP = {
    "1": "down-only",
    "2": "both",
    "3": "both",
    "4": "up-preferred",
    "5": "one-way",
    "6": "one-way",
}

_RATING_SCORE = {"green": 0, "blue": 1, "black": 2, "double-black": 3}
_WORD = re.compile(r"[a-z][a-z_\-]*")


def fetch_trails(
    api_key: str,
    region_id: int,
    limit: int,
    transport: Optional[httpx.BaseTransport] = None,
) -> List[Dict[str, Any]]:
    params = {
        "api_key": api_key,
        "scope": "region",
        "id": region_id,
        "rows": limit,
        "order": "score",
    }
    with httpx.Client(timeout=30.0, transport=transport) as client:
        response = client.get(TRAILFORKS_API, params=params)
        response.raise_for_status()
        payload = response.json()
    trails = payload.get("data", {}).get("trails")
    if trails is None and "trails" in payload:
        trails = payload["trails"]
    if not trails:
        raise RuntimeError("Trailforks response did not include any trails.")
    return trails


def _fitness_from_climb(climb_m: float) -> int:
    if climb_m < 100:
        return 0
    if climb_m < 300:
        return 1
    if climb_m < 600:
        return 2
    return 3


def _tags_in(text: str, index: EnumerationIndex) -> List[str]:
    found: List[str] = []
    for word in _WORD.findall(text.lower()):
        tag = index.lookup("character_tags", word)
        if tag and tag not in found:
            found.append(tag)
    return found


def normalize_trail(
    trail: Dict[str, Any],
    system_id: str,
    index: EnumerationIndex,
    fetched_at: datetime,
) -> Tuple[Trail, DifficultyProfile]:
    trailforks_id = str(trail.get("trailid") or trail.get("id"))

    # Trailforks reports distance in meters
    distance_m = float(trail.get("distance") or 0)
    length_km = round(distance_m / 1000, 2) if distance_m else None

    climb_m = float(trail.get("climb") or trail.get("elevation_gain") or trail.get("uphill") or 0)

    difficulty_code = str(trail.get("difficulty") or "")
    rating_id = DIFFICULTY_MAP.get(difficulty_code, "blue")
    if difficulty_code not in DIFFICULTY_MAP:
        logger.warning("Trail %s has unknown difficulty %r, defaulting to blue", trailforks_id, difficulty_code)
    direction_code = str(trail.get("direction") or "")
    direction_id = DIRECTION_MAP.get(direction_code, "both")
    if direction_code not in DIRECTION_MAP:
        logger.warning("Trail %s has unknown direction %r, defaulting to both", trailforks_id, direction_code)
    downhill = direction_id == "down-only"

    description = trail.get("desc") or trail.get("description") or ""
    rating = _RATING_SCORE[rating_id]

    profile = DifficultyProfile(
        id=f"dp_tf_{trailforks_id}",
        overall_rating_id=rating_id,
        regional_calibration_id="typical",
        technical_climbing=0 if downhill else rating,
        technical_descending=rating,
        flow_features=0,
        fitness_demand=0 if downhill else _fitness_from_climb(climb_m),
        character_tag_ids=_tags_in(description, index),
    )
    normalized = Trail(
        id=f"trail_tf_{trailforks_id}",
        system_id=system_id,
        name=trail.get("title") or trail.get("name") or "Unnamed Trail",
        difficulty_profile_id=profile.id,
        direction_id=direction_id,
        length_km=length_km,
        personality=description.split(". ")[0].strip() or "Imported from Trailforks",
        local_name=trail.get("alias") or None,
        trailforks_id=trailforks_id,
        created_at=fetched_at,
        updated_at=fetched_at,
    )
    return normalized, profile


def build_drafts(
    raw_trails: List[Dict[str, Any]],
    system_id: str,
    index: Optional[EnumerationIndex] = None,
    fetched_at: Optional[datetime] = None,
) -> NormalizedCatalog:
    index = index or EnumerationIndex()
    fetched_at = fetched_at or datetime.now(timezone.utc)
    trails: List[Trail] = []
    profiles: List[DifficultyProfile] = []
    for raw in raw_trails:
        trail, profile = normalize_trail(raw, system_id, index, fetched_at)
        trails.append(trail)
        profiles.append(profile)
    return NormalizedCatalog(difficulty_profiles=profiles, trails=trails)


def write_drafts(drafts: NormalizedCatalog, output: Path = OUTPUT_FILE) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(drafts.model_dump(mode="json"), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote {len(drafts.trails)} trails to {output}")  # noqa: T201
    return output


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Fetch trails from Trailforks.")
    parser.add_argument("--region-id", type=int, required=True, help="Trailforks region id.")
    parser.add_argument("--system-id", required=True, help="Catalog system id the trails belong to.")
    parser.add_argument("--limit", type=int, default=25, help="How many records to fetch.")
    parser.add_argument("--out", type=Path, default=OUTPUT_FILE, help="Output JSON path.")
    args = parser.parse_args()

    api_key = os.getenv("TRAILFORKS_API_KEY")
    if not api_key:
        raise RuntimeError("TRAILFORKS_API_KEY is not set in the environment.")

    raw_trails = fetch_trails(api_key, args.region_id, args.limit)
    write_drafts(build_drafts(raw_trails, args.system_id), args.out)


if __name__ == "__main__":
    main()
