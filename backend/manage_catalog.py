"""
Command line entry point for catalog housekeeping.

Usage:
    python manage_catalog.py init-db [--with-examples]
    python manage_catalog.py check
    python manage_catalog.py export --out data/enumeration_seed.json
    python manage_catalog.py fixtures --out data/fixtures.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from enumeration_seed_data import write_enumeration_seed_data

logger = logging.getLogger(__name__)


def _dump(records: List[Any]) -> List[Dict[str, Any]]:
    return [r.model_dump(mode="json") for r in records]


def collect_fixtures() -> Dict[str, Any]:
    """Every example record, grouped by the module that defines it."""
    import content_examples
    import regional_examples
    import sample_data
    from normalized_examples import NORMALIZED_EXAMPLES

    return {
        "sample_data": {
            "systems": _dump(sample_data.SAMPLE_SYSTEMS),
            "routes": _dump(sample_data.SAMPLE_ROUTES),
            "trails": _dump(sample_data.SAMPLE_TRAILS),
        },
        "regional_examples": {
            "systems": _dump([regional_examples.SQUAMISH_SYSTEM, regional_examples.ST_GEORGE_SYSTEM]),
            "routes": _dump([regional_examples.HALF_NELSON_ROUTE, regional_examples.ZEN_TRAIL_ROUTE]),
            "comparisons": _dump([regional_examples.PNW_VS_SOUTHWEST_COMPARISON]),
        },
        "content_examples": {
            "credibility": _dump([content_examples.SQUAMISH_LOCAL_SARAH]),
            "guides": _dump(content_examples.CONTENT_GUIDES),
            "media": _dump(content_examples.CONTENT_MEDIA),
            "reviews": _dump(content_examples.CONTENT_REVIEWS),
            "updates": _dump(content_examples.CONTENT_UPDATES),
        },
        "normalized_examples": NORMALIZED_EXAMPLES.model_dump(mode="json"),
    }


def cmd_init_db(args: argparse.Namespace) -> int:
    from db import SessionLocal, engine
    from init_db import init_tables, seed_enumerations, seed_examples

    init_tables(engine)
    db = SessionLocal()
    try:
        seed_enumerations(db)
        if args.with_examples:
            seed_examples(db)
    finally:
        db.close()
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from integrity import validate_all

    failed = False
    for name, result in validate_all().items():
        status = "ok" if result.is_valid else "FAILED"
        print(f"{name}: {status}")  # noqa: T201
        for error in result.errors:
            print(f"  error: {error}")  # noqa: T201
        for warning in result.warnings:
            print(f"  warning: {warning}")  # noqa: T201
        failed = failed or not result.is_valid
    return 1 if failed else 0


def cmd_export(args: argparse.Namespace) -> int:
    path = write_enumeration_seed_data(args.out)
    print(f"Wrote enumeration seed to {path}")  # noqa: T201
    return 0


def cmd_fixtures(args: argparse.Namespace) -> int:
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(collect_fixtures(), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote example fixtures to {out}")  # noqa: T201
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage the MTB trail wiki catalog.")
    sub = parser.add_subparsers(dest="command", required=True)

    init_db = sub.add_parser("init-db", help="Create tables and seed enumerations.")
    init_db.add_argument("--with-examples", action="store_true", help="Also load the normalized examples.")
    init_db.set_defaults(func=cmd_init_db)

    check = sub.add_parser("check", help="Run integrity checks on built-in data.")
    check.set_defaults(func=cmd_check)

    export = sub.add_parser("export", help="Write the enumeration seed as JSON.")
    export.add_argument("--out", type=Path, default=None, help="Output path (default: the seed export path).")
    export.set_defaults(func=cmd_export)

    fixtures = sub.add_parser("fixtures", help="Write every example fixture as JSON.")
    fixtures.add_argument("--out", type=Path, required=True, help="Output path.")
    fixtures.set_defaults(func=cmd_fixtures)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
