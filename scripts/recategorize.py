#!/usr/bin/env python3
"""
Recompute creator categories for a JSON dump of creator records.

    python scripts/recategorize.py --creators creators.json --out updated.json
    python scripts/recategorize.py --creators creators.json --reviewed

--reviewed only trims existing categories to the current catalog (creators
left with nothing get automatic ones). Without it every creator is
recategorized from hashtags + bio.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from creator_match.catalog import load_catalog  # noqa: E402
from creator_match.config import scoring_config_from_env  # noqa: E402
from creator_match.errors import CatalogError, ConfigError  # noqa: E402
from creator_match.recategorize import (  # noqa: E402
    review_all_creator_categories,
    update_all_creator_categories,
)

log = logging.getLogger("recategorize")


def _load_creators(path: Path) -> List[dict]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"cannot read creators file {path}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"creators file {path} must hold a JSON list")
    return data


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Recompute creator categories")
    parser.add_argument("--creators", required=True, type=Path, help="JSON list of creator records")
    parser.add_argument("--catalog", type=Path, default=None, help="Category catalog JSON (default: env / bundled)")
    parser.add_argument("--out", type=Path, default=None, help="Write updated records here (default: stdout)")
    parser.add_argument("--reviewed", action="store_true", help="Only trim categories to the current catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog)
        config = scoring_config_from_env()
        creators = _load_creators(args.creators)
    except (CatalogError, ConfigError, ValueError) as e:
        log.error("%s", e)
        return 2

    if args.reviewed:
        updated, _ = review_all_creator_categories(creators, catalog, config)
    else:
        updated, _ = update_all_creator_categories(creators, catalog, config)

    payload = json.dumps(updated, ensure_ascii=False, indent=2)
    if args.out:
        args.out.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
