# creator_match/recategorize.py
"""
Batch category maintenance over plain creator records.

Records are dicts as handed over by the persistence layer:

    {"username": ..., "bio": ..., "top_20_hashtags": {...}, "category": [...]}

Nothing here is written back anywhere; callers get NEW dicts and decide
what to save. Inputs are never mutated.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from .catalog import CategoryDefinition
from .category_infer import get_new_categories, review_categories
from .config import ScoringConfig

log = logging.getLogger(__name__)

CreatorRecord = Dict[str, Any]


def update_creator_categories(
    record: Optional[CreatorRecord],
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
    percentage: Optional[float] = None,
) -> Optional[CreatorRecord]:
    """Return a copy of record with "category" recomputed. None passes through."""
    if record is None:
        return None

    new_record = dict(record)
    new_record["category"] = get_new_categories(record, catalog, config)

    if percentage is not None:
        log.debug("Update %s%% done", percentage)
    return new_record


def _usable(records: Iterable[Optional[CreatorRecord]]) -> List[CreatorRecord]:
    out: List[CreatorRecord] = []
    for rec in records:
        if rec is None or rec.get("username") is None:
            log.debug("Skipping creator record without username")
            continue
        out.append(rec)
    return out


def update_all_creator_categories(
    records: Iterable[Optional[CreatorRecord]],
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
) -> Tuple[List[CreatorRecord], str]:
    """
    Recompute categories for every record that has a username.

    Returns (updated_records, summary_message).
    """
    creators = _usable(records)
    total_count = len(creators)

    updated: List[CreatorRecord] = []
    for idx, rec in enumerate(creators, start=1):
        percentage = round(idx * 100 / total_count, 2)
        updated.append(update_creator_categories(rec, catalog, config, percentage))

    message = f"Updated {total_count} items"
    log.info(message)
    return updated, message


def review_all_creator_categories(
    records: Iterable[Optional[CreatorRecord]],
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
) -> Tuple[List[CreatorRecord], str]:
    """
    Trim every creator's categories to the current catalog.

    Creators left with no valid category get automatic ones.
    """
    creators = _usable(records)
    updated: List[CreatorRecord] = []
    recomputed = 0
    for rec in creators:
        categories, fell_back = review_categories(rec, catalog, config)
        if fell_back:
            recomputed += 1
        new_record = dict(rec)
        new_record["category"] = categories
        updated.append(new_record)

    message = f"Reviewed {len(creators)} items, {recomputed} recategorized"
    log.info(message)
    return updated, message
