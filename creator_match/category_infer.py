# creator_match/category_infer.py
"""
Category inference for creator profiles.

Signals, per catalog keyword:
- top hashtags: the hashtag's post count is added as-is
- bio: a whole-word mention adds a fixed bonus (bio_weight, default 2),
  since a bio is curated and a hashtag may just be a repeat

Every category ends up with an "instances" total. The best ones are then
picked with a dominance rule so a clearly dominant signal isn't diluted
by noise:
- top > 2nd * 10  -> only the top category
- top > 3rd * 15  -> only the top two (3rd taken from the full ranking)
- otherwise       -> the top MAX_CATEGORIES

Public API
----------
    score_categories(catalog, hashtag_counts, bio) -> Dict[str, int]
    pick_best_categories(matches)                  -> List[str]
    get_new_categories(creator, catalog)           -> List[str]
    update_reviewed_categories(creator, catalog)   -> List[str]
    review_categories(creator, catalog)            -> (List[str], bool)
    CategoryScorer(catalog)                        -> same, catalog bound
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .catalog import CategoryDefinition, category_names
from .config import ScoringConfig
from .strings import word_is_in_text

MAX_CATEGORIES = 2

_DEFAULT_CONFIG = ScoringConfig()


# ------------------------
# Data structures
# ------------------------

@dataclass(frozen=True)
class CategoryMatch:
    category: str
    instances: int = 0


@dataclass(frozen=True)
class CreatorProfile:
    """Read-only view of the fields scoring cares about."""
    username: Optional[str] = None
    bio: Optional[str] = None
    hashtag_counts: Optional[Mapping[str, int]] = None
    categories: Sequence[str] = ()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CreatorProfile":
        return cls(
            username=record.get("username"),
            bio=record.get("bio"),
            hashtag_counts=record.get("top_20_hashtags"),
            categories=tuple(record.get("category") or ()),
        )


CreatorLike = Union[CreatorProfile, Mapping[str, Any]]
MatchesLike = Union[Mapping[str, int], Iterable[CategoryMatch]]


def _as_profile(creator: CreatorLike) -> CreatorProfile:
    if isinstance(creator, CreatorProfile):
        return creator
    return CreatorProfile.from_record(creator)


def _as_matches(matches: MatchesLike) -> List[CategoryMatch]:
    if isinstance(matches, Mapping):
        return [CategoryMatch(category=c, instances=n) for c, n in matches.items()]
    return list(matches)


# ------------------------
# Scoring
# ------------------------

def _hashtag_count(hashtag_counts: Mapping[str, int], keyword: str) -> int:
    """Count of the first hashtag equal to keyword, ignoring case."""
    kw = keyword.lower()
    for tag, count in hashtag_counts.items():
        if tag.lower() == kw:
            return count
    return 0


def _count_keyword_instances(
    keywords: Iterable[str],
    hashtag_counts: Optional[Mapping[str, int]],
    bio: Optional[str],
    config: ScoringConfig,
) -> int:
    total = 0
    for keyword in keywords:
        if hashtag_counts is not None:
            total += _hashtag_count(hashtag_counts, keyword)
        if bio and word_is_in_text(bio, keyword):
            total += config.bio_weight
    return total


def score_categories(
    catalog: Iterable[CategoryDefinition],
    hashtag_counts: Optional[Mapping[str, int]] = None,
    bio: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
) -> Dict[str, int]:
    """
    Instances per category, in catalog order.

    Either input may be None; a missing signal simply contributes zero.
    """
    cfg = config or _DEFAULT_CONFIG
    return {
        definition.category: _count_keyword_instances(
            definition.keywords, hashtag_counts, bio, cfg
        )
        for definition in catalog
    }


# ------------------------
# Selection
# ------------------------

def pick_best_categories(
    matches: MatchesLike,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """
    Pick up to MAX_CATEGORIES names, best first.

    Accepts either a {category: instances} mapping or CategoryMatch
    objects. Ties keep input order (sorted() is stable).
    """
    cfg = config or _DEFAULT_CONFIG
    actual_matches = [m for m in _as_matches(matches) if m.instances > 0]
    sorted_matches = sorted(actual_matches, key=lambda m: m.instances, reverse=True)
    best_matches = sorted_matches[:MAX_CATEGORIES]

    if len(sorted_matches) > 1:
        top, second = sorted_matches[0], sorted_matches[1]
        # 2nd place is noise next to the top one
        if top.instances > second.instances * cfg.second_dominance_ratio:
            return [top.category]

    if len(sorted_matches) > 2:
        top, third = sorted_matches[0], sorted_matches[2]
        if top.instances > third.instances * cfg.third_dominance_ratio:
            return [top.category, sorted_matches[1].category]

    return [m.category for m in best_matches]


# ------------------------
# Creator-level helpers
# ------------------------

def get_new_categories(
    creator: CreatorLike,
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """Recompute a creator's categories from hashtags + bio."""
    profile = _as_profile(creator)
    scores = score_categories(catalog, profile.hashtag_counts, profile.bio, config)
    return pick_best_categories(scores, config)


def review_categories(
    creator: CreatorLike,
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
) -> Tuple[List[str], bool]:
    """
    Trim a creator's (possibly hand-reviewed) categories to the current catalog.

    Categories that no longer exist are dropped. If nothing survives,
    fall back to automatic categories; otherwise keep the survivors in
    their original spelling and order, capped at MAX_CATEGORIES.

    Returns (categories, recomputed).
    """
    profile = _as_profile(creator)
    known = category_names(catalog)
    remaining = [c for c in profile.categories if c.lower() in known]
    if not remaining:
        return get_new_categories(profile, catalog, config), True
    return remaining[:MAX_CATEGORIES], False


def update_reviewed_categories(
    creator: CreatorLike,
    catalog: Sequence[CategoryDefinition],
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    categories, _ = review_categories(creator, catalog, config)
    return categories


class CategoryScorer:
    """Binds a catalog and scoring config so callers don't pass them around."""

    def __init__(
        self,
        catalog: Sequence[CategoryDefinition],
        config: Optional[ScoringConfig] = None,
    ) -> None:
        self.catalog = tuple(catalog)
        self.config = config or _DEFAULT_CONFIG

    def score(
        self,
        hashtag_counts: Optional[Mapping[str, int]] = None,
        bio: Optional[str] = None,
    ) -> Dict[str, int]:
        return score_categories(self.catalog, hashtag_counts, bio, self.config)

    def pick_best(self, matches: MatchesLike) -> List[str]:
        return pick_best_categories(matches, self.config)

    def get_new_categories(self, creator: CreatorLike) -> List[str]:
        return get_new_categories(creator, self.catalog, self.config)

    def update_reviewed_categories(self, creator: CreatorLike) -> List[str]:
        return update_reviewed_categories(creator, self.catalog, self.config)
