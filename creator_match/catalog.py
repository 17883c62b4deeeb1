# creator_match/catalog.py
"""
Static category catalog.

The catalog is a JSON list shaped like:

    [
        {"category": "Gaming", "keywords": ["gaming", "gamer", "twitch"]},
        ...
    ]

It is loaded once at startup and handed to the scorer explicitly. Shape
problems raise CatalogError naming the offending entry, so a bad deploy
fails loudly instead of silently scoring against half a catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Set, Tuple, Union
import json
import logging

from .config import catalog_path_from_env
from .errors import CatalogError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryDefinition:
    category: str
    keywords: Tuple[str, ...] = ()


Catalog = Tuple[CategoryDefinition, ...]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _parse_entry(idx: int, entry: Any) -> CategoryDefinition:
    if not isinstance(entry, dict):
        raise CatalogError(f"entry {idx}: expected an object, got {type(entry).__name__}")

    name = entry.get("category")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"entry {idx}: 'category' must be a non-empty string")

    keywords = entry.get("keywords", [])
    if not isinstance(keywords, list):
        raise CatalogError(f"entry {idx} ({name}): 'keywords' must be a list")
    for kw in keywords:
        if not isinstance(kw, str):
            raise CatalogError(f"entry {idx} ({name}): keyword {kw!r} is not a string")

    return CategoryDefinition(category=name, keywords=tuple(keywords))


def parse_catalog(data: Any) -> Catalog:
    """Validate an already-decoded catalog document."""
    if not isinstance(data, list):
        raise CatalogError(f"catalog must be a list, got {type(data).__name__}")

    out: List[CategoryDefinition] = []
    seen: Set[str] = set()
    for idx, entry in enumerate(data):
        definition = _parse_entry(idx, entry)
        key = definition.category.lower()
        if key in seen:
            raise CatalogError(f"entry {idx}: duplicate category {definition.category!r}")
        seen.add(key)
        out.append(definition)
    return tuple(out)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """
    Read and validate the catalog JSON.

    With no path, uses CREATOR_CATEGORIES_PATH or the bundled catalog.
    """
    catalog_path = Path(path) if path is not None else catalog_path_from_env()
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"cannot read catalog {catalog_path}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogError(f"catalog {catalog_path} is not valid JSON: {e}") from e

    catalog = parse_catalog(data)
    log.info("Loaded %d categories from %s", len(catalog), catalog_path)
    return catalog


def category_names(catalog: Iterable[CategoryDefinition]) -> Set[str]:
    """Lower-cased names, for case-insensitive membership checks."""
    return {c.category.lower() for c in catalog}
