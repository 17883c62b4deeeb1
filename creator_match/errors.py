# creator_match/errors.py
"""
Startup-time configuration errors.

Scoring itself never raises; these only surface while loading the
catalog or reading settings.
"""

from __future__ import annotations


class CatalogError(ValueError):
    """Category catalog is missing, unreadable, or not the expected shape."""


class ConfigError(ValueError):
    """An environment setting could not be parsed."""
