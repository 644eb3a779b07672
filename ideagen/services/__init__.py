"""
Services module.

Contains external service integrations like idea generation.
"""

from ideagen.services.idea_generator import (
    IdeaGenerator,
    normalize_features,
    FEATURE_COUNT,
    DEFAULT_CITY,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
)

__all__ = [
    "IdeaGenerator",
    "normalize_features",
    "FEATURE_COUNT",
    "DEFAULT_CITY",
    "DEFAULT_LATITUDE",
    "DEFAULT_LONGITUDE",
]
