"""
Location module.

Detects places mentioned in a topic and shapes the headquarters guidance.
"""

from ideagen.location.places import (
    KNOWN_PLACES,
    GLOBAL_CITIES,
    COUNTRIES,
    US_STATES,
    REGIONS,
    is_city,
)

from ideagen.location.detector import (
    PromptGuidance,
    DEFAULT_GUIDANCE_LINES,
    find_place,
    display_name,
    detect,
)

__all__ = [
    # Place configuration
    "KNOWN_PLACES",
    "GLOBAL_CITIES",
    "COUNTRIES",
    "US_STATES",
    "REGIONS",
    "is_city",
    # Detection
    "PromptGuidance",
    "DEFAULT_GUIDANCE_LINES",
    "find_place",
    "display_name",
    "detect",
]
