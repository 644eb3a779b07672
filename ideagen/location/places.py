"""
Known places for location detection.

This file is the single source of truth for which places the generator
recognizes in a topic. A recognized place pins the suggested headquarters
to it; otherwise the generator is nudged towards an unexpected city.

CUSTOMIZATION:

To add a place:
    1. Add it (lowercase) to the matching group below
    2. Places are matched as substrings of the lowercased topic
       (e.g., "uk" also matches "ukulele" - be specific!)
    3. The FIRST match in KNOWN_PLACES order wins, so a name that contains
       another one must be declared before it to ever be reported
       ("new york state" is currently shadowed by "new york")
"""

# =============================================================================
# Place Groups
# =============================================================================

GLOBAL_CITIES: list[str] = [
    "new york", "paris", "london", "tokyo", "shanghai", "dubai", "singapore",
    "los angeles", "chicago", "toronto", "sydney", "melbourne", "berlin", "madrid",
    "rome", "mumbai", "delhi", "bangalore", "bangkok", "seoul", "hong kong",
]

COUNTRIES: list[str] = [
    "india", "china", "japan", "france", "germany", "italy", "spain",
    "canada", "australia", "brazil", "mexico", "russia", "uk", "usa",
    "united states", "united kingdom",
]

US_STATES: list[str] = [
    "california", "texas", "florida", "new york state", "illinois",
    "pennsylvania", "ohio", "georgia", "michigan", "north carolina",
]

REGIONS: list[str] = [
    "europe", "asia", "africa", "south america", "north america",
    "middle east", "southeast asia", "latin america", "scandinavia",
    "caribbean", "mediterranean", "eastern europe", "western europe",
]


# =============================================================================
# Match Order
# =============================================================================

# Declaration order is the tie-break order
KNOWN_PLACES: list[str] = GLOBAL_CITIES + COUNTRIES + US_STATES + REGIONS


def is_city(place: str) -> bool:
    """Check whether a known place is one of the global cities."""
    return place in GLOBAL_CITIES
