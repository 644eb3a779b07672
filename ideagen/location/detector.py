"""
Location detection for idea generation prompts.

Scans a free-text topic for a known place and turns the result into
prompt guidance for the headquarters location. Pure functions, no I/O
beyond logging.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ideagen.location.places import KNOWN_PLACES, is_city

logger = logging.getLogger(__name__)


DEFAULT_GUIDANCE_LINES: list[str] = [
    "Choose a real, but unique or unexpected city that would make an interesting headquarters",
    "Avoid obvious tech hubs like San Francisco, New York, or London unless specifically relevant",
    "Consider cities in different countries and continents for global diversity",
    "If the topic suggests a specific industry, consider cities known for that particular industry",
]


@dataclass
class PromptGuidance:
    """
    Headquarters-location instructions for the generation prompt.

    Attributes:
        text: Bullet list to embed in the prompt.
        place: The known place found in the topic, or None.
    """
    text: str
    place: Optional[str] = None

    @property
    def matched(self) -> bool:
        """True when the topic mentioned a known place."""
        return self.place is not None


def find_place(topic: str) -> Optional[str]:
    """
    Find the first known place mentioned in a topic.

    Matching rules:
    - Case-insensitive comparison
    - Partial matches allowed (place can appear anywhere in the text)
    - First match in KNOWN_PLACES order wins

    Args:
        topic: Free-text topic.

    Returns:
        The matched place name (lowercase), or None.
    """
    lower_topic = (topic or "").lower()
    for place in KNOWN_PLACES:
        if place in lower_topic:
            return place
    return None


def display_name(place: str) -> str:
    """Upper-case the first letter of a place name, leaving the rest untouched."""
    return place[:1].upper() + place[1:]


def _format_lines(lines: list[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def detect(topic: str) -> PromptGuidance:
    """
    Build headquarters guidance for a topic.

    Always returns guidance: place-specific when the topic mentions a
    known place, the generic diversity-oriented default otherwise.
    """
    place = find_place(topic)

    if place is None:
        return PromptGuidance(text=_format_lines(DEFAULT_GUIDANCE_LINES))

    logger.info(
        "Found location in topic: %s (%s)",
        place,
        "city" if is_city(place) else "country/region",
    )

    lines = [
        f"The startup headquarters MUST be located in or near {display_name(place)}",
        "Choose a specific city within this region that would be appropriate for this business",
        "If the location is a city, use that exact city",
        "If the location is a country or region, choose a notable but perhaps not obvious city within it",
    ]
    return PromptGuidance(text=_format_lines(lines), place=place)
