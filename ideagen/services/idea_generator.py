"""
Startup idea generation via an OpenAI-compatible chat completions API.

Builds a location-aware prompt, calls the provider, and normalizes the
JSON answer into an IdeaDraft with exactly three features.
"""

import json
import logging
import requests
from typing import Any, Dict, List, Optional

from ideagen.config import (
    OPENAI_API_KEY,
    OPENAI_MODEL,
    OPENAI_API_URL,
    GENERATION_TEMPERATURE,
    GENERATION_MAX_TOKENS,
    REQUEST_TIMEOUT,
)
from ideagen.exceptions import GenerationError
from ideagen.location import detect
from ideagen.models.idea import IdeaDraft

logger = logging.getLogger(__name__)


FEATURE_COUNT = 3

# Used when the provider leaves the headquarters out
DEFAULT_CITY = "San Francisco"
DEFAULT_LATITUDE = "37.7749"
DEFAULT_LONGITUDE = "-122.4194"


def normalize_features(name: str, features: List[Any]) -> List[str]:
    """
    Force a feature list to exactly three entries.

    Extra features are dropped; missing ones are filled with
    "Additional feature for <name>".
    """
    normalized = [str(f) for f in features[:FEATURE_COUNT]]
    while len(normalized) < FEATURE_COUNT:
        normalized.append(f"Additional feature for {name}")
    return normalized


def _text_or_default(value: Any, default: Optional[str]) -> Optional[str]:
    """Stringify a provider value, falling back when it is missing or empty."""
    if value is None or value == "":
        return default
    return str(value)


def _error_detail(response) -> str:
    """Pull a readable error out of a non-200 provider response."""
    try:
        body = response.json()
    except ValueError:
        return response.text

    # {"error": {"message": ...}} or {"error": "..."}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return response.text


class IdeaGenerator:
    """Generates startup ideas using a chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        self.api_key = api_key if api_key is not None else OPENAI_API_KEY
        self.model = model or OPENAI_MODEL
        self.api_url = api_url or OPENAI_API_URL
        self.temperature = temperature if temperature is not None else GENERATION_TEMPERATURE
        self.max_tokens = max_tokens or GENERATION_MAX_TOKENS
        self.timeout = timeout or REQUEST_TIMEOUT

    def is_available(self) -> bool:
        """Check if generation is available (API key configured)."""
        return bool(self.api_key)

    def generate(self, topic: str) -> IdeaDraft:
        """
        Generate a startup idea for a topic.

        The caller is expected to reject blank topics first.

        Args:
            topic: Free-text topic, optionally mentioning a place.

        Returns:
            IdeaDraft with exactly three features and a headquarters location.

        Raises:
            GenerationError: On any provider, network, or format failure.
                The message always starts with GenerationError.PREFIX.
        """
        try:
            if not self.is_available():
                raise GenerationError(
                    "Completion provider not configured. Add OPENAI_API_KEY to .env"
                )
            content = self._call_api(self.build_prompt(topic))
            return self._parse_idea(topic, content)
        except (GenerationError, requests.RequestException) as e:
            reason = e.message if isinstance(e, GenerationError) else str(e)
            logger.error("Idea generation failed for topic %r: %s", topic, reason)
            raise GenerationError(f"{GenerationError.PREFIX}: {reason}", original_error=e) from e

    def build_prompt(self, topic: str) -> str:
        """Build the generation prompt, including headquarters guidance."""
        guidance = detect(topic)

        return f"""Generate a personalized startup app idea related to "{topic}".
Please respond with a JSON object in the following format:
{{
  "name": "A catchy startup name",
  "description": "A brief description of what the app does (max 120 characters)",
  "features": ["Feature 1", "Feature 2", "Feature 3"],
  "city": "A unique or unexpected real city for this startup's headquarters",
  "latitude": "Latitude of the city (e.g., 40.7128)",
  "longitude": "Longitude of the city (e.g., -74.0060)",
  "locationRationale": "A one-line reason why this location is perfect for the startup"
}}

Be creative but concise. The name should be memorable and relate to the topic.
The description should explain the core value proposition in 1-2 sentences.
The features should be the 3 most important capabilities of the application.

For the headquarters location:
{guidance.text}
- Provide accurate latitude and longitude coordinates for the selected city"""

    def _call_api(self, prompt: str) -> str:
        """Make the chat completions call and return the message content."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                }
            ],
            "response_format": {"type": "json_object"},
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        logger.info("Requesting startup idea from %s (model=%s)", self.api_url, self.model)
        response = requests.post(
            self.api_url,
            headers=headers,
            json=payload,
            timeout=self.timeout,
        )

        if response.status_code != 200:
            raise GenerationError(
                f"API error ({response.status_code}): {_error_detail(response)}"
            )

        try:
            data = response.json()
        except ValueError:
            raise GenerationError("Unexpected response body from completion provider")
        if not isinstance(data, dict):
            raise GenerationError("Unexpected response body from completion provider")

        choices = data.get("choices")
        if not choices:
            raise GenerationError("Empty response from completion provider")
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise GenerationError("Unexpected response body from completion provider")

        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None

        if content is not None and not isinstance(content, str):
            raise GenerationError("Unexpected message content from completion provider")
        if not content or not content.strip():
            raise GenerationError("Empty response from completion provider")

        return content

    def _parse_idea(self, topic: str, content: str) -> IdeaDraft:
        """Parse and validate provider JSON into a normalized IdeaDraft."""
        try:
            raw: Dict[str, Any] = json.loads(content)
        except json.JSONDecodeError as e:
            raise GenerationError(f"Invalid JSON from completion provider: {e.msg}")

        if (
            not isinstance(raw, dict)
            or not raw.get("name")
            or not raw.get("description")
            or not isinstance(raw.get("features"), list)
        ):
            raise GenerationError("Invalid response format from completion provider")

        name = str(raw["name"])

        return IdeaDraft(
            topic=topic,
            name=name,
            description=str(raw["description"]),
            features=normalize_features(name, raw["features"]),
            city=_text_or_default(raw.get("city"), DEFAULT_CITY),
            latitude=_text_or_default(raw.get("latitude"), DEFAULT_LATITUDE),
            longitude=_text_or_default(raw.get("longitude"), DEFAULT_LONGITUDE),
            location_rationale=_text_or_default(raw.get("locationRationale"), None),
        )
