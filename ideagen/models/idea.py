"""
Core data model for the Startup Idea Generator.

Defines IdeaDraft (an idea as generated or submitted, without an id) and
Idea (a draft that the store has saved and assigned an id to).
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional

from ideagen.exceptions import ValidationError


# Optional location fields: Python attribute name -> JSON key
OPTIONAL_FIELDS: dict[str, str] = {
    "city": "city",
    "latitude": "latitude",
    "longitude": "longitude",
    "location_rationale": "locationRationale",
}

REQUIRED_TEXT_FIELDS: tuple[str, ...] = ("topic", "name", "description")


@dataclass
class IdeaDraft:
    """
    A startup idea that has not been saved yet.

    Produced by the generator and accepted from clients on save/update.
    Optional location fields use None as the only "absent" value.

    Attributes:
        topic: Free-text topic the idea was generated for.
        name: Catchy startup name.
        description: One or two sentence value proposition.
        features: Key capabilities (exactly three after generation).
        city: Suggested headquarters city.
        latitude: Latitude of the city as a numeric string.
        longitude: Longitude of the city as a numeric string.
        location_rationale: One-line reason the city suits the startup.
    """

    topic: str
    name: str
    description: str
    features: list[str] = field(default_factory=list)
    city: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location_rationale: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to the JSON wire format (camelCase keys)."""
        data = {
            "topic": self.topic,
            "name": self.name,
            "description": self.description,
            "features": list(self.features),
        }
        for attr, key in OPTIONAL_FIELDS.items():
            data[key] = getattr(self, attr)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "IdeaDraft":
        """
        Build a draft from an inbound JSON payload, validating its shape.

        Unknown keys (e.g. an "id" echoed back by a client) are ignored.
        The number of features is not checked here.

        Raises:
            ValidationError: If the payload is not an object or any field
                has the wrong type. All problems are reported together.
        """
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        errors = []

        for name in REQUIRED_TEXT_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"{name} is required and must be a non-empty string")

        features = data.get("features")
        if not isinstance(features, list):
            errors.append("features must be an array")
        elif not all(isinstance(f, str) for f in features):
            errors.append("features must contain only strings")

        optional = {}
        for attr, key in OPTIONAL_FIELDS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"{key} must be a string or null")
            optional[attr] = value

        if errors:
            raise ValidationError("; ".join(errors))

        return cls(
            topic=data["topic"],
            name=data["name"],
            description=data["description"],
            features=list(features),
            **optional,
        )


@dataclass
class Idea(IdeaDraft):
    """
    A saved startup idea.

    The id is assigned by the store on save and never changes afterwards.
    Update keeps id and created_at and refreshes updated_at.
    """

    id: int = 0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_draft(
        cls,
        idea_id: int,
        draft: IdeaDraft,
        created_at: Optional[datetime] = None,
    ) -> "Idea":
        """Create a saved idea from a draft, copying the feature list."""
        now = datetime.now()
        values = {f.name: getattr(draft, f.name) for f in fields(IdeaDraft)}
        values["features"] = list(draft.features)
        return cls(
            id=idea_id,
            created_at=created_at or now,
            updated_at=now,
            **values,
        )

    def to_draft(self) -> IdeaDraft:
        """Return the user-editable part of this idea."""
        values = {f.name: getattr(self, f.name) for f in fields(IdeaDraft)}
        values["features"] = list(self.features)
        return IdeaDraft(**values)

    def to_dict(self) -> dict:
        """
        Convert to the JSON wire format.

        Datetime fields are converted to ISO format strings.
        """
        data = {"id": self.id}
        data.update(super().to_dict())
        data["createdAt"] = self.created_at.isoformat()
        data["updatedAt"] = self.updated_at.isoformat()
        return data

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.city or 'no city'})"
