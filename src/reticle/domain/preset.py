"""Saved, named crosshair configurations."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from reticle.domain.crosshair import CrosshairConfig
from reticle.exceptions import ConfigValidationError


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def _parse_timestamp(value: object) -> datetime:
    if not isinstance(value, str):
        raise ConfigValidationError("created_at", f"expected an ISO-8601 string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ConfigValidationError("created_at", f"not an ISO-8601 timestamp: {value!r}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass(frozen=True, slots=True)
class Preset:
    """A named snapshot of a configuration.

    Identity is ``id``; two presets may share an equal ``config``.

    Attributes:
        id: Opaque unique token, assigned once at creation
        name: Display name
        config: The saved configuration
        created_at: Creation time (UTC)
    """

    id: str
    name: str
    config: CrosshairConfig
    created_at: datetime

    def renamed(self, name: str) -> "Preset":
        """Return a copy with a new name and the same identity."""
        return Preset(id=self.id, name=name, config=self.config, created_at=self.created_at)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with id, name, config and created_at fields
        """
        return {
            "id": self.id,
            "name": self.name,
            "config": self.config.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Preset":
        """Deserialize from dictionary.

        Raises:
            ConfigValidationError: If a field is missing or invalid
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("preset", f"expected an object, got {type(data).__name__}")
        for key in ("id", "name", "config", "created_at"):
            if key not in data:
                raise ConfigValidationError(key, "missing")
        if not isinstance(data["id"], str):
            raise ConfigValidationError("id", f"expected a string, got {data['id']!r}")
        if not isinstance(data["name"], str):
            raise ConfigValidationError("name", f"expected a string, got {data['name']!r}")
        return cls(
            id=data["id"],
            name=data["name"],
            config=CrosshairConfig.from_dict(data["config"]),
            created_at=_parse_timestamp(data["created_at"]),
        )
