"""Protocols for the services the core talks to.

The overlay surface and the persistence backend are external. The core only
reaches them through these request/response calls, all of which may suspend.
Storage failures are reported as StorageError.
"""

from typing import Protocol

from reticle.domain import CrosshairConfig, Preset


class ConfigBackend(Protocol):
    """Stores the active configuration."""

    async def load_config(self) -> CrosshairConfig:
        """Load the saved configuration.

        Raises:
            StorageError: If nothing is stored or the document is malformed
        """
        ...

    async def save_config(self, config: CrosshairConfig) -> None: ...


class PresetBackend(Protocol):
    """Stores presets, keyed by id, in insertion order."""

    async def list_presets(self) -> list[Preset]: ...

    async def save_preset(self, preset: Preset) -> None:
        """Insert ``preset``, or replace the stored preset with the same id."""
        ...

    async def delete_preset(self, preset_id: str) -> None: ...


class FavoriteBackend(Protocol):
    """Stores the favorite configurations."""

    async def load_favorites(self) -> list[CrosshairConfig]: ...

    async def save_favorites(self, favorites: list[CrosshairConfig]) -> None: ...


class OverlayBackend(Protocol):
    """The render surface painting on top of other applications."""

    async def update_live_overlay(self, config: CrosshairConfig) -> None: ...

    async def toggle_overlay(self, enabled: bool) -> None: ...
