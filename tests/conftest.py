"""Shared fixtures: in-memory stand-ins for the persistence and overlay services."""

import asyncio
import itertools

import pytest

from reticle.domain import CrosshairConfig, Preset
from reticle.exceptions import StorageError


class MemoryBackend:
    """Config, preset and favorite storage held in memory."""

    def __init__(self, config: CrosshairConfig | None = None) -> None:
        self.config = config
        self.presets: list[Preset] = []
        self.favorites: list[CrosshairConfig] = []
        self.saved_configs: list[CrosshairConfig] = []
        self.fail_saves = False
        self.fail_favorite_saves = False
        self.hold_first_save: asyncio.Event | None = None

    async def load_config(self) -> CrosshairConfig:
        if self.config is None:
            raise StorageError("load_config", "nothing stored")
        return self.config

    async def save_config(self, config: CrosshairConfig) -> None:
        if self.fail_saves:
            raise StorageError("save_config", "disk full")
        self.saved_configs.append(config)
        if self.hold_first_save is not None and len(self.saved_configs) == 1:
            await self.hold_first_save.wait()
        self.config = config

    async def list_presets(self) -> list[Preset]:
        return list(self.presets)

    async def save_preset(self, preset: Preset) -> None:
        for index, existing in enumerate(self.presets):
            if existing.id == preset.id:
                self.presets[index] = preset
                return
        self.presets.append(preset)

    async def delete_preset(self, preset_id: str) -> None:
        self.presets = [p for p in self.presets if p.id != preset_id]

    async def load_favorites(self) -> list[CrosshairConfig]:
        return list(self.favorites)

    async def save_favorites(self, favorites: list[CrosshairConfig]) -> None:
        if self.fail_favorite_saves:
            raise StorageError("save_favorites", "read-only file system")
        self.favorites = list(favorites)


class RecordingOverlay:
    """Overlay surface that records what it was sent."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.updates: list[CrosshairConfig] = []
        self.toggles: list[bool] = []

    async def update_live_overlay(self, config: CrosshairConfig) -> None:
        if self.fail:
            raise ConnectionError("overlay window closed")
        self.updates.append(config)

    async def toggle_overlay(self, enabled: bool) -> None:
        if self.fail:
            raise ConnectionError("overlay window closed")
        self.toggles.append(enabled)


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def overlay() -> RecordingOverlay:
    return RecordingOverlay()


@pytest.fixture
def sequential_ids():
    """Id factory yielding id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"
