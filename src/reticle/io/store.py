"""JSON file persistence backend.

This module provides JsonFileStore, which keeps the active configuration,
presets and favorites as JSON files in one directory:

    <data_dir>/config.json      the active configuration
    <data_dir>/presets.json     {"presets": [...]}, insertion order
    <data_dir>/favorites.json   [config, ...]
"""

import asyncio
import os
import tempfile
from pathlib import Path

import structlog

from reticle.domain import CrosshairConfig, Preset
from reticle.exceptions import StorageError
from reticle.io.documents import (
    decode_config,
    decode_favorites,
    decode_preset_store,
    encode_config,
    encode_favorites,
    encode_preset_store,
)

logger = structlog.get_logger(__name__)

CONFIG_FILE = "config.json"
PRESETS_FILE = "presets.json"
FAVORITES_FILE = "favorites.json"


def _write_atomic(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class JsonFileStore:
    """Persistence backend storing documents under a data directory.

    Implements the ConfigBackend, PresetBackend and FavoriteBackend
    protocols. File I/O runs in a worker thread so callers on the event loop
    never block.

    Example:
        store = JsonFileStore(Path("~/.config/crosshair-overlay").expanduser())
        config = await store.load_config()
    """

    def __init__(self, data_dir: Path) -> None:
        """Initialize the store.

        Args:
            data_dir: Directory holding the JSON documents (created on first write)
        """
        self._data_dir = data_dir
        # Serializes read-modify-write of the preset collection
        self._presets_lock = asyncio.Lock()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def config_path(self) -> Path:
        return self._data_dir / CONFIG_FILE

    @property
    def presets_path(self) -> Path:
        return self._data_dir / PRESETS_FILE

    @property
    def favorites_path(self) -> Path:
        return self._data_dir / FAVORITES_FILE

    async def _read(self, path: Path, operation: str) -> bytes | None:
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(operation, f"cannot read {path}: {e}") from e

    async def _write(self, path: Path, data: bytes, operation: str) -> None:
        try:
            await asyncio.to_thread(_write_atomic, path, data)
        except OSError as e:
            raise StorageError(operation, f"cannot write {path}: {e}") from e
        logger.debug("Document written", path=str(path), bytes=len(data))

    async def load_config(self) -> CrosshairConfig:
        """Load the active configuration.

        Raises:
            StorageError: If no configuration is stored or it is malformed
        """
        data = await self._read(self.config_path, "load_config")
        if data is None:
            raise StorageError("load_config", f"no configuration at {self.config_path}")
        return decode_config(data)

    async def save_config(self, config: CrosshairConfig) -> None:
        await self._write(self.config_path, encode_config(config), "save_config")

    async def list_presets(self) -> list[Preset]:
        """Load all presets in stored order; empty if none were saved."""
        data = await self._read(self.presets_path, "list_presets")
        if data is None:
            return []
        return decode_preset_store(data)

    async def save_preset(self, preset: Preset) -> None:
        """Insert or replace a preset by id.

        A replaced preset keeps its position in the collection.
        """
        async with self._presets_lock:
            presets = await self.list_presets()
            for index, existing in enumerate(presets):
                if existing.id == preset.id:
                    presets[index] = preset
                    break
            else:
                presets.append(preset)
            await self._write(self.presets_path, encode_preset_store(presets), "save_preset")

    async def delete_preset(self, preset_id: str) -> None:
        """Remove a preset by id. Unknown ids are ignored."""
        async with self._presets_lock:
            presets = await self.list_presets()
            remaining = [preset for preset in presets if preset.id != preset_id]
            if len(remaining) == len(presets):
                logger.debug("Preset not found for delete", preset_id=preset_id)
                return
            await self._write(self.presets_path, encode_preset_store(remaining), "delete_preset")

    async def load_favorites(self) -> list[CrosshairConfig]:
        data = await self._read(self.favorites_path, "load_favorites")
        if data is None:
            return []
        return decode_favorites(data)

    async def save_favorites(self, favorites: list[CrosshairConfig]) -> None:
        await self._write(self.favorites_path, encode_favorites(favorites), "save_favorites")
