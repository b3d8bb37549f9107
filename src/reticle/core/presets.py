"""Preset management over a persistence backend.

PresetStore implements the user-facing preset operations (create, rename,
duplicate, delete, import and export) on top of the three primitive
backend calls: list, upsert by id, and delete by id.
"""

import uuid
from collections.abc import Callable, Iterable

import structlog

from reticle.core.boundary import PresetBackend
from reticle.domain import CrosshairConfig, Preset, utc_now
from reticle.io.documents import decode_presets, encode_presets

logger = structlog.get_logger(__name__)

COPY_SUFFIX = " (Copy)"


def new_preset_id() -> str:
    """Generate an opaque, unique preset id."""
    return uuid.uuid4().hex


class PresetStore:
    """Named configuration snapshots, identified by id.

    Ids are assigned here and never reused. Imported ids are always
    replaced, so an import can never overwrite or collide with an existing
    preset.

    Example:
        store = PresetStore(JsonFileStore(data_dir))
        preset = await store.create("Sniper", config)
        copy = await store.duplicate(preset)
    """

    def __init__(
        self,
        backend: PresetBackend,
        id_factory: Callable[[], str] = new_preset_id,
    ) -> None:
        """Initialize the store.

        Args:
            backend: Persistence collaborator
            id_factory: Source of fresh ids
        """
        self._backend = backend
        self._id_factory = id_factory

    def _fresh_id(self, taken: Iterable[str]) -> str:
        taken = set(taken)
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate

    async def list_presets(self) -> list[Preset]:
        """All presets in persisted order."""
        return await self._backend.list_presets()

    async def get(self, preset_id: str) -> Preset | None:
        for preset in await self.list_presets():
            if preset.id == preset_id:
                return preset
        return None

    async def save(self, preset: Preset) -> None:
        """Upsert by id: a new id creates, an existing id fully replaces."""
        await self._backend.save_preset(preset)
        logger.info("Preset saved", preset_id=preset.id, name=preset.name)

    async def create(self, name: str, config: CrosshairConfig) -> Preset:
        """Save ``config`` as a new preset named ``name``."""
        existing = await self.list_presets()
        preset = Preset(
            id=self._fresh_id(p.id for p in existing),
            name=name,
            config=config,
            created_at=utc_now(),
        )
        await self.save(preset)
        return preset

    async def rename(self, preset: Preset, name: str) -> Preset:
        renamed = preset.renamed(name)
        await self.save(renamed)
        return renamed

    async def delete(self, preset_id: str) -> None:
        """Remove a preset. Deleting an unknown id is a no-op."""
        await self._backend.delete_preset(preset_id)
        logger.info("Preset deleted", preset_id=preset_id)

    async def duplicate(self, preset: Preset) -> Preset:
        """Copy a preset under a fresh id.

        The copy is named ``"<name> (Copy)"``, stamped now, and holds a
        configuration equal to the source's.
        """
        existing = await self.list_presets()
        taken = {p.id for p in existing}
        taken.add(preset.id)
        copy = Preset(
            id=self._fresh_id(taken),
            name=f"{preset.name}{COPY_SUFFIX}",
            config=CrosshairConfig.from_dict(preset.config.to_dict()),
            created_at=utc_now(),
        )
        await self.save(copy)
        return copy

    async def export_all(self) -> bytes:
        """Serialize every preset into one JSON array document."""
        return encode_presets(await self.list_presets())

    async def import_all(self, data: bytes | str) -> list[Preset]:
        """Import every preset in an exported document.

        The document is fully parsed before anything is stored. Each entry
        gets a fresh id, distinct from existing presets and from the other
        entries, whatever id the document carried.

        Args:
            data: Document produced by ``export_all``

        Returns:
            The presets as stored

        Raises:
            ImportParseError: If the document is malformed; nothing is stored
        """
        parsed = decode_presets(data)

        taken = {p.id for p in await self.list_presets()}
        imported: list[Preset] = []
        for entry in parsed:
            preset_id = self._fresh_id(taken)
            taken.add(preset_id)
            imported.append(
                Preset(
                    id=preset_id,
                    name=entry.name,
                    config=entry.config,
                    created_at=entry.created_at,
                )
            )

        for preset in imported:
            await self._backend.save_preset(preset)

        logger.info("Presets imported", count=len(imported))
        return imported
