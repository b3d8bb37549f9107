"""Designer session: the single update path for the active configuration.

The session owns the current CrosshairConfig and replaces it wholesale on
every edit, then pushes the new value to the live overlay. Overlay pushes
are fire-and-forget: a failing surface is logged, never raised. Storage
failures on load fall back to the last good configuration; storage failures
on save are raised to the caller.
"""

from collections.abc import Sequence
from typing import Any

import structlog

from reticle.core.authoring import CustomShapeAuthor
from reticle.core.boundary import ConfigBackend, FavoriteBackend, OverlayBackend
from reticle.core.compositor import render
from reticle.core.favorites import FavoriteSet
from reticle.core.templates import DEFAULT_CONFIG
from reticle.domain import CrosshairConfig, PaintOp
from reticle.exceptions import StorageError

logger = structlog.get_logger(__name__)


class DesignerSession:
    """Holds the active configuration and routes every change through it.

    Example:
        session = DesignerSession(store, overlay=overlay, favorites_backend=store)
        await session.start()
        await session.update(size=12, color=0xFF0000)
        await session.save()
    """

    def __init__(
        self,
        config_backend: ConfigBackend,
        overlay: OverlayBackend | None = None,
        favorites_backend: FavoriteBackend | None = None,
        authoring_center: tuple[float, float] = (150.0, 150.0),
    ) -> None:
        """Initialize the session with the built-in default configuration.

        Args:
            config_backend: Where the active configuration is loaded and saved
            overlay: Live render surface, if any
            favorites_backend: Where favorites are persisted, if anywhere
            authoring_center: Crosshair origin on the Custom authoring canvas
        """
        self._config_backend = config_backend
        self._overlay = overlay
        self._favorites_backend = favorites_backend
        self._config = DEFAULT_CONFIG
        self._favorites = FavoriteSet()
        self._save_seq = 0
        self.author = CustomShapeAuthor(canvas_center=authoring_center)

    @property
    def config(self) -> CrosshairConfig:
        """Current configuration snapshot."""
        return self._config

    @property
    def favorites(self) -> FavoriteSet:
        return self._favorites

    async def start(self) -> CrosshairConfig:
        """Load persisted state and push it to the overlay.

        A missing or malformed configuration leaves the default in place.
        """
        try:
            self._config = await self._config_backend.load_config()
            logger.info("Configuration loaded", style=self._config.style.value)
        except StorageError as e:
            logger.info("Configuration unavailable, using default", error=str(e))

        if self._favorites_backend is not None:
            try:
                self._favorites = FavoriteSet(await self._favorites_backend.load_favorites())
            except StorageError as e:
                logger.warning("Favorites unavailable", error=str(e))

        await self._push()
        return self._config

    async def _push(self) -> None:
        if self._overlay is None:
            return
        try:
            await self._overlay.update_live_overlay(self._config)
        except Exception as e:
            logger.warning(
                "Overlay update failed",
                error=str(e),
                error_type=type(e).__name__,
            )

    async def apply(self, config: CrosshairConfig) -> CrosshairConfig:
        """Replace the whole configuration (template, preset or favorite load)."""
        self._config = config
        await self._push()
        return config

    async def update(self, **changes: Any) -> CrosshairConfig:
        """Change individual fields.

        Raises:
            ConfigValidationError: If a change is invalid; the current
                configuration is kept
        """
        return await self.apply(self._config.replace(**changes))

    async def reset(self) -> CrosshairConfig:
        return await self.apply(DEFAULT_CONFIG)

    def on_overlay_toggled(self, enabled: bool) -> CrosshairConfig:
        """Handle an inbound toggle notification from the host.

        Only ``enabled`` is merged; any other pending edit is kept.
        """
        self._config = self._config.with_enabled(enabled)
        logger.debug("Overlay toggled by host", enabled=enabled)
        return self._config

    async def toggle(self) -> bool:
        """Flip ``enabled`` and tell the overlay.

        Returns:
            The new enabled state
        """
        enabled = not self._config.enabled
        await self.update(enabled=enabled)
        if self._overlay is not None:
            try:
                await self._overlay.toggle_overlay(enabled)
            except Exception as e:
                logger.warning("Overlay toggle failed", enabled=enabled, error=str(e))
        return enabled

    async def save(self) -> bool:
        """Persist the current configuration.

        Saves may complete out of order. Only the newest request's result
        reflects the configuration the user last asked to save.

        Returns:
            True if no newer save was started while this one was in flight

        Raises:
            StorageError: If the backend rejects the save
        """
        self._save_seq += 1
        seq = self._save_seq
        snapshot = self._config
        await self._config_backend.save_config(snapshot)
        latest = seq == self._save_seq
        logger.info("Configuration saved", seq=seq, superseded=not latest)
        return latest

    async def click(self, x: float, y: float) -> CrosshairConfig:
        """Forward an authoring-canvas click to the Custom shape author."""
        updated = self.author.click(self._config, x, y)
        if updated is not self._config:
            await self.apply(updated)
        return self._config

    async def clear_custom_lines(self) -> CrosshairConfig:
        return await self.apply(self.author.clear(self._config))

    def is_favorite(self) -> bool:
        return self._favorites.contains(self._config)

    async def toggle_favorite(self) -> bool:
        """Add or remove the current configuration from the favorites.

        The in-memory set only changes once the backend has stored it.

        Returns:
            True if the configuration is a favorite afterwards

        Raises:
            StorageError: If the backend rejects the save; favorites are unchanged
        """
        updated = FavoriteSet(self._favorites)
        added = updated.toggle(self._config)
        if self._favorites_backend is not None:
            await self._favorites_backend.save_favorites(list(updated))
        self._favorites = updated
        return added

    def preview(self, center: tuple[float, float] = (0.0, 0.0)) -> Sequence[PaintOp]:
        """Paint sequence for the current configuration."""
        return render(self._config, center)
