"""Core engine for reticle.

This module contains the rendering and preset logic:

- Geometry resolution (configuration to local primitives, per style)
- Compositing (primitives to a layered, device-space paint sequence)
- Custom shape authoring (two-click segment entry)
- Preset and favorite management
- The designer session that routes every configuration change

Resolution and compositing are pure, synchronous and total over valid
configurations. Only calls across the boundary protocols may suspend.

Key functions:
- resolve: Configuration to ordered primitives
- composite: Primitives to ordered PaintOps
- render: resolve + composite

Key classes:
- CustomShapeAuthor: Custom-mode authoring state machine
- PresetStore: Preset CRUD, import and export
- FavoriteSet: Favorites keyed by structural equality
- DesignerSession: Owner of the active configuration
"""

from reticle.core.authoring import AuthoringState, CustomShapeAuthor
from reticle.core.compositor import composite, layers_present, render
from reticle.core.favorites import FavoriteSet
from reticle.core.geometry import classic_arms, resolve
from reticle.core.presets import PresetStore, new_preset_id
from reticle.core.session import DesignerSession
from reticle.core.templates import (
    DEFAULT_CONFIG,
    PRESET_COLORS,
    STARTER_TEMPLATES,
    StarterTemplate,
    get_template,
)

__all__ = [
    # Authoring
    "AuthoringState",
    "CustomShapeAuthor",
    # Templates
    "DEFAULT_CONFIG",
    "PRESET_COLORS",
    "STARTER_TEMPLATES",
    # Session
    "DesignerSession",
    # Presets and favorites
    "FavoriteSet",
    "PresetStore",
    "StarterTemplate",
    # Geometry and compositing
    "classic_arms",
    "composite",
    "get_template",
    "layers_present",
    "new_preset_id",
    "render",
    "resolve",
]
