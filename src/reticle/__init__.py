"""Reticle - Design, preview and manage crosshair overlays.

Reticle turns a declarative crosshair configuration (style, geometry,
colors, outline, shadow, transform and free-form custom lines) into a
layered, device-space paint sequence, and keeps named presets and favorites
of those configurations.

Example:
    $ reticle render --template circle --svg circle.svg

This will write a preview of the Circle starter template to circle.svg.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
