"""Persistence and output layer for reticle.

This module handles everything that leaves the process as bytes:

- JSON documents for configurations, presets and favorites
- The JSON file persistence backend
- SVG output of paint sequences

Key classes:
- JsonFileStore: Config, preset and favorite storage in a data directory

Key functions:
- encode_presets / decode_presets: Preset export and import documents
- paint_ops_to_svg / write_svg: SVG rendering of a paint sequence
"""

from reticle.io.documents import (
    decode_config,
    decode_presets,
    encode_config,
    encode_presets,
)
from reticle.io.store import JsonFileStore
from reticle.io.svg import paint_ops_to_svg, write_svg

__all__ = [
    "JsonFileStore",
    "decode_config",
    "decode_presets",
    "encode_config",
    "encode_presets",
    "paint_ops_to_svg",
    "write_svg",
]
