"""JSON documents for configurations and presets.

Encoders produce UTF-8 JSON bytes; decoders validate the whole document and
raise before returning anything, so callers never see a partial result.
"""

import json
from typing import Any

from reticle.domain import CrosshairConfig, Preset
from reticle.exceptions import ConfigValidationError, ImportParseError, StorageError


def _dump(payload: Any) -> bytes:
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def _load(data: bytes | str) -> Any:
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    return json.loads(text)


def encode_config(config: CrosshairConfig) -> bytes:
    return _dump(config.to_dict())


def decode_config(data: bytes | str) -> CrosshairConfig:
    """Decode a stored configuration document.

    Raises:
        StorageError: If the document is not valid JSON or not a valid configuration
    """
    try:
        return CrosshairConfig.from_dict(_load(data))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageError("load_config", f"malformed document: {e}") from e
    except ConfigValidationError as e:
        raise StorageError("load_config", str(e)) from e


def encode_presets(presets: list[Preset]) -> bytes:
    """Encode presets as one JSON array, verbatim and in order."""
    return _dump([preset.to_dict() for preset in presets])


def decode_presets(data: bytes | str) -> list[Preset]:
    """Decode an exported preset array.

    Args:
        data: JSON array of preset objects

    Returns:
        Presets in document order, ids as found in the document

    Raises:
        ImportParseError: If the document or any entry is malformed
    """
    try:
        payload = _load(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ImportParseError(f"not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ImportParseError(f"expected a JSON array, got {type(payload).__name__}")

    presets: list[Preset] = []
    for index, entry in enumerate(payload):
        try:
            presets.append(Preset.from_dict(entry))
        except ConfigValidationError as e:
            raise ImportParseError(str(e), index=index) from e
    return presets


def encode_preset_store(presets: list[Preset]) -> bytes:
    """Encode the on-disk preset collection (``{"presets": [...]}``)."""
    return _dump({"presets": [preset.to_dict() for preset in presets]})


def decode_preset_store(data: bytes | str) -> list[Preset]:
    """Decode the on-disk preset collection.

    Raises:
        StorageError: If the document is malformed
    """
    try:
        payload = _load(data)
        if not isinstance(payload, dict) or not isinstance(payload.get("presets"), list):
            raise StorageError("list_presets", "expected an object with a 'presets' array")
        return [Preset.from_dict(entry) for entry in payload["presets"]]
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageError("list_presets", f"malformed document: {e}") from e
    except ConfigValidationError as e:
        raise StorageError("list_presets", str(e)) from e


def encode_favorites(favorites: list[CrosshairConfig]) -> bytes:
    return _dump([config.to_dict() for config in favorites])


def decode_favorites(data: bytes | str) -> list[CrosshairConfig]:
    """Decode the stored favorite list.

    Raises:
        StorageError: If the document is malformed
    """
    try:
        payload = _load(data)
        if not isinstance(payload, list):
            raise StorageError("load_favorites", "expected a JSON array")
        return [CrosshairConfig.from_dict(item) for item in payload]
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageError("load_favorites", f"malformed document: {e}") from e
    except ConfigValidationError as e:
        raise StorageError("load_favorites", str(e)) from e
