"""Exception hierarchy for Reticle."""


class ReticleError(Exception):
    """Base exception for all Reticle errors."""

    pass


class ConfigValidationError(ReticleError):
    """A crosshair configuration field is out of range or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class UnknownStyleError(ConfigValidationError):
    """Style tag does not name a known crosshair style."""

    def __init__(self, tag: object) -> None:
        self.tag = tag
        super().__init__("style", f"unknown style {tag!r}")


class StorageError(ReticleError):
    """Errors reported by the persistence backend."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage operation '{operation}' failed: {reason}")


class ImportParseError(ReticleError):
    """A preset import document could not be parsed.

    Raised before anything is stored, so a corrupt document never
    results in a partial import.
    """

    def __init__(self, reason: str, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        where = f" (entry {index})" if index is not None else ""
        super().__init__(f"Invalid preset document{where}: {reason}")
