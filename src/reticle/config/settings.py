"""Configuration settings for Reticle."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DATA_DIR = Path.home() / ".config" / "crosshair-overlay"


class StorageConfig(BaseModel):
    """Where configuration, presets and favorites are persisted."""

    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory holding config.json, presets.json and favorites.json",
    )


class PreviewConfig(BaseModel):
    """Configuration for preview rendering and the authoring canvas."""

    size: int = Field(
        default=400,
        ge=50,
        le=4096,
        description="Side length of the square preview surface",
    )
    authoring_canvas: int = Field(
        default=300,
        ge=50,
        le=4096,
        description="Side length of the Custom-mode authoring canvas",
    )
    show_background: bool = Field(
        default=True,
        description="Draw the dark backdrop and grid under previews",
    )

    @property
    def center(self) -> tuple[float, float]:
        """Center of the preview surface."""
        return (self.size / 2, self.size / 2)

    @property
    def authoring_center(self) -> tuple[float, float]:
        """Center of the authoring canvas."""
        return (self.authoring_canvas / 2, self.authoring_canvas / 2)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ReticleSettings(BaseModel):
    """Main application settings."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ReticleSettings:
    """Get default application settings."""
    return ReticleSettings()
