"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from uniformcolors.persistence import PydanticPersistence

from .color import UniformColor
from .enums import UniformCategory
from .palette import default_prototypes

DEFAULT_CONFIG_PATH = Path.home() / ".uniformcolors" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    pause_on_exit: bool = Field(
        default=True,
        description="Wait for a key press before the demo exits (skipped when not on a terminal)",
    )

    prototypes: dict[UniformCategory, UniformColor] = Field(
        default_factory=default_prototypes,
        description="Channel values of the prototypes registered at startup",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.uniformcolors/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (previous file is kept as .bak)."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
