"""Data models for uniform prototypes."""

from .color import UniformColor
from .config import AppConfig
from .enums import UniformCategory
from .palette import STANDARD_CHANNELS, default_prototypes
from .prototype import Prototype, duplicate_owned

__all__ = [
    "AppConfig",
    # Palette
    "STANDARD_CHANNELS",
    "default_prototypes",
    # Models
    "Prototype",
    "UniformColor",
    # Enums
    "UniformCategory",
    "duplicate_owned",
]
