"""uniformcolors: Prototype pattern demonstration with Starfleet uniform colors."""

__version__ = "0.1.0"

from .models import Prototype, UniformCategory, UniformColor
from .registry import PrototypeRegistry

__all__ = [
    "Prototype",
    "PrototypeRegistry",
    "UniformCategory",
    "UniformColor",
]
