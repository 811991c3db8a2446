"""Standard Starfleet uniform colors.

This module is the single source of truth for the channel values of the
built-in prototypes. The demo registry, the default configuration and the
CLI all start from `default_prototypes()`.

| Category    | Red | Green | Blue |
|-------------|-----|-------|------|
| Red         | 255 | 0     | 0    |
| Green       | 0   | 255   | 0    |
| Blue        | 0   | 0     | 255  |
| Command     | 255 | 0     | 54   |
| Engineering | 128 | 128   | 211  |
| Medical     | 211 | 20    | 34   |

Example:
    ```python
    from uniformcolors.models.palette import default_prototypes
    from uniformcolors.models import UniformCategory

    medical = default_prototypes()[UniformCategory.MEDICAL]
    medical.to_rgb_tuple()  # (211, 20, 34)
    ```
"""

from .color import UniformColor
from .enums import UniformCategory

STANDARD_CHANNELS: dict[UniformCategory, tuple[int, int, int]] = {
    # Base colors
    UniformCategory.RED: (255, 0, 0),
    UniformCategory.GREEN: (0, 255, 0),
    UniformCategory.BLUE: (0, 0, 255),
    # Division colors
    UniformCategory.COMMAND: (255, 0, 54),
    UniformCategory.ENGINEERING: (128, 128, 211),
    UniformCategory.MEDICAL: (211, 20, 34),
}
"""(red, green, blue) per category, in registration order."""


def default_prototypes() -> dict[UniformCategory, UniformColor]:
    """Build fresh prototype instances for every standard category."""
    return {
        category: UniformColor(red=red, green=green, blue=blue)
        for category, (red, green, blue) in STANDARD_CHANNELS.items()
    }


__all__ = ["STANDARD_CHANNELS", "default_prototypes"]
