"""Uniform color record."""

from typing import Any

from pydantic import Field

from .prototype import Prototype


class UniformColor(Prototype):
    """Standard 8-bit RGB uniform color.

    Channels are validated on construction and on assignment, so every
    instance (prototype or copy) always holds three values in 0-255.
    """

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    def describe_copy(self, kind: str, label: str | None = None) -> str:
        """Trace line for a copy, e.g. 'Deep copy of Medical RGB: 211,34,20'.

        Channels are reported red, blue, green.
        """
        return f"{kind} copy of {label or 'Starfleet Uniform Color'} RGB: {self.red},{self.blue},{self.green}"

    def _duplicate_fields(self, memo: dict[int, Any]) -> dict[str, Any]:
        # All channels are scalars
        return {"red": self.red, "green": self.green, "blue": self.blue}

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB'

        Example:
            >>> color = UniformColor(red=255, green=0, blue=0)
            >>> color.to_hex()
            '#FF0000'
        """
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
