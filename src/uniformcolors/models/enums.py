"""Enumerations for uniform prototypes."""

from enum import Enum


class UniformCategory(str, Enum):
    """Uniform color categories used as prototype registry keys."""

    # Base colors
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    # Division colors
    COMMAND = "command"
    ENGINEERING = "engineering"
    MEDICAL = "medical"

    @property
    def label(self) -> str:
        """Display name (e.g. 'Engineering')."""
        return self.value.title()
