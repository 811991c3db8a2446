"""Prototype registry exceptions.

This module defines exceptions raised by the prototype registry:
- RegistryError: Base class for registry errors
- DuplicateKeyError: A prototype is already stored under the key
- KeyNotFoundError: No prototype is stored under the key
"""

from typing import Any

from .base import UniformColorsError


class RegistryError(UniformColorsError):
    """Prototype registry operation failed."""

    def __init__(self, user_message: str, key: Any = None, **kwargs):
        """
        Initialize registry error.

        Args:
            user_message: User-friendly error message
            key: The registry key involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.key = key


class DuplicateKeyError(RegistryError):
    """A prototype is already registered under this key."""

    def __init__(self, key: Any):
        """
        Initialize duplicate-key error.

        Args:
            key: The key that is already registered
        """
        name = getattr(key, "value", key)
        super().__init__(
            user_message=f"A prototype is already registered for '{name}'.",
            technical_message=f"Refusing to overwrite existing prototype for key {key!r}",
            key=key,
            recoverable=True,
            recovery_hint="Registered prototypes cannot be replaced. Use a different category.",
        )


class KeyNotFoundError(RegistryError):
    """No prototype is registered under this key."""

    def __init__(self, key: Any, available: list[str] | None = None):
        """
        Initialize key-not-found error.

        Args:
            key: The key that wasn't found
            available: Names of the keys currently registered (optional)
        """
        name = getattr(key, "value", key)
        recovery = "Run 'uniformcolors list' to see registered prototypes."
        if available:
            recovery = f"Registered prototypes: {', '.join(available)}"

        super().__init__(
            user_message=f"No prototype registered for '{name}'.",
            technical_message=f"Lookup failed for key {key!r}",
            key=key,
            recoverable=True,
            recovery_hint=recovery,
        )
        self.available = available or []
