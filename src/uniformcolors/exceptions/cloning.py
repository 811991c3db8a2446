"""Copy-related exceptions."""

from typing import Optional

from .base import UniformColorsError


class CopyError(UniformColorsError):
    """A prototype could not be duplicated."""

    def __init__(
        self,
        type_name: str,
        reason: str,
        field: Optional[str] = None,
    ):
        """
        Initialize copy error.

        Args:
            type_name: Name of the record type being copied
            reason: Why duplication failed
            field: The field whose value could not be duplicated (if known)
        """
        where = f"{type_name}.{field}" if field else type_name
        super().__init__(
            user_message=f"Could not copy {type_name}: {reason}",
            technical_message=f"Deep copy of {where} failed: {reason}",
            recoverable=False,
            recovery_hint=(
                "Nested values of a prototype must be prototypes, containers, "
                "or immutable scalars."
            ),
        )
        self.type_name = type_name
        self.field = field
        self.reason = reason
