"""Base model for records that can be cloned from a prototype instance.

A prototype is an initialized record used as the source of new records.
Callers never construct the copy themselves; they ask the prototype for
one of two copies:

- **Shallow copy**: top-level fields are copied into a new instance. Owned
  nested data (lists, dicts, nested prototypes) is shared with the source.
- **Deep copy**: every owned nested value is duplicated recursively, so the
  result shares no mutable state with the source. Fields listed in
  `shared_fields` are references the record does not own and are kept as-is.

Example:
    ```python
    class Badge(Prototype):
        name: str
        ranks: list[str] = []

    badge = Badge(name="Ensign", ranks=["pip"])

    alias = badge.shallow_copy()
    alias.ranks is badge.ranks      # True

    owned = badge.deep_copy()
    owned.ranks is badge.ranks      # False
    owned.ranks == badge.ranks      # True
    ```

Deep copies keep a memo of already-duplicated objects, so shared
sub-structures stay shared within the copy and cycles are reproduced
instead of recursing forever.
"""

import logging
from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from uniformcolors.exceptions import CopyError

logger = logging.getLogger(__name__)

# Values that can be handed to a copy without duplication
IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, Enum)


class Prototype(BaseModel):
    """Pydantic record exposing shallow and deep copy operations."""

    model_config = ConfigDict(validate_assignment=True)

    shared_fields: ClassVar[frozenset[str]] = frozenset()
    """Fields holding references the record does not own; never duplicated."""

    def shallow_copy(self, label: str | None = None) -> Self:
        """Return a new instance sharing nested data with this one.

        Args:
            label: Name used in the copy trace (defaults to the type name)
        """
        duplicate = self.model_copy()
        logger.info(duplicate.describe_copy("Shallow", label))
        return duplicate

    def deep_copy(self, label: str | None = None) -> Self:
        """Return a fully independent instance.

        Args:
            label: Name used in the copy trace (defaults to the type name)

        Raises:
            CopyError: If a nested value cannot be duplicated
        """
        duplicate = self._deep_copy(memo={})
        logger.info(duplicate.describe_copy("Deep", label))
        return duplicate

    def clone(self, shallow: bool = True, label: str | None = None) -> Self:
        """Return a shallow or deep copy depending on `shallow`."""
        if shallow:
            return self.shallow_copy(label)
        return self.deep_copy(label)

    def describe_copy(self, kind: str, label: str | None = None) -> str:
        """Human-readable trace line for a copy of this record."""
        return f"{kind} copy of {label or type(self).__name__}"

    def _deep_copy(self, memo: dict[int, Any]) -> Self:
        if id(self) in memo:
            return memo[id(self)]

        # Register before duplicating fields so cycles resolve to the copy
        duplicate = self.model_copy()
        memo[id(self)] = duplicate
        duplicate.__dict__.update(self._duplicate_fields(memo))

        # model_copy() shares private attributes and extra fields with the source
        owner = type(self).__name__
        for attribute in ("__pydantic_private__", "__pydantic_extra__"):
            values = getattr(self, attribute)
            if values:
                object.__setattr__(duplicate, attribute, {
                    name: duplicate_owned(value, memo, owner, field=name)
                    for name, value in values.items()
                })
        return duplicate

    def _duplicate_fields(self, memo: dict[int, Any]) -> dict[str, Any]:
        """Return the field values of a deep copy, keyed by field name.

        Subclasses whose fields are all scalars can override this to list
        their fields explicitly.
        """
        values = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if name in self.shared_fields:
                values[name] = value
            else:
                values[name] = duplicate_owned(value, memo, owner=type(self).__name__, field=name)
        return values


def duplicate_owned(value: Any, memo: dict[int, Any], owner: str, field: str | None = None) -> Any:
    """
    Recursively duplicate a value owned by a prototype.

    Args:
        value: The value to duplicate
        memo: Objects already duplicated during this copy, keyed by id
        owner: Name of the record type being copied (for error messages)
        field: Name of the field holding the value (for error messages)

    Returns:
        An independent duplicate of `value` (immutable values are returned as-is)

    Raises:
        CopyError: If `value` (or something nested in it) has an unsupported type
    """
    if isinstance(value, IMMUTABLE_TYPES):
        return value

    if isinstance(value, Prototype):
        return value._deep_copy(memo)

    if id(value) in memo:
        return memo[id(value)]

    if isinstance(value, list):
        duplicate = []
        memo[id(value)] = duplicate
        duplicate.extend(duplicate_owned(item, memo, owner, field) for item in value)
        return duplicate

    if isinstance(value, dict):
        duplicate = {}
        memo[id(value)] = duplicate
        for key, item in value.items():
            duplicate[key] = duplicate_owned(item, memo, owner, field)
        return duplicate

    if isinstance(value, (tuple, frozenset)):
        # Immutable containers are memoized only once built, so a cycle passing
        # through one (tuple -> list -> same tuple) yields a second tuple in the copy
        duplicate = type(value)(duplicate_owned(item, memo, owner, field) for item in value)
        memo[id(value)] = duplicate
        return duplicate

    if isinstance(value, set):
        duplicate = set()
        memo[id(value)] = duplicate
        duplicate.update(duplicate_owned(item, memo, owner, field) for item in value)
        return duplicate

    raise CopyError(
        owner,
        f"values of type {type(value).__name__} cannot be duplicated",
        field=field,
    )
