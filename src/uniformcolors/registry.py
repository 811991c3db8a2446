"""Keyed store of named prototypes."""

import logging
from collections.abc import Iterator
from threading import Lock
from typing import Generic, TypeVar

from uniformcolors.exceptions import DuplicateKeyError, KeyNotFoundError
from uniformcolors.models import Prototype, UniformCategory, UniformColor

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=Prototype)


class PrototypeRegistry(Generic[RecordType]):
    """
    Type-safe store of prototypes keyed by uniform category.

    The registry hands out the stored prototype itself. Callers that want
    an independent object copy the result explicitly:

        ```python
        registry = PrototypeRegistry[UniformColor]()
        registry.set(UniformCategory.MEDICAL, UniformColor(red=211, green=20, blue=34))

        prototype = registry.get(UniformCategory.MEDICAL)   # the stored instance
        uniform = prototype.deep_copy()                     # a new, independent one
        ```

    Keys are unique and entries are never replaced or removed.

    Threading:
        All public methods are thread-safe. The _lock protects the backing dict.
    """

    def __init__(self) -> None:
        self._prototypes: dict[UniformCategory, RecordType] = {}
        self._lock = Lock()

    @staticmethod
    def _coerce_key(key: UniformCategory | str) -> UniformCategory:
        try:
            return UniformCategory(key)
        except ValueError as e:
            raise KeyNotFoundError(key, [c.value for c in UniformCategory]) from e

    def set(self, key: UniformCategory | str, record: RecordType) -> None:
        """
        Register a prototype under `key`.

        Args:
            key: Category (or its string value) to register under
            record: The prototype instance; the registry keeps this exact object

        Raises:
            DuplicateKeyError: If a prototype is already registered for `key`.
                The existing entry is left unchanged.
            KeyNotFoundError: If `key` is not a known category
        """
        category = self._coerce_key(key)
        with self._lock:
            if category in self._prototypes:
                raise DuplicateKeyError(category)
            self._prototypes[category] = record

        logger.debug(f"Registered prototype {category.value}: {record!r}")

    def get(self, key: UniformCategory | str) -> RecordType:
        """
        Return the prototype registered under `key` (not a copy).

        Raises:
            KeyNotFoundError: If nothing is registered for `key`
        """
        category = self._coerce_key(key)
        with self._lock:
            try:
                return self._prototypes[category]
            except KeyError:
                available = [c.value for c in self._prototypes]
                raise KeyNotFoundError(category, available) from None

    def clone(
        self, key: UniformCategory | str, shallow: bool = True, label: str | None = None
    ) -> RecordType:
        """
        Look up a prototype and return a copy of it.

        Args:
            key: Category to copy
            shallow: Shallow copy if True, deep copy otherwise
            label: Name used in the copy trace (defaults to the category's display name)

        Raises:
            KeyNotFoundError: If nothing is registered for `key`
            CopyError: If a deep copy cannot duplicate the prototype
        """
        category = self._coerce_key(key)
        return self.get(category).clone(shallow=shallow, label=label or category.label)

    def keys(self) -> list[UniformCategory]:
        """Registered categories, in registration order."""
        with self._lock:
            return list(self._prototypes)

    def items(self) -> list[tuple[UniformCategory, RecordType]]:
        """Snapshot of (category, prototype) pairs, in registration order."""
        with self._lock:
            return list(self._prototypes.items())

    def __getitem__(self, key: UniformCategory | str) -> RecordType:
        return self.get(key)

    def __setitem__(self, key: UniformCategory | str, record: RecordType) -> None:
        self.set(key, record)

    def __contains__(self, key: object) -> bool:
        try:
            category = UniformCategory(key)
        except ValueError:
            return False
        with self._lock:
            return category in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)

    def __iter__(self) -> Iterator[UniformCategory]:
        return iter(self.keys())


def build_registry(
    prototypes: dict[UniformCategory, UniformColor],
) -> PrototypeRegistry[UniformColor]:
    """Create a registry holding `prototypes`, in mapping order."""
    registry = PrototypeRegistry[UniformColor]()
    for category, record in prototypes.items():
        registry.set(category, record)
    logger.info(f"Prototype registry populated with {len(registry)} prototypes")
    return registry
