"""Prototype pattern walkthrough.

Populates a registry with the six standard uniform colors, then obtains new
uniforms by copying prototypes instead of constructing them:

- shallow copies of Red and Engineering
- a deep copy of Medical

Each copy prints one trace line, e.g.::

    Shallow copy of Red RGB: 255,0,0
    Shallow copy of Engineering RGB: 128,211,128
    Deep copy of Medical RGB: 211,34,20
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from uniformcolors.exceptions import ErrorContext
from uniformcolors.models import UniformCategory, UniformColor, default_prototypes
from uniformcolors.registry import PrototypeRegistry, build_registry

logger = logging.getLogger(__name__)

# (category, shallow) in the order the copies are made
DEMO_COPIES: tuple[tuple[UniformCategory, bool], ...] = (
    (UniformCategory.RED, True),
    (UniformCategory.ENGINEERING, True),
    (UniformCategory.MEDICAL, False),
)


@dataclass
class CopyResult:
    """One copy made by the demo."""

    category: UniformCategory
    shallow: bool
    prototype: UniformColor
    copy: UniformColor

    @property
    def kind(self) -> str:
        return "Shallow" if self.shallow else "Deep"

    @property
    def trace(self) -> str:
        return self.copy.describe_copy(self.kind, self.category.label)


def run_demo(
    prototypes: dict[UniformCategory, UniformColor] | None = None,
    echo: Callable[[str], None] = print,
) -> list[CopyResult]:
    """
    Populate a registry and copy prototypes from it.

    Args:
        prototypes: Prototypes to register (defaults to the standard palette)
        echo: Receives one trace line per copy

    Returns:
        The copies, in the order they were made

    Raises:
        KeyNotFoundError: If `prototypes` lacks a category the demo copies
    """
    with ErrorContext("populate prototype registry", logger_instance=logger):
        registry = build_registry(default_prototypes() if prototypes is None else prototypes)

    return copy_prototypes(registry, DEMO_COPIES, echo)


def copy_prototypes(
    registry: PrototypeRegistry[UniformColor],
    requests: tuple[tuple[UniformCategory, bool], ...],
    echo: Callable[[str], None] = print,
) -> list[CopyResult]:
    """Copy each requested (category, shallow) prototype and echo its trace."""
    results = []
    for category, shallow in requests:
        prototype = registry.get(category)
        result = CopyResult(
            category=category,
            shallow=shallow,
            prototype=prototype,
            copy=registry.clone(category, shallow=shallow),
        )
        echo(result.trace)
        results.append(result)
    return results
