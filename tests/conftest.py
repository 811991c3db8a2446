"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from uniformcolors.models import UniformCategory, UniformColor, default_prototypes
from uniformcolors.registry import PrototypeRegistry, build_registry


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def medical():
    """Create the Medical uniform color."""
    return UniformColor(red=211, green=20, blue=34)


@pytest.fixture
def empty_registry():
    """Create an empty prototype registry."""
    return PrototypeRegistry[UniformColor]()


@pytest.fixture
def standard_registry():
    """Create a registry holding the six standard prototypes."""
    return build_registry(default_prototypes())


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file inside the temporary directory."""
    return temp_dir / "config.json"


@pytest.fixture
def all_categories():
    """Every uniform category, in declaration order."""
    return list(UniformCategory)
