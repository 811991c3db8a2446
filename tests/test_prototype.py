"""Unit tests for shallow and deep copies of records with nested data."""

from threading import Lock
from typing import Any, ClassVar

import pytest
from pydantic import ConfigDict, PrivateAttr

from uniformcolors.exceptions import CopyError
from uniformcolors.models import Prototype, UniformColor, duplicate_owned


class Insignia(Prototype):
    """Nested prototype owned by a Uniform."""

    rank: str
    pips: list[int] = []


class Uniform(Prototype):
    """Record with owned nested data and one shared reference."""

    shared_fields: ClassVar[frozenset[str]] = frozenset({"ship"})

    color: UniformColor
    insignia: Insignia
    patches: list[str] = []
    notes: dict[str, list[str]] = {}
    ship: Any = None
    extras: list[Any] = []


class Logbook(Prototype):
    """Record with a private attribute and extra fields."""

    model_config = ConfigDict(extra="allow")

    owner: str
    _entries: list[str] = PrivateAttr(default_factory=list)


@pytest.fixture
def uniform():
    """Create a uniform with nested data."""
    return Uniform(
        color=UniformColor(red=211, green=20, blue=34),
        insignia=Insignia(rank="Lieutenant", pips=[1, 1]),
        patches=["medical"],
        notes={"fit": ["tailored"]},
        ship={"name": "Enterprise"},
    )


class TestShallowCopy:
    """Shallow copies share nested data with their source."""

    @pytest.mark.unit
    def test_nested_data_is_aliased(self, uniform):
        """Test that owned nested values are shared."""
        copy = uniform.shallow_copy()
        assert copy is not uniform
        assert copy == uniform
        assert copy.patches is uniform.patches
        assert copy.insignia is uniform.insignia
        assert copy.color is uniform.color

    @pytest.mark.unit
    def test_nested_mutation_is_visible_in_source(self, uniform):
        """Test that mutating aliased nested data shows through."""
        copy = uniform.shallow_copy()
        copy.patches.append("away team")
        assert uniform.patches == ["medical", "away team"]

    @pytest.mark.unit
    def test_top_level_reassignment_is_independent(self, uniform):
        """Test that rebinding a top-level field does not touch the source."""
        copy = uniform.shallow_copy()
        copy.patches = []
        assert uniform.patches == ["medical"]


class TestDeepCopy:
    """Deep copies duplicate all owned nested data."""

    @pytest.mark.unit
    def test_nested_data_is_duplicated(self, uniform):
        """Test that owned nested values are new objects with equal contents."""
        copy = uniform.deep_copy()
        assert copy == uniform
        assert copy.patches is not uniform.patches
        assert copy.notes is not uniform.notes
        assert copy.notes["fit"] is not uniform.notes["fit"]
        assert copy.insignia is not uniform.insignia
        assert copy.insignia.pips is not uniform.insignia.pips
        assert copy.color is not uniform.color

    @pytest.mark.unit
    def test_nested_mutation_is_independent(self, uniform):
        """Test that mutating a deep copy never reaches the source."""
        copy = uniform.deep_copy()
        copy.patches.append("away team")
        copy.insignia.pips.append(1)
        copy.color.red = 0
        assert uniform.patches == ["medical"]
        assert uniform.insignia.pips == [1, 1]
        assert uniform.color.red == 211

    @pytest.mark.unit
    def test_shared_fields_are_preserved(self, uniform):
        """Test that fields declared shared keep the same reference."""
        copy = uniform.deep_copy()
        assert copy.ship is uniform.ship

    @pytest.mark.unit
    def test_shared_substructure_stays_shared(self, uniform):
        """Test that one object reachable twice is duplicated once."""
        tag = ["duty"]
        uniform.extras.extend([tag, tag])
        copy = uniform.deep_copy()
        assert copy.extras[0] is copy.extras[1]
        assert copy.extras[0] is not tag

    @pytest.mark.unit
    def test_list_cycle_is_reproduced(self, uniform):
        """Test that a self-containing list is copied without recursing forever."""
        uniform.extras.append(uniform.extras)
        copy = uniform.deep_copy()
        assert copy.extras[0] is copy.extras
        assert copy.extras is not uniform.extras

    @pytest.mark.unit
    def test_record_cycle_is_reproduced(self, uniform):
        """Test that a record referring back to itself resolves to the copy."""
        uniform.extras.append(uniform)
        copy = uniform.deep_copy()
        assert copy.extras[0] is copy

    @pytest.mark.unit
    def test_unsupported_value_raises_copy_error(self, uniform):
        """Test that values with no duplication rule fail the copy."""
        uniform.extras.append(Lock())
        with pytest.raises(CopyError) as exc_info:
            uniform.deep_copy()

        assert exc_info.value.type_name == "Uniform"
        assert exc_info.value.field == "extras"
        assert "lock" in exc_info.value.reason.lower()

    @pytest.mark.unit
    def test_unsupported_value_does_not_affect_shallow_copy(self, uniform):
        """Test that shallow copies never inspect nested values."""
        lock = Lock()
        uniform.extras.append(lock)
        assert uniform.shallow_copy().extras[0] is lock


class TestCloneDispatch:
    """Test clone() on records with nested data."""

    @pytest.mark.unit
    def test_clone_deep(self, uniform):
        """Test clone(shallow=False) duplicates nested data."""
        copy = uniform.clone(shallow=False)
        assert copy == uniform
        assert copy.patches is not uniform.patches

    @pytest.mark.unit
    def test_clone_shallow_by_default(self, uniform):
        """Test clone() defaults to a shallow copy."""
        assert uniform.clone().patches is uniform.patches


class TestPrivateAndExtraValues:
    """Test deep copies of private attributes and extra fields."""

    @pytest.fixture
    def logbook(self):
        """Create a logbook with a private list and an extra list field."""
        logbook = Logbook(owner="Crusher", stardates=[41153.7])
        logbook._entries.append("Sickbay inventory")
        return logbook

    @pytest.mark.unit
    def test_private_attribute_is_duplicated(self, logbook):
        """Test a deep copy owns its private attributes."""
        copy = logbook.deep_copy()
        assert copy._entries == ["Sickbay inventory"]
        assert copy._entries is not logbook._entries

        copy._entries.append("Away mission")
        assert logbook._entries == ["Sickbay inventory"]

    @pytest.mark.unit
    def test_extra_field_is_duplicated(self, logbook):
        """Test a deep copy owns its extra fields."""
        copy = logbook.deep_copy()
        assert copy.stardates == [41153.7]
        assert copy.stardates is not logbook.stardates

    @pytest.mark.unit
    def test_shallow_copy_shares_private_attribute(self, logbook):
        """Test a shallow copy keeps sharing private values."""
        assert logbook.shallow_copy()._entries is logbook._entries


class TestImmutableContainerCycles:
    """Test cycles passing through tuples."""

    @pytest.mark.unit
    def test_tuple_cycle_terminates(self, uniform):
        """Test a tuple -> list -> tuple cycle copies without recursing forever."""
        entries = []
        record = (entries,)
        entries.append(record)
        uniform.extras.append(record)

        copy = uniform.deep_copy()

        copied_entries = copy.extras[0][0]
        assert copied_entries is not entries
        assert copied_entries[0][0] is copied_entries


class TestDuplicateOwned:
    """Test the recursive duplication helper."""

    @pytest.mark.unit
    def test_immutable_values_are_returned_as_is(self):
        """Test that scalars are not duplicated."""
        text = "Starfleet"
        assert duplicate_owned(text, {}, owner="Test") is text
        assert duplicate_owned(None, {}, owner="Test") is None

    @pytest.mark.unit
    def test_containers_are_duplicated(self):
        """Test that tuples, sets and dicts are rebuilt."""
        value = {"ranks": ({1, 2}, [3])}
        duplicate = duplicate_owned(value, {}, owner="Test")
        assert duplicate == value
        assert duplicate["ranks"][1] is not value["ranks"][1]


class TestCopyTrace:
    """Test the copy trace of records without a custom description."""

    @pytest.mark.unit
    def test_default_trace_label_is_type_name(self, uniform):
        """Test the generic trace line."""
        assert uniform.describe_copy("Deep") == "Deep copy of Uniform"
