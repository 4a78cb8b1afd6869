"""
Tests for mock field declarations.

This test suite verifies:
- Fields are unreadable until mocks are attached
- Declaration order and inheritance
- Mock creation for plain, specced and static fields
"""

from unittest.mock import MagicMock

import pytest

from mock_lifecycle.errors import MocksNotInitializedError
from mock_lifecycle.fields import (
    MockField,
    StaticMockField,
    declared_mock_fields,
    mock_field,
    static_mock,
)
from mock_lifecycle.static import StaticMock
from mock_lifecycle.validator import Validator


def supply() -> str:
    return "real"


class Base:
    supplier = mock_field()
    validator = static_mock(Validator)


class Child(Base):
    extra = mock_field(spec=supply)
    validator = None


class TestMockField:
    """Test suite for MockField descriptors."""

    def test_class_access_returns_descriptor(self):
        """Test that reading the field on the class gives the declaration."""
        assert isinstance(Base.supplier, MockField)
        assert isinstance(Base.validator, StaticMockField)
        assert Base.supplier.name == "supplier"
        assert Base.supplier.owner is Base

    def test_unattached_field_raises(self):
        """Test that reading a field before mocks are opened fails loudly."""
        instance = Base()

        with pytest.raises(MocksNotInitializedError, match="'supplier' of Base"):
            instance.supplier

    def test_assignment_attaches_value(self):
        """Test that assigning to the field attaches the value."""
        instance = Base()
        value = MagicMock()

        instance.supplier = value

        assert instance.supplier is value
        assert Base.supplier.is_attached(instance)

    def test_delete_detaches_value(self):
        """Test that deleting the field makes it unreadable again."""
        instance = Base()
        instance.supplier = MagicMock()

        del instance.supplier

        assert not Base.supplier.is_attached(instance)
        with pytest.raises(MocksNotInitializedError):
            instance.supplier

    def test_fields_are_per_instance(self):
        """Test that attaching on one instance leaves others untouched."""
        first, second = Base(), Base()
        first.supplier = MagicMock()

        with pytest.raises(MocksNotInitializedError):
            second.supplier

    def test_create_plain_mock(self):
        """Test that a field without spec creates a named MagicMock."""
        value = Base.supplier.create()

        assert isinstance(value, MagicMock)
        assert "supplier" in repr(value)

    def test_create_each_time_is_fresh(self):
        """Test that every create() returns a new mock."""
        assert Base.supplier.create() is not Base.supplier.create()

    def test_create_with_spec_is_autospecced(self):
        """Test that a spec gives a mock enforcing the signature."""
        value = Child.extra.create()
        value.return_value = "mocked"

        assert value() == "mocked"
        with pytest.raises(TypeError):
            value("unexpected")

    def test_create_passes_kwargs(self):
        """Test that extra keyword arguments configure the mock."""
        field = mock_field(return_value="configured")

        assert field.create()() == "configured"

    def test_static_field_opens_static_mock(self):
        """Test that a static field creates an open StaticMock."""
        static = Base.validator.create(autospec_static=False)

        assert isinstance(static, StaticMock)
        assert static.closed is False
        assert static.autospec is False

        Base.validator.release(static)
        assert static.closed is True

    def test_static_field_own_autospec_wins(self):
        """Test that autospec set on the declaration overrides the default."""
        field = static_mock(Validator, autospec=True)

        static = field.create(autospec_static=False)
        assert static.autospec is True
        field.release(static)


class TestDeclaredMockFields:
    """Test suite for declared_mock_fields."""

    def test_definition_order(self):
        """Test that fields come back in the order they were declared."""
        names = [name for name, _ in declared_mock_fields(Base)]
        assert names == ["supplier", "validator"]

    def test_subclass_can_remove_field(self):
        """Test that a subclass shadowing a field with a plain value drops it."""
        names = [name for name, _ in declared_mock_fields(Child)]
        assert names == ["supplier", "extra"]

    def test_subclass_override_replaces_field(self):
        """Test that a redeclared field uses the subclass declaration."""
        class Override(Base):
            supplier = mock_field(spec=supply)

        fields = dict(declared_mock_fields(Override))
        assert fields["supplier"] is Override.__dict__["supplier"]

    def test_class_without_fields(self):
        """Test that a class with no declarations has no fields."""
        assert declared_mock_fields(object) == []
