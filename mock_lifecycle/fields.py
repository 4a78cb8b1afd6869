"""
Mock field declarations.

Test classes declare their mocks as class attributes:

    class TestSomething:
        supplier = mock_field()
        validator = static_mock(Validator)

The declarations are descriptors. They hold nothing until a session created
by open_mocks() attaches fresh mocks to an instance, and reading a field on
an instance without attached mocks raises MocksNotInitializedError.
"""

from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock, create_autospec

from mock_lifecycle.errors import MocksNotInitializedError
from mock_lifecycle.static import StaticMock


class MockField:
    """Descriptor for a mock created fresh by every session."""

    def __init__(self, spec: Any = None, **kwargs):
        self.spec = spec
        self.kwargs = kwargs
        self.name: Optional[str] = None
        self.owner: Optional[type] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    @property
    def storage_key(self) -> str:
        return f"_mock_field_{self.name}"

    def __get__(self, instance: Any, owner: type = None) -> Any:
        if instance is None:
            return self
        try:
            return instance.__dict__[self.storage_key]
        except KeyError:
            owner_name = (owner or type(instance)).__qualname__
            raise MocksNotInitializedError(
                f"Mock field '{self.name}' of {owner_name} is not initialized; "
                f"open_mocks() must run before the test uses it"
            ) from None

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.storage_key] = value

    def __delete__(self, instance: Any) -> None:
        instance.__dict__.pop(self.storage_key, None)

    def is_attached(self, instance: Any) -> bool:
        return self.storage_key in instance.__dict__

    def create(self, autospec_static: bool = True) -> Any:
        """Create a new mock for this field."""
        if self.spec is not None:
            return create_autospec(self.spec, **self.kwargs)
        return MagicMock(name=self.name, **self.kwargs)

    def release(self, value: Any) -> None:
        """Release whatever create() returned. Plain mocks need nothing."""


class StaticMockField(MockField):
    """Descriptor for a StaticMock opened by every session."""

    def __init__(self, target: type, autospec: Optional[bool] = None):
        super().__init__()
        self.target = target
        self.autospec = autospec

    def create(self, autospec_static: bool = True) -> StaticMock:
        autospec = autospec_static if self.autospec is None else self.autospec
        return StaticMock(self.target, autospec=autospec).open()

    def release(self, value: StaticMock) -> None:
        value.close()


def mock_field(spec: Any = None, **kwargs) -> MockField:
    """
    Declare a mock field.

    Args:
        spec: Optional object to autospec the mock from.
        **kwargs: Passed to MagicMock (or create_autospec when spec is set).
    """
    return MockField(spec, **kwargs)


def static_mock(target: type, autospec: Optional[bool] = None) -> StaticMockField:
    """
    Declare a static mock of target.

    Args:
        target: Class whose static methods are patched while a session is open.
        autospec: Autospec the patched methods; None uses the configured default.
    """
    return StaticMockField(target, autospec=autospec)


def declared_mock_fields(cls: type) -> List[Tuple[str, MockField]]:
    """Return (name, field) for every mock field of cls, in definition order."""
    fields: Dict[str, MockField] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, MockField):
                fields[name] = value
            elif name in fields:
                del fields[name]
    return list(fields.items())
