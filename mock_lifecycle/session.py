"""
Mock Sessions - open and close the mocks a test instance declares.

open_mocks() creates a fresh mock for every mock field declared on the
instance's class and returns a MockSession. Closing the session releases
static mocks and detaches every field, so the next test has to open a new
session before it can touch its mocks.

Flow:
    setup    -> session = open_mocks(self)
    test     -> self.supplier.return_value = ...
    teardown -> session.close()

Usage:
    class TestTrim:
        supplier = mock_field()

        def setup_method(self):
            self.session = open_mocks(self)

        def teardown_method(self):
            self.session.close()
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from config import settings
from mock_lifecycle.errors import MocksAlreadyOpenError
from mock_lifecycle.fields import MockField, declared_mock_fields

logger = logging.getLogger(__name__)

_SESSION_KEY = "_mock_lifecycle_session"


class MockSession:
    """Closeable handle over the mocks attached to one instance."""

    def __init__(self, instance: Any, autospec_static: bool = True):
        self.instance = instance
        self.autospec_static = autospec_static
        self._attached: List[Tuple[MockField, Any]] = []
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def mocks(self) -> Dict[str, Any]:
        """Attached mocks keyed by field name; empty once closed."""
        return {field.name: value for field, value in self._attached}

    def open(self) -> "MockSession":
        """
        Create and attach a mock for every declared field.

        Raises:
            MocksAlreadyOpenError: If the instance already has an open session.
            StaticMockError: If a static mock cannot be opened. Mocks opened
                before the failure are closed first.
        """
        current = self.instance.__dict__.get(_SESSION_KEY)
        if current is not None and current.is_open:
            raise MocksAlreadyOpenError(
                f"{type(self.instance).__qualname__} instance already has open mocks; "
                f"close the current session first"
            )

        try:
            for name, field in declared_mock_fields(type(self.instance)):
                value = field.create(autospec_static=self.autospec_static)
                self._attached.append((field, value))
                field.__set__(self.instance, value)
        except Exception:
            self._release()
            raise

        self.instance.__dict__[_SESSION_KEY] = self
        self._open = True
        logger.debug(
            f"Opened {len(self._attached)} mock(s) for {type(self.instance).__qualname__}"
        )
        return self

    def close(self) -> None:
        """Release static mocks and detach every field. Safe to call twice."""
        if not self._open:
            return

        try:
            self._release()
        finally:
            self._open = False
            if self.instance.__dict__.get(_SESSION_KEY) is self:
                del self.instance.__dict__[_SESSION_KEY]
            logger.debug(f"Closed mocks for {type(self.instance).__qualname__}")

    def _release(self) -> None:
        errors = []
        while self._attached:
            field, value = self._attached.pop()
            field.__delete__(self.instance)
            try:
                field.release(value)
            except Exception as e:
                errors.append(e)
        if errors:
            raise errors[0]

    def __enter__(self) -> "MockSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"<MockSession {type(self.instance).__qualname__} ({state})>"


def open_mocks(instance: Any, *, autospec_static: Optional[bool] = None) -> MockSession:
    """
    Open fresh mocks for every mock field declared on instance's class.

    Args:
        instance: Object whose class declares mock_field()/static_mock() attributes.
        autospec_static: Default autospec for static mocks that do not set
            their own; None uses settings.autospec_static.

    Returns:
        The open MockSession. Close it (or use it as a context manager)
        to release the mocks.
    """
    if autospec_static is None:
        autospec_static = settings.autospec_static
    return MockSession(instance, autospec_static=autospec_static).open()
