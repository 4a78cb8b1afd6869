"""
Mock Lifecycle - two ways of giving every test fresh mocks.

Tests declare their mocks as class attributes and get them created before
each test and torn down after it, either by a pytest marker (the runner
strategy) or by calling open_mocks()/close() in their own setup and
teardown hooks (the manual strategy).

Modules:
    trim: the string handling exercised by the demo tests
    validator: static-method holder used as a static mocking target
    errors: lifecycle exceptions
    static: StaticMock - patches every static method of a class
    fields: mock_field()/static_mock() declarations
    session: open_mocks() and MockSession
    plugin: pytest plugin implementing the mock_runner marker
    report: runs demo modules and classifies their failures

Entry Point:
    python -m mock_lifecycle
"""

from mock_lifecycle.errors import (
    MockLifecycleError,
    MocksAlreadyOpenError,
    MocksNotInitializedError,
    StaticMockError,
)
from mock_lifecycle.fields import mock_field, static_mock
from mock_lifecycle.session import MockSession, open_mocks
from mock_lifecycle.static import StaticMock
from mock_lifecycle.trim import trim_supplied
from mock_lifecycle.validator import Validator

__version__ = "0.1.0"

__all__ = [
    "MockLifecycleError",
    "MocksAlreadyOpenError",
    "MocksNotInitializedError",
    "MockSession",
    "StaticMock",
    "StaticMockError",
    "Validator",
    "mock_field",
    "open_mocks",
    "static_mock",
    "trim_supplied",
]
