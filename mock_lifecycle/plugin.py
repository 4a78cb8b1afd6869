"""
pytest plugin: the runner strategy.

Test classes marked with ``@pytest.mark.mock_runner`` get their mock fields
opened before every test and closed after it, whatever the test's outcome.
Marker keyword arguments are passed to open_mocks().

Enable with ``-p mock_lifecycle.plugin`` or
``pytest_plugins = ["mock_lifecycle.plugin"]`` in a root conftest.py.
"""

import logging

import pytest

from mock_lifecycle.session import open_mocks
from mock_lifecycle.static import active_static_mocks, close_leaked_static_mocks

logger = logging.getLogger(__name__)

_preexisting_key = pytest.StashKey[list]()


def pytest_configure(config):
    """Register the mock_runner marker."""
    config.addinivalue_line(
        "markers",
        "mock_runner(**kwargs): open declared mock fields before each test "
        "and close them after it"
    )


@pytest.fixture(autouse=True)
def _mock_runner(request):
    """
    Open mocks for a mock_runner test and close them after it.

    Yields the MockSession, or None when the test is not marked or is not
    a method of a test class.
    """
    marker = request.node.get_closest_marker("mock_runner")
    if marker is None or request.instance is None:
        yield None
        return

    session = open_mocks(request.instance, **marker.kwargs)
    yield session
    session.close()


@pytest.fixture
def mock_session(_mock_runner):
    """The session opened for the current mock_runner test."""
    if _mock_runner is None:
        pytest.fail(
            "mock_session requires a test marked with mock_runner "
            "that is a method of a test class"
        )
    return _mock_runner


def pytest_sessionstart(session):
    session.config.stash[_preexisting_key] = active_static_mocks()


def pytest_sessionfinish(session, exitstatus):
    preexisting = session.config.stash.get(_preexisting_key, [])
    closed = close_leaked_static_mocks(keep=preexisting)
    if closed:
        logger.warning(f"Closed {closed} static mock(s) left open at the end of the session")
