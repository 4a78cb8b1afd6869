"""
Pytest fixtures and configuration.

This module provides shared fixtures for all tests:
- Paths to the demo modules
- A pytester helper that runs a module with the mock_lifecycle plugin
- Cleanup of static mocks left open by a failing test

Usage:
    def test_something(run_module):
        # fixtures are automatically injected
        pass
"""

from pathlib import Path

import pytest

from mock_lifecycle.report import STRATEGIES, OutcomeRecorder
from mock_lifecycle.static import close_leaked_static_mocks

DEMO_DIR = Path(__file__).resolve().parent.parent / "demos"


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "demo: mark test as running one of the demo modules"
    )


# =============================================================================
# Demo Fixtures
# =============================================================================

@pytest.fixture
def demo_dir() -> Path:
    """Directory holding the demo modules."""
    return DEMO_DIR


@pytest.fixture
def demo_source():
    """Return the source text of a demo module by strategy name."""
    def _source(strategy: str) -> str:
        return (DEMO_DIR / STRATEGIES[strategy]).read_text(encoding="utf-8")
    return _source


@pytest.fixture
def run_module(pytester):
    """
    Run a test module inline with the mock_lifecycle plugin loaded.

    Returns (result, recorder): the pytester RunResult and the
    OutcomeRecorder that watched the run.
    """
    def _run(source: str, name: str = "test_module", *args):
        pytester.makepyfile(**{name: source})
        recorder = OutcomeRecorder()
        result = pytester.runpytest_inprocess(
            "-p", "mock_lifecycle.plugin", *args, plugins=[recorder]
        )
        return result, recorder
    return _run


# =============================================================================
# Cleanup Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def cleanup_static_mocks():
    """
    Automatically close static mocks a test left open.

    This fixture runs for every test automatically.
    """
    yield
    close_leaked_static_mocks()
