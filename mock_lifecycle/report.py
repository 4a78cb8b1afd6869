"""
Strategy Reports - run a demo module and classify how its tests failed.

A clean strategy fails only where a test asserts something false. A leaky
one also fails with lifecycle errors in tests that never asked to fail.

Failure kinds:
    ASSERTION: AssertionError or pytest.fail()
    LIFECYCLE: any MockLifecycleError (uninitialized or leaked mocks)
    ERROR:     anything else

Usage:
    report = run_strategy("manual", Path("demos/demo_manual_strategy.py"))
    print(report.summary())
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from mock_lifecycle.errors import MockLifecycleError

logger = logging.getLogger(__name__)

STRATEGIES = {
    "runner": "demo_runner_strategy.py",
    "manual": "demo_manual_strategy.py",
    "unittest": "demo_unittest_cleanup.py",
}


class FailureKind(Enum):
    """How a test failed."""
    ASSERTION = "assertion"
    LIFECYCLE = "lifecycle"
    ERROR = "error"


def classify_exception(exc: BaseException) -> FailureKind:
    """Map an exception raised by a test to a FailureKind."""
    if isinstance(exc, MockLifecycleError):
        return FailureKind.LIFECYCLE
    if isinstance(exc, (AssertionError, pytest.fail.Exception)):
        return FailureKind.ASSERTION
    return FailureKind.ERROR


@dataclass
class TestOutcome:
    """Outcome of one phase (setup, call or teardown) of one test."""
    __test__ = False

    nodeid: str
    when: str
    outcome: str
    kind: Optional[FailureKind] = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.outcome == "failed"


class OutcomeRecorder:
    """pytest plugin object recording test outcomes with failure kinds."""

    def __init__(self):
        self.outcomes: List[TestOutcome] = []

    @pytest.hookimpl(wrapper=True)
    def pytest_runtest_makereport(self, item, call):
        report = yield

        if report.passed and call.when != "call":
            return report

        kind = None
        message = ""
        if call.excinfo is not None and report.failed:
            kind = classify_exception(call.excinfo.value)
            message = f"{call.excinfo.typename}: {call.excinfo.value}"

        self.outcomes.append(TestOutcome(
            nodeid=item.nodeid,
            when=call.when,
            outcome=report.outcome,
            kind=kind,
            message=message,
        ))
        return report


@dataclass
class StrategyReport:
    """Collected outcomes of one demo run."""
    name: str
    exit_code: int
    outcomes: List[TestOutcome] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.when == "call" and o.outcome == "passed")

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    @property
    def failure_kinds(self) -> Counter:
        return Counter(o.kind for o in self.outcomes if o.failed)

    @property
    def is_isolated(self) -> bool:
        """True when every failure is a plain assertion failure."""
        return all(o.kind == FailureKind.ASSERTION for o in self.outcomes if o.failed)

    def failures(self) -> List[TestOutcome]:
        return [o for o in self.outcomes if o.failed]

    def summary(self) -> str:
        kinds = ", ".join(
            f"{kind.value}: {count}"
            for kind, count in sorted(self.failure_kinds.items(), key=lambda item: item[0].value)
        )
        text = f"{self.name}: {self.passed} passed, {self.failed} failed"
        if kinds:
            text += f" ({kinds})"
        return text


def run_strategy(
    name: str,
    path: Path,
    extra_args: Sequence[str] = (),
) -> StrategyReport:
    """
    Run one demo module under pytest and record its outcomes.

    Args:
        name: Strategy name used in the report.
        path: Demo module to run.
        extra_args: Additional pytest command line arguments.

    Returns:
        StrategyReport for the run.

    Raises:
        FileNotFoundError: If path does not exist.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Demo module not found: {path}")

    recorder = OutcomeRecorder()
    args = [str(path), "-p", "mock_lifecycle.plugin", "-p", "no:cacheprovider", *extra_args]
    logger.info(f"Running strategy '{name}': pytest {' '.join(args)}")

    exit_code = pytest.main(args, plugins=[recorder])
    report = StrategyReport(name=name, exit_code=int(exit_code), outcomes=recorder.outcomes)

    logger.info(report.summary())
    return report
