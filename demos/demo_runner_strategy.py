"""
Runner strategy: mocks are opened by the mock_runner marker.

The mock_runner fixture opens the declared mock fields before every test and
closes them after it. The first test fails on purpose; since the fixture's
teardown runs whatever the outcome, the tests after it get fresh mocks and
pass. Expected result: 3 passed, 1 failed (assertion).

Run with:
    pytest demos/demo_runner_strategy.py -p mock_lifecycle.plugin
"""

import pytest

from mock_lifecycle import Validator, mock_field, static_mock, trim_supplied


@pytest.mark.mock_runner
class TestRunnerWithStaticMock:
    supplier = mock_field()
    validator = static_mock(Validator)

    def test_name1(self):
        """Intentional failure; the next test must not inherit its state."""
        pytest.fail("intentional failure")

    def test_name2(self):
        self.supplier.return_value = None
        assert trim_supplied(self.supplier) == ""

    def test_name3(self):
        self.supplier.return_value = ""
        assert trim_supplied(self.supplier) == ""

    def test_name4(self):
        self.supplier.return_value = " "
        assert trim_supplied(self.supplier) == ""
