"""
Manual strategy: mocks are opened in setup_method and closed in teardown_method.

Compare with demo_runner_strategy.py. The session is created before every
test and closed after every test, so the intentional failure in test_name1
is the only failure. Expected result: 3 passed, 1 failed (assertion).

Run with:
    pytest demos/demo_manual_strategy.py
"""

import pytest

from mock_lifecycle import Validator, mock_field, open_mocks, static_mock, trim_supplied


class TestOpenMocksWithStaticMock:
    supplier = mock_field()
    validator = static_mock(Validator)

    session = None

    def setup_method(self, method):
        self.session = open_mocks(self)

    def teardown_method(self, method):
        if self.session is not None:
            self.session.close()

    def test_name1(self):
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
