"""
unittest variant of the manual strategy.

setUp opens the mocks and registers session.close with addCleanup, which
unittest runs after every test even when the test fails.
Expected result: 3 passed, 1 failed (assertion).
"""

import unittest

from mock_lifecycle import Validator, mock_field, open_mocks, static_mock, trim_supplied


class TestCleanupWithStaticMock(unittest.TestCase):
    supplier = mock_field()
    validator = static_mock(Validator)

    def setUp(self):
        session = open_mocks(self)
        self.addCleanup(session.close)

    def test_name1(self):
        self.fail("intentional failure")

    def test_name2(self):
        self.supplier.return_value = None
        self.assertEqual(trim_supplied(self.supplier), "")

    def test_name3(self):
        self.supplier.return_value = ""
        self.assertEqual(trim_supplied(self.supplier), "")

    def test_name4(self):
        self.supplier.return_value = " "
        self.assertEqual(trim_supplied(self.supplier), "")


if __name__ == "__main__":
    unittest.main()
