"""
Integration Tests Package.

These tests run whole test modules through pytester to observe how each
mock lifecycle strategy behaves across a sequence of tests.
"""
