"""
Unit Tests Package.

Tests of the trimming helper, static mocks, mock field declarations,
sessions, reports and settings, each in isolation.
"""
