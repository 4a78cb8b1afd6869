"""
Test Suite for the mock lifecycle demo.

Structure:
    tests/
    ├── conftest.py          # Shared fixtures and configuration
    ├── unit/                # Tests of individual modules
    │   ├── test_trim.py
    │   ├── test_static_mock.py
    │   ├── test_fields.py
    │   ├── test_session.py
    │   ├── test_report.py
    │   └── test_settings.py
    └── integration/         # Demo modules run through pytester
        ├── test_strategies.py
        ├── test_runner_plugin.py
        └── test_cli.py

Run tests:
    pytest tests/                    # All tests
    pytest tests/unit/               # Unit tests only
    pytest tests/integration/        # Integration tests only
    pytest tests/ -m demo            # Tests that run the demo modules
"""
