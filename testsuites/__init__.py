"""
Test suites package.

Kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - shared framework imports (`testsuites.ui_testing.framework`)
"""
