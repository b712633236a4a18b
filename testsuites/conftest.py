"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags collected items by location.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the deployed portal"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "signup: Sign-up scenarios"
    )
    config.addinivalue_line(
        "markers", "signin: Sign-in scenarios"
    )
    config.addinivalue_line(
        "markers", "signout: Sign-out scenarios"
    )


def pytest_collection_modifyitems(config, items):
    """Tag items by directory so `-m ui` / `-m unit` select whole suites."""
    for item in items:
        path = str(item.fspath)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)

        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    base_url = config.getoption("--ui-base-url") or ConfigLoader().get("ui.base_url")
    return [
        "",
        "=" * 60,
        "Portal Authentication E2E Suite",
        f"Portal: {base_url}",
        "=" * 60,
        "",
    ]
