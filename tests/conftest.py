"""
Root pytest configuration for release-signing.
"""

import pytest

# Auto-bootstrap logging for all tests
from release_signing.build.config.logging import bootstrap_logging
bootstrap_logging()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "critical: core signing behavior - failure means release builds are unsafe"
    )


def pytest_collection_modifyitems(config, items):
    """Run critical tests first."""
    critical_tests = []
    other_tests = []
    for item in items:
        if item.get_closest_marker('critical'):
            critical_tests.append(item)
        else:
            other_tests.append(item)
    items[:] = critical_tests + other_tests


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep a developer's SIGNING_PROPERTIES_FILE from leaking into tests."""
    monkeypatch.delenv("SIGNING_PROPERTIES_FILE", raising=False)
