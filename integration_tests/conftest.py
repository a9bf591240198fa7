"""Pytest configuration for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(items):
    """Mark live-provider tests and skip them when no API key is configured."""
    skip_live = pytest.mark.skip(reason="ANTHROPIC_API_KEY not set")
    for item in items:
        if "integration_tests" not in str(item.fspath):
            continue
        item.add_marker(pytest.mark.integration)
        if not os.getenv("ANTHROPIC_API_KEY"):
            item.add_marker(skip_live)
