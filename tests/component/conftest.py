"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── crowd_registry/  Service-level tests
    └── mocks/           Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockEventBus


def pytest_collection_modifyitems(items):
    for item in items:
        if "tests/component" in str(item.fspath).replace(os.sep, "/"):
            item.add_marker(pytest.mark.component)


@pytest.fixture
def mock_event_bus() -> MockEventBus:
    return MockEventBus()
