"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Service tests (in-memory state, mocked event bus)
    - unit/       : Single components and pure functions
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("ENV", "testing")

from tests.fixtures import (
    OWNER,
    ROUTER,
    make_address,
    make_registry_config,
)


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "component: marks tests as component tests")


@pytest.fixture
def owner() -> str:
    return OWNER


@pytest.fixture
def router() -> str:
    return ROUTER


@pytest.fixture
def alice() -> str:
    return make_address()


@pytest.fixture
def bob() -> str:
    return make_address()


@pytest.fixture
def registry_config():
    return make_registry_config()
