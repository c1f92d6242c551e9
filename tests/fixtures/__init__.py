"""
Shared Test Fixtures

Centralized factories and generators used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - registry_fixtures.py: Crowd registry factories
"""

# Common utilities
from .common import (
    make_address,
    make_request_id,
    make_timestamp,
)

# Crowd registry fixtures
from .registry_fixtures import (
    OWNER,
    ROUTER,
    SUPPLY,
    make_registry_config,
    make_source_code,
    event_types,
)

__all__ = [
    "make_address",
    "make_request_id",
    "make_timestamp",
    "OWNER",
    "ROUTER",
    "SUPPLY",
    "make_registry_config",
    "make_source_code",
    "event_types",
]
