"""
Component Test Mocks

Shared mock implementations for component testing.
"""

from .nats_mock import MockEventBus

__all__ = [
    'MockEventBus',
]
