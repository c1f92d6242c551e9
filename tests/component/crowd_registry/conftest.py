"""
Component Test Fixtures for Crowd Registry Service

Builds a fully wired, initialized service with in-memory state, the local
computation runtime, and a mock event bus.
"""

import pytest
import pytest_asyncio

from microservices.crowd_registry_service.clients.computation_runtime import LocalComputationRuntime
from microservices.crowd_registry_service.factory import create_crowd_registry_service
from tests.fixtures import ROUTER, make_registry_config


@pytest.fixture
def runtime() -> LocalComputationRuntime:
    return LocalComputationRuntime(address=ROUTER, max_gas_limit=300_000)


@pytest_asyncio.fixture
async def service(mock_event_bus, runtime):
    service = create_crowd_registry_service(
        config=make_registry_config(),
        event_bus=mock_event_bus,
        runtime=runtime,
    )
    await service.initialize()
    mock_event_bus.clear()
    return service


@pytest_asyncio.fixture
async def funded(service, owner, alice):
    """Service where alice holds 1000 tokens and is registered"""
    await service.transfer(owner, alice, 1000)
    await service.register_user(alice, "Alice")
    return service
